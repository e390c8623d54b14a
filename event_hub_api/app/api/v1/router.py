"""
Top‑level router for version 1 of the API.

This router aggregates the domain routers.  Each domain router
defines its full paths itself, so none of them gets a prefix here.
"""

from fastapi import APIRouter

from .endpoints import (
    auth,
    users,
    events,
    pre_registrations,
    tasks,
    admin_tasks,
    health,
)

router = APIRouter()

router.include_router(auth.router, tags=["auth"])
router.include_router(users.router, tags=["users"])
router.include_router(events.router, tags=["events"])
router.include_router(pre_registrations.router, tags=["pre-registrations"])
router.include_router(tasks.router, tags=["tasks"])
router.include_router(admin_tasks.router, tags=["admin tasks"])
router.include_router(health.router, tags=["health"])
