"""
Application package initializer.

The project is organised into layers: ``core`` holds configuration,
persistence, logging and password helpers; ``schemas`` the Pydantic
payload models; ``services`` the per-domain logic against MongoDB;
and ``api/v1/endpoints`` the routers that expose it over HTTP.
"""

from .main import app  # noqa: F401
