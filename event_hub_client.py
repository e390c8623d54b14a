"""Event Hub API client.

This module defines a thin client wrapper around the Event Hub REST
API.  It is meant for scripts, bots and integration checks that talk
to a running server.  The client uses the ``requests`` library
internally.

Every public method returns a tuple ``(data, error)``:

* on success ``data`` holds the decoded JSON body and ``error`` is
  ``None``;
* on failure ``data`` is ``None`` (or an empty list for listing
  methods) and ``error`` is a dictionary with ``status_code`` and
  ``message`` keys.  ``status_code`` is ``None`` when the server could
  not be reached at all.

The client never raises for HTTP or connection errors.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]
Result = Tuple[Optional[Any], Optional[Error]]


class EventHubClient:
    """Client for interacting with the Event Hub API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:5000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self,
        method: str,
        path: str,
        *,
        json_body: Any | None = None,
        data: Dict[str, Any] | None = None,
        files: Dict[str, Any] | None = None,
    ) -> Result:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/events``).
            json_body: JSON body to send with the request.
            data: Form fields for ``multipart/form-data`` requests.
            files: Files for ``multipart/form-data`` requests.
        Returns:
            A tuple ``(data, error)`` as described in the module docstring.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                data=data,
                files=files,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("message") or err_json.get("detail") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def _list(self, path: str) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", path)
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    # ------------------------------------------------------------------
    # Accounts
    # ------------------------------------------------------------------
    def signup(self, name: str, email: str, password: str) -> Result:
        return self._request("POST", "/signup", json_body={"name": name, "email": email, "password": password})

    def login(self, email: str, password: str) -> Result:
        """Check credentials.

        Returns:
            A tuple ``(user, error)`` where ``user`` is the
            ``{id, name, email}`` record from the response.
        """
        data, error = self._request("POST", "/login", json_body={"email": email, "password": password})
        if error:
            return None, error
        return data.get("user"), None

    def get_user(self, user_id: str) -> Result:
        return self._request("GET", f"/user/{user_id}")

    def update_user(self, user_id: str, **fields: Any) -> Result:
        """Update profile fields (``name``, ``email``, ``password``)."""
        data, error = self._request("PUT", f"/user/{user_id}", json_body=fields)
        if error:
            return None, error
        return data.get("user"), None

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------
    def list_events(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all events, earliest date first."""
        return self._list("/events")

    def add_event(
        self,
        *,
        name: str,
        date: str,
        location: str,
        description: str,
        image_path: Optional[str] = None,
    ) -> Result:
        """Create an event, optionally uploading an image from disk.

        Args:
            date: ISO‑8601 date or datetime string.
            image_path: Path of an image file to attach.
        """
        form = {"name": name, "date": date, "location": location, "description": description}
        if not image_path:
            return self._request("POST", "/admin/add_event", data=form)
        with open(image_path, "rb") as fh:
            files = {"image": (os.path.basename(image_path), fh)}
            return self._request("POST", "/admin/add_event", data=form, files=files)

    def pre_register(self, *, fullname: str, dob: str, email: str, phone: str, event: str) -> Result:
        payload = {"fullname": fullname, "dob": dob, "email": email, "phone": phone, "event": event}
        return self._request("POST", "/pre_register", json_body=payload)

    # ------------------------------------------------------------------
    # Tasks
    # ------------------------------------------------------------------
    def assign_task(self, email: str, task_name: str) -> Result:
        data, error = self._request("POST", "/assign_task", json_body={"email": email, "taskName": task_name})
        if error:
            return None, error
        return data.get("task"), None

    def my_tasks(self, email: str) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list(f"/my_tasks/{quote(email, safe='@')}")

    def create_admin_task(
        self,
        task_name: str,
        description: Optional[str] = None,
        deadline: Optional[str] = None,
    ) -> Result:
        payload: Dict[str, Any] = {"taskName": task_name}
        if description is not None:
            payload["description"] = description
        if deadline is not None:
            payload["deadline"] = deadline
        data, error = self._request("POST", "/admin/tasks", json_body=payload)
        if error:
            return None, error
        return data.get("task"), None

    def list_admin_tasks(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/admin/tasks")

    def update_admin_task(self, task_id: str, **fields: Any) -> Result:
        """Update an admin task; keys use the wire names (``taskName``...)."""
        data, error = self._request("PUT", f"/admin/tasks/{task_id}", json_body=fields)
        if error:
            return None, error
        return data.get("task"), None

    def delete_admin_task(self, task_id: str) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("DELETE", f"/admin/tasks/{task_id}")
        if error:
            return False, error
        return True, None
