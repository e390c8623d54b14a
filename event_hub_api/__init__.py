"""
Top‑level package for the Event Hub API.

The package itself provides no public exports; the application lives
in the ``app`` subpackage and can be imported with fully qualified
names such as ``event_hub_api.app.main``.
"""

__all__ = []
