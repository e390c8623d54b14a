"""
Version 1 of the API.

The v1 routes keep the flat paths existing clients already call
(``/signup``, ``/events``, ``/admin/tasks``...), so the router is
mounted without a version prefix.
"""
