"""
Endpoint modules for version 1 of the API.  Each module defines a
``router`` for one domain.
"""
