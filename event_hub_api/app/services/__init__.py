"""
Service layer abstraction.

Each service encapsulates the logic for one domain.  Methods are
classmethods taking the MongoDB ``Database`` handle as their first
argument; expected failures are raised as ``core.errors`` exceptions
and translated to HTTP responses by the endpoints.
"""
