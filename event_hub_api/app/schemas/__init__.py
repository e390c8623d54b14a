"""
Pydantic schema definitions for API payloads.

Each domain (users, events, pre-registrations, tasks) defines its own
models for request and response bodies.  Field names are snake_case in
Python and carry camelCase aliases where the wire format uses them
(``taskName``, ``imageUrl``, ``createdAt``), which are also the keys
stored in MongoDB.
"""
