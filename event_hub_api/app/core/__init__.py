"""
Core infrastructure: settings, MongoDB access, logging, password
hashing, upload storage and the service error hierarchy.
"""
