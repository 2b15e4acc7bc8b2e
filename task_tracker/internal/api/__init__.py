"""
API Module.
Contains routes, schemas, and API-related utilities.
"""
