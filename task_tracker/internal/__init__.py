"""
Internal package.
Contains API routes, schemas and other internal modules.
"""
