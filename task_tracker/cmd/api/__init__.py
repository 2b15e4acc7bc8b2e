"""
API server entry point.
"""
