"""
Process entry points.
"""
