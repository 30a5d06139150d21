"""
Command-line tools for polyline simplification.
"""
