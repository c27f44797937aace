"""
HTTP API: routers, dependencies and response helpers.
"""
