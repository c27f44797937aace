"""
Core building blocks shared across the application: exceptions,
logging helpers, middleware and constants.
"""
