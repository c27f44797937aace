"""
Logger access for application modules.
"""

import logging


def get_logger(name: str) -> logging.Logger:
    """Get logger with context"""
    return logging.getLogger(name)
