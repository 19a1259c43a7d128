"""Minimal logging utilities for lexparse.

Example:
    >>> from lexparse.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Tokenizing source")
"""

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a standard library logger under the "lexparse." namespace.

    Args:
        name: Logger name (typically __name__)

    Example:
        >>> get_logger("mymodule").name
        'lexparse.mymodule'
    """
    if not (name == "lexparse" or name.startswith("lexparse.")):
        name = f"lexparse.{name}"
    return logging.getLogger(name)
