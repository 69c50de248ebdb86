"""Package loggers.

All loggers are children of ``sra``. The package installs no output of its
own; applications attach handlers and levels to the ``sra`` logger.
"""

import logging

logger = logging.getLogger("sra")
# Silence "no handlers" output when the application has not configured logging
logger.addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Get a child logger for the specified module.

    Args:
        name: Module name (will be prefixed with 'sra.')

    Returns:
        Logger instance
    """
    return logging.getLogger(f"sra.{name}")
