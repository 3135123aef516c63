"""
Utility Functions
=================

Logging configuration shared by every ``voxelmc`` module.

Functions
---------
configure_logging
    Attach a console handler (and optionally a file handler) to the
    package logger.
"""

import logging

import voxelmc


def configure_logging(level=logging.INFO, logfile=None):
    """Configure logging for the voxelmc package.

    Parameters
    ----------
    level : int, default logging.INFO
        Logging level (e.g., logging.DEBUG, logging.INFO, logging.WARNING).
    logfile : str, optional
        Path to log file. If provided, logs are written to both console
        and file. If None, logs only to console.

    Examples
    --------
    >>> from voxelmc.utils import configure_logging
    >>> import logging
    >>> configure_logging(level=logging.DEBUG, logfile='voxelmc.log')

    Notes
    -----
    The log format is: "HH:MM:SS message".
    Calling this again replaces the handlers installed by a previous call.
    """
    logger = logging.getLogger(voxelmc.__name__)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter("%(asctime)s %(message)s", datefmt="%H:%M:%S")
    logger_handler = logging.StreamHandler()
    logger_handler.setFormatter(formatter)
    logger.addHandler(logger_handler)

    if logfile is not None:
        file_logger_handler = logging.FileHandler(logfile)
        file_logger_handler.setFormatter(formatter)
        logger.addHandler(file_logger_handler)
