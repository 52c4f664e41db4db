#!/usr/bin/env python
"""
A simple logging module for the mandelbrot package.

Usage:

    import mandelbrot.utilities.log as log

    log.console_logging_level = log.INFO    # optional, default is CRITICAL
    log.log_filename = './escape.log'       # optional, default is no file

    log.debug('A message at DEBUG level')
    log.info('Another message, INFO level')
    log.critical('Verbose output goes here')

Messages at or above console_logging_level are written to stdout without
decoration. If log_filename is set, messages at or above log_logging_level
are also appended to that file, tagged with time, level and the calling
module and line.

The levels are fixed on the first call to one of the logging functions.
Use set_logfile() or reset() to change the setup afterwards.
"""

import os
import sys
import logging
import traceback


# Export the standard logging levels
CRITICAL = logging.CRITICAL
ERROR = logging.ERROR
WARNING = logging.WARNING
INFO = logging.INFO
DEBUG = logging.DEBUG
NOTSET = logging.NOTSET

DefaultConsoleLogLevel = CRITICAL
DefaultFileLogLevel = INFO

# Marker used by timingInfo() so timing lines can be picked out of a log file
TimingDelimiter = '#@# '

console_logging_level = DefaultConsoleLogLevel
log_logging_level = DefaultFileLogLevel
log_filename = None

LoggerName = 'mandelbrot'

_setup = False
_handlers = []


def _caller():
    """Return (module name, line number) of the code calling the log function."""

    frames = traceback.extract_stack()
    this_file = os.path.splitext(__file__)[0]
    for frame in reversed(frames):
        filename = frame[0]
        if os.path.splitext(filename)[0] != this_file:
            return os.path.basename(filename), frame[1]

    return '?', 0


def _setup_logger():
    global _setup, log_logging_level

    logger = logging.getLogger(LoggerName)
    logger.propagate = False

    # The file must capture at least what goes to the console
    if log_logging_level > console_logging_level:
        log_logging_level = console_logging_level

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(console_logging_level)
    console.setFormatter(logging.Formatter('%(message)s'))
    logger.addHandler(console)
    _handlers.append(console)

    level = console_logging_level
    if log_filename is not None:
        fmt = '%(asctime)s %(levelname)-8s %(mname)25s:%(lnum)-4d|%(message)s'
        handler = logging.FileHandler(log_filename, mode='a')
        handler.setLevel(log_logging_level)
        handler.setFormatter(logging.Formatter(fmt))
        logger.addHandler(handler)
        _handlers.append(handler)
        level = min(level, log_logging_level)

    logger.setLevel(level)
    _setup = True

    return logger


def reset():
    """Remove installed handlers so the next message sets up logging again."""

    global _setup

    logger = logging.getLogger(LoggerName)
    while _handlers:
        handler = _handlers.pop()
        logger.removeHandler(handler)
        handler.close()

    _setup = False


def set_logfile(filename, level=DefaultFileLogLevel):
    """Direct file logging to filename from the next message on."""

    global log_filename, log_logging_level

    reset()
    log_filename = filename
    log_logging_level = level


def log(msg, level=None):
    """Log a message at a particular loglevel.

    msg:    The message string to log.
    level:  The logging level to log with (defaults to console level).
    """

    if not _setup:
        logger = _setup_logger()
    else:
        logger = logging.getLogger(LoggerName)

    if level is None:
        level = console_logging_level

    mname, lnum = _caller()
    logger.log(level, msg, extra={'mname': mname, 'lnum': lnum})


def debug(msg=''):
    log(msg, logging.DEBUG)

def info(msg=''):
    log(msg, logging.INFO)

def warning(msg=''):
    log(msg, logging.WARNING)

def error(msg=''):
    log(msg, logging.ERROR)

def critical(msg=''):
    log(msg, logging.CRITICAL)

def timingInfo(msg=''):
    log(TimingDelimiter + msg, logging.INFO)
