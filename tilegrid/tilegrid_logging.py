"""This provides logging functionality for tilegrid.

It is built on the standard library's logging package. All loggers live below
a common root logger named ``TILEGRID``, so output of the whole library can be
switched on with a single call to :func:`log_to_stderr`.

The module offers ``create_module_logger`` for module level loggers, and two
decorators, ``method_logger`` and ``function_logger``, that emit a DEBUG
record for every call of the decorated callable.

"""

import inspect
import logging
from functools import wraps
from logging import DEBUG, INFO

__all__ = [
    "DEBUG",
    "INFO",
    "create_module_logger",
    "function_logger",
    "get_module_logger",
    "get_rootlogger",
    "log_to_stderr",
    "method_logger",
]
TILEGRID_LOGGER_NAME = "TILEGRID"
DEFAULT_LEVEL = DEBUG

logging.getLogger(TILEGRID_LOGGER_NAME).addHandler(logging.NullHandler())


def create_module_logger(name: str | None = None):
    """Create a module level logger.

    Args:
        name: name of the module, inferred from the calling frame if None

    Returns:
        logging.Logger: a child of the tilegrid root logger

    """
    if name is None:
        frm = inspect.stack()[1]
        mod = inspect.getmodule(frm[0])
        name = mod.__name__
    logger_name = f"{TILEGRID_LOGGER_NAME}.{name}"
    logger = logging.getLogger(logger_name)
    return logger


def get_module_logger(name: str):
    """Return the logger for the given module name."""
    logger_name = f"{TILEGRID_LOGGER_NAME}.{name}"
    logger = logging.getLogger(logger_name)
    return logger


def get_rootlogger():
    """Return the tilegrid root logger."""
    return logging.getLogger(TILEGRID_LOGGER_NAME)


def method_logger(name: str):
    """Decorator for adding logging to a method.

    Args:
        name: The name of the module in which the method is defined.

    """
    logger = get_module_logger(name)
    classname = inspect.getouterframes(inspect.currentframe())[1][3]

    def real_decorator(meth):
        @wraps(meth)
        def wrapper(*args, **kwargs):
            # hack, because we use this decorator also on __init__,
            # we cannot simply use self.__class__.__name__
            logger.debug(
                f"calling {classname}.{meth.__name__} with {args[1::]} and {kwargs}"
            )
            return meth(*args, **kwargs)

        return wrapper

    return real_decorator


def function_logger(name: str):
    """Decorator for adding logging to a function.

    Args:
        name: The name of the module in which the function is defined.

    """
    logger = get_module_logger(name)

    def real_decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            logger.debug(f"calling {func.__name__} with {args} and {kwargs}")
            return func(*args, **kwargs)

        return wrapper

    return real_decorator


def log_to_stderr(level: int | None = None, pass_through: bool = True):
    """Log tilegrid messages to stderr.

    Args:
        level: minimum level of the messages to be logged
        pass_through: also pass the messages to the handlers of the python root logger

    """
    if level is None:
        level = DEFAULT_LEVEL

    logger = get_rootlogger()
    logger.setLevel(level)
    logger.propagate = pass_through

    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        formatter = logging.Formatter(
            "[%(levelname)s] %(asctime)s %(name)s: %(message)s"
        )
        handler = logging.StreamHandler()
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
