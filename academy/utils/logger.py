"""
Console logging for the application.
Colored output through colorlog plus a decorator that traces service calls.
"""
import os
import logging
import colorlog
import functools
import time
from academy.errors import AcademyError

LOG_FORMAT = (
    "%(log_color)s[%(asctime)s] %(levelname)-8s%(reset)s "
    "%(blue)s%(name)s %(bold_white)s%(funcName)s:%(lineno)d%(reset)s - "
    "%(message_log_color)s%(message)s"
)

LOG_COLORS = {
    'DEBUG': 'cyan',
    'INFO': 'green',
    'WARNING': 'yellow',
    'ERROR': 'red',
    'CRITICAL': 'red,bg_white',
}


def _build_handler():
    console_handler = colorlog.StreamHandler()
    console_handler.setFormatter(colorlog.ColoredFormatter(
        LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        log_colors=LOG_COLORS,
        secondary_log_colors={
            'message': {
                'DEBUG': 'cyan',
                'INFO': 'white',
                'WARNING': 'yellow',
                'ERROR': 'red',
                'CRITICAL': 'red,bg_white',
            }
        }
    ))
    return console_handler


class CustomLogger:
    """
    Logger used to trace service calls with timing and parameters
    """
    def __init__(self, name='academy.calls'):
        self.logger = logging.getLogger(name)

    def log_function_call(self, func):
        """Decorator to log function calls with timing and parameters"""
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            func_name = func.__qualname__

            self.logger.debug(f"→ Entering {func_name}")
            if args or kwargs:
                params = []
                if args:
                    params.append(f"args: {args}")
                if kwargs:
                    params.append(f"kwargs: {kwargs}")
                self.logger.debug(f"Parameters: {', '.join(params)}")

            start_time = time.time()
            try:
                result = func(*args, **kwargs)
                execution_time = (time.time() - start_time) * 1000
                self.logger.debug(f"← Completed {func_name} in {execution_time:.2f}ms")
                return result

            except AcademyError as e:
                execution_time = (time.time() - start_time) * 1000
                self.logger.info(
                    f"← {func_name} rejected after {execution_time:.2f}ms: {e.message}"
                )
                raise

            except Exception as e:
                execution_time = (time.time() - start_time) * 1000
                self.logger.error(
                    f"✕ Error in {func_name} after {execution_time:.2f}ms: {str(e)}"
                )
                raise

        return wrapper


custom_logger = CustomLogger()

_configured = False


def setup_logging(level=None):
    """Configure colored console logging on the root logger (idempotent)"""
    global _configured
    level = level or os.getenv('LOG_LEVEL', 'INFO')

    root = logging.getLogger()
    root.setLevel(level.upper() if isinstance(level, str) else level)
    if _configured:
        return root

    root.addHandler(_build_handler())
    _configured = True
    return root
