import os
import sys
from functools import wraps

from loguru import logger as loguru_logger

_sink_map = {}

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[source]}</cyan> | "
    "<blue>{function}</blue>:<yellow>{line}</yellow> - "
    "<level>{message}</level>"
)


def resolve_log_level(logger_name, class_level=None):
    """
    Pick the level for a named logger.

    Order: LOG_LEVEL_<NAME> env var, then the class `log_level`
    attribute, then APP_LOG_LEVEL (WARNING when unset).
    """
    env_key = f"LOG_LEVEL_{logger_name.upper()}"
    default_level = os.getenv("APP_LOG_LEVEL", "WARNING")
    return os.getenv(env_key, class_level or default_level).upper()


def _ensure_sink(logger_name, log_level):
    # The first injected class drops loguru's default handler
    if not _sink_map:
        loguru_logger.remove()

    if logger_name not in _sink_map:
        _sink_map[logger_name] = loguru_logger.add(
            sys.stderr,
            level=log_level,
            filter=lambda record: record["extra"].get("source") == logger_name,
            format=LOG_FORMAT,
        )


def inject_logger(name_attr="logger_name", level_attr="log_level"):
    """
    Class decorator that binds a loguru logger to `self.logger`
    before the original __init__ runs.
    """
    def decorator(cls):
        orig_init = cls.__init__

        @wraps(orig_init)
        def wrapped(self, *args, **kwargs):
            logger_name = getattr(self, name_attr, cls.__name__)
            log_level = resolve_log_level(logger_name, getattr(cls, level_attr, None))
            _ensure_sink(logger_name, log_level)

            self.logger = loguru_logger.bind(source=logger_name)
            orig_init(self, *args, **kwargs)

        cls.__init__ = wrapped
        return cls
    return decorator
