"""
Structured logging for the CS Fundamentals guide
Events are logged as a name plus key/value context, rendered as JSON lines
"""
import logging
import sys

import structlog


def configure_logging(level='INFO'):
    """Configure structlog once for the whole process"""
    log_level = getattr(logging, str(level).upper(), logging.INFO)
    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=log_level)
    logging.getLogger().setLevel(log_level)
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt='iso'),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


class AppLogger:
    """Thin wrapper adding application-specific event helpers"""

    def __init__(self, name='csfundamentals'):
        self._logger = structlog.get_logger(name)

    def debug(self, event, **kwargs):
        self._logger.debug(event, **kwargs)

    def info(self, event, **kwargs):
        self._logger.info(event, **kwargs)

    def warning(self, event, **kwargs):
        self._logger.warning(event, **kwargs)

    def error(self, event, **kwargs):
        self._logger.error(event, **kwargs)

    def security_event(self, event, **kwargs):
        """Log access-control related events under a dedicated category"""
        self._logger.warning(event, category='security', **kwargs)

    def selection_event(self, event, category=None, topic_id=None, **kwargs):
        self._logger.info(event, active_category=category, active_topic_id=topic_id, **kwargs)


configure_logging()
logger = AppLogger()
