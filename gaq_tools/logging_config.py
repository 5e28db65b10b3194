"""
Logging Configuration Module

Queue-based logging setup for the demo server and helpers. Request threads
write to a queue and a single listener formats the records, so lines from
concurrent requests never interleave.
"""

import logging
import logging.handlers
import sys
from queue import Queue
from typing import Optional


class QueuedLoggingConfig:
    """Logging configuration backed by a QueueHandler/QueueListener pair."""

    def __init__(self):
        self._log_listener: Optional[logging.handlers.QueueListener] = None
        self._log_queue: Optional[Queue] = None

    def setup_logging(self, debug: bool = False) -> None:
        """
        Route all log records through a queue and quiet the request log.

        Args:
            debug: Whether to enable debug logging
        """
        self.stop()
        self._log_queue = Queue()
        queue_handler = logging.handlers.QueueHandler(self._log_queue)

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s")
        )

        self._log_listener = logging.handlers.QueueListener(
            self._log_queue, console_handler, respect_handler_level=True
        )
        self._log_listener.start()

        root_logger = logging.getLogger()
        root_logger.handlers.clear()
        root_logger.addHandler(queue_handler)
        root_logger.setLevel(logging.DEBUG if debug else logging.INFO)

        if not debug:
            self._silence_request_log()

    def _silence_request_log(self) -> None:
        """Drop per-request access lines for static assets."""
        class _MuteStaticFilter(logging.Filter):
            def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
                msg = record.getMessage()
                return not (isinstance(msg, str) and ("GET /static/" in msg or "GET /favicon.ico" in msg))

        werkzeug_logger = logging.getLogger("werkzeug")
        werkzeug_logger.setLevel(logging.WARNING)
        werkzeug_logger.addFilter(_MuteStaticFilter())

    def stop(self) -> None:
        """Stop the logging listener and cleanup."""
        if self._log_listener:
            self._log_listener.stop()
            self._log_listener = None
        self._log_queue = None


# Global logging configuration instance
logging_config = QueuedLoggingConfig()


def setup_logging(debug: bool = False) -> None:
    """Setup queue-based logging."""
    logging_config.setup_logging(debug)


def stop_logging() -> None:
    logging_config.stop()


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with the specified name.

    Args:
        name: Logger name

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)
