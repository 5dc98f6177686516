import logging
import sys

from pythonjsonlogger.json import JsonFormatter


def setup_logging(level: str = "INFO") -> logging.Logger:
    """
    Configures structured JSON logging for applications using the client.

    This function initializes a JSON formatter that includes timestamp, level,
    logger name and message. It replaces the default handlers of the root
    logger with a stdout stream handler so that the client's request and
    error logs share one consistent format. Context passed through ``extra``
    is emitted as additional JSON keys.

    Args:
        level: Log level name applied to the root logger.

    Returns:
        logging.Logger: The configured root logger instance.
    """
    formatter = JsonFormatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s"
    )
    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = []
    root_logger.addHandler(stream_handler)

    # httpx logs every request at INFO; keep it quieter than our own loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)

    return root_logger
