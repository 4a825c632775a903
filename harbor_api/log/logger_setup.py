import sys
from typing import TextIO

import loguru
from loguru import logger

from harbor_api.config import LogLevelType
from harbor_api.log.sensitive import sensitive_log_filter


def setup_logger(level: LogLevelType = "INFO", sink: TextIO = sys.stdout) -> int:
    """
    Replaces loguru's default handler with a single redacting sink

    Returns the handler id so callers can remove it again.
    """
    logger.remove()
    return _stdout_loguru_handler(level, sink)


def _stdout_loguru_handler(level: LogLevelType, sink: TextIO) -> int:
    logger_format = (
        "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
        "<level>{level: <8}</level> | "
        "<level>{message}</level>"
    )
    if level == "DEBUG":
        logger_format += " | {extra}"

    handler_id = logger.add(
        sink,
        level=level.upper(),
        format=logger_format,
        diagnose=False,  # hide variable values in log backtrace
        filter=sensitive_log_filter.create_filter(),
    )
    logger.configure(patcher=exception_deserializer)
    return handler_id


def exception_deserializer(record: "loguru.Record") -> None:
    """
    Workaround for when trying to log exception objects with loguru.
    Loguru doesn't able to deserialize `Exception` subclasses.
    https://github.com/Delgan/loguru/issues/504#issuecomment-917365972
    """
    exception: loguru.RecordException | None = record["exception"]
    if exception is not None:
        fixed = Exception(str(exception.value))
        record["exception"] = exception._replace(value=fixed)
