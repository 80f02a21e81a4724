"""
Logging setup for the command-line usage of the FQDN resolution.

The library itself never configures the logging: it only emits debug events
to the injected loggers, or to the ``hostfqdn.*`` loggers, which stay silent
(``NullHandler``) unless the application configures the logging its own way.

The debug events carry the structured fields (host, fqdn, address, etc.)
as the records' extras. They are rendered as separate keys in JSON logs,
and the host is rendered as a message prefix in text logs.
"""
import copy
import enum
import logging
from typing import Any, Dict, Optional

import pythonjsonlogger.core
import pythonjsonlogger.json

HOST_ATTR = 'host'
""" The record's attribute with the short hostname being resolved, if any. """


class LogFormat(enum.Enum):
    """ Log formats, as specified on CLI. """
    PLAIN = '%(message)s'
    FULL = '[%(asctime)s] %(name)-20.20s [%(levelname)-8.8s] %(message)s'
    JSON = enum.auto()


class HostFormatter(logging.Formatter):
    pass


class HostTextFormatter(HostFormatter, logging.Formatter):
    pass


class HostJsonFormatter(HostFormatter, pythonjsonlogger.json.JsonFormatter):
    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs.setdefault('reserved_attrs', pythonjsonlogger.core.RESERVED_ATTRS)
        kwargs.setdefault('timestamp', True)
        super().__init__(*args, **kwargs)

    def add_fields(
            self,
            log_record: Dict[str, Any],
            record: logging.LogRecord,
            message_dict: Dict[str, Any],
    ) -> None:
        super().add_fields(log_record, record, message_dict)

        if 'severity' not in log_record:
            log_record['severity'] = (
                "debug" if record.levelno <= logging.DEBUG else
                "info" if record.levelno <= logging.INFO else
                "warn" if record.levelno <= logging.WARNING else
                "error" if record.levelno <= logging.ERROR else
                "fatal")


class HostPrefixingMixin(HostFormatter):
    def format(self, record: logging.LogRecord) -> str:
        host = getattr(record, HOST_ATTR, None)
        if host:
            record = copy.copy(record)  # shallow
            record.msg = f"[{host}] {record.msg}"
        return super().format(record)


class HostPrefixingTextFormatter(HostPrefixingMixin, HostTextFormatter):
    pass


class HostPrefixingJsonFormatter(HostPrefixingMixin, HostJsonFormatter):
    pass


def configure(
        debug: Optional[bool] = None,
        verbose: Optional[bool] = None,
        quiet: Optional[bool] = None,
        log_format: LogFormat = LogFormat.FULL,
        log_prefix: Optional[bool] = False,
) -> None:
    log_level = 'DEBUG' if debug or verbose else 'WARNING' if quiet else 'INFO'
    formatter = make_formatter(log_format=log_format, log_prefix=log_prefix)
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    logger = logging.getLogger()
    logger.addHandler(handler)
    logger.setLevel(log_level)


def make_formatter(
        log_format: LogFormat = LogFormat.FULL,
        log_prefix: Optional[bool] = False,
) -> HostFormatter:
    log_prefix = log_prefix if log_prefix is not None else bool(log_format is not LogFormat.JSON)
    if log_format is LogFormat.JSON:
        if log_prefix:
            return HostPrefixingJsonFormatter()
        else:
            return HostJsonFormatter()
    elif isinstance(log_format, LogFormat):
        if log_prefix:
            return HostPrefixingTextFormatter(log_format.value)
        else:
            return HostTextFormatter(log_format.value)
    elif isinstance(log_format, str):
        if log_prefix:
            return HostPrefixingTextFormatter(log_format)
        else:
            return HostTextFormatter(log_format)
    else:
        raise ValueError(f"Unsupported log format: {log_format!r}")
