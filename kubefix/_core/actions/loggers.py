"""
Logging setup for the command-line tool and for the test harnesses.

The library itself only logs to its own ``kubefix.*`` loggers and never
configures the logging on import. The configuration is done explicitly:
by the CLI, or by the test harness if it wants the same output formats.

The records about the external processes carry the executed command
in the ``command`` attribute: it is used as a prefix in the text logs,
and as a separate field in the JSON logs.
"""
import copy
import enum
import logging
from typing import TYPE_CHECKING, Any, MutableMapping, Optional, TextIO, Union

import pythonjsonlogger.json


class LogFormat(enum.Enum):
    """ Log formats, as specified on CLI. """
    PLAIN = '%(message)s'
    FULL = '[%(asctime)s] %(name)-20.20s [%(levelname)-8.8s] %(message)s'
    JSON = '-json-'  # not used for formatting, only for detection


class CommandFormatter(logging.Formatter):
    pass


class CommandTextFormatter(CommandFormatter, logging.Formatter):
    pass


class CommandJsonFormatter(CommandFormatter, pythonjsonlogger.json.JsonFormatter):
    def __init__(
            self,
            *args: Any,
            **kwargs: Any,
    ) -> None:
        kwargs.setdefault('timestamp', True)
        super().__init__(*args, **kwargs)

    def add_fields(
            self,
            log_record: MutableMapping[str, Any],
            record: logging.LogRecord,
            message_dict: MutableMapping[str, Any],
    ) -> None:
        super().add_fields(log_record, record, message_dict)

        if 'severity' not in log_record:
            log_record['severity'] = (
                "debug" if record.levelno <= logging.DEBUG else
                "info" if record.levelno <= logging.INFO else
                "warn" if record.levelno <= logging.WARNING else
                "error" if record.levelno <= logging.ERROR else
                "fatal")


class CommandPrefixingMixin(CommandFormatter):
    def format(self, record: logging.LogRecord) -> str:
        if hasattr(record, 'command'):
            command = getattr(record, 'command')
            record = copy.copy(record)  # shallow
            record.msg = f"[{command}] {record.msg}"
        return super().format(record)


class CommandPrefixingTextFormatter(CommandPrefixingMixin, CommandTextFormatter):
    pass


class CommandPrefixingJsonFormatter(CommandPrefixingMixin, CommandJsonFormatter):
    pass


# Used to identify and remove our own handlers on re-configuration, e.g. in CLI tests,
# where the previous handlers can stream into a closed stderr interceptor of Click's runner.
if TYPE_CHECKING:
    class _KubefixStreamHandler(logging.StreamHandler[TextIO]):
        pass
else:
    class _KubefixStreamHandler(logging.StreamHandler):
        pass


def configure(
        debug: Optional[bool] = None,
        verbose: Optional[bool] = None,
        quiet: Optional[bool] = None,
        log_format: Union[LogFormat, str] = LogFormat.FULL,
        log_prefix: Optional[bool] = False,
) -> None:
    log_level = 'DEBUG' if debug or verbose else 'WARNING' if quiet else 'INFO'
    formatter = make_formatter(log_format=log_format, log_prefix=log_prefix)
    handler = _KubefixStreamHandler()
    handler.setFormatter(formatter)
    logger = logging.getLogger()
    logger.handlers[:] = [h for h in logger.handlers if not isinstance(h, _KubefixStreamHandler)]
    logger.addHandler(handler)
    logger.setLevel(log_level)

    # Prevent the low-level logging of the clients unless in the debug mode.
    for name in ['urllib3', 'kubernetes']:
        logging.getLogger(name).setLevel(logging.NOTSET if debug else logging.WARNING)


def make_formatter(
        log_format: Union[LogFormat, str] = LogFormat.FULL,
        log_prefix: Optional[bool] = False,
) -> CommandFormatter:
    log_prefix = log_prefix if log_prefix is not None else bool(log_format is not LogFormat.JSON)
    match log_format:
        case LogFormat.JSON:
            if log_prefix:
                return CommandPrefixingJsonFormatter()
            else:
                return CommandJsonFormatter()
        case LogFormat():
            if log_prefix:
                return CommandPrefixingTextFormatter(log_format.value)
            else:
                return CommandTextFormatter(log_format.value)
        case str():
            if log_prefix:
                return CommandPrefixingTextFormatter(log_format)
            else:
                return CommandTextFormatter(log_format)
        case _:
            raise ValueError(f"Unsupported log format: {log_format!r}")
