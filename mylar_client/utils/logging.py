"""
Logging utilities

The client only emits records through standard module loggers and never
installs handlers itself. Applications that want structured output can call
setup_logging(), which pairs a readable console format with an optional JSON
formatter carrying per-task context.
"""
import contextvars
import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Union

# Context variable for request tracking across async calls
log_context: contextvars.ContextVar[Dict[str, Any]] = contextvars.ContextVar('log_context', default={})

LOGGER_NAME = 'mylar_client'

JSONValue = Union[
    str,
    int,
    float,
    bool,
    None,
    dict[str, Any],   # nested object
    list[Any]         # arrays
]

_RECORD_ATTRS = {
    'name', 'msg', 'args', 'levelname', 'levelno', 'pathname',
    'filename', 'module', 'lineno', 'funcName', 'created',
    'msecs', 'relativeCreated', 'thread', 'threadName',
    'processName', 'process', 'getMessage', 'exc_info',
    'exc_text', 'stack_info', 'taskName', 'message', 'asctime'
}


class JSONFormatter(logging.Formatter):
    """
    One JSON object per record.

    The timestamp is taken from the record itself in UTC. The Mylar command
    of a request record is lifted to a top-level 'command' key so log
    shippers can filter on it without digging into 'extra'.
    """

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        entry: Dict[str, JSONValue] = {
            'timestamp': created.isoformat().replace('+00:00', 'Z'),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'function': record.funcName,
            'line': record.lineno
        }

        if record.exc_info:
            entry['exception'] = self._exception_fields(record.exc_info)
        if record.stack_info:
            entry['stack'] = self.formatStack(record.stack_info)

        context = log_context.get({})
        if context:
            entry['context'] = dict(context)

        extra = _extra_fields(record)
        if extra:
            if 'command' in extra:
                entry['command'] = extra['command']
            entry['extra'] = extra

        return json.dumps(entry, ensure_ascii=False)

    def _exception_fields(self, exc_info) -> Dict[str, str]:
        exc_type, exc, _ = exc_info
        return {
            'type': getattr(exc_type, '__name__', 'Unknown'),
            'message': str(exc) if exc is not None else '',
            'traceback': self.formatException(exc_info)
        }


def _jsonable(value: Any) -> JSONValue:
    try:
        json.dumps(value)
    except (TypeError, ValueError):
        return str(value)
    return value


def _extra_fields(record: logging.LogRecord) -> Dict[str, JSONValue]:
    """Collect attributes attached through the extra= argument."""
    return {
        key: _jsonable(value)
        for key, value in vars(record).items()
        if key not in _RECORD_ATTRS and not key.startswith('_')
    }


def set_log_context(**context: Any) -> None:
    """
    Add key/value pairs to the logging context of the current task.

    Values are included under 'context' by JSONFormatter.
    """
    current = log_context.get({}).copy()
    current.update(context)
    log_context.set(current)


def clear_context() -> None:
    """Clear the current logging context."""
    log_context.set({})


def setup_logging(level: Optional[str] = None, json_output: bool = False) -> logging.Logger:
    """
    Attach a console handler to the client's logger.

    Args:
        level: Log level name (defaults to LOG_LEVEL from configuration)
        json_output: Emit JSON lines instead of the human-readable format

    Returns:
        The configured 'mylar_client' logger
    """
    from mylar_client.config import get_config
    from mylar_client.exceptions import ConfigError

    level_name = (level or get_config().log_level).upper()
    level_value = logging.getLevelName(level_name)
    if not isinstance(level_value, int):
        raise ConfigError(f"unknown log level: {level_name}")

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level_value)

    handler = logging.StreamHandler()
    if json_output:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s'
        ))

    # Avoid duplicate handlers when called more than once
    for existing in list(logger.handlers):
        if getattr(existing, '_mylar_client_handler', False):
            logger.removeHandler(existing)
    handler._mylar_client_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)

    return logger
