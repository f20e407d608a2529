# 📄 File: lawmarket/shared/utils/logging.py

# 🧭 Purpose (Layman Explanation):
# Sets up how the marketplace writes its logs, so every line says which request and which
# account it belongs to and can be searched easily in a log tool.

# 🧪 Purpose (Technical Summary):
# Structured logging with python-json-logger, request/account context variables, and a
# LoggerAdapter based StructuredLogger that turns keyword arguments into JSON fields and
# offers helpers for business events and the admin audit trail.

# 🔗 Dependencies:
# - python-json-logger: JSON log formatting
# - logging: Python standard logging
# - contextvars: Request context tracking

# 🔄 Connected Modules / Calls From:
# Used by: lawmarket.main (setup), RequestLoggingMiddleware, session dependency,
# EventPublisher (business events), admin command handlers (audit trail)

import logging
import sys
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Dict, MutableMapping, Optional, Tuple

from pythonjsonlogger import jsonlogger

request_id_var: ContextVar[str] = ContextVar('request_id', default='')
account_id_var: ContextVar[str] = ContextVar('account_id', default='')

SERVICE_NAME = 'lawmarket-api'
TEXT_FORMAT = '%(asctime)s %(levelname)-8s %(name)s [%(request_id)s] %(message)s'

# Keyword arguments understood by logging.Logger itself
_LOGGER_KWARGS = frozenset({'exc_info', 'stack_info', 'stacklevel', 'extra'})
_NOISY_LOGGERS = ('httpx', 'httpcore', 'hpack', 'sqlalchemy.engine', 'asyncio')

_configured = False
_adapters: Dict[str, "StructuredLogger"] = {}


class RequestContextFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get('') or '-'
        record.account_id = account_id_var.get('')
        record.service = SERVICE_NAME
        return True


class LawMarketJsonFormatter(jsonlogger.JsonFormatter):
    """
    One JSON object per line.

    Fixed keys (timestamp, level, logger, module, service) come first,
    then request context, then whatever the caller passed as fields.
    """

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record.update({
            'timestamp': datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'module': record.module,
            'service': getattr(record, 'service', SERVICE_NAME),
        })

        for key in ('request_id', 'account_id'):
            value = getattr(record, key, '')
            if value and value != '-':
                log_record[key] = value

        for key, value in (getattr(record, 'fields', None) or {}).items():
            log_record.setdefault(key, value)


class StructuredLogger(logging.LoggerAdapter):
    """
    Adapter that accepts arbitrary keyword fields.

        logger.info("Account banned", target_id=account.id, expires_at=None)

    Unknown keyword arguments are collected under ``record.fields`` and
    rendered as top-level keys by LawMarketJsonFormatter.
    """

    def __init__(self, name: str):
        super().__init__(logging.getLogger(name), {})

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> Tuple[Any, MutableMapping[str, Any]]:
        fields = {key: kwargs.pop(key) for key in list(kwargs) if key not in _LOGGER_KWARGS}
        extra = dict(kwargs.pop('extra', None) or {})
        fields.update(extra.pop('fields', {}))
        if fields:
            extra['fields'] = fields
        if extra:
            kwargs['extra'] = extra
        return msg, kwargs

    def log_user_action(
        self,
        action: str,
        account_id: str,
        resource: Optional[str] = None,
        result: str = 'success',
        extra: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Audit entry for an action taken by an account (admin moderation)."""
        target = f" on {resource}" if resource else ""
        self.info(
            f"Account {account_id} {action}{target}: {result}",
            event_type='user_action',
            action=action,
            actor_account_id=account_id,
            resource=resource,
            result=result,
            **(extra or {}),
        )

    def log_business_event(
        self,
        event_type: str,
        description: str,
        entity_id: Optional[str] = None,
        extra: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.info(
            description,
            event_type='business_event',
            business_event_type=event_type,
            entity_id=entity_id,
            **(extra or {}),
        )


def _build_formatter(log_format: str) -> logging.Formatter:
    if log_format.lower() == 'json':
        return LawMarketJsonFormatter('%(message)s')
    return logging.Formatter(TEXT_FORMAT)


def setup_logging(log_level: str = 'INFO', log_format: str = 'json') -> logging.Logger:
    """
    Configure the root logger once per process.

    Args:
        log_level: Name of the minimum level to emit
        log_format: ``json`` for python-json-logger output, ``text`` otherwise
    """
    global _configured

    startup_logger = logging.getLogger('lawmarket.startup')
    if _configured:
        return startup_logger

    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(_build_formatter(log_format))
    handler.addFilter(RequestContextFilter())

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)
    root.addHandler(handler)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    _configured = True
    startup_logger.debug(f"Logging configured (level={log_level.upper()}, format={log_format})")
    return startup_logger


def get_logger(name: str) -> StructuredLogger:
    """Return the cached StructuredLogger for ``name`` (usually ``__name__``)."""
    if name not in _adapters:
        _adapters[name] = StructuredLogger(name)
    return _adapters[name]
