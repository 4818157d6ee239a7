"""JSON logging for the auth proxy."""

import logging
from typing import Union

from flask import g, has_app_context
from pythonjsonlogger import jsonlogger

FORMAT = '%(asctime)s %(levelname)s %(name)s %(message)s'


class RequestIdFilter(logging.Filter):
    """Attach the id of the request being handled, if there is one."""

    def filter(self, record: logging.LogRecord) -> bool:
        if has_app_context() and 'request_id' in g:
            record.request_id = g.request_id
        return True


def setup_logger(level: Union[int, str] = logging.INFO) -> None:
    """Send JSON log lines to stderr. Safe to call more than once."""
    logger = logging.getLogger()
    logger.setLevel(level)
    if any(getattr(h, '_uhc_json', False) for h in logger.handlers):
        return
    handler = logging.StreamHandler()
    handler.setFormatter(jsonlogger.JsonFormatter(
        FORMAT,
        rename_fields={'levelname': 'level', 'asctime': 'timestamp'}
    ))
    handler.addFilter(RequestIdFilter())
    handler._uhc_json = True    # type: ignore
    logger.addHandler(handler)


def getLogger(name: str) -> logging.Logger:
    """Get a logger for a module."""
    return logging.getLogger(name)
