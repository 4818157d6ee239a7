"""
Authenticated HTTP access to the cluster manager.

The cluster manager expects every call to carry the proxy's own offline
access token, distinct from the token presented by the cluster. The
:class:`.HTTPWrapper` attaches that token and hands back the raw response
body; callers decide what the bytes mean.
"""

from abc import ABC, abstractmethod
from typing import Optional

import requests
from flask import Flask, current_app

from ..exceptions import TransportError
from .. import logging

logger = logging.getLogger(__name__)

JSON = 'application/json'
EXTENSION = 'uhc_client'


class Wrapper(ABC):
    """Something that can send a request to the cluster manager."""

    @abstractmethod
    def send(self, request: requests.Request) -> bytes:
        """
        Send ``request`` and return the complete response body.

        Raises
        ------
        :class:`.TransportError`
            If the request could not be sent or the response not read.

        """


class HTTPWrapper(Wrapper):
    """
    Sends requests to the cluster manager over HTTP.

    Parameters
    ----------
    token : str
        Offline access token for the cluster manager. Fixed for the lifetime
        of the wrapper.
    timeout : float or None
        Seconds to wait for the cluster manager; ``None`` waits indefinitely.
    session : :class:`requests.Session`
        Session to send on. A new one is created if not given.

    """

    def __init__(self, token: str, timeout: Optional[float] = None,
                 session: Optional[requests.Session] = None) -> None:
        self._token = token
        self.timeout = timeout
        self._session = session if session is not None else requests.Session()

    def __repr__(self) -> str:
        return f'HTTPWrapper(timeout={self.timeout!r})'

    def add_headers(self, request: requests.Request) -> None:
        """Set the auth and content negotiation headers on ``request``."""
        request.headers['Authorization'] = f'Bearer {self._token}'
        request.headers['Accept'] = JSON
        request.headers['Content-Type'] = JSON

    def send(self, request: requests.Request) -> bytes:
        self.add_headers(request)
        # Prepared apart from the shared session so that cookies set by the
        # cluster manager never carry over between registrations.
        prepared = request.prepare()
        try:
            response = self._session.send(prepared, timeout=self.timeout)
            try:
                # Reading .content drains the body; read errors surface here.
                content: bytes = response.content
            finally:
                response.close()
        except requests.exceptions.RequestException as e:
            logger.error('Request to %s failed: %s', request.url,
                         type(e).__name__)
            raise TransportError('Could not reach the cluster manager') from e
        logger.debug('%s %s returned %i (%i bytes)', request.method,
                     request.url, response.status_code, len(content))
        return content


def _parse_timeout(value: Optional[str]) -> Optional[float]:
    if value is None or str(value).strip() == '':
        return None
    return float(value)


def init_app(app: Flask) -> None:
    """Set required configuration defaults for the application."""
    app.config.setdefault('OFFLINE_ACCESS_TOKEN', None)
    app.config.setdefault('UPSTREAM_TIMEOUT', '10')


def get_session(app: Optional[Flask] = None) -> HTTPWrapper:
    """
    Create a new :class:`.HTTPWrapper` from application config.

    Parameters
    ----------
    app : :class:`flask.Flask`
        Defaults to the current application.

    """
    config = (app or current_app).config
    return HTTPWrapper(config.get('OFFLINE_ACCESS_TOKEN') or '',
                       timeout=_parse_timeout(config.get('UPSTREAM_TIMEOUT')))


def current_session() -> HTTPWrapper:
    """
    Get the wrapper shared by all requests to the current application.

    The wrapper is built from config on first use and its session, with its
    connection pool, is reused after that. The service token never changes,
    so sharing it across concurrent requests is safe.
    """
    app = current_app._get_current_object()    # type: ignore
    wrapper = app.extensions.get(EXTENSION)
    if wrapper is None:
        wrapper = app.extensions.setdefault(EXTENSION, get_session(app))
    return wrapper     # type: ignore
