"""Provides an app factory for the auth proxy."""

import time
import uuid

from flask import Flask, Response, current_app, g, jsonify, request
from werkzeug.exceptions import HTTPException
from werkzeug.middleware.proxy_fix import ProxyFix

from . import routes, logging
from .services import client

logger = logging.getLogger(__name__)


def jsonify_exception(error: HTTPException) -> Response:
    exc_resp = error.get_response()
    response = jsonify(reason=error.description)
    response.status_code = exc_resp.status_code
    return response


def _start_request() -> None:
    """Adopt the caller's request id, or make one up."""
    header = current_app.config['REQUEST_ID_HEADER']
    g.request_id = request.headers.get(header) or str(uuid.uuid4())
    g.request_started = time.monotonic()


def _finish_request(response: Response) -> Response:
    """Echo the request id and write the access log line."""
    if 'request_id' in g:
        response.headers[current_app.config['REQUEST_ID_HEADER']] \
            = g.request_id
    elapsed = time.monotonic() - g.get('request_started', time.monotonic())
    logger.info('%s %s %i', request.method, request.path,
                response.status_code,
                extra={'duration_ms': round(elapsed * 1000, 2),
                       'remote_addr': request.remote_addr})
    return response


def create_app() -> Flask:
    """Initialize an instance of the auth proxy."""
    app = Flask('uhc_auth_proxy')
    app.config.from_pyfile('config.py')
    logging.setup_logger(app.config['LOGLEVEL'])

    client.init_app(app)
    if not app.config['OFFLINE_ACCESS_TOKEN']:
        logger.warning('OFFLINE_ACCESS_TOKEN is not set; calls to the '
                       'cluster manager will be rejected')

    app.register_blueprint(routes.blueprint)
    app.before_request(_start_request)
    app.after_request(_finish_request)
    app.errorhandler(HTTPException)(jsonify_exception)
    if app.config['TRUSTED_PROXIES']:
        # Take the client address from X-Forwarded-For set by the router.
        app.wsgi_app = ProxyFix(app.wsgi_app,    # type: ignore
                                x_for=app.config['TRUSTED_PROXIES'])
    return app
