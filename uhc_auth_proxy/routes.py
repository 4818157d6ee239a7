"""Provides the routes of the auth proxy."""

from http import HTTPStatus as status

from flask import Blueprint, jsonify, request

from .controllers import identity

blueprint = Blueprint('uhc_auth_proxy', __name__, url_prefix='')


@blueprint.route('/', methods=['GET'])
def root() -> tuple:
    """Get the identity of the registering cluster."""
    return identity.get_identity(request.headers.get('User-Agent'),
                                 request.headers.get('Authorization'))


@blueprint.route('/status', methods=['GET'])
def ok() -> tuple:
    """Health check endpoint."""
    return jsonify({'status': 'ok'}), status.OK
