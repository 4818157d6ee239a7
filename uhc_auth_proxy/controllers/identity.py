"""Handles identity requests from the support operator."""

import json
from http import HTTPStatus as status
from typing import Optional, Tuple, Union

from .. import identity, logging
from ..domain import Registration
from ..exceptions import (ExchangeError, MalformedAuthorization,
                          MalformedUserAgent)
from ..services import client, cluster

logger = logging.getLogger(__name__)

Response = Tuple[Union[str, bytes], int, dict]

TEXT = {'Content-Type': 'text/plain; charset=utf-8'}
JSON = {'Content-Type': 'application/json'}


def get_identity(user_agent: Optional[str],
                 authorization: Optional[str]) -> Response:
    """
    Resolve the identity of the cluster making the request.

    Parameters
    ----------
    user_agent : str
        ``User-Agent`` header of the inbound request.
    authorization : str
        ``Authorization`` header of the inbound request.

    Returns
    -------
    bytes or str
        The identity document as UTF-8 JSON, or a reason for failure.
    int
        An HTTP status code.
    dict
        Headers to add to the response.

    """
    try:
        cluster_id = identity.get_cluster_id(user_agent)
    except MalformedUserAgent as e:
        logger.error('Rejected user-agent: %s', user_agent)
        return f"Invalid user-agent: '{e}'", status.BAD_REQUEST, TEXT

    try:
        token = identity.get_token(authorization)
    except MalformedAuthorization as e:
        logger.error('Rejected authorization header for cluster %s',
                     cluster_id)
        return (f"Invalid authorization header: '{e}'", status.BAD_REQUEST,
                TEXT)

    registration = Registration(cluster_id=cluster_id,
                                authorization_token=token)
    try:
        ident = cluster.get_identity(client.current_session(), registration)
    except ExchangeError as e:
        logger.error('Exchange failed for cluster %s: %s', cluster_id, e)
        return f"Unable to get identity: '{e}'", status.UNAUTHORIZED, TEXT

    try:
        body = json.dumps(ident, separators=(',', ':'), ensure_ascii=False,
                          allow_nan=False).encode('utf-8')
    except (TypeError, ValueError) as e:
        logger.error('Could not serialize identity for cluster %s: %s',
                     cluster_id, e)
        return ("Unable to read identity returned by cluster manager: "
                f"'{e}'", status.INTERNAL_SERVER_ERROR, TEXT)

    logger.info('Resolved identity for cluster %s', cluster_id)
    return body, status.OK, JSON
