"""Exchange a cluster registration for its identity."""

import json
import math
from typing import Optional

import requests
from flask import current_app

from ..domain import IdentityDocument, Registration
from ..exceptions import (TransportError, UpstreamUnavailable,
                          MalformedUpstreamResponse)
from .. import logging
from .client import Wrapper

logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> None:
    raise ValueError(f'{name} is not valid JSON')


def _parse_float(value: str) -> float:
    number = float(value)
    if math.isinf(number):
        raise ValueError(f'{value} is out of range')
    return number


def _registration_url() -> str:
    return current_app.config['UHC_REGISTRATION_URL']


def get_identity(wrapper: Wrapper, registration: Registration,
                 url: Optional[str] = None) -> IdentityDocument:
    """
    Ask the cluster manager who a registering cluster is.

    Makes exactly one request; failures are not retried.

    Parameters
    ----------
    wrapper : :class:`.Wrapper`
        Sends the request to the cluster manager.
    registration : :class:`.Registration`
        Cluster id and token presented by the cluster.
    url : str
        Registration endpoint. Defaults to ``UHC_REGISTRATION_URL`` in the
        application config.

    Returns
    -------
    object
        The decoded identity document, key order preserved.

    Raises
    ------
    :class:`.UpstreamUnavailable`
        If the cluster manager could not be reached.
    :class:`.MalformedUpstreamResponse`
        If the cluster manager did not respond with JSON.

    """
    request = requests.Request('POST', url or _registration_url(),
                               data=json.dumps(registration.to_dict()))
    logger.debug('Exchanging %r', registration)
    try:
        content = wrapper.send(request)
    except TransportError as e:
        raise UpstreamUnavailable(f'cluster manager unavailable: {e}') from e
    try:
        return json.loads(content, parse_constant=_reject_constant,
                          parse_float=_parse_float)
    except (ValueError, UnicodeDecodeError) as e:
        logger.warning('Cluster manager response for %s is not JSON',
                       registration.cluster_id)
        raise MalformedUpstreamResponse('cluster manager response is not '
                                        'valid JSON') from e
