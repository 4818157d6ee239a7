"""
Extract identity material from the support operator's request headers.

The support operator identifies the cluster it runs in through its
user-agent::

    support-operator/<commit> cluster/<cluster_id>

and presents the cluster's pull-secret token as a bearer token.
"""

from typing import Optional

from .exceptions import MalformedUserAgent, MalformedAuthorization

OPERATOR_PREFIX = 'support-operator/'
CLUSTER_PREFIX = 'cluster/'
BEARER_PREFIX = 'Bearer '


def get_cluster_id(user_agent: Optional[str]) -> str:
    """
    Get the cluster id from a support operator user-agent.

    Parameters
    ----------
    user_agent : str
        Value of the ``User-Agent`` header.

    Returns
    -------
    str
        Everything after ``cluster/`` in the second token.

    Raises
    ------
    :class:`.MalformedUserAgent`
        If the user-agent is not ``support-operator/... cluster/...``.

    """
    parts = (user_agent or '').split(' ', 1)
    if len(parts) < 2:
        raise MalformedUserAgent('Invalid user-agent')
    operator, cluster = parts
    if not operator.startswith(OPERATOR_PREFIX):
        raise MalformedUserAgent('Invalid user-agent')
    if not cluster.startswith(CLUSTER_PREFIX):
        raise MalformedUserAgent('Invalid user-agent')
    return cluster[len(CLUSTER_PREFIX):]


def get_token(authorization_header: Optional[str]) -> str:
    """
    Get the bearer token from an ``Authorization`` header.

    The token is returned exactly as given, and may be empty.

    Raises
    ------
    :class:`.MalformedAuthorization`
        If the header does not start with ``Bearer``.

    """
    header = authorization_header or ''
    if not header.startswith(BEARER_PREFIX):
        # The header may hold some other kind of credential; don't echo it.
        raise MalformedAuthorization('Not a bearer token')
    return header[len(BEARER_PREFIX):]
