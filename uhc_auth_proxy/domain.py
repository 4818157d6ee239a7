"""Defines the registration concepts exchanged with the cluster manager."""

from typing import Any, NamedTuple


class Registration(NamedTuple):
    """A cluster's claim to an identity, built once per inbound request."""

    cluster_id: str
    """Cluster identifier taken from the support operator's user-agent."""

    authorization_token: str
    """Pull-secret token presented by the cluster. Never logged."""

    def __repr__(self) -> str:
        """Omit the token so that it can't leak into logs or tracebacks."""
        return f'Registration(cluster_id={self.cluster_id!r})'

    def to_dict(self) -> dict:
        """Request body expected by the registration API."""
        return {'cluster_id': self.cluster_id,
                'authorization_token': self.authorization_token}


IdentityDocument = Any
"""Whatever JSON value the cluster manager returns; relayed verbatim."""
