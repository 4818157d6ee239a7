"""Provides exceptions raised while resolving a cluster identity."""


class MalformedUserAgent(ValueError):
    """The user-agent does not identify a support operator and cluster."""


class MalformedAuthorization(ValueError):
    """The Authorization header does not carry a bearer token."""


class TransportError(IOError):
    """The cluster manager could not be reached or its response not read."""


class ExchangeError(RuntimeError):
    """Failed to exchange a registration for an identity."""


class UpstreamUnavailable(ExchangeError):
    """The cluster manager was unavailable during the exchange."""


class MalformedUpstreamResponse(ExchangeError):
    """The cluster manager returned something other than JSON."""
