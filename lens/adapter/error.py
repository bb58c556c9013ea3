"""Adapter layer errors."""


class AdapterError(Exception):
    """Base adapter error."""

    pass


class ProviderError(AdapterError):
    """External identity provider error."""

    pass


class OAuthError(ProviderError):
    """OAuth round trip with a provider failed."""

    pass


class UpstreamError(AdapterError):
    """Image search service failed or rejected the request."""

    pass


class UpstreamAuthError(UpstreamError):
    """Image search service rejected our credentials."""

    pass
