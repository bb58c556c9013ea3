"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class ProfileIncompleteError(DomainError):
    """Raised when a provider profile lacks a field every identity needs."""

    def __init__(self, provider: str, missing: str):
        self.provider = provider
        self.missing = missing
        super().__init__(f"{provider} profile is missing {missing}")


class AuthenticationError(DomainError):
    """Raised when a protected operation has no valid session."""

    def __init__(self, message: str = "Not authenticated"):
        super().__init__(message)


class StoreUnavailableError(DomainError):
    """Raised when a backing store cannot be reached."""

    pass


class DuplicateIdentityError(DomainError):
    """Raised when an identity for (provider, provider_id) already exists."""

    def __init__(self, provider: str, provider_id: str):
        self.provider = provider
        self.provider_id = provider_id
        super().__init__(f"Identity already exists: {provider}:{provider_id}")


class UnsupportedProviderError(DomainError):
    """Raised for a provider with no registered adapter or client."""

    def __init__(self, provider: str):
        self.provider = provider
        super().__init__(f"Unsupported provider: {provider}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
