"""Domain layer errors."""

from pydantic import BaseModel


class FieldError(BaseModel):
    """Error attached to a single registration form field."""

    field: str  # "username", "email" or "realname"
    code: str  # "Required", "Invalid" or "Duplicate"
    message: str


class DomainError(Exception):
    """Base domain error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class RegistrationError(DomainError):
    """Recoverable registration failure carrying per-field errors."""

    def __init__(self, errors: list[FieldError]):
        self.errors = errors
        super().__init__("; ".join(error.message for error in errors))

    @property
    def field_codes(self) -> dict[str, str]:
        """Map of field name to error code."""
        return {error.field: error.code for error in self.errors}


class ValidationError(RegistrationError):
    """One or more registration fields are invalid."""

    pass


class DuplicateKeyError(RegistrationError):
    """A registration field collided with an existing account."""

    def __init__(self, key: str, error: FieldError):
        self.key = key
        super().__init__([error])


class UniquenessViolation(DomainError):
    """Raised by the account store when a unique key is violated.

    ``key`` names the violated column or constraint (e.g. ``username``,
    ``email``, ``provider_identity``).
    """

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Uniqueness violation on {key}")


class ConflictingLinkError(DomainError):
    """The email matches an account already linked to another provider identity."""

    def __init__(self, provider_name: str, account_id: str):
        self.provider_name = provider_name
        self.account_id = account_id
        super().__init__(
            f"The email associated with the {provider_name} account you just "
            f"logged in with is already associated with another account which "
            f"is, in turn, associated with a {provider_name} account different "
            f"from the one you just logged in with."
        )


class ProviderAuthFailure(DomainError):
    """Token exchange or user-info retrieval failed."""

    def __init__(self, provider: str, reason: str):
        self.provider = provider
        self.reason = reason
        super().__init__(f"{provider} authentication failed: {reason}")


class ProviderDisabledError(DomainError):
    """Raised when a login is attempted through a disabled provider."""

    def __init__(self, provider: str):
        self.provider = provider
        super().__init__(f"OAuth provider is not enabled: {provider}")


class FatalSetupIssuesError(DomainError):
    """Raised when the setup engine reports issues that block the application."""

    def __init__(self, issue_keys: list[str]):
        self.issue_keys = issue_keys
        super().__init__(f"Fatal setup issues: {', '.join(issue_keys)}")
