"""OAuth account resolution.

Decides what a verified external identity means locally, in priority order:

1. The identity is already linked: log in the linked account.
2. The identity's email belongs to an account with no link for this
   provider: link it and log in.
3. Otherwise collect registration fields and create a new account.
"""

from uuid import uuid4

import logfire

from atrium.domain.error import (
    ConflictingLinkError,
    DuplicateKeyError,
    FieldError,
    UniquenessViolation,
    ValidationError,
)
from atrium.domain.model import LinkedAccount, LocalAccount, ProfileImage
from atrium.domain.value import (
    AccountId,
    AuthContext,
    ExternalIdentity,
    LinkedAccountId,
    LoginExisting,
    NeedsRegistration,
    ProfileImageId,
    RegistrationFields,
    RegistrationSuggestion,
    ResolutionOutcome,
    Username,
    is_valid_username,
)

from .account_service import AccountService
from .base import Service
from .linked_account_service import LinkedAccountService
from .oauth_provider import OAuthProviderRegistry

# Store keys that are recoverable on the registration form
DUPLICATE_FIELD_ERRORS: dict[str, FieldError] = {
    "username": FieldError(
        field="username", code="Duplicate", message="That username is not unique."
    ),
    "email": FieldError(
        field="email", code="Duplicate", message="That email is not unique."
    ),
}


class OAuthAccountResolver(Service):
    """Matches external identities against local accounts."""

    def __init__(
        self,
        account_service: AccountService,
        linked_account_service: LinkedAccountService,
        provider_registry: OAuthProviderRegistry,
    ) -> None:
        """Initialize account resolver.

        Args:
            account_service: Account domain service
            linked_account_service: Linked account domain service
            provider_registry: Registry used to reach the provider capability
        """
        self.account_service = account_service
        self.linked_account_service = linked_account_service
        self.provider_registry = provider_registry

    async def resolve(
        self, identity: ExternalIdentity, context: AuthContext
    ) -> ResolutionOutcome:
        """Resolve an external identity to a login or a registration.

        Args:
            identity: Verified identity from the provider
            context: Request context for this login attempt

        Returns:
            LoginExisting or NeedsRegistration

        Raises:
            ConflictingLinkError: If the email belongs to an account linked to
                a different identity on the same provider
        """
        with logfire.span(
            "account_resolver.resolve",
            provider=identity.provider.value,
            external_user_id=identity.external_user_id,
            has_email=identity.email is not None,
        ):
            known = await self.linked_account_service.get_by_provider_identity(
                identity.provider, identity.external_user_id
            )
            if known:
                return LoginExisting(account_id=known.account_id)

            if identity.email:
                account = await self.account_service.get_by_email(identity.email)
                if account:
                    return await self._link_by_email(account, identity)

            logfire.info(
                "No account matched, registration required",
                provider=identity.provider.value,
                external_user_id=identity.external_user_id,
            )
            return NeedsRegistration(
                suggestion=RegistrationSuggestion(
                    username=identity.username_hint,
                    email=identity.email,
                    display_name=identity.display_name,
                )
            )

    async def complete_registration(
        self,
        fields: RegistrationFields,
        identity: ExternalIdentity,
        context: AuthContext,
    ) -> AccountId:
        """Validate registration fields and create the account.

        Every field is validated and all errors are reported together.
        The profile image is only fetched once validation has passed.

        Args:
            fields: Fields submitted on the registration form
            identity: Verified identity from the provider
            context: Request context for this login attempt

        Returns:
            ID of the new account

        Raises:
            ValidationError: If any field is missing or invalid
            DuplicateKeyError: If username or email is already taken
            UniquenessViolation: For any other violated key
        """
        with logfire.span(
            "account_resolver.complete_registration",
            provider=identity.provider.value,
            username=fields.username,
        ):
            errors: list[FieldError] = []

            username = fields.username
            if not username:
                errors.append(
                    FieldError(
                        field="username",
                        code="Required",
                        message="Username is required.",
                    )
                )
            elif not is_valid_username(username):
                errors.append(
                    FieldError(
                        field="username",
                        code="Invalid",
                        message="Username may only contain letters and numbers.",
                    )
                )

            # Provider-supplied values are authoritative
            email = identity.email or fields.email.strip()
            if not email:
                errors.append(
                    FieldError(
                        field="email", code="Required", message="Email is required."
                    )
                )

            display_name = identity.display_name or fields.realname.strip()
            if not display_name:
                errors.append(
                    FieldError(
                        field="realname",
                        code="Required",
                        message="Real name is required.",
                    )
                )

            if errors:
                logfire.info(
                    "Registration rejected",
                    provider=identity.provider.value,
                    fields=[error.field for error in errors],
                )
                raise ValidationError(errors)

            profile_image = await self._fetch_profile_image(identity, context)

            account = LocalAccount(
                id=AccountId(uuid4()),
                username=Username(username),
                email=email,
                display_name=display_name,
                profile_image_id=profile_image.id if profile_image else None,
            )
            link = LinkedAccount(
                id=LinkedAccountId(uuid4()),
                account_id=account.id,
                provider=identity.provider,
                external_user_id=identity.external_user_id,
            )

            try:
                saved = await self.account_service.register(
                    account, link, profile_image
                )
            except UniquenessViolation as e:
                field_error = DUPLICATE_FIELD_ERRORS.get(e.key)
                if field_error is None:
                    raise
                logfire.info(
                    "Registration collided with existing account", key=e.key
                )
                raise DuplicateKeyError(e.key, field_error) from e

            return saved.id

    async def _link_by_email(
        self, account: LocalAccount, identity: ExternalIdentity
    ) -> LoginExisting:
        """Link the identity to an account that shares its email."""
        existing = await self.linked_account_service.get_for_account(
            account.id, identity.provider
        )
        if existing:
            logfire.error(
                "Email belongs to an account linked to another identity",
                provider=identity.provider.value,
                account_id=str(account.id),
                linked_external_user_id=existing.external_user_id,
                external_user_id=identity.external_user_id,
            )
            raise ConflictingLinkError(
                identity.provider.display_name, str(account.id)
            )

        await self.linked_account_service.link(
            LinkedAccount(
                id=LinkedAccountId(uuid4()),
                account_id=account.id,
                provider=identity.provider,
                external_user_id=identity.external_user_id,
            )
        )
        return LoginExisting(account_id=account.id, linked=True)

    async def _fetch_profile_image(
        self, identity: ExternalIdentity, context: AuthContext
    ) -> ProfileImage | None:
        """Fetch the provider avatar for a confirmed registration."""
        content = identity.profile_image
        if content is None:
            client = self.provider_registry.get_client(identity.provider)
            content = await client.fetch_profile_image(
                context.access_token, context.user_info
            )
        if not content:
            return None

        return ProfileImage(
            id=ProfileImageId(uuid4()),
            name=f"{identity.provider.value}-profile.jpg",
            content=content,
        )
