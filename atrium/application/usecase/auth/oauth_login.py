"""OAuth login use case.

Drives a login through an OAuth provider: token exchange, user-info lookup,
account resolution and, for unknown identities, the registration form.
"""

from typing import Literal

import logfire
from pydantic import BaseModel, Field

from atrium.application.usecase.base import BaseUseCase
from atrium.config import Settings
from atrium.domain.error import FieldError, ProviderAuthFailure, RegistrationError
from atrium.domain.model import LocalAccount
from atrium.domain.service import (
    AccountService,
    OAuthAccountResolver,
    OAuthProviderRegistry,
    SessionService,
)
from atrium.domain.value import (
    AuthContext,
    ExternalIdentity,
    LoginExisting,
    OAuthProviderKey,
    RegistrationFields,
    RegistrationSuggestion,
)


class OAuthLoginRequest(BaseModel):
    """Login request from an OAuth callback or the registration form."""

    provider: OAuthProviderKey
    viewer_id: str | None = None  # Account ID of an already authenticated viewer
    code: str | None = None  # Authorization code from the provider callback
    token: str | None = None  # Access token echoed back by the registration form
    error: str | None = None  # Error reported by the provider callback
    registration: RegistrationFields | None = None  # Set when the form is posted


class RegistrationFormField(BaseModel):
    """A single input of the registration form."""

    name: Literal["username", "email", "realname"]
    label: str
    value: str = ""
    error: str | None = None  # FieldError code, e.g. "Required"


class RegistrationForm(BaseModel):
    """Registration form shown when no local account matched."""

    title: str = "Create New Account"
    action: str  # Callback URI the form posts back to
    token: str  # Hidden field so the provider is not asked for a new code
    fields: list[RegistrationFormField]
    errors: list[FieldError] = Field(default_factory=list)
    messages: list[str] = Field(default_factory=list)  # Errors with no input


class OAuthLoginResponse(BaseModel):
    """Login outcome.

    ``session_token`` is set for ``logged_in`` and ``registered``; ``form`` is
    set for ``registration_required``.
    """

    kind: Literal[
        "already_authenticated", "logged_in", "registered", "registration_required"
    ]
    session_token: str | None = None
    account_id: str | None = None
    username: str | None = None
    linked: bool = False
    form: RegistrationForm | None = None


class OAuthLoginUseCase(BaseUseCase):
    """Use case for logging in or registering through an OAuth provider."""

    def __init__(
        self,
        provider_registry: OAuthProviderRegistry,
        account_resolver: OAuthAccountResolver,
        account_service: AccountService,
        session_service: SessionService,
        settings: Settings,
    ) -> None:
        """Initialize OAuth login use case.

        Args:
            provider_registry: Registry of enabled provider clients
            account_resolver: Matches identities against local accounts
            account_service: Account domain service
            session_service: Session token domain service
            settings: Application settings
        """
        self.provider_registry = provider_registry
        self.account_resolver = account_resolver
        self.account_service = account_service
        self.session_service = session_service
        self.settings = settings

    async def execute(self, request: OAuthLoginRequest) -> OAuthLoginResponse:
        """Execute the OAuth login flow.

        Steps:
        1. Ignore the request if the viewer is already logged in
        2. Obtain an access token (echoed token or code exchange)
        3. Fetch user info and build the external identity
        4. Resolve the identity: log in, or collect registration fields
        5. Issue a session token on success

        Args:
            request: Login request

        Returns:
            Login outcome

        Raises:
            ProviderDisabledError: If the provider is not enabled
            ProviderAuthFailure: If the provider reported an error or the
                token exchange or user-info lookup failed
            ConflictingLinkError: If the email belongs to an account linked to
                another identity on this provider
        """
        # Account linking for logged-in viewers is not performed
        if request.viewer_id:
            logfire.info(
                "OAuth login ignored, viewer already authenticated",
                provider=request.provider.value,
                viewer_id=request.viewer_id,
            )
            return OAuthLoginResponse(
                kind="already_authenticated", account_id=request.viewer_id
            )

        client = self.provider_registry.get_client(request.provider)

        if request.error:
            logfire.warn(
                "OAuth provider returned an error",
                provider=request.provider.value,
                error=request.error,
            )
            raise ProviderAuthFailure(request.provider.value, request.error)

        with logfire.span("oauth_login", provider=request.provider.value):
            access_token = request.token
            if not access_token:
                if not request.code:
                    raise ProviderAuthFailure(
                        request.provider.value, "No authorization code provided"
                    )
                access_token = await client.exchange_code_for_token(request.code)

            user_info = await client.fetch_user_info(access_token)
            identity = client.extract_identity(user_info)
            context = AuthContext(access_token=access_token, user_info=user_info)

            outcome = await self.account_resolver.resolve(identity, context)
            if isinstance(outcome, LoginExisting):
                account = await self.account_service.get_by_id(outcome.account_id)
                return self._session_response(
                    "logged_in", account, linked=outcome.linked
                )

            if request.registration is None:
                return self._form_response(
                    request, access_token, outcome.suggestion, identity
                )

            try:
                account_id = await self.account_resolver.complete_registration(
                    request.registration, identity, context
                )
            except RegistrationError as e:
                return self._form_response(
                    request, access_token, outcome.suggestion, identity, e.errors
                )

            account = await self.account_service.get_by_id(account_id)
            return self._session_response("registered", account)

    def _session_response(
        self,
        kind: Literal["logged_in", "registered"],
        account: LocalAccount,
        linked: bool = False,
    ) -> OAuthLoginResponse:
        return OAuthLoginResponse(
            kind=kind,
            session_token=self.session_service.establish_session(account),
            account_id=str(account.id),
            username=account.username.root,
            linked=linked,
        )

    def _form_response(
        self,
        request: OAuthLoginRequest,
        access_token: str,
        suggestion: RegistrationSuggestion,
        identity: ExternalIdentity,
        errors: list[FieldError] | None = None,
    ) -> OAuthLoginResponse:
        errors = errors or []
        codes = {error.field: error.code for error in errors}
        submitted = request.registration or RegistrationFields()

        fields = [
            RegistrationFormField(
                name="username",
                label="Username",
                value=(
                    submitted.username
                    if request.registration is not None
                    else suggestion.username or ""
                ),
                error=codes.get("username"),
            )
        ]
        if suggestion.email_editable:
            fields.append(
                RegistrationFormField(
                    name="email",
                    label="Email",
                    value=submitted.email,
                    error=codes.get("email"),
                )
            )
        if suggestion.display_name_editable:
            fields.append(
                RegistrationFormField(
                    name="realname",
                    label="Real Name",
                    value=submitted.realname,
                    error=codes.get("realname"),
                )
            )

        shown = {field.name for field in fields}
        messages = [error.message for error in errors if error.field not in shown]

        logfire.info(
            "Registration form required",
            provider=identity.provider.value,
            external_user_id=identity.external_user_id,
            error_count=len(errors),
        )

        return OAuthLoginResponse(
            kind="registration_required",
            form=RegistrationForm(
                action=getattr(
                    self.settings.auth, f"{request.provider.value}_callback_url"
                ),
                token=access_token,
                fields=fields,
                errors=errors,
                messages=messages,
            ),
        )
