import pytest

from oauth_validation.errors import InvalidScopeError
from oauth_validation.models.clients import OAuthClient, OAuthClientAuthorization
from oauth_validation.models.meta import ObjectMeta
from oauth_validation.models.tokens import OAuthAccessToken, OAuthAuthorizeToken
from oauth_validation.scope.registry import ScopeEvaluatorRegistry, default_registry
from oauth_validation.settings import get_settings

TOKEN_NAME = "tokentokentokentokentokentoken01"
CODE_CHALLENGE = "E9Melhoa2OwvFrEMTJguCHaoeK1t8URWbuGJSstw-cM"


class FakeEvaluator:
    """Evaluator double that records every call it receives."""

    def __init__(self, name: str, prefix: str, error: str | None = None):
        self.name = name
        self.prefix = prefix
        self.error = error
        self.handled: list[str] = []
        self.validated: list[str] = []

    def handles(self, scope: str) -> bool:
        self.handled.append(scope)
        return scope.startswith(self.prefix)

    def validate(self, scope: str) -> None:
        self.validated.append(scope)
        if self.error is not None:
            raise InvalidScopeError(self.error)


@pytest.fixture(autouse=True)
def reset_process_state():
    """Settings and the default registry are cached per process."""
    get_settings.cache_clear()
    default_registry.cache_clear()
    yield
    get_settings.cache_clear()
    default_registry.cache_clear()


@pytest.fixture
def accepting_registry() -> ScopeEvaluatorRegistry:
    """A registry that accepts every scope starting with ``user:``."""
    return ScopeEvaluatorRegistry([FakeEvaluator("user", "user:")])


@pytest.fixture
def access_token() -> OAuthAccessToken:
    return OAuthAccessToken(
        metadata=ObjectMeta(name=TOKEN_NAME),
        client_name="myclient",
        user_name="bob",
        user_uid="bob-uid",
        scopes=["user:info"],
        redirect_uri="https://example.com/callback",
    )


@pytest.fixture
def authorize_token() -> OAuthAuthorizeToken:
    return OAuthAuthorizeToken(
        metadata=ObjectMeta(name=TOKEN_NAME),
        client_name="myclient",
        user_name="bob",
        user_uid="bob-uid",
        scopes=["user:info"],
        redirect_uri="https://example.com/callback",
        code_challenge=CODE_CHALLENGE,
        code_challenge_method="S256",
    )


@pytest.fixture
def client() -> OAuthClient:
    return OAuthClient(
        metadata=ObjectMeta(name="myclient"),
        redirect_uris=["https://example.com/callback"],
    )


@pytest.fixture
def client_authorization() -> OAuthClientAuthorization:
    return OAuthClientAuthorization(
        metadata=ObjectMeta(name="bob:app"),
        client_name="app",
        user_name="bob",
        user_uid="bob-uid",
        scopes=["user:info"],
    )
