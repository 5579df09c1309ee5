"""Access and authorize tokens.

Token objects are immutable once created; only the metadata fields allowed
by the generic metadata update rules may change.
"""

from __future__ import annotations

from pydantic import Field

from oauth_validation.models.base import ApiModel
from oauth_validation.models.meta import ObjectMeta


class OAuthAccessToken(ApiModel):
    """An issued access token. ``metadata.name`` is the token itself."""

    metadata: ObjectMeta = Field(default_factory=ObjectMeta)
    client_name: str = Field(default="", alias="clientName")
    user_name: str = Field(default="", alias="userName")
    user_uid: str = Field(default="", alias="userUID")
    scopes: list[str] = Field(default_factory=list)
    redirect_uri: str = Field(default="", alias="redirectURI")

    expires_in: int = Field(default=0, alias="expiresIn")  # seconds, 0 means never
    authorize_token: str = Field(default="", alias="authorizeToken")
    refresh_token: str = Field(default="", alias="refreshToken")


class OAuthAuthorizeToken(ApiModel):
    """An authorization code, optionally bound to a PKCE code challenge (RFC 7636)."""

    metadata: ObjectMeta = Field(default_factory=ObjectMeta)
    client_name: str = Field(default="", alias="clientName")
    user_name: str = Field(default="", alias="userName")
    user_uid: str = Field(default="", alias="userUID")
    scopes: list[str] = Field(default_factory=list)
    redirect_uri: str = Field(default="", alias="redirectURI")
    state: str = ""
    expires_in: int = Field(default=0, alias="expiresIn")

    code_challenge: str = Field(default="", alias="codeChallenge")
    code_challenge_method: str = Field(default="", alias="codeChallengeMethod")
