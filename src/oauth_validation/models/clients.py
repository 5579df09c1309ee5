"""OAuth clients, their scope restrictions, and client authorizations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from pydantic import Field

from oauth_validation.models.base import ApiModel
from oauth_validation.models.meta import ObjectMeta


@dataclass(frozen=True)
class ExactValuesRestriction:
    """Only these literal scope strings may be requested."""

    literals: tuple[str, ...]


@dataclass(frozen=True)
class ClusterRoleRestriction:
    """Only ``role:`` scopes for these roles and namespaces may be requested."""

    role_names: tuple[str, ...]
    namespaces: tuple[str, ...]
    allow_escalation: bool = False


RestrictionVariant = ExactValuesRestriction | ClusterRoleRestriction


class ClusterRoleScopeRestriction(ApiModel):
    role_names: list[str] = Field(default_factory=list, alias="roleNames")
    namespaces: list[str] = Field(default_factory=list)
    allow_escalation: bool = Field(default=False, alias="allowEscalation")


class ScopeRestriction(ApiModel):
    """Wire form of a scope restriction.

    Exactly one of ``literals`` and ``clusterRole`` is meant to be set. The
    class constructors only build such values, but a decoded wire dict can
    carry both or neither, so validators go through ``variant()``.
    """

    literals: list[str] | None = None
    cluster_role: ClusterRoleScopeRestriction | None = Field(
        default=None, alias="clusterRole"
    )

    @classmethod
    def exact(cls, *literals: str) -> ScopeRestriction:
        return cls(literals=list(literals))

    @classmethod
    def for_cluster_role(
        cls,
        role_names: Iterable[str],
        namespaces: Iterable[str],
        allow_escalation: bool = False,
    ) -> ScopeRestriction:
        return cls(
            cluster_role=ClusterRoleScopeRestriction(
                role_names=list(role_names),
                namespaces=list(namespaces),
                allow_escalation=allow_escalation,
            )
        )

    @classmethod
    def of(cls, variant: RestrictionVariant) -> ScopeRestriction:
        if isinstance(variant, ExactValuesRestriction):
            return cls.exact(*variant.literals)
        return cls.for_cluster_role(
            variant.role_names, variant.namespaces, variant.allow_escalation
        )

    def populated(self) -> list[str]:
        """Wire names of the populated variants. An empty literal list counts as unset."""
        names = []
        if self.literals:
            names.append("literals")
        if self.cluster_role is not None:
            names.append("clusterRole")
        return names

    def variant(self) -> RestrictionVariant | None:
        """The single populated variant, or None when zero or two are populated."""
        if len(self.populated()) != 1:
            return None
        if self.literals:
            return ExactValuesRestriction(tuple(self.literals))
        return ClusterRoleRestriction(
            tuple(self.cluster_role.role_names),
            tuple(self.cluster_role.namespaces),
            self.cluster_role.allow_escalation,
        )


class OAuthClient(ApiModel):
    metadata: ObjectMeta = Field(default_factory=ObjectMeta)
    secret: str = ""
    additional_secrets: list[str] = Field(default_factory=list, alias="additionalSecrets")
    respond_with_challenges: bool = Field(default=False, alias="respondWithChallenges")
    redirect_uris: list[str] = Field(default_factory=list, alias="redirectURIs")
    grant_method: str = Field(default="", alias="grantMethod")
    scope_restrictions: list[ScopeRestriction] = Field(
        default_factory=list, alias="scopeRestrictions"
    )


class OAuthClientAuthorization(ApiModel):
    """A user's grant of scopes to a client.

    The name is always ``<userName>:<clientName>``, and the client, user name
    and user UID never change after creation.
    """

    metadata: ObjectMeta = Field(default_factory=ObjectMeta)
    client_name: str = Field(default="", alias="clientName")
    user_name: str = Field(default="", alias="userName")
    user_uid: str = Field(default="", alias="userUID")
    scopes: list[str] = Field(default_factory=list)

    @staticmethod
    def name_for(user_name: str, client_name: str) -> str:
        return f"{user_name}:{client_name}"
