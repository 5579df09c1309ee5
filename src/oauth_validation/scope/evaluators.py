"""Built-in scope grammars.

Each evaluator claims a family of scopes by prefix and checks that a claimed
scope is well formed. What a scope grants is decided elsewhere.
"""

from __future__ import annotations

from oauth_validation.apimachinery.names import minimal_name_requirements
from oauth_validation.errors import InvalidScopeError

USER_INDICATOR = "user:"
USER_INFO = USER_INDICATOR + "info"
USER_ACCESS_CHECK = USER_INDICATOR + "check-access"
USER_LIST_SCOPED_PROJECTS = USER_INDICATOR + "list-projects"
USER_FULL = USER_INDICATOR + "full"

USER_SCOPES = (USER_INFO, USER_ACCESS_CHECK, USER_LIST_SCOPED_PROJECTS, USER_FULL)

CLUSTER_ROLE_INDICATOR = "role:"
ESCALATING_SUFFIX = ":!"
ALL_NAMESPACES = "*"


class UserEvaluator:
    """Handles ``user:`` scopes, which describe access to the user's own information."""

    name = "user"

    def handles(self, scope: str) -> bool:
        return scope.startswith(USER_INDICATOR)

    def validate(self, scope: str) -> None:
        if scope not in USER_SCOPES:
            raise InvalidScopeError(f"unrecognized scope: {scope}")


class ClusterRoleEvaluator:
    """Handles ``role:<clusterRoleName>:<namespace>[:!]`` scopes.

    ``*`` as the namespace means every namespace. A trailing ``:!`` asks for
    the role including its escalating rules.
    """

    name = "role"

    def handles(self, scope: str) -> bool:
        return scope.startswith(CLUSTER_ROLE_INDICATOR)

    def validate(self, scope: str) -> None:
        role_name, _, _ = parse_cluster_role_scope(scope)
        reasons = minimal_name_requirements(role_name, False)
        if reasons:
            raise InvalidScopeError(f"invalid role name {role_name!r}: {', '.join(reasons)}")


def parse_cluster_role_scope(scope: str) -> tuple[str, str, bool]:
    """Split a ``role:`` scope into (role name, namespace, escalating).

    Namespaces cannot contain colons but role names can, so the namespace is
    everything after the last colon.

    Raises:
        InvalidScopeError: If the scope does not follow the grammar.
    """
    if not scope.startswith(CLUSTER_ROLE_INDICATOR):
        raise InvalidScopeError(f"bad format for scope {scope}")

    body = scope[len(CLUSTER_ROLE_INDICATOR) :]
    escalating = body.endswith(ESCALATING_SUFFIX)
    if escalating:
        body = body[: -len(ESCALATING_SUFFIX)]

    role_name, colon, namespace = body.rpartition(":")
    if not colon or not role_name or not namespace:
        raise InvalidScopeError(f"bad format for scope {scope}")
    return role_name, namespace, escalating


def builtin_evaluators() -> list:
    return [UserEvaluator(), ClusterRoleEvaluator()]
