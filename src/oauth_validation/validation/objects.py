"""Create and update validation for the OAuth API objects.

Every validator returns the complete list of field errors for the object;
an empty list means the object may be stored. The order of checks is fixed
(metadata, referenced names, scopes, required fields, redirect URI and PKCE)
and so is the order of the errors.

Update validators run the full create validation on the new object first,
then check what may not change relative to the old object.
"""

from __future__ import annotations

import logging

from oauth_validation.apimachinery.meta import (
    validate_immutable_field,
    validate_object_meta,
    validate_object_meta_update,
)
from oauth_validation.apimachinery.names import name_is_dns_subdomain
from oauth_validation.field import ErrorList, Path, invalid, new_path, required
from oauth_validation.models.clients import (
    ClusterRoleRestriction,
    ExactValuesRestriction,
    OAuthClient,
    OAuthClientAuthorization,
    ScopeRestriction,
)
from oauth_validation.models.tokens import OAuthAccessToken, OAuthAuthorizeToken
from oauth_validation.scope.registry import ScopeEvaluatorRegistry
from oauth_validation.scope.validation import validate_scopes
from oauth_validation.validation.names import (
    validate_client_authorization_name,
    validate_client_name_field,
    validate_token_name,
    validate_user_name_field,
)
from oauth_validation.validation.pkce import validate_code_challenge
from oauth_validation.validation.redirect import validate_redirect_uri

logger = logging.getLogger(__name__)


def validate_access_token(
    token: OAuthAccessToken, registry: ScopeEvaluatorRegistry | None = None
) -> ErrorList:
    all_errs = validate_object_meta(
        token.metadata, False, validate_token_name, new_path("metadata")
    )
    all_errs.extend(validate_client_name_field(token.client_name, new_path("clientName")))
    all_errs.extend(validate_user_name_field(token.user_name, new_path("userName")))
    all_errs.extend(validate_scopes(token.scopes, new_path("scopes"), registry))

    if not token.user_uid:
        all_errs.append(required(new_path("userUID")))
    ok, msg = validate_redirect_uri(token.redirect_uri)
    if not ok:
        all_errs.append(invalid(new_path("redirectURI"), token.redirect_uri, msg))

    return _logged("OAuthAccessToken", all_errs)


def validate_access_token_update(
    new: OAuthAccessToken,
    old: OAuthAccessToken,
    registry: ScopeEvaluatorRegistry | None = None,
) -> ErrorList:
    all_errs = validate_access_token(new, registry)
    all_errs.extend(_validate_token_immutable(new, old))
    return all_errs


def validate_authorize_token(
    token: OAuthAuthorizeToken, registry: ScopeEvaluatorRegistry | None = None
) -> ErrorList:
    all_errs = validate_object_meta(
        token.metadata, False, validate_token_name, new_path("metadata")
    )
    all_errs.extend(validate_client_name_field(token.client_name, new_path("clientName")))
    all_errs.extend(validate_user_name_field(token.user_name, new_path("userName")))
    all_errs.extend(validate_scopes(token.scopes, new_path("scopes"), registry))

    if not token.user_uid:
        all_errs.append(required(new_path("userUID")))
    ok, msg = validate_redirect_uri(token.redirect_uri)
    if not ok:
        all_errs.append(invalid(new_path("redirectURI"), token.redirect_uri, msg))

    all_errs.extend(
        validate_code_challenge(
            token.code_challenge,
            token.code_challenge_method,
            new_path("codeChallenge"),
            new_path("codeChallengeMethod"),
        )
    )

    return _logged("OAuthAuthorizeToken", all_errs)


def validate_authorize_token_update(
    new: OAuthAuthorizeToken,
    old: OAuthAuthorizeToken,
    registry: ScopeEvaluatorRegistry | None = None,
) -> ErrorList:
    all_errs = validate_authorize_token(new, registry)
    all_errs.extend(_validate_token_immutable(new, old))
    return all_errs


def _validate_token_immutable(
    new: OAuthAccessToken | OAuthAuthorizeToken, old: OAuthAccessToken | OAuthAuthorizeToken
) -> ErrorList:
    # Only metadata may change, and only as far as the metadata update rules allow.
    all_errs = validate_object_meta_update(new.metadata, old.metadata, new_path("metadata"))
    with_new_metadata = old.model_copy(update={"metadata": new.metadata})
    all_errs.extend(
        validate_immutable_field(new.to_wire(), with_new_metadata.to_wire(), Path())
    )
    return all_errs


def validate_client(client: OAuthClient) -> ErrorList:
    all_errs = validate_object_meta(
        client.metadata, False, name_is_dns_subdomain, new_path("metadata")
    )
    for i, redirect in enumerate(client.redirect_uris):
        ok, msg = validate_redirect_uri(redirect)
        if not ok:
            all_errs.append(invalid(new_path("redirectURIs").index(i), redirect, msg))

    for i, restriction in enumerate(client.scope_restrictions):
        all_errs.extend(
            validate_scope_restriction(restriction, new_path("scopeRestrictions").index(i))
        )

    return _logged("OAuthClient", all_errs)


def validate_client_update(client: OAuthClient, old_client: OAuthClient) -> ErrorList:
    all_errs = validate_client(client)
    all_errs.extend(
        validate_object_meta_update(client.metadata, old_client.metadata, new_path("metadata"))
    )
    return all_errs


def validate_scope_restriction(restriction: ScopeRestriction, path: Path) -> ErrorList:
    all_errs = ErrorList()

    variant = restriction.variant()
    if variant is None:
        all_errs.append(
            invalid(
                path,
                restriction.to_wire(),
                "exactly one of literals, clusterRole is required",
            )
        )
        return all_errs

    if isinstance(variant, ExactValuesRestriction):
        for i, literal in enumerate(variant.literals):
            if not literal:
                all_errs.append(invalid(path.child("literals").index(i), literal, "may not be empty"))
    elif isinstance(variant, ClusterRoleRestriction):
        if not variant.role_names:
            all_errs.append(required(path.child("clusterRole", "roleNames"), "won't match anything"))
        if not variant.namespaces:
            all_errs.append(required(path.child("clusterRole", "namespaces"), "won't match anything"))

    return all_errs


def validate_client_authorization(
    authorization: OAuthClientAuthorization,
    registry: ScopeEvaluatorRegistry | None = None,
) -> ErrorList:
    all_errs = ErrorList()

    expected_name = OAuthClientAuthorization.name_for(
        authorization.user_name, authorization.client_name
    )
    metadata_errs = validate_object_meta(
        authorization.metadata,
        False,
        validate_client_authorization_name,
        new_path("metadata"),
    )
    if metadata_errs:
        all_errs.extend(metadata_errs)
    elif authorization.metadata.name != expected_name:
        all_errs.append(
            invalid(
                new_path("metadata", "name"),
                authorization.metadata.name,
                "must be in the format <userName>:<clientName>",
            )
        )

    all_errs.extend(
        validate_client_name_field(authorization.client_name, new_path("clientName"))
    )
    all_errs.extend(validate_user_name_field(authorization.user_name, new_path("userName")))
    all_errs.extend(validate_scopes(authorization.scopes, new_path("scopes"), registry))

    if not authorization.user_uid:
        all_errs.append(required(new_path("userUID")))

    return _logged("OAuthClientAuthorization", all_errs)


def validate_client_authorization_update(
    new: OAuthClientAuthorization,
    old: OAuthClientAuthorization,
    registry: ScopeEvaluatorRegistry | None = None,
) -> ErrorList:
    all_errs = validate_client_authorization(new, registry)
    all_errs.extend(
        validate_object_meta_update(new.metadata, old.metadata, new_path("metadata"))
    )

    if old.client_name != new.client_name:
        all_errs.append(
            invalid(new_path("clientName"), new.client_name, "clientName is not a mutable field")
        )
    if old.user_name != new.user_name:
        all_errs.append(
            invalid(new_path("userName"), new.user_name, "userName is not a mutable field")
        )
    if old.user_uid != new.user_uid:
        all_errs.append(
            invalid(new_path("userUID"), new.user_uid, "userUID is not a mutable field")
        )

    return all_errs


def _logged(kind: str, all_errs: ErrorList) -> ErrorList:
    if all_errs:
        logger.debug("%s rejected with %d field error(s)", kind, len(all_errs))
    return all_errs
