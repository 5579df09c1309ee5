"""Name rules for OAuth objects and the identities they reference."""

from __future__ import annotations

from oauth_validation.apimachinery.names import (
    minimal_name_requirements,
    name_is_dns_subdomain,
    split_service_account_username,
    validate_service_account_name,
    validate_user_name,
)
from oauth_validation.field import ErrorList, Path, invalid, required

MIN_TOKEN_LENGTH = 32


def validate_token_name(name: str, prefix: bool) -> list[str]:
    reasons = minimal_name_requirements(name, prefix)
    if reasons:
        return reasons
    if len(name.encode()) < MIN_TOKEN_LENGTH:
        return [f"must be at least {MIN_TOKEN_LENGTH} characters long"]
    return []


def validate_client_authorization_name(name: str, prefix: bool) -> list[str]:
    reasons = minimal_name_requirements(name, prefix)
    if reasons:
        return reasons
    colon = name.find(":")
    if colon <= 0 or colon >= len(name) - 1:
        return ["must be in the format <userName>:<clientName>"]
    return []


def validate_client_name_field(value: str, path: Path) -> ErrorList:
    """A client is either a service account user name or an OAuthClient name."""
    if not value:
        return ErrorList([required(path)])

    try:
        _, sa_name = split_service_account_username(value)
    except ValueError:
        reasons = name_is_dns_subdomain(value, False)
    else:
        reasons = validate_service_account_name(sa_name, False)

    if reasons:
        return ErrorList([invalid(path, value, ", ".join(reasons))])
    return ErrorList()


def validate_user_name_field(value: str, path: Path) -> ErrorList:
    if not value:
        return ErrorList([required(path)])
    reasons = validate_user_name(value, False)
    if reasons:
        return ErrorList([invalid(path, value, ", ".join(reasons))])
    return ErrorList()
