"""Generic name checks shared by the object validators.

Each check returns a list of human-readable reasons; an empty list means the
name is acceptable.
"""

from __future__ import annotations

import re

DNS1123_SUBDOMAIN_MAX_LENGTH = 253
QUALIFIED_NAME_MAX_LENGTH = 63
LABEL_VALUE_MAX_LENGTH = 63

SERVICE_ACCOUNT_USERNAME_PREFIX = "system:serviceaccount:"

_DNS1123_LABEL = r"[a-z0-9]([-a-z0-9]*[a-z0-9])?"
_DNS1123_SUBDOMAIN_RE = re.compile(rf"^{_DNS1123_LABEL}(\.{_DNS1123_LABEL})*$")
_QUALIFIED_NAME_RE = re.compile(r"^([A-Za-z0-9][-A-Za-z0-9_.]*)?[A-Za-z0-9]$")
_LABEL_VALUE_RE = re.compile(r"^(([A-Za-z0-9][-A-Za-z0-9_.]*)?[A-Za-z0-9])?$")


def minimal_name_requirements(name: str, prefix: bool) -> list[str]:
    """Rules every name must meet to be usable as a single URL path segment."""
    reasons: list[str] = []
    if not prefix:
        if name == ".":
            return ["may not be '.'"]
        if name == "..":
            return ["may not be '..'"]
    if "/" in name:
        reasons.append("may not contain '/'")
    if "%" in name:
        reasons.append("may not contain '%'")
    return reasons


def name_is_dns_subdomain(name: str, prefix: bool) -> list[str]:
    if prefix:
        name = _mask_trailing_dash(name)
    reasons: list[str] = []
    if len(name) > DNS1123_SUBDOMAIN_MAX_LENGTH:
        reasons.append(f"must be no more than {DNS1123_SUBDOMAIN_MAX_LENGTH} characters")
    if not _DNS1123_SUBDOMAIN_RE.fullmatch(name):
        reasons.append(
            "a DNS-1123 subdomain must consist of lower case alphanumeric characters, "
            "'-' or '.', and must start and end with an alphanumeric character"
        )
    return reasons


def _mask_trailing_dash(name: str) -> str:
    # generateName prefixes get a random suffix appended
    if name.endswith("-"):
        return name[:-1] + "a"
    return name


def validate_service_account_name(name: str, prefix: bool) -> list[str]:
    return name_is_dns_subdomain(name, prefix)


def split_service_account_username(username: str) -> tuple[str, str]:
    """Split ``system:serviceaccount:<namespace>:<name>`` into its parts.

    Raises:
        ValueError: If ``username`` is not a service account user name.
    """
    if not username.startswith(SERVICE_ACCOUNT_USERNAME_PREFIX):
        raise ValueError(f"username must start with {SERVICE_ACCOUNT_USERNAME_PREFIX}")
    parts = username[len(SERVICE_ACCOUNT_USERNAME_PREFIX) :].split(":")
    if len(parts) != 2 or not parts[0] or not parts[1]:
        raise ValueError("username must be system:serviceaccount:<namespace>:<name>")
    return parts[0], parts[1]


def validate_user_name(name: str, prefix: bool = False) -> list[str]:
    reasons = minimal_name_requirements(name, False)
    if reasons:
        return reasons
    if ":" in name:
        return ['may not contain ":"']
    if name == "~":
        return ['may not equal "~"']
    return []


def is_qualified_name(value: str) -> list[str]:
    """``[prefix/]name`` where prefix is a DNS subdomain, as used by label and annotation keys."""
    parts = value.split("/")
    if len(parts) == 1:
        name = parts[0]
    elif len(parts) == 2:
        prefix, name = parts
        if not prefix:
            return ["prefix part must be non-empty"]
        reasons = name_is_dns_subdomain(prefix, False)
        if reasons:
            return ["prefix part " + reason for reason in reasons]
    else:
        return [
            "a qualified name must consist of alphanumeric characters, '-', '_' or '.', "
            "with an optional DNS subdomain prefix and '/'"
        ]

    reasons = []
    if not name:
        reasons.append("name part must be non-empty")
    elif len(name) > QUALIFIED_NAME_MAX_LENGTH:
        reasons.append(f"name part must be no more than {QUALIFIED_NAME_MAX_LENGTH} characters")
    if name and not _QUALIFIED_NAME_RE.fullmatch(name):
        reasons.append(
            "name part must consist of alphanumeric characters, '-', '_' or '.', "
            "and must start and end with an alphanumeric character"
        )
    return reasons


def is_valid_label_value(value: str) -> list[str]:
    reasons = []
    if len(value) > LABEL_VALUE_MAX_LENGTH:
        reasons.append(f"must be no more than {LABEL_VALUE_MAX_LENGTH} characters")
    if not _LABEL_VALUE_RE.fullmatch(value):
        reasons.append(
            "a valid label must be an empty string or consist of alphanumeric characters, "
            "'-', '_' or '.', and must start and end with an alphanumeric character"
        )
    return reasons
