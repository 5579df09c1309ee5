"""PKCE (RFC 7636) code challenge checks for authorize tokens."""

from __future__ import annotations

import re

from oauth_validation.field import ErrorList, Path, invalid, not_supported, required

CODE_CHALLENGE_METHOD_PLAIN = "plain"
CODE_CHALLENGE_METHOD_SHA256 = "S256"

CODE_CHALLENGE_METHODS_SUPPORTED = (
    CODE_CHALLENGE_METHOD_PLAIN,
    CODE_CHALLENGE_METHOD_SHA256,
)

# RFC 7636 section 4.1: 43-128 unreserved characters
_CODE_CHALLENGE_RE = re.compile(r"[a-zA-Z0-9._~-]{43,128}")


def is_valid_code_challenge(challenge: str) -> bool:
    return _CODE_CHALLENGE_RE.fullmatch(challenge) is not None


def validate_code_challenge(
    challenge: str,
    method: str,
    challenge_path: Path,
    method_path: Path,
) -> ErrorList:
    """Challenge and method are either both absent or both present and valid."""
    all_errs = ErrorList()
    if not challenge and not method:
        return all_errs

    if not challenge:
        all_errs.append(
            required(challenge_path, "required if codeChallengeMethod is specified")
        )
    elif not is_valid_code_challenge(challenge):
        all_errs.append(
            invalid(challenge_path, challenge, "must be 43-128 characters [a-zA-Z0-9.~_-]")
        )

    if not method:
        all_errs.append(required(method_path, "required if codeChallenge is specified"))
    elif method not in CODE_CHALLENGE_METHODS_SUPPORTED:
        all_errs.append(not_supported(method_path, method, CODE_CHALLENGE_METHODS_SUPPORTED))

    return all_errs
