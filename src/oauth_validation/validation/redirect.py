"""Redirect URI checks for tokens and clients."""

from __future__ import annotations

import re
from urllib.parse import unquote, urlsplit

_BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def validate_redirect_uri(redirect: str) -> tuple[bool, str]:
    """Check a redirect URI. Returns (ok, reason); reason is empty when ok.

    An empty URI is valid since the redirect URI is optional. A URI may not
    carry a fragment, and no decoded path segment may be ``.`` or ``..``, so
    ``%2e%2e`` is rejected the same as ``..``.
    """
    if not redirect:
        return True, ""

    bad_escape = _BAD_ESCAPE_RE.search(redirect)
    if bad_escape:
        start = bad_escape.start()
        return False, f'invalid URL escape "{redirect[start:start + 3]}"'

    try:
        parsed = urlsplit(redirect)
    except ValueError as e:
        return False, str(e)

    if parsed.fragment:
        return False, "may not contain a fragment"
    for segment in unquote(parsed.path).split("/"):
        if segment == ".":
            return False, "may not contain a path segment of ."
        if segment == "..":
            return False, "may not contain a path segment of .."
    return True, ""
