"""Scope string validation.

Each scope goes through two stages. First every character is checked
against the scope-token charset of RFC 6749 section 3.3:

    scope-token = 1*( %x21 / %x23-5B / %x5D-7E )

that is ``!``, ``#`` through ``[`` and ``]`` through ``~``. A scope with an
illegal character gets one error per offending character and is not looked
at further. Otherwise the first registered evaluator that handles the scope
decides whether it is valid; a scope nobody handles is rejected.

Errors are collected across all scopes.
"""

from __future__ import annotations

import logging
from typing import Sequence

from oauth_validation.errors import InvalidScopeError
from oauth_validation.field import ErrorList, Path, invalid
from oauth_validation.scope.registry import ScopeEvaluatorRegistry, default_registry

logger = logging.getLogger(__name__)


def is_scope_token_char(ch: str) -> bool:
    return ch == "!" or "#" <= ch <= "[" or "]" <= ch <= "~"


def illegal_scope_characters(scope: str) -> list[str]:
    """Every character of ``scope`` outside the scope-token charset, in order."""
    return [ch for ch in scope if not is_scope_token_char(ch)]


def validate_scopes(
    scopes: Sequence[str],
    path: Path,
    registry: ScopeEvaluatorRegistry | None = None,
) -> ErrorList:
    if registry is None:
        registry = default_registry()

    all_errs = ErrorList()
    for i, scope in enumerate(scopes):
        illegal = illegal_scope_characters(scope)
        for ch in illegal:
            all_errs.append(invalid(path.index(i), scope, f"U+{ord(ch):04X} not allowed"))
        if illegal:
            continue

        evaluator = registry.find(scope)
        if evaluator is None:
            logger.debug("No scope evaluator handles %r", scope)
            all_errs.append(invalid(path.index(i), scope, "no scope handler found"))
            continue

        try:
            evaluator.validate(scope)
        except InvalidScopeError as e:
            all_errs.append(invalid(path.index(i), scope, str(e)))

    return all_errs
