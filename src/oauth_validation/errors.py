"""Exception hierarchy for OAuth object validation.

Malformed objects are never reported through exceptions; they produce field
error lists. These exceptions cover misuse of the scope evaluator registry,
evaluator rejections on their way to becoming field errors, and callers that
prefer to raise a whole error list at once.
"""

from __future__ import annotations

from typing import Any


class OAuthValidationError(Exception):
    """Base exception for all oauth_validation errors."""

    pass


class RegistryError(OAuthValidationError):
    """Raised when the scope evaluator registry is misused."""

    pass


class RegistryFrozenError(RegistryError):
    """Raised when an evaluator is registered after the registry was frozen."""

    pass


class DuplicateEvaluatorError(RegistryError):
    """Raised when two evaluators are registered under the same name."""

    pass


class InvalidScopeError(OAuthValidationError):
    """Raised by a scope evaluator that handles a scope but rejects it.

    The message becomes the detail of the resulting field error.
    """

    pass


class FieldValidationError(OAuthValidationError):
    """An aggregate of field errors, for callers that want to raise them."""

    def __init__(self, errors: list[Any]):
        self.errors = errors
        super().__init__(self._format(errors))

    @staticmethod
    def _format(errors: list[Any]) -> str:
        if len(errors) == 1:
            return str(errors[0])
        return "[" + ", ".join(str(err) for err in errors) + "]"
