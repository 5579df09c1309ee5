"""Ordered registry of scope evaluators.

A registry has two phases. During startup evaluators are registered, in the
order they should be consulted. The first lookup freezes the registry; from
then on it is read-only and can be shared by any number of threads without
locking.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Iterable, Iterator, Protocol, runtime_checkable

from oauth_validation.errors import DuplicateEvaluatorError, RegistryFrozenError
from oauth_validation.scope.evaluators import builtin_evaluators
from oauth_validation.settings import get_settings

logger = logging.getLogger(__name__)


@runtime_checkable
class ScopeEvaluator(Protocol):
    """A scope grammar.

    ``handles`` claims a scope; ``validate`` raises InvalidScopeError when a
    claimed scope is malformed.
    """

    name: str

    def handles(self, scope: str) -> bool: ...

    def validate(self, scope: str) -> None: ...


class ScopeEvaluatorRegistry:
    def __init__(self, evaluators: Iterable[ScopeEvaluator] = ()):
        self._evaluators: list[ScopeEvaluator] = []
        self._frozen = False
        for evaluator in evaluators:
            self.register(evaluator)

    @property
    def frozen(self) -> bool:
        return self._frozen

    def register(self, evaluator: ScopeEvaluator) -> None:
        """Append an evaluator. Earlier registrations take precedence.

        Raises:
            RegistryFrozenError: If the registry is already serving lookups
            DuplicateEvaluatorError: If an evaluator with the same name exists
        """
        if self._frozen:
            raise RegistryFrozenError(
                f"Cannot register scope evaluator {evaluator.name!r}: registry is frozen"
            )
        if any(existing.name == evaluator.name for existing in self._evaluators):
            raise DuplicateEvaluatorError(
                f"Scope evaluator {evaluator.name!r} is already registered"
            )
        self._evaluators.append(evaluator)
        logger.debug("Registered scope evaluator %s", evaluator.name)

    def freeze(self) -> None:
        if self._frozen:
            return
        self._frozen = True
        logger.info(
            "Scope evaluator registry frozen with %d evaluator(s): %s",
            len(self._evaluators),
            ", ".join(evaluator.name for evaluator in self._evaluators),
        )

    def find(self, scope: str) -> ScopeEvaluator | None:
        """Return the first evaluator that handles ``scope``, in registration order."""
        self.freeze()
        for evaluator in self._evaluators:
            if evaluator.handles(scope):
                return evaluator
        return None

    def __iter__(self) -> Iterator[ScopeEvaluator]:
        return iter(tuple(self._evaluators))

    def __len__(self) -> int:
        return len(self._evaluators)


@lru_cache(maxsize=1)
def default_registry() -> ScopeEvaluatorRegistry:
    """The process-wide registry used when a validator is not given one."""
    registry = ScopeEvaluatorRegistry()
    if get_settings().register_builtin_evaluators:
        for evaluator in builtin_evaluators():
            registry.register(evaluator)
    return registry


def register(evaluator: ScopeEvaluator) -> None:
    """Register an evaluator with the default registry. Call during startup only."""
    default_registry().register(evaluator)
