"""
oauth_validation.settings

Process configuration (Pydantic Settings).

Read once from the environment (prefix ``OAUTH_VALIDATION_``) and cached.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ValidationSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="OAUTH_VALIDATION_", case_sensitive=False)

    # Pre-populate the default scope evaluator registry with the built-in
    # user: and role: grammars.
    register_builtin_evaluators: bool = True

    # Upper bound on the summed size of annotation keys and values, in bytes.
    total_annotation_size_limit: int = Field(default=256 * 1024, gt=0)


@lru_cache(maxsize=1)
def get_settings() -> ValidationSettings:
    return ValidationSettings()
