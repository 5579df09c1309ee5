"""Object metadata shared by every OAuth API object."""

from __future__ import annotations

from pydantic import Field

from oauth_validation.models.base import ApiModel


class ObjectMeta(ApiModel):
    name: str = ""
    generate_name: str = Field(default="", alias="generateName")
    namespace: str = ""
    uid: str = ""
    resource_version: str = Field(default="", alias="resourceVersion")
    creation_timestamp: str | None = Field(default=None, alias="creationTimestamp")
    labels: dict[str, str] = Field(default_factory=dict)
    annotations: dict[str, str] = Field(default_factory=dict)
