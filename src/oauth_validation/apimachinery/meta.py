"""Generic object metadata validation.

These checks know nothing about OAuth; the object validators pass in the
name rule that applies to their type.
"""

from __future__ import annotations

from typing import Any, Callable

from oauth_validation.apimachinery.names import (
    is_qualified_name,
    is_valid_label_value,
    name_is_dns_subdomain,
)
from oauth_validation.field import (
    ErrorList,
    Path,
    forbidden,
    invalid,
    required,
    too_long,
)
from oauth_validation.models.meta import ObjectMeta
from oauth_validation.settings import get_settings

NameValidator = Callable[[str, bool], list[str]]


def validate_object_meta(
    meta: ObjectMeta,
    requires_namespace: bool,
    name_fn: NameValidator,
    path: Path,
) -> ErrorList:
    all_errs = ErrorList()

    if meta.generate_name:
        for msg in name_fn(meta.generate_name, True):
            all_errs.append(invalid(path.child("generateName"), meta.generate_name, msg))

    if not meta.name:
        if not meta.generate_name:
            all_errs.append(required(path.child("name"), "name or generateName is required"))
    else:
        for msg in name_fn(meta.name, False):
            all_errs.append(invalid(path.child("name"), meta.name, msg))

    if requires_namespace:
        if not meta.namespace:
            all_errs.append(required(path.child("namespace"), ""))
        else:
            for msg in name_is_dns_subdomain(meta.namespace, False):
                all_errs.append(invalid(path.child("namespace"), meta.namespace, msg))
    elif meta.namespace:
        all_errs.append(forbidden(path.child("namespace"), "not allowed on this type"))

    all_errs.extend(validate_labels(meta.labels, path.child("labels")))
    all_errs.extend(validate_annotations(meta.annotations, path.child("annotations")))
    return all_errs


def validate_object_meta_update(new: ObjectMeta, old: ObjectMeta, path: Path) -> ErrorList:
    """Identity fields of the metadata may not change; labels and annotations may."""
    all_errs = ErrorList()
    all_errs.extend(validate_immutable_field(new.name, old.name, path.child("name")))
    all_errs.extend(
        validate_immutable_field(new.namespace, old.namespace, path.child("namespace"))
    )
    all_errs.extend(validate_immutable_field(new.uid, old.uid, path.child("uid")))
    all_errs.extend(
        validate_immutable_field(
            new.creation_timestamp, old.creation_timestamp, path.child("creationTimestamp")
        )
    )

    all_errs.extend(validate_labels(new.labels, path.child("labels")))
    all_errs.extend(validate_annotations(new.annotations, path.child("annotations")))
    return all_errs


def validate_immutable_field(new: Any, old: Any, path: Path) -> ErrorList:
    if new != old:
        return ErrorList([invalid(path, new, "field is immutable")])
    return ErrorList()


def validate_labels(labels: dict[str, str], path: Path) -> ErrorList:
    all_errs = ErrorList()
    for key, value in labels.items():
        for msg in is_qualified_name(key):
            all_errs.append(invalid(path, key, msg))
        for msg in is_valid_label_value(value):
            all_errs.append(invalid(path.key(key), value, msg))
    return all_errs


def validate_annotations(annotations: dict[str, str], path: Path) -> ErrorList:
    all_errs = ErrorList()
    total_size = 0
    for key, value in annotations.items():
        for msg in is_qualified_name(key.lower()):
            all_errs.append(invalid(path, key, msg))
        total_size += len(key.encode()) + len(value.encode())

    limit = get_settings().total_annotation_size_limit
    if total_size > limit:
        all_errs.append(too_long(path, "", limit))
    return all_errs
