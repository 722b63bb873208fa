"""Helpers for turning raw request payloads into validated documents.

Payloads arrive as loose JSON objects. Before validation they are
normalized: immutable bookkeeping keys are dropped, camelCase aliases are
mapped to field names, and unknown keys are discarded.
"""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from portfolio_site.errors import ContentValidationError

__all__ = [
    "IMMUTABLE_FIELDS",
    "apply_document",
    "build_document",
    "merge_document",
    "normalize_payload",
]

DocumentT = TypeVar("DocumentT", bound=BaseModel)

# Identity, timestamps and the version marker are owned by the store.
IMMUTABLE_FIELDS = frozenset(
    {"_id", "id", "createdAt", "updatedAt", "created_at", "updated_at", "__v"}
)


def _field_lookup(model_cls: type[BaseModel]) -> dict[str, str]:
    lookup: dict[str, str] = {}
    for name, field in model_cls.model_fields.items():
        lookup[name] = name
        if field.alias:
            lookup[field.alias] = name
    return lookup


def normalize_payload(model_cls: type[BaseModel], payload: dict[str, Any]) -> dict[str, Any]:
    """Return ``payload`` keyed by field name, without immutable or unknown keys."""
    if not isinstance(payload, dict):
        raise ContentValidationError("Request body must be a JSON object")

    lookup = _field_lookup(model_cls)
    normalized: dict[str, Any] = {}
    for key, value in payload.items():
        if key in IMMUTABLE_FIELDS:
            continue
        name = lookup.get(key)
        if name is not None:
            normalized[name] = value
    return normalized


def _to_content_error(exc: ValidationError) -> ContentValidationError:
    fields: list[str] = []
    details: list[str] = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"]) or "body"
        message = error["msg"].removeprefix("Value error, ")
        fields.append(field)
        details.append(f"{field}: {message}")
    return ContentValidationError("Validation failed: " + "; ".join(details), fields)


def build_document(model_cls: type[DocumentT], payload: dict[str, Any]) -> DocumentT:
    """Validate a create payload, applying schema defaults for omitted fields.

    Raises:
        ContentValidationError: If the payload violates the schema.
    """
    try:
        return model_cls.model_validate(normalize_payload(model_cls, payload))
    except ValidationError as exc:
        raise _to_content_error(exc) from exc


def merge_document(
    model_cls: type[DocumentT], current: dict[str, Any], payload: dict[str, Any]
) -> DocumentT:
    """Overlay the supplied fields of ``payload`` onto ``current`` and re-validate.

    Args:
        model_cls: Document model describing the entity.
        current: Stored field values keyed by field name.
        payload: Raw update payload.

    Raises:
        ContentValidationError: If the merged document violates the schema.
    """
    merged = {name: value for name, value in current.items() if name in model_cls.model_fields}
    merged.update(normalize_payload(model_cls, payload))
    try:
        return model_cls.model_validate(merged)
    except ValidationError as exc:
        raise _to_content_error(exc) from exc


def apply_document(record: Any, document: BaseModel) -> None:
    """Copy every field of ``document`` onto an ORM ``record``."""
    for name, value in document.model_dump(mode="json").items():
        setattr(record, name, value)
