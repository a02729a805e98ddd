#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/serini/schema.py
"""Static field descriptions for dataclass records.

A record is any dataclass. Each of its fields is tagged once from its type
annotation with a :class:`FieldKind`:

- ``SCALAR`` / ``OPTIONAL_SCALAR``: a single ``key = value`` line
- ``RECORD`` / ``OPTIONAL_RECORD``: a ``[key]`` section

Annotations that the INI format cannot represent (sequences, tuples, maps,
sets, enums, non-optional unions) raise
:class:`~serini.exceptions.UnsupportedFeatureError` as soon as the record is
described, whatever the field currently holds.

Child record types are only referenced, never described eagerly, so a
dataclass may refer to itself through an optional field.
"""

from __future__ import annotations

import types
from collections.abc import Mapping, Sequence
from collections.abc import Set as AbstractSet
from dataclasses import MISSING, dataclass, field, fields, is_dataclass
from enum import Enum, auto
from typing import Annotated, Any, Literal, Union, get_args, get_origin, get_type_hints

from serini.exceptions import SchemaError, UnsupportedFeatureError
from serini.types import PLAIN_KINDS, ScalarKind

RENAME_KEY = "rename"
SKIP_IF_NONE_KEY = "skip_if_none"

_NONE_TYPE = type(None)


class FieldKind(Enum):
    """Static tag of a record field."""

    SCALAR = auto()
    RECORD = auto()
    OPTIONAL_SCALAR = auto()
    OPTIONAL_RECORD = auto()

    @property
    def is_optional(self) -> bool:
        return self in (FieldKind.OPTIONAL_SCALAR, FieldKind.OPTIONAL_RECORD)

    @property
    def is_record(self) -> bool:
        return self in (FieldKind.RECORD, FieldKind.OPTIONAL_RECORD)


@dataclass(frozen=True)
class FieldSpec:
    """Description of one dataclass field.

    Parameters
    ----------
    name : str
        Attribute name on the dataclass
    key : str
        Key used in the INI text, for both ``key = value`` lines and ``[key]`` headers
    kind : FieldKind
        Static tag derived from the annotation
    scalar : ScalarKind or None
        Scalar kind for scalar fields
    record_type : type or None
        Dataclass for record fields
    skip_if_none : bool
        Omit the line entirely when the field holds ``None``
    has_default : bool
        Whether the dataclass supplies a default for the field
    init : bool
        Whether the field is accepted by the dataclass constructor

    """

    name: str
    key: str
    kind: FieldKind
    scalar: ScalarKind | None = None
    record_type: type | None = None
    skip_if_none: bool = False
    has_default: bool = False
    init: bool = True


def ini_field(*, rename: str | None = None, skip_if_none: bool = False, **kwargs: Any) -> Any:
    """Declare a dataclass field with INI-specific metadata.

    Parameters
    ----------
    rename : str, optional
        Key to use in the INI text instead of the attribute name
    skip_if_none : bool, default False
        Write nothing at all for this field when it holds ``None``
    **kwargs
        Forwarded to :func:`dataclasses.field`

    Examples
    --------
    >>> @dataclass
    ... class App:
    ...     app_name: str = ini_field(rename="app-name")
    ...     debug: Optional[bool] = ini_field(default=None, skip_if_none=True)

    """
    metadata = dict(kwargs.pop("metadata", None) or {})
    if rename is not None:
        metadata[RENAME_KEY] = rename
    if skip_if_none:
        metadata[SKIP_IF_NONE_KEY] = True
    return field(metadata=metadata, **kwargs)


def is_record(value: Any) -> bool:
    """Return True for dataclass instances."""
    return is_dataclass(value) and not isinstance(value, type)


def is_record_type(tp: Any) -> bool:
    """Return True for dataclass types."""
    return isinstance(tp, type) and is_dataclass(tp)


def record_fields(record_type: type) -> list[FieldSpec]:
    """Describe every field of a dataclass in declaration order.

    Parameters
    ----------
    record_type : type
        Dataclass to describe

    Returns
    -------
    list[FieldSpec]
        One entry per dataclass field

    Raises
    ------
    SchemaError
        If the annotations cannot be resolved
    UnsupportedFeatureError
        If a field is annotated with a shape the format cannot represent

    """
    try:
        hints = get_type_hints(record_type, include_extras=True)
    except (NameError, TypeError) as e:
        raise SchemaError(record_type, f"Cannot resolve annotations of {record_type.__name__}: {e}", e) from e

    specs: list[FieldSpec] = []
    for f in fields(record_type):
        annotation = hints.get(f.name, f.type)
        kind, scalar, child = classify_annotation(annotation)
        specs.append(
            FieldSpec(
                name=f.name,
                key=f.metadata.get(RENAME_KEY, f.name),
                kind=kind,
                scalar=scalar,
                record_type=child,
                skip_if_none=bool(f.metadata.get(SKIP_IF_NONE_KEY, False)),
                has_default=f.default is not MISSING or f.default_factory is not MISSING,
                init=f.init,
            )
        )
    return specs


def classify_annotation(annotation: Any) -> tuple[FieldKind, ScalarKind | None, type | None]:
    """Tag a single annotation.

    Returns
    -------
    tuple
        ``(kind, scalar_kind, record_type)``; exactly one of the last two is set

    """
    target, optional = _split_optional(annotation)
    scalar, child = _describe(target)
    if child is not None:
        return (FieldKind.OPTIONAL_RECORD if optional else FieldKind.RECORD), None, child
    return (FieldKind.OPTIONAL_SCALAR if optional else FieldKind.SCALAR), scalar, None


def _strip_annotated(annotation: Any) -> Any:
    # Annotated wrappers without a ScalarKind carry nothing for us
    while get_origin(annotation) is Annotated:
        base, *extras = get_args(annotation)
        if any(isinstance(extra, ScalarKind) for extra in extras):
            return annotation
        annotation = base
    return annotation


def _split_optional(annotation: Any) -> tuple[Any, bool]:
    annotation = _strip_annotated(annotation)
    origin = get_origin(annotation)
    if origin is Union or origin is types.UnionType:
        args = get_args(annotation)
        members = [arg for arg in args if arg is not _NONE_TYPE]
        if len(members) == 1 and len(args) == 2:
            return _strip_annotated(members[0]), True
        raise UnsupportedFeatureError("enums")
    return annotation, False


def _describe(annotation: Any) -> tuple[ScalarKind | None, type | None]:
    origin = get_origin(annotation)
    if origin is Annotated:
        _, *extras = get_args(annotation)
        for extra in extras:
            if isinstance(extra, ScalarKind):
                return extra, None
    if origin is Literal:
        raise UnsupportedFeatureError("enums")
    if origin is not None:
        _reject_container(origin)
        raise UnsupportedFeatureError(f"fields of type {annotation!r}")

    if not isinstance(annotation, type):
        raise UnsupportedFeatureError(f"fields of type {annotation!r}")
    if is_dataclass(annotation):
        return None, annotation
    if issubclass(annotation, Enum):
        raise UnsupportedFeatureError("enums")
    if annotation in PLAIN_KINDS:
        return PLAIN_KINDS[annotation], None
    _reject_container(annotation)
    raise UnsupportedFeatureError(f"fields of type {annotation.__name__}")


def _reject_container(container: Any) -> None:
    if not isinstance(container, type):
        return
    if issubclass(container, tuple):
        raise UnsupportedFeatureError("tuple structs" if hasattr(container, "_fields") else "tuples")
    if issubclass(container, Mapping):
        raise UnsupportedFeatureError("maps")
    if issubclass(container, AbstractSet):
        raise UnsupportedFeatureError("sets")
    if issubclass(container, Sequence):
        raise UnsupportedFeatureError("sequences")
