#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/serini/prober.py
"""Structural probing of field values.

Before a record is written, each of its fields is probed to decide whether
it becomes a ``[section]`` or a scalar line. Probing looks at the value the
field holds right now, not at its annotation: an optional record field that
holds ``None`` probes as a scalar and is written as the ``; key = ``
placeholder, never as a section.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

from serini.schema import FieldSpec, is_record, record_fields

logger = logging.getLogger(__name__)


class Verdict(Enum):
    """Result of probing one value."""

    RECORD = auto()
    SCALAR = auto()


@dataclass(frozen=True)
class FieldPlanEntry:
    """One field of a record together with its current value and verdict."""

    spec: FieldSpec
    value: Any
    verdict: Verdict

    @property
    def key(self) -> str:
        return self.spec.key

    @property
    def is_record(self) -> bool:
        return self.verdict is Verdict.RECORD


def probe(value: Any) -> Verdict:
    """Classify a value as a record or a scalar without encoding it.

    Parameters
    ----------
    value : Any
        Field value; ``None`` stands for an absent optional

    Returns
    -------
    Verdict
        ``RECORD`` for dataclass instances, ``SCALAR`` for everything else

    """
    if value is None:
        return Verdict.SCALAR
    return Verdict.RECORD if is_record(value) else Verdict.SCALAR


def build_field_plan(record: Any) -> list[FieldPlanEntry]:
    """Probe every field of a record in declaration order.

    Parameters
    ----------
    record : Any
        Dataclass instance

    Returns
    -------
    list[FieldPlanEntry]
        The field plan

    """
    plan: list[FieldPlanEntry] = []
    for spec in record_fields(type(record)):
        value = getattr(record, spec.name)
        plan.append(FieldPlanEntry(spec, value, probe(value)))
    logger.debug(
        "Field plan for %s: sections=%s",
        type(record).__name__,
        [entry.key for entry in plan if entry.is_record],
    )
    return plan
