#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_prober.py
"""Unit tests for structural probing."""

from dataclasses import dataclass
from typing import Optional

import pytest

from serini.prober import Verdict, build_field_plan, probe


@dataclass
class Database:
    host: str


@dataclass
class Config:
    name: str
    database: Database
    backup: Optional[Database] = None


@pytest.mark.unit
class TestProbe:
    """Tests for probe()."""

    def test_record_value(self) -> None:
        assert probe(Database("localhost")) is Verdict.RECORD

    @pytest.mark.parametrize("value", [None, 1, 1.5, True, "text", b"raw", [1, 2], {"a": 1}])
    def test_scalar_values(self, value: object) -> None:
        assert probe(value) is Verdict.SCALAR

    def test_record_type_is_not_a_record(self) -> None:
        assert probe(Database) is Verdict.SCALAR


@pytest.mark.unit
class TestBuildFieldPlan:
    """Tests for build_field_plan()."""

    def test_plan_follows_values(self) -> None:
        plan = build_field_plan(Config("app", Database("db1")))

        assert [entry.key for entry in plan] == ["name", "database", "backup"]
        assert [entry.verdict for entry in plan] == [Verdict.SCALAR, Verdict.RECORD, Verdict.SCALAR]
        assert plan[1].is_record
        assert plan[1].value == Database("db1")

    def test_present_optional_record_is_a_section(self) -> None:
        plan = build_field_plan(Config("app", Database("db1"), Database("db2")))
        assert plan[2].is_record
        assert plan[2].value.host == "db2"
