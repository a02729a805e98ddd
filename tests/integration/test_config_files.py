#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/integration/test_config_files.py
"""Integration tests for reading and writing configuration files.

These tests go through the public API end to end: dataclasses are dumped to
files on disk, edited the way a person would edit them, and loaded back.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import pytest

from serini import F32, U16, DeserializerOptions, InvalidValueError, MissingFieldError, dump, ini_field, load


@dataclass
class Database:
    host: str
    port: U16 = 5432
    username: Optional[str] = None
    password: Optional[str] = None


@dataclass
class Cache:
    ttl: int
    enabled: bool = True


@dataclass
class AppConfig:
    app_name: str = ini_field(rename="app-name")
    port: U16 = 8080
    debug: bool = False
    motd: Optional[str] = None
    database: Database = ini_field(default_factory=lambda: Database(host="localhost"))
    cache: Optional[Cache] = None


@dataclass
class Speed:
    speed: F32
    anime: Optional["Speed"] = None
    movie: Optional["Speed"] = None


@pytest.mark.integration
class TestConfigFiles:
    """End-to-end tests with files on disk."""

    def test_dump_edit_load(self, tmp_path: Path) -> None:
        path = tmp_path / "app.ini"
        dump(AppConfig(app_name="Demo"), path)

        written = path.read_text(encoding="utf-8")
        assert written.startswith("app-name = Demo\nport = 8080\ndebug = false\n; motd = \n; cache = \n")
        assert "[database]\nhost = localhost\nport = 5432\n; username = \n; password = \n" in written

        edited = written.replace("; password = ", "password = s3cr\\;t").replace("; cache = \n", "")
        edited += "\n[cache]\nttl = 60\n"
        path.write_text(edited, encoding="utf-8")

        config = load(path, AppConfig)
        assert config.database.password == "s3cr;t"
        assert config.cache == Cache(ttl=60)
        assert config.motd is None

    def test_hand_written_file(self, tmp_path: Path) -> None:
        path = tmp_path / "hand.ini"
        path.write_bytes(
            b"# written by hand\r\n"
            b"app-name = Hand Made\r\n"
            b"motd = Hello\\nWorld\r\n"
            b"\r\n"
            b"[database]\r\n"
            b"    host = db.internal\r\n"
            b"    port = 6543\r\n"
        )
        config = load(path, AppConfig)
        assert config == AppConfig(
            app_name="Hand Made", motd="Hello\nWorld", database=Database(host="db.internal", port=6543)
        )

    def test_self_referential_sections(self, tmp_path: Path) -> None:
        path = tmp_path / "speed.ini"
        value = Speed(speed=1.0, anime=Speed(speed=1.5), movie=Speed(speed=2.0))
        dump(value, path)
        assert path.read_text(encoding="utf-8") == "speed = 1\n\n[anime]\nspeed = 1.5\n\n[movie]\nspeed = 2\n"
        assert load(path, Speed) == value

    def test_bad_edit_reported(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.ini"
        path.write_text("app-name = x\nport = eighty\n", encoding="utf-8")
        with pytest.raises(InvalidValueError) as exc_info:
            load(path, AppConfig)
        assert exc_info.value.typ == "u16"
        assert exc_info.value.value == "eighty"

    def test_missing_required_key(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.ini"
        path.write_text("; nothing here\n", encoding="utf-8")
        with pytest.raises(MissingFieldError) as exc_info:
            load(path, AppConfig)
        assert exc_info.value.field == "app-name"

    def test_one_section_of_a_larger_file(self, tmp_path: Path) -> None:
        path = tmp_path / "shared.ini"
        path.write_text("[other]\nx = 1\n\n[database]\nhost = shared\n", encoding="utf-8")
        database = load(path, Database, DeserializerOptions(section="database"))
        assert database == Database(host="shared")
