"""Shared test fixtures for trackit.

Fixtures defined here are available to all tests in the suite without
needing an explicit import. Add project-wide fixtures here; keep
domain-specific fixtures close to the tests that use them.
"""
from __future__ import annotations

import json
from datetime import date, time
from pathlib import Path

import pytest

from trackit.model.entities import Contact, Lesson, LessonDateTime, LessonType, Module, Task, Weekday
from trackit.model.fields import Address, Code, Email, Name, Phone, Tag
from trackit.model.manager import ModelManager
from trackit.model.track import Track

# A Monday.
FIXED_TODAY = date(2026, 10, 19)


@pytest.fixture()
def package_name() -> str:
    """Return the importable package name for assertions."""
    return "trackit"


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string.

    Update this fixture when cutting a release so that the version
    test immediately catches stale ``__version__`` values.
    """
    return "0.1.0"


@pytest.fixture()
def today() -> date:
    return FIXED_TODAY


# ---------------------------------------------------------------------------
# Typical entities
# ---------------------------------------------------------------------------


@pytest.fixture()
def alice() -> Contact:
    return Contact(
        name=Name("Alice Pauline"),
        phone=Phone("94351253"),
        email=Email("alice@example.com"),
        address=Address("123, Jurong West Ave 6, #08-111"),
        tags=frozenset({Tag("CS2103T"), Tag("friends")}),
    )


@pytest.fixture()
def benson() -> Contact:
    return Contact(
        name=Name("Benson Meier"),
        phone=Phone("98765432"),
        email=Email("johnd@example.com"),
        address=Address("311, Clementi Ave 2, #02-25"),
    )


@pytest.fixture()
def cs2103t() -> Module:
    return Module(Code("CS2103T"), Name("Software Engineering"))


@pytest.fixture()
def cs1231s() -> Module:
    return Module(Code("CS1231S"), Name("Discrete Structures"), "Proofs and logic")


@pytest.fixture()
def cs2103t_lecture() -> Lesson:
    return Lesson(
        code=Code("CS2103T"),
        type=LessonType.LECTURE,
        date=LessonDateTime(Weekday.MON, time(10, 0), time(12, 0)),
        address=Address("I3-AUD"),
    )


@pytest.fixture()
def cs1231s_tutorial() -> Lesson:
    return Lesson(
        code=Code("CS1231S"),
        type=LessonType.TUTORIAL,
        date=LessonDateTime(Weekday.WED, time(14, 0), time(15, 0)),
        address=Address("COM1-0208"),
    )


@pytest.fixture()
def past_task() -> Task:
    return Task(Name("Assignment 1"), date(2024, 1, 1), Code("CS2103T"), "Chapters 1 to 3")


@pytest.fixture()
def far_task() -> Task:
    return Task(Name("Final exam"), date(2099, 1, 1), Code("CS1231S"))


@pytest.fixture()
def typical_track(
    alice: Contact,
    benson: Contact,
    cs2103t: Module,
    cs1231s: Module,
    cs2103t_lecture: Lesson,
    cs1231s_tutorial: Lesson,
    past_task: Task,
    far_task: Task,
) -> Track:
    return Track.from_entities(
        contacts=[alice, benson],
        modules=[cs2103t, cs1231s],
        lessons=[cs2103t_lecture, cs1231s_tutorial],
        tasks=[past_task, far_task],
    )


@pytest.fixture()
def model(typical_track: Track) -> ModelManager:
    """A model over the typical track with the clock fixed at ``FIXED_TODAY``."""
    return ModelManager(typical_track, today=lambda: FIXED_TODAY)


# ---------------------------------------------------------------------------
# Files
# ---------------------------------------------------------------------------


@pytest.fixture()
def data_file(tmp_path: Path) -> Path:
    return tmp_path / "data" / "trackit.json"


@pytest.fixture()
def config_file(tmp_path: Path, data_file: Path) -> Path:
    """A config file pointing at ``data_file`` inside ``tmp_path``."""
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"data_file": str(data_file), "module_limit": 3}), encoding="utf-8")
    return path
