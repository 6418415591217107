"""Track serialization and deserialization.

Converts a ``Track`` to and from a plain dict/list document that maps
directly onto JSON (the storage format) and YAML (an export format)::

    {
      "contacts": [{"name", "phone", "email", "address", "tags": [...]}],
      "modules":  [{"code", "name", "description"}],
      "lessons":  [{"code", "type": "LECTURE", "date": "Mon 17:45-21:00", "address"}],
      "tasks":    [{"name", "date": "dd/mm/yyyy", "code": null, "remark"}]
    }

Usage
-----
::

    from trackit.storage.serializer import TrackSerializer

    serializer = TrackSerializer()
    json_text = serializer.to_json(track)
    track2 = serializer.from_json(json_text)
    assert track == track2
"""
from __future__ import annotations

import json
from collections.abc import Callable
from datetime import date, datetime
from typing import Any, TypeVar

import yaml

from trackit.model.entities import DATE_FORMAT, Contact, Lesson, LessonDateTime, LessonType, Module, Task
from trackit.model.errors import InconsistentSnapshotError
from trackit.model.fields import Address, Code, Email, FieldConstraintError, Name, Phone, Tag
from trackit.model.track import Track
from trackit.storage.errors import DataConversionError

V = TypeVar("V")

_MISSING_FIELD = "{entity}'s {field} field is missing!"
_INVALID_FIELD = "{entity}'s {field} field is invalid: {reason}"


def _parse_task_date(text: str) -> date:
    return datetime.strptime(text, DATE_FORMAT).date()


class TrackSerializer:
    """Converts between ``Track`` objects and plain Python dicts."""

    # ------------------------------------------------------------------
    # Serialization (Track → dict)
    # ------------------------------------------------------------------

    def to_dict(self, track: Track) -> dict[str, object]:
        """Serialize a ``Track`` to a JSON-compatible dict."""
        return {
            "contacts": [self._contact_to_dict(c) for c in track.contacts],
            "modules": [self._module_to_dict(m) for m in track.modules],
            "lessons": [self._lesson_to_dict(ls) for ls in track.lessons],
            "tasks": [self._task_to_dict(t) for t in track.tasks],
        }

    def _contact_to_dict(self, c: Contact) -> dict[str, object]:
        return {
            "name": c.name.value,
            "phone": c.phone.value,
            "email": c.email.value,
            "address": c.address.value,
            "tags": [t.value for t in c.sorted_tags()],
        }

    def _module_to_dict(self, m: Module) -> dict[str, object]:
        return {"code": m.code.value, "name": m.name.value, "description": m.description}

    def _lesson_to_dict(self, ls: Lesson) -> dict[str, object]:
        return {
            "code": ls.code.value,
            "type": ls.type.name,
            "date": str(ls.date),
            "address": ls.address.value,
        }

    def _task_to_dict(self, t: Task) -> dict[str, object]:
        return {
            "name": t.name.value,
            "date": t.formatted_date(),
            "code": t.code.value if t.code is not None else None,
            "remark": t.remark,
        }

    # ------------------------------------------------------------------
    # Deserialization (dict → Track)
    # ------------------------------------------------------------------

    def from_dict(self, data: dict[str, Any]) -> Track:
        """Deserialize a ``Track`` from a plain dict.

        Raises
        ------
        DataConversionError
            If the document is malformed, a field is missing or invalid,
            or a list holds two same-kind entities.
        """
        if not isinstance(data, dict):
            raise DataConversionError("Track data must be a mapping of entity lists")
        contacts = [self._contact_from_dict(d) for d in self._entries(data, "contacts")]
        modules = [self._module_from_dict(d) for d in self._entries(data, "modules")]
        lessons = [self._lesson_from_dict(d) for d in self._entries(data, "lessons")]
        tasks = [self._task_from_dict(d) for d in self._entries(data, "tasks")]
        try:
            return Track.from_entities(contacts, modules, lessons, tasks)
        except InconsistentSnapshotError as exc:
            raise DataConversionError(f"Stored data is inconsistent: {exc}") from exc

    def _entries(self, data: dict[str, Any], key: str) -> list[dict[str, Any]]:
        entries = data.get(key) or []
        if not isinstance(entries, list) or not all(isinstance(e, dict) for e in entries):
            raise DataConversionError(f"'{key}' must be a list of objects")
        return entries

    def _field(
        self,
        d: dict[str, Any],
        entity: str,
        key: str,
        factory: Callable[[Any], V],
    ) -> V:
        """Convert ``d[key]`` with ``factory``, naming the entity and field on failure."""
        if d.get(key) is None:
            raise DataConversionError(_MISSING_FIELD.format(entity=entity, field=key))
        try:
            return factory(d[key])
        except (FieldConstraintError, ValueError, TypeError, AttributeError) as exc:
            raise DataConversionError(
                _INVALID_FIELD.format(entity=entity, field=key, reason=exc)
            ) from exc

    def _contact_from_dict(self, d: dict[str, Any]) -> Contact:
        return Contact(
            name=self._field(d, "Contact", "name", Name),
            phone=self._field(d, "Contact", "phone", Phone),
            email=self._field(d, "Contact", "email", Email),
            address=self._field(d, "Contact", "address", Address),
            tags=self._field(d, "Contact", "tags", self._tags) if d.get("tags") is not None else frozenset(),
        )

    def _module_from_dict(self, d: dict[str, Any]) -> Module:
        return Module(
            code=self._field(d, "Module", "code", Code),
            name=self._field(d, "Module", "name", Name),
            description=str(d.get("description") or ""),
        )

    def _lesson_from_dict(self, d: dict[str, Any]) -> Lesson:
        return Lesson(
            code=self._field(d, "Lesson", "code", Code),
            type=self._field(d, "Lesson", "type", self._lesson_type),
            date=self._field(d, "Lesson", "date", LessonDateTime.parse),
            address=self._field(d, "Lesson", "address", Address),
        )

    @staticmethod
    def _tags(values: list[str]) -> frozenset[Tag]:
        if not isinstance(values, list):
            raise TypeError("tags must be a list")
        return frozenset(Tag(v) for v in values)

    @staticmethod
    def _lesson_type(name: str) -> LessonType:
        try:
            return LessonType[name]
        except KeyError as exc:
            raise ValueError(f"unknown lesson type {name!r}") from exc

    def _task_from_dict(self, d: dict[str, Any]) -> Task:
        code = self._field(d, "Task", "code", Code) if d.get("code") is not None else None
        return Task(
            name=self._field(d, "Task", "name", Name),
            date=self._field(d, "Task", "date", _parse_task_date),
            code=code,
            remark=str(d.get("remark") or ""),
        )

    # ------------------------------------------------------------------
    # JSON helpers
    # ------------------------------------------------------------------

    def to_json(self, track: Track, indent: int = 2) -> str:
        """Serialize a ``Track`` to a JSON string."""
        return json.dumps(self.to_dict(track), indent=indent, ensure_ascii=False)

    def from_json(self, text: str) -> Track:
        """Deserialize a ``Track`` from a JSON string."""
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise DataConversionError(f"Data file is not valid JSON: {exc}") from exc
        return self.from_dict(data)

    # ------------------------------------------------------------------
    # YAML helpers
    # ------------------------------------------------------------------

    def to_yaml(self, track: Track) -> str:
        """Serialize a ``Track`` to a YAML string."""
        return yaml.dump(self.to_dict(track), default_flow_style=False, allow_unicode=True, sort_keys=False)

    def from_yaml(self, text: str) -> Track:
        """Deserialize a ``Track`` from a YAML string."""
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise DataConversionError(f"Data is not valid YAML: {exc}") from exc
        return self.from_dict(data)
