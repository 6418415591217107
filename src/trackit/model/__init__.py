"""trackit model module.

Exports the field and entity types, the predicate library, the
``Track`` aggregate, filtered views and the ``ModelManager`` façade.
"""
from __future__ import annotations

from trackit.model.entities import (
    DATE_FORMAT,
    LESSON_TYPE_CONSTRAINTS,
    Contact,
    Lesson,
    LessonDateTime,
    LessonType,
    Module,
    Task,
    Weekday,
)
from trackit.model.errors import (
    DuplicateEntityError,
    EntityNotFoundError,
    InconsistentSnapshotError,
    TrackError,
)
from trackit.model.fields import Address, Code, Email, FieldConstraintError, Name, Phone, Tag
from trackit.model.manager import ModelManager
from trackit.model.predicates import (
    SHOW_ALL,
    SHOW_NONE,
    ContactHasTag,
    LessonHasCode,
    LessonOnWeekday,
    TaskAfterDate,
    TaskHasCode,
    TaskIsOverdue,
    TaskOnDate,
    all_of,
)
from trackit.model.track import Track
from trackit.model.unique_list import UniqueEntityList
from trackit.model.views import FilteredView

__all__ = [
    # Fields
    "Address",
    "Code",
    "Email",
    "FieldConstraintError",
    "Name",
    "Phone",
    "Tag",
    # Entities
    "Contact",
    "Module",
    "Lesson",
    "LessonDateTime",
    "LessonType",
    "Task",
    "Weekday",
    "DATE_FORMAT",
    "LESSON_TYPE_CONSTRAINTS",
    # Errors
    "TrackError",
    "DuplicateEntityError",
    "EntityNotFoundError",
    "InconsistentSnapshotError",
    # Predicates
    "SHOW_ALL",
    "SHOW_NONE",
    "ContactHasTag",
    "LessonHasCode",
    "LessonOnWeekday",
    "TaskAfterDate",
    "TaskHasCode",
    "TaskIsOverdue",
    "TaskOnDate",
    "all_of",
    # Containers
    "UniqueEntityList",
    "FilteredView",
    "Track",
    "ModelManager",
]
