"""Lesson commands: ``L add``, ``L edit``, ``L delete`` and ``L list``.

Lessons are addressed by (module code, lesson type) rather than by
index, since a module has at most one lesson of each type.
"""
from __future__ import annotations

from dataclasses import dataclass, replace

from trackit.commands.base import Command, CommandError, CommandResult, ResultSection
from trackit.commands.messages import (
    MESSAGE_DUPLICATE_LESSON,
    MESSAGE_LESSON_DOES_NOT_EXIST,
    MESSAGE_MODULE_DOES_NOT_EXIST,
    MESSAGE_NOT_EDITED,
)
from trackit.model.entities import Lesson, LessonDateTime, LessonType
from trackit.model.fields import Address, Code
from trackit.model.manager import ModelManager
from trackit.model.predicates import SHOW_ALL, LessonHasCode

TYPE = "L"


def _lessons_section(model: ModelManager) -> ResultSection:
    return ResultSection("Lessons", "lesson", tuple(model.filtered_lessons))


def _require_lesson(model: ModelManager, code: Code, lesson_type: LessonType) -> Lesson:
    lesson = model.get_lesson(code, lesson_type)
    if lesson is None:
        raise CommandError(MESSAGE_LESSON_DOES_NOT_EXIST)
    return lesson


class AddLessonCommand(Command):
    COMMAND_WORD = "add"
    USAGE = (
        f"{TYPE} {COMMAND_WORD}: Adds a lesson to an existing module. "
        "Parameters: m/CODE t/TYPE d/DAY HH:MM-HH:MM a/VENUE\n"
        f"Example: {TYPE} {COMMAND_WORD} m/CS2103T t/lecture d/Fri 16:00-18:00 a/I3-AUD"
    )

    def __init__(self, lesson: Lesson) -> None:
        self.lesson = lesson

    def execute(self, model: ModelManager) -> CommandResult:
        if model.has_lesson(self.lesson):
            raise CommandError(MESSAGE_DUPLICATE_LESSON)
        if not model.has_module_code(self.lesson.code):
            raise CommandError(MESSAGE_MODULE_DOES_NOT_EXIST)
        model.add_lesson(self.lesson)
        model.update_filtered_lesson_list(SHOW_ALL)
        return CommandResult(
            f"New lesson added: {self.lesson}",
            mutated=True,
            sections=(_lessons_section(model),),
        )


@dataclass(frozen=True)
class LessonEdit:
    """Fields to change on a lesson; ``None`` leaves a field as it is."""

    date: LessonDateTime | None = None
    address: Address | None = None

    def is_any_field_edited(self) -> bool:
        return self.date is not None or self.address is not None

    def apply(self, lesson: Lesson) -> Lesson:
        return replace(
            lesson,
            date=self.date or lesson.date,
            address=self.address or lesson.address,
        )


class EditLessonCommand(Command):
    COMMAND_WORD = "edit"
    USAGE = (
        f"{TYPE} {COMMAND_WORD}: Edits the schedule or venue of a lesson.\n"
        "Parameters: m/CODE t/TYPE [d/DAY HH:MM-HH:MM] [a/VENUE]\n"
        f"Example: {TYPE} {COMMAND_WORD} m/CS3233 t/lecture d/Mon 17:45-21:00"
    )

    def __init__(self, code: Code, lesson_type: LessonType, edit: LessonEdit) -> None:
        self.code = code
        self.lesson_type = lesson_type
        self.edit = edit

    def execute(self, model: ModelManager) -> CommandResult:
        if not self.edit.is_any_field_edited():
            raise CommandError(MESSAGE_NOT_EDITED)
        target = _require_lesson(model, self.code, self.lesson_type)
        edited = self.edit.apply(target)
        model.set_lesson(target, edited)
        model.update_filtered_lesson_list(SHOW_ALL)
        return CommandResult(
            f"Edited lesson: {edited}",
            mutated=True,
            sections=(_lessons_section(model),),
        )


class DeleteLessonCommand(Command):
    COMMAND_WORD = "delete"
    USAGE = (
        f"{TYPE} {COMMAND_WORD}: Deletes a lesson.\n"
        "Parameters: m/CODE t/TYPE\n"
        f"Example: {TYPE} {COMMAND_WORD} m/CS2103T t/tutorial"
    )

    def __init__(self, code: Code, lesson_type: LessonType) -> None:
        self.code = code
        self.lesson_type = lesson_type

    def execute(self, model: ModelManager) -> CommandResult:
        target = _require_lesson(model, self.code, self.lesson_type)
        model.delete_lesson(target)
        return CommandResult(
            f"Deleted lesson: {target}",
            mutated=True,
            sections=(_lessons_section(model),),
        )


class ListLessonCommand(Command):
    COMMAND_WORD = "list"
    USAGE = (
        f"{TYPE} {COMMAND_WORD}: Lists all lessons, or the lessons of one module.\n"
        "Parameters: [m/CODE]\n"
        f"Example: {TYPE} {COMMAND_WORD} m/CS2103T"
    )

    def __init__(self, code: Code | None = None) -> None:
        self.code = code

    def execute(self, model: ModelManager) -> CommandResult:
        if self.code is None:
            model.update_filtered_lesson_list(SHOW_ALL)
            feedback = "Listed all lessons"
        else:
            model.update_filtered_lesson_list(LessonHasCode(self.code))
            feedback = f"Listed lessons of {self.code}"
        return CommandResult(feedback, sections=(_lessons_section(model),))
