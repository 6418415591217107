"""Unit tests for trackit.commands."""
from __future__ import annotations

from dataclasses import replace
from datetime import date

import pytest

from trackit.commands.base import CommandError, CommandResult, pick
from trackit.commands.contact import (
    AddContactCommand,
    ContactEdit,
    DeleteContactCommand,
    EditContactCommand,
    ListContactCommand,
)
from trackit.commands.general import ClearCommand, ExitCommand, HelpCommand, UpcomingCommand
from trackit.commands.lesson import (
    AddLessonCommand,
    DeleteLessonCommand,
    EditLessonCommand,
    LessonEdit,
    ListLessonCommand,
)
from trackit.commands.messages import (
    MESSAGE_DUPLICATE_CONTACT,
    MESSAGE_DUPLICATE_LESSON,
    MESSAGE_DUPLICATE_MODULE,
    MESSAGE_DUPLICATE_TASK,
    MESSAGE_INVALID_CONTACT_INDEX,
    MESSAGE_INVALID_TASK_INDEX,
    MESSAGE_LESSON_DOES_NOT_EXIST,
    MESSAGE_MODULE_DOES_NOT_EXIST,
    MESSAGE_NOT_EDITED,
)
from trackit.commands.module import (
    AddModuleCommand,
    DeleteModuleCommand,
    EditModuleCommand,
    ListModuleCommand,
    ModuleEdit,
    ViewModuleCommand,
)
from trackit.commands.task import (
    AddTaskCommand,
    DeleteTaskCommand,
    EditTaskCommand,
    FutureTaskCommand,
    ListTaskCommand,
    OverdueTaskCommand,
    TaskEdit,
)
from trackit.config import Config
from trackit.model.entities import Contact, Lesson, LessonDateTime, LessonType, Module, Task
from trackit.model.fields import Address, Code, Email, Name, Phone, Tag
from trackit.model.manager import ModelManager
from trackit.model.track import Track


def _expect_error(command, model: ModelManager, message: str) -> None:
    before = Track(model.track)
    with pytest.raises(CommandError) as exc_info:
        command.execute(model)
    assert str(exc_info.value).startswith(message)
    assert model.track == before


# ===========================================================================
# Base helpers
# ===========================================================================


class TestBase:
    def test_pick(self) -> None:
        assert pick(("a", "b"), 1, "bad") == "b"
        with pytest.raises(CommandError, match="bad"):
            pick(("a",), 1, "bad")

    def test_commands_compare_by_arguments(self) -> None:
        assert DeleteTaskCommand(0) == DeleteTaskCommand(0)
        assert DeleteTaskCommand(0) != DeleteTaskCommand(1)
        assert DeleteTaskCommand(0) != DeleteContactCommand(0)

    def test_repr(self) -> None:
        assert repr(DeleteTaskCommand(2)) == "DeleteTaskCommand(index=2)"

    def test_result_defaults(self) -> None:
        result = CommandResult("done")
        assert not result.mutated
        assert not result.should_exit
        assert result.sections == ()


# ===========================================================================
# Contacts
# ===========================================================================


class TestContactCommands:
    def test_add(self, model: ModelManager) -> None:
        contact = Contact(Name("Carl Kurz"), Phone("95352563"), Email("heinz@example.com"), Address("wall street"))
        result = AddContactCommand(contact).execute(model)
        assert result.mutated
        assert model.has_contact(contact)
        assert result.sections[0].items[-1] == contact

    def test_add_duplicate(self, model: ModelManager, alice: Contact) -> None:
        _expect_error(AddContactCommand(replace(alice, phone=Phone("111"))), model, MESSAGE_DUPLICATE_CONTACT)

    def test_edit_uses_displayed_index(self, model: ModelManager, benson: Contact) -> None:
        model.update_filtered_contact_list(lambda c: c.name == benson.name)
        EditContactCommand(0, ContactEdit(phone=Phone("12345"))).execute(model)
        assert model.track.contacts[1] == replace(benson, phone=Phone("12345"))

    def test_edit_clears_tags(self, model: ModelManager, alice: Contact) -> None:
        EditContactCommand(0, ContactEdit(tags=frozenset())).execute(model)
        assert model.track.contacts[0].tags == frozenset()

    def test_edit_to_existing_name(self, model: ModelManager, benson: Contact) -> None:
        _expect_error(
            EditContactCommand(0, ContactEdit(name=benson.name)), model, MESSAGE_DUPLICATE_CONTACT
        )

    def test_edit_nothing(self, model: ModelManager) -> None:
        _expect_error(EditContactCommand(0, ContactEdit()), model, MESSAGE_NOT_EDITED)

    def test_delete_out_of_range(self, model: ModelManager) -> None:
        _expect_error(DeleteContactCommand(2), model, MESSAGE_INVALID_CONTACT_INDEX)

    def test_delete(self, model: ModelManager, alice: Contact) -> None:
        DeleteContactCommand(0).execute(model)
        assert not model.has_contact(alice)

    def test_list_by_tag(self, model: ModelManager, alice: Contact) -> None:
        result = ListContactCommand(Tag("friends")).execute(model)
        assert not result.mutated
        assert result.sections[0].items == (alice,)
        assert len(ListContactCommand().execute(model).sections[0].items) == 2


# ===========================================================================
# Modules
# ===========================================================================


class TestModuleCommands:
    def test_add(self, model: ModelManager) -> None:
        module = Module(Code("MA1521"), Name("Calculus"))
        result = AddModuleCommand(module).execute(model)
        assert result.mutated
        assert model.has_module(module)

    def test_add_duplicate(self, model: ModelManager, cs2103t: Module) -> None:
        _expect_error(AddModuleCommand(replace(cs2103t, name=Name("Other"))), model, MESSAGE_DUPLICATE_MODULE)

    def test_add_at_ceiling_rejected(self, typical_track: Track) -> None:
        model = ModelManager(typical_track, Config(module_limit=2))
        _expect_error(
            AddModuleCommand(Module(Code("MA1521"), Name("Calculus"))),
            model,
            "You can only track up to 2 modules",
        )

    def test_duplicate_reported_before_ceiling(self, typical_track: Track, cs2103t: Module) -> None:
        model = ModelManager(typical_track, Config(module_limit=2))
        _expect_error(AddModuleCommand(cs2103t), model, MESSAGE_DUPLICATE_MODULE)

    def test_edit_name(self, model: ModelManager) -> None:
        EditModuleCommand(Code("CS2103T"), ModuleEdit(name=Name("SE"))).execute(model)
        assert model.get_module(Code("CS2103T")).name == Name("SE")

    def test_edit_code_to_existing(self, model: ModelManager) -> None:
        _expect_error(
            EditModuleCommand(Code("CS2103T"), ModuleEdit(code=Code("CS1231S"))),
            model,
            MESSAGE_DUPLICATE_MODULE,
        )

    def test_edit_unknown_module(self, model: ModelManager) -> None:
        _expect_error(
            EditModuleCommand(Code("MA1521"), ModuleEdit(name=Name("X"))), model, MESSAGE_MODULE_DOES_NOT_EXIST
        )

    def test_delete_keeps_tasks_and_lessons(self, model: ModelManager) -> None:
        DeleteModuleCommand(Code("CS2103T")).execute(model)
        assert not model.has_module_code(Code("CS2103T"))
        assert len(model.track.tasks) == 2
        assert len(model.track.lessons) == 2

    def test_list(self, model: ModelManager) -> None:
        assert len(ListModuleCommand().execute(model).sections[0].items) == 2

    def test_view(self, model: ModelManager, cs2103t_lecture: Lesson, past_task: Task, alice: Contact) -> None:
        result = ViewModuleCommand(Code("CS2103T")).execute(model)
        lessons, tasks, contacts = result.sections
        assert lessons.items == (cs2103t_lecture,)
        assert tasks.items == (past_task,)
        assert contacts.items == (alice,)
        assert tuple(model.filtered_tasks) == (past_task,)

    def test_view_unknown(self, model: ModelManager) -> None:
        _expect_error(ViewModuleCommand(Code("MA1521")), model, MESSAGE_MODULE_DOES_NOT_EXIST)


# ===========================================================================
# Lessons
# ===========================================================================


class TestLessonCommands:
    def test_add(self, model: ModelManager, cs2103t_lecture: Lesson) -> None:
        lab = replace(cs2103t_lecture, type=LessonType.LAB)
        AddLessonCommand(lab).execute(model)
        assert model.has_lesson(lab)

    def test_add_needs_module(self, model: ModelManager, cs2103t_lecture: Lesson) -> None:
        _expect_error(
            AddLessonCommand(replace(cs2103t_lecture, code=Code("MA1521"))), model, MESSAGE_MODULE_DOES_NOT_EXIST
        )

    def test_add_same_kind(self, model: ModelManager, cs2103t_lecture: Lesson) -> None:
        moved = replace(cs2103t_lecture, date=LessonDateTime.parse("Thu 10:00-12:00"))
        _expect_error(AddLessonCommand(moved), model, MESSAGE_DUPLICATE_LESSON)

    def test_edit(self, model: ModelManager, cs2103t_lecture: Lesson) -> None:
        slot = LessonDateTime.parse("Tue 09:00-11:00")
        EditLessonCommand(Code("CS2103T"), LessonType.LECTURE, LessonEdit(date=slot)).execute(model)
        assert model.get_lesson(Code("CS2103T"), LessonType.LECTURE) == replace(cs2103t_lecture, date=slot)

    def test_edit_missing_lesson(self, model: ModelManager) -> None:
        _expect_error(
            EditLessonCommand(Code("CS2103T"), LessonType.LAB, LessonEdit(address=Address("COM3"))),
            model,
            MESSAGE_LESSON_DOES_NOT_EXIST,
        )

    def test_delete(self, model: ModelManager, cs1231s_tutorial: Lesson) -> None:
        DeleteLessonCommand(Code("CS1231S"), LessonType.TUTORIAL).execute(model)
        assert not model.has_lesson(cs1231s_tutorial)

    def test_list_by_module(self, model: ModelManager, cs1231s_tutorial: Lesson) -> None:
        result = ListLessonCommand(Code("CS1231S")).execute(model)
        assert result.sections[0].items == (cs1231s_tutorial,)


# ===========================================================================
# Tasks
# ===========================================================================


class TestTaskCommands:
    def test_add_without_module(self, model: ModelManager) -> None:
        task = Task(Name("Buy stationery"), date(2026, 11, 1))
        AddTaskCommand(task).execute(model)
        assert model.has_task(task)

    def test_add_with_unknown_module(self, model: ModelManager) -> None:
        task = Task(Name("Problem set"), date(2026, 11, 1), Code("MA1521"))
        _expect_error(AddTaskCommand(task), model, MESSAGE_MODULE_DOES_NOT_EXIST)

    def test_add_duplicate(self, model: ModelManager, past_task: Task) -> None:
        _expect_error(AddTaskCommand(replace(past_task)), model, MESSAGE_DUPLICATE_TASK)

    def test_edit_follows_filtered_view(self, model: ModelManager, far_task: Task) -> None:
        OverdueTaskCommand().execute(model)
        EditTaskCommand(0, TaskEdit(remark="Submitted late")).execute(model)
        assert model.track.tasks[0].remark == "Submitted late"
        assert model.track.tasks[1] == far_task

    def test_edit_into_duplicate(self, model: ModelManager, past_task: Task, far_task: Task) -> None:
        edit = TaskEdit(name=far_task.name, date=far_task.date, code=far_task.code, remark=far_task.remark)
        _expect_error(EditTaskCommand(0, edit), model, MESSAGE_DUPLICATE_TASK)

    def test_edit_to_unknown_module(self, model: ModelManager) -> None:
        _expect_error(EditTaskCommand(0, TaskEdit(code=Code("MA1521"))), model, MESSAGE_MODULE_DOES_NOT_EXIST)

    def test_edit_keeps_stale_module_when_code_untouched(self, model: ModelManager) -> None:
        model.delete_module(model.get_module(Code("CS2103T")))
        EditTaskCommand(0, TaskEdit(remark="still fine")).execute(model)
        assert model.track.tasks[0].code == Code("CS2103T")

    def test_delete_out_of_range(self, model: ModelManager) -> None:
        _expect_error(DeleteTaskCommand(5), model, MESSAGE_INVALID_TASK_INDEX)

    def test_list_by_module(self, model: ModelManager, past_task: Task) -> None:
        assert ListTaskCommand(Code("CS2103T")).execute(model).sections[0].items == (past_task,)

    def test_overdue_and_future(self, model: ModelManager, past_task: Task, far_task: Task) -> None:
        overdue = OverdueTaskCommand().execute(model)
        assert overdue.sections[0].items == (past_task,)
        assert overdue.feedback == "1 overdue task(s)"
        future = FutureTaskCommand().execute(model)
        assert future.sections[0].items == (far_task,)


# ===========================================================================
# General
# ===========================================================================


class TestGeneralCommands:
    def test_upcoming_defaults_to_today(self, model: ModelManager, cs2103t_lecture: Lesson) -> None:
        result = UpcomingCommand().execute(model)
        lessons, tasks = result.sections
        assert lessons.items == (cs2103t_lecture,)
        assert tasks.items == ()
        assert not result.mutated

    def test_upcoming_on_given_day(self, model: ModelManager, past_task: Task) -> None:
        result = UpcomingCommand(date(2024, 1, 1)).execute(model)
        lessons, tasks = result.sections
        assert lessons.items == (model.track.lessons[0],)
        assert tasks.items == (past_task,)

    def test_clear(self, model: ModelManager) -> None:
        result = ClearCommand().execute(model)
        assert result.mutated
        assert model.track == Track()

    def test_help_lists_usages(self, model: ModelManager) -> None:
        result = HelpCommand(("usage one", "usage two")).execute(model)
        assert result.feedback == "usage one\n\nusage two"

    def test_exit(self, model: ModelManager) -> None:
        assert ExitCommand().execute(model).should_exit
