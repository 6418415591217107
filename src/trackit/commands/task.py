"""Task commands: ``T add``, ``T edit``, ``T delete``, ``T list``, ``T overdue`` and ``T future``."""
from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date

from trackit.commands.base import Command, CommandError, CommandResult, ResultSection, pick
from trackit.commands.messages import (
    MESSAGE_DUPLICATE_TASK,
    MESSAGE_INVALID_TASK_INDEX,
    MESSAGE_MODULE_DOES_NOT_EXIST,
    MESSAGE_NOT_EDITED,
)
from trackit.model.entities import Task
from trackit.model.fields import Code, Name
from trackit.model.manager import ModelManager
from trackit.model.predicates import SHOW_ALL, TaskHasCode

TYPE = "T"


def _tasks_section(model: ModelManager) -> ResultSection:
    return ResultSection("Tasks", "task", tuple(model.filtered_tasks))


def _check_module(model: ModelManager, task: Task) -> None:
    if task.code is not None and not model.has_module_code(task.code):
        raise CommandError(MESSAGE_MODULE_DOES_NOT_EXIST)


class AddTaskCommand(Command):
    COMMAND_WORD = "add"
    USAGE = (
        f"{TYPE} {COMMAND_WORD}: Adds a task. "
        "Parameters: n/NAME d/DATE [m/CODE] [r/REMARK]\n"
        f"Example: {TYPE} {COMMAND_WORD} n/Assignment 1 d/20/11/2026 m/CS2103T "
        "r/Focus on Chapters 1-3"
    )

    def __init__(self, task: Task) -> None:
        self.task = task

    def execute(self, model: ModelManager) -> CommandResult:
        if model.has_task(self.task):
            raise CommandError(MESSAGE_DUPLICATE_TASK)
        _check_module(model, self.task)
        model.add_task(self.task)
        model.update_filtered_task_list(SHOW_ALL)
        return CommandResult(
            f"New task added: {self.task}",
            mutated=True,
            sections=(_tasks_section(model),),
        )


@dataclass(frozen=True)
class TaskEdit:
    """Fields to change on a task; ``None`` leaves a field as it is."""

    name: Name | None = None
    date: date | None = None
    code: Code | None = None
    remark: str | None = None

    def is_any_field_edited(self) -> bool:
        return any(v is not None for v in (self.name, self.date, self.code, self.remark))

    def apply(self, task: Task) -> Task:
        return replace(
            task,
            name=self.name or task.name,
            date=self.date or task.date,
            code=self.code or task.code,
            remark=self.remark if self.remark is not None else task.remark,
        )


class EditTaskCommand(Command):
    COMMAND_WORD = "edit"
    USAGE = (
        f"{TYPE} {COMMAND_WORD}: Edits the task at INDEX in the displayed list.\n"
        "Parameters: INDEX [n/NAME] [d/DATE] [m/CODE] [r/REMARK]\n"
        f"Example: {TYPE} {COMMAND_WORD} 1 d/21/11/2026"
    )

    def __init__(self, index: int, edit: TaskEdit) -> None:
        self.index = index
        self.edit = edit

    def execute(self, model: ModelManager) -> CommandResult:
        if not self.edit.is_any_field_edited():
            raise CommandError(MESSAGE_NOT_EDITED)
        target = pick(model.filtered_tasks, self.index, MESSAGE_INVALID_TASK_INDEX)
        edited = self.edit.apply(target)
        if edited != target and model.has_task(edited):
            raise CommandError(MESSAGE_DUPLICATE_TASK)
        if self.edit.code is not None:
            _check_module(model, edited)
        model.set_task(target, edited)
        model.update_filtered_task_list(SHOW_ALL)
        return CommandResult(
            f"Edited task: {edited}",
            mutated=True,
            sections=(_tasks_section(model),),
        )


class DeleteTaskCommand(Command):
    COMMAND_WORD = "delete"
    USAGE = (
        f"{TYPE} {COMMAND_WORD}: Deletes the task at INDEX in the displayed list.\n"
        "Parameters: INDEX (must be a positive integer)\n"
        f"Example: {TYPE} {COMMAND_WORD} 1"
    )

    def __init__(self, index: int) -> None:
        self.index = index

    def execute(self, model: ModelManager) -> CommandResult:
        target = pick(model.filtered_tasks, self.index, MESSAGE_INVALID_TASK_INDEX)
        model.delete_task(target)
        return CommandResult(
            f"Deleted task: {target}",
            mutated=True,
            sections=(_tasks_section(model),),
        )


class ListTaskCommand(Command):
    COMMAND_WORD = "list"
    USAGE = (
        f"{TYPE} {COMMAND_WORD}: Lists all tasks, or the tasks of one module.\n"
        "Parameters: [m/CODE]\n"
        f"Example: {TYPE} {COMMAND_WORD} m/CS2103T"
    )

    def __init__(self, code: Code | None = None) -> None:
        self.code = code

    def execute(self, model: ModelManager) -> CommandResult:
        if self.code is None:
            model.update_filtered_task_list(SHOW_ALL)
            feedback = "Listed all tasks"
        else:
            model.update_filtered_task_list(TaskHasCode(self.code))
            feedback = f"Listed tasks of {self.code}"
        return CommandResult(feedback, sections=(_tasks_section(model),))


class OverdueTaskCommand(Command):
    COMMAND_WORD = "overdue"
    USAGE = f"{TYPE} {COMMAND_WORD}: Lists tasks whose due date has passed.\nExample: {TYPE} {COMMAND_WORD}"

    def execute(self, model: ModelManager) -> CommandResult:
        tasks = tuple(model.get_overdue_tasks())
        return CommandResult(
            f"{len(tasks)} overdue task(s)",
            sections=(ResultSection("Overdue tasks", "task", tasks),),
        )


class FutureTaskCommand(Command):
    COMMAND_WORD = "future"
    USAGE = (
        f"{TYPE} {COMMAND_WORD}: Lists tasks due more than a week from today.\n"
        f"Example: {TYPE} {COMMAND_WORD}"
    )

    def execute(self, model: ModelManager) -> CommandResult:
        tasks = tuple(model.get_future_tasks())
        return CommandResult(
            f"{len(tasks)} future task(s)",
            sections=(ResultSection("Future tasks", "task", tasks),),
        )
