"""trackit commands module.

Each command class holds the validated arguments of one user request
and applies it to a ``ModelManager`` through ``execute``.
"""
from __future__ import annotations

from trackit.commands.base import Command, CommandError, CommandResult, ResultSection
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

__all__ = [
    "Command",
    "CommandError",
    "CommandResult",
    "ResultSection",
    "AddContactCommand",
    "ContactEdit",
    "DeleteContactCommand",
    "EditContactCommand",
    "ListContactCommand",
    "AddModuleCommand",
    "DeleteModuleCommand",
    "EditModuleCommand",
    "ListModuleCommand",
    "ModuleEdit",
    "ViewModuleCommand",
    "AddLessonCommand",
    "DeleteLessonCommand",
    "EditLessonCommand",
    "LessonEdit",
    "ListLessonCommand",
    "AddTaskCommand",
    "DeleteTaskCommand",
    "EditTaskCommand",
    "FutureTaskCommand",
    "ListTaskCommand",
    "OverdueTaskCommand",
    "TaskEdit",
    "ClearCommand",
    "ExitCommand",
    "HelpCommand",
    "UpcomingCommand",
]
