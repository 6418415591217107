"""Module commands: ``M add``, ``M edit``, ``M delete``, ``M list`` and ``M view``.

Deleting or re-coding a module leaves the tasks and lessons that refer
to the old code in place; ``trackit check`` reports such stale
references.
"""
from __future__ import annotations

from dataclasses import dataclass, replace

from trackit.commands.base import Command, CommandError, CommandResult, ResultSection
from trackit.commands.messages import (
    MESSAGE_DUPLICATE_MODULE,
    MESSAGE_MODULE_DOES_NOT_EXIST,
    MESSAGE_MODULE_LIMIT_REACHED,
    MESSAGE_NOT_EDITED,
)
from trackit.model.entities import Module
from trackit.model.fields import Code, Name
from trackit.model.manager import ModelManager
from trackit.model.predicates import SHOW_ALL

TYPE = "M"


def _modules_section(model: ModelManager) -> ResultSection:
    return ResultSection("Modules", "module", tuple(model.filtered_modules))


def _require_module(model: ModelManager, code: Code) -> Module:
    module = model.get_module(code)
    if module is None:
        raise CommandError(MESSAGE_MODULE_DOES_NOT_EXIST)
    return module


class AddModuleCommand(Command):
    COMMAND_WORD = "add"
    USAGE = (
        f"{TYPE} {COMMAND_WORD}: Adds a module. "
        "Parameters: m/CODE n/NAME [r/DESCRIPTION]\n"
        f"Example: {TYPE} {COMMAND_WORD} m/CS1231S n/Discrete Structures"
    )

    def __init__(self, module: Module) -> None:
        self.module = module

    def execute(self, model: ModelManager) -> CommandResult:
        if model.has_module(self.module):
            raise CommandError(MESSAGE_DUPLICATE_MODULE)
        if not model.can_add_more_module():
            raise CommandError(MESSAGE_MODULE_LIMIT_REACHED.format(limit=model.config.module_limit))
        model.add_module(self.module)
        return CommandResult(
            f"New module added: {self.module}",
            mutated=True,
            sections=(_modules_section(model),),
        )


@dataclass(frozen=True)
class ModuleEdit:
    """Fields to change on a module; ``None`` leaves a field as it is."""

    code: Code | None = None
    name: Name | None = None
    description: str | None = None

    def is_any_field_edited(self) -> bool:
        return any(v is not None for v in (self.code, self.name, self.description))

    def apply(self, module: Module) -> Module:
        return replace(
            module,
            code=self.code or module.code,
            name=self.name or module.name,
            description=self.description if self.description is not None else module.description,
        )


class EditModuleCommand(Command):
    COMMAND_WORD = "edit"
    USAGE = (
        f"{TYPE} {COMMAND_WORD}: Edits the module with CODE.\n"
        "Parameters: CODE [m/NEW_CODE] [n/NAME] [r/DESCRIPTION]\n"
        f"Example: {TYPE} {COMMAND_WORD} CS1231S n/Discrete Structures I"
    )

    def __init__(self, code: Code, edit: ModuleEdit) -> None:
        self.code = code
        self.edit = edit

    def execute(self, model: ModelManager) -> CommandResult:
        if not self.edit.is_any_field_edited():
            raise CommandError(MESSAGE_NOT_EDITED)
        target = _require_module(model, self.code)
        edited = self.edit.apply(target)
        if not target.is_same_module(edited) and model.has_module(edited):
            raise CommandError(MESSAGE_DUPLICATE_MODULE)
        model.set_module(target, edited)
        return CommandResult(
            f"Edited module: {edited}",
            mutated=True,
            sections=(_modules_section(model),),
        )


class DeleteModuleCommand(Command):
    COMMAND_WORD = "delete"
    USAGE = (
        f"{TYPE} {COMMAND_WORD}: Deletes the module with CODE. "
        "Its tasks and lessons are kept.\n"
        "Parameters: CODE\n"
        f"Example: {TYPE} {COMMAND_WORD} CS1231S"
    )

    def __init__(self, code: Code) -> None:
        self.code = code

    def execute(self, model: ModelManager) -> CommandResult:
        target = _require_module(model, self.code)
        model.delete_module(target)
        return CommandResult(
            f"Deleted module: {target}",
            mutated=True,
            sections=(_modules_section(model),),
        )


class ListModuleCommand(Command):
    COMMAND_WORD = "list"
    USAGE = f"{TYPE} {COMMAND_WORD}: Lists all modules.\nExample: {TYPE} {COMMAND_WORD}"

    def execute(self, model: ModelManager) -> CommandResult:
        model.update_filtered_module_list(SHOW_ALL)
        return CommandResult("Listed all modules", sections=(_modules_section(model),))


class ViewModuleCommand(Command):
    COMMAND_WORD = "view"
    USAGE = (
        f"{TYPE} {COMMAND_WORD}: Shows the lessons, tasks and contacts of the module with CODE.\n"
        "Parameters: CODE\n"
        f"Example: {TYPE} {COMMAND_WORD} CS2103T"
    )

    def __init__(self, code: Code) -> None:
        self.code = code

    def execute(self, model: ModelManager) -> CommandResult:
        module = _require_module(model, self.code)
        lessons = tuple(model.get_module_lessons(self.code))
        tasks = tuple(model.get_module_tasks(self.code))
        contacts = tuple(model.get_module_contacts(self.code))
        return CommandResult(
            f"Showing module: {module}",
            sections=(
                ResultSection("Lessons", "lesson", lessons),
                ResultSection("Tasks", "task", tasks),
                ResultSection("Contacts", "contact", contacts),
            ),
        )
