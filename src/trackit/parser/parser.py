"""Turns a line of user input into a ``Command``.

Input has the form ``<TYPE> <verb> <args>`` where TYPE is one of ``C``
(contacts), ``M`` (modules), ``L`` (lessons) or ``T`` (tasks), or a
single general word (``help``, ``exit``, ``clear``, ``upcoming``)
followed by its arguments.

Usage
-----
::

    from trackit.parser import CommandParser

    command = CommandParser().parse("T add n/Assignment 1 d/20/11/2026 m/CS2103T")
    result = command.execute(model)
"""
from __future__ import annotations

import logging
from collections.abc import Callable

from trackit.commands.base import Command
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
from trackit.model.entities import Contact, Lesson, Module, Task
from trackit.model.fields import Tag
from trackit.parser.errors import MESSAGE_INVALID_COMMAND_FORMAT, MESSAGE_UNKNOWN_COMMAND, ParseError
from trackit.parser.fields import (
    parse_address,
    parse_code,
    parse_date,
    parse_email,
    parse_index,
    parse_lesson_datetime,
    parse_lesson_type,
    parse_name,
    parse_phone,
    parse_tag,
    parse_tags,
    parse_text,
)
from trackit.parser.tokenizer import (
    PREFIX_ADDRESS,
    PREFIX_CODE,
    PREFIX_DATE,
    PREFIX_EMAIL,
    PREFIX_NAME,
    PREFIX_PHONE,
    PREFIX_REMARK,
    PREFIX_TAG,
    PREFIX_TYPE,
    ArgumentMultimap,
    Prefix,
    tokenize,
)

logger = logging.getLogger(__name__)

_ArgParser = Callable[[str], Command]


def _require(args: ArgumentMultimap, usage: str, *prefixes: Prefix, preamble: bool = False) -> None:
    """Raise the invalid-format error unless every prefix is present.

    When ``preamble`` is False the preamble must be empty; when True it
    must be non-empty.
    """
    if not args.has_all(*prefixes) or bool(args.preamble) != preamble:
        raise ParseError(MESSAGE_INVALID_COMMAND_FORMAT, usage)


def _optional(args: ArgumentMultimap, prefix: Prefix, parse: Callable[[str], object]):
    value = args.get(prefix)
    return parse(value) if value is not None else None


def _edited_tags(args: ArgumentMultimap) -> frozenset[Tag] | None:
    """Tags given to an edit; a single empty ``t/`` clears them."""
    if not args.has(PREFIX_TAG):
        return None
    values = args.get_all(PREFIX_TAG)
    if values == [""]:
        return frozenset()
    return parse_tags(values)


def _parse_preamble_index(args: ArgumentMultimap, usage: str) -> int:
    try:
        return parse_index(args.preamble)
    except ParseError as exc:
        raise ParseError(exc.message, usage) from exc


# ---------------------------------------------------------------------------
# Contacts
# ---------------------------------------------------------------------------


def _add_contact(text: str) -> Command:
    args = tokenize(text, PREFIX_NAME, PREFIX_PHONE, PREFIX_EMAIL, PREFIX_ADDRESS, PREFIX_TAG)
    _require(args, AddContactCommand.USAGE, PREFIX_NAME, PREFIX_PHONE, PREFIX_EMAIL, PREFIX_ADDRESS)
    contact = Contact(
        name=parse_name(args.get(PREFIX_NAME)),
        phone=parse_phone(args.get(PREFIX_PHONE)),
        email=parse_email(args.get(PREFIX_EMAIL)),
        address=parse_address(args.get(PREFIX_ADDRESS)),
        tags=parse_tags(args.get_all(PREFIX_TAG)),
    )
    return AddContactCommand(contact)


def _edit_contact(text: str) -> Command:
    args = tokenize(text, PREFIX_NAME, PREFIX_PHONE, PREFIX_EMAIL, PREFIX_ADDRESS, PREFIX_TAG)
    index = _parse_preamble_index(args, EditContactCommand.USAGE)
    edit = ContactEdit(
        name=_optional(args, PREFIX_NAME, parse_name),
        phone=_optional(args, PREFIX_PHONE, parse_phone),
        email=_optional(args, PREFIX_EMAIL, parse_email),
        address=_optional(args, PREFIX_ADDRESS, parse_address),
        tags=_edited_tags(args),
    )
    return EditContactCommand(index, edit)


def _delete_contact(text: str) -> Command:
    return DeleteContactCommand(_parse_preamble_index(tokenize(text), DeleteContactCommand.USAGE))


def _list_contact(text: str) -> Command:
    args = tokenize(text, PREFIX_TAG)
    _require(args, ListContactCommand.USAGE)
    return ListContactCommand(_optional(args, PREFIX_TAG, parse_tag))


# ---------------------------------------------------------------------------
# Modules
# ---------------------------------------------------------------------------


def _add_module(text: str) -> Command:
    args = tokenize(text, PREFIX_CODE, PREFIX_NAME, PREFIX_REMARK)
    _require(args, AddModuleCommand.USAGE, PREFIX_CODE, PREFIX_NAME)
    module = Module(
        code=parse_code(args.get(PREFIX_CODE)),
        name=parse_name(args.get(PREFIX_NAME)),
        description=parse_text(args.get(PREFIX_REMARK) or ""),
    )
    return AddModuleCommand(module)


def _edit_module(text: str) -> Command:
    args = tokenize(text, PREFIX_CODE, PREFIX_NAME, PREFIX_REMARK)
    _require(args, EditModuleCommand.USAGE, preamble=True)
    edit = ModuleEdit(
        code=_optional(args, PREFIX_CODE, parse_code),
        name=_optional(args, PREFIX_NAME, parse_name),
        description=_optional(args, PREFIX_REMARK, parse_text),
    )
    return EditModuleCommand(parse_code(args.preamble), edit)


def _delete_module(text: str) -> Command:
    args = tokenize(text)
    _require(args, DeleteModuleCommand.USAGE, preamble=True)
    return DeleteModuleCommand(parse_code(args.preamble))


def _list_module(text: str) -> Command:
    _require(tokenize(text), ListModuleCommand.USAGE)
    return ListModuleCommand()


def _view_module(text: str) -> Command:
    args = tokenize(text)
    _require(args, ViewModuleCommand.USAGE, preamble=True)
    return ViewModuleCommand(parse_code(args.preamble))


# ---------------------------------------------------------------------------
# Lessons
# ---------------------------------------------------------------------------


def _add_lesson(text: str) -> Command:
    args = tokenize(text, PREFIX_CODE, PREFIX_TYPE, PREFIX_DATE, PREFIX_ADDRESS)
    _require(args, AddLessonCommand.USAGE, PREFIX_CODE, PREFIX_TYPE, PREFIX_DATE, PREFIX_ADDRESS)
    lesson = Lesson(
        code=parse_code(args.get(PREFIX_CODE)),
        type=parse_lesson_type(args.get(PREFIX_TYPE)),
        date=parse_lesson_datetime(args.get(PREFIX_DATE)),
        address=parse_address(args.get(PREFIX_ADDRESS)),
    )
    return AddLessonCommand(lesson)


def _edit_lesson(text: str) -> Command:
    args = tokenize(text, PREFIX_CODE, PREFIX_TYPE, PREFIX_DATE, PREFIX_ADDRESS)
    _require(args, EditLessonCommand.USAGE, PREFIX_CODE, PREFIX_TYPE)
    edit = LessonEdit(
        date=_optional(args, PREFIX_DATE, parse_lesson_datetime),
        address=_optional(args, PREFIX_ADDRESS, parse_address),
    )
    return EditLessonCommand(
        parse_code(args.get(PREFIX_CODE)),
        parse_lesson_type(args.get(PREFIX_TYPE)),
        edit,
    )


def _delete_lesson(text: str) -> Command:
    args = tokenize(text, PREFIX_CODE, PREFIX_TYPE)
    _require(args, DeleteLessonCommand.USAGE, PREFIX_CODE, PREFIX_TYPE)
    return DeleteLessonCommand(
        parse_code(args.get(PREFIX_CODE)),
        parse_lesson_type(args.get(PREFIX_TYPE)),
    )


def _list_lesson(text: str) -> Command:
    args = tokenize(text, PREFIX_CODE)
    _require(args, ListLessonCommand.USAGE)
    return ListLessonCommand(_optional(args, PREFIX_CODE, parse_code))


# ---------------------------------------------------------------------------
# Tasks
# ---------------------------------------------------------------------------


def _add_task(text: str) -> Command:
    args = tokenize(text, PREFIX_NAME, PREFIX_DATE, PREFIX_CODE, PREFIX_REMARK)
    _require(args, AddTaskCommand.USAGE, PREFIX_NAME, PREFIX_DATE)
    task = Task(
        name=parse_name(args.get(PREFIX_NAME)),
        date=parse_date(args.get(PREFIX_DATE)),
        code=_optional(args, PREFIX_CODE, parse_code),
        remark=parse_text(args.get(PREFIX_REMARK) or ""),
    )
    return AddTaskCommand(task)


def _edit_task(text: str) -> Command:
    args = tokenize(text, PREFIX_NAME, PREFIX_DATE, PREFIX_CODE, PREFIX_REMARK)
    index = _parse_preamble_index(args, EditTaskCommand.USAGE)
    edit = TaskEdit(
        name=_optional(args, PREFIX_NAME, parse_name),
        date=_optional(args, PREFIX_DATE, parse_date),
        code=_optional(args, PREFIX_CODE, parse_code),
        remark=_optional(args, PREFIX_REMARK, parse_text),
    )
    return EditTaskCommand(index, edit)


def _delete_task(text: str) -> Command:
    return DeleteTaskCommand(_parse_preamble_index(tokenize(text), DeleteTaskCommand.USAGE))


def _list_task(text: str) -> Command:
    args = tokenize(text, PREFIX_CODE)
    _require(args, ListTaskCommand.USAGE)
    return ListTaskCommand(_optional(args, PREFIX_CODE, parse_code))


# ---------------------------------------------------------------------------
# General
# ---------------------------------------------------------------------------


def _upcoming(text: str) -> Command:
    args = tokenize(text, PREFIX_DATE)
    _require(args, UpcomingCommand.USAGE)
    return UpcomingCommand(_optional(args, PREFIX_DATE, parse_date))


_TYPED: dict[str, dict[str, tuple[_ArgParser, str]]] = {
    "C": {
        "add": (_add_contact, AddContactCommand.USAGE),
        "edit": (_edit_contact, EditContactCommand.USAGE),
        "delete": (_delete_contact, DeleteContactCommand.USAGE),
        "list": (_list_contact, ListContactCommand.USAGE),
    },
    "M": {
        "add": (_add_module, AddModuleCommand.USAGE),
        "edit": (_edit_module, EditModuleCommand.USAGE),
        "delete": (_delete_module, DeleteModuleCommand.USAGE),
        "list": (_list_module, ListModuleCommand.USAGE),
        "view": (_view_module, ViewModuleCommand.USAGE),
    },
    "L": {
        "add": (_add_lesson, AddLessonCommand.USAGE),
        "edit": (_edit_lesson, EditLessonCommand.USAGE),
        "delete": (_delete_lesson, DeleteLessonCommand.USAGE),
        "list": (_list_lesson, ListLessonCommand.USAGE),
    },
    "T": {
        "add": (_add_task, AddTaskCommand.USAGE),
        "edit": (_edit_task, EditTaskCommand.USAGE),
        "delete": (_delete_task, DeleteTaskCommand.USAGE),
        "list": (_list_task, ListTaskCommand.USAGE),
        "overdue": (lambda _: OverdueTaskCommand(), OverdueTaskCommand.USAGE),
        "future": (lambda _: FutureTaskCommand(), FutureTaskCommand.USAGE),
    },
}

_GENERAL_USAGES: tuple[str, ...] = (
    UpcomingCommand.USAGE,
    ClearCommand.USAGE,
    HelpCommand.USAGE,
    ExitCommand.USAGE,
)

ALL_USAGES: tuple[str, ...] = tuple(
    usage for verbs in _TYPED.values() for _, usage in verbs.values()
) + _GENERAL_USAGES


class CommandParser:
    """Parses user input lines into commands.

    The parser is stateless; one instance can be shared for a whole
    session.
    """

    def parse(self, text: str) -> Command:
        """Parse one line of input.

        Raises
        ------
        ParseError
            If the command word is unknown or an argument is missing or
            invalid.
        """
        stripped = text.strip()
        if not stripped:
            raise ParseError(MESSAGE_INVALID_COMMAND_FORMAT, HelpCommand.USAGE)
        word, _, rest = stripped.partition(" ")
        logger.debug("Parsing command word %r", word)

        if word in _TYPED:
            return self._parse_typed(word, rest.strip())
        if word == UpcomingCommand.COMMAND_WORD:
            return _upcoming(rest)
        if word == ClearCommand.COMMAND_WORD:
            return ClearCommand()
        if word == HelpCommand.COMMAND_WORD:
            return HelpCommand(ALL_USAGES)
        if word == ExitCommand.COMMAND_WORD:
            return ExitCommand()
        raise ParseError(MESSAGE_UNKNOWN_COMMAND)

    def _parse_typed(self, entity_type: str, text: str) -> Command:
        verbs = _TYPED[entity_type]
        verb, _, rest = text.partition(" ")
        if verb not in verbs:
            usages = "\n".join(usage for _, usage in verbs.values())
            if not verb:
                raise ParseError(MESSAGE_INVALID_COMMAND_FORMAT, usages)
            raise ParseError(MESSAGE_UNKNOWN_COMMAND, usages)
        parse_args, _ = verbs[verb]
        return parse_args(rest)
