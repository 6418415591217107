"""Unit tests for trackit.parser: tokenizer, field helpers and the
command parser.
"""
from __future__ import annotations

from datetime import date, time

import pytest

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
from trackit.model.entities import Contact, Lesson, LessonDateTime, LessonType, Module, Task, Weekday
from trackit.model.fields import Address, Code, Email, Name, Phone, Tag
from trackit.parser.errors import (
    MESSAGE_INVALID_COMMAND_FORMAT,
    MESSAGE_INVALID_INDEX,
    MESSAGE_UNKNOWN_COMMAND,
    ParseError,
)
from trackit.parser.fields import (
    MESSAGE_DATE_CONSTRAINTS,
    parse_code,
    parse_date,
    parse_index,
    parse_lesson_type,
    parse_tags,
)
from trackit.parser.parser import ALL_USAGES, CommandParser
from trackit.parser.tokenizer import PREFIX_DATE, PREFIX_NAME, PREFIX_TAG, tokenize


@pytest.fixture()
def parser() -> CommandParser:
    return CommandParser()


# ===========================================================================
# Tokenizer
# ===========================================================================


class TestTokenize:
    def test_preamble_and_values(self) -> None:
        args = tokenize(" 2 n/Assignment 1 d/20/11/2026", PREFIX_NAME, PREFIX_DATE)
        assert args.preamble == "2"
        assert args.get(PREFIX_NAME) == "Assignment 1"
        assert args.get(PREFIX_DATE) == "20/11/2026"

    def test_slashes_inside_values_are_kept(self) -> None:
        args = tokenize("n/Read ch1/ch2 d/01/02/2026", PREFIX_NAME, PREFIX_DATE)
        assert args.get(PREFIX_NAME) == "Read ch1/ch2"

    def test_repeated_prefix(self) -> None:
        args = tokenize("t/friends t/CS2103T", PREFIX_TAG)
        assert args.get_all(PREFIX_TAG) == ["friends", "CS2103T"]
        assert args.get(PREFIX_TAG) == "CS2103T"

    def test_missing_prefix(self) -> None:
        args = tokenize("n/Only name", PREFIX_NAME, PREFIX_DATE)
        assert not args.has(PREFIX_DATE)
        assert args.get(PREFIX_DATE) is None
        assert args.get_all(PREFIX_DATE) == []
        assert not args.has_all(PREFIX_NAME, PREFIX_DATE)

    def test_unrecognised_prefix_stays_in_value(self) -> None:
        args = tokenize("n/Alice p/123", PREFIX_NAME)
        assert args.get(PREFIX_NAME) == "Alice p/123"


# ===========================================================================
# Field helpers
# ===========================================================================


class TestFieldHelpers:
    @pytest.mark.parametrize("raw, expected", [("1", 0), (" 3 ", 2), ("10", 9)])
    def test_parse_index(self, raw: str, expected: int) -> None:
        assert parse_index(raw) == expected

    @pytest.mark.parametrize("raw", ["", "0", "-1", "a", "1 2", "+1", "\u00b2", "\u0663"])
    def test_parse_index_invalid(self, raw: str) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_index(raw)
        assert exc_info.value.message == MESSAGE_INVALID_INDEX

    def test_parse_code_uppercases(self) -> None:
        assert parse_code(" cs2103t ") == Code("CS2103T")

    def test_parse_code_invalid(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_code("CS21")
        assert exc_info.value.message == Code.MESSAGE_CONSTRAINTS

    def test_parse_date(self) -> None:
        assert parse_date("20/11/2026") == date(2026, 11, 20)

    @pytest.mark.parametrize("raw", ["2026-11-20", "31/02/2026", "20/13/2026", ""])
    def test_parse_date_invalid(self, raw: str) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_date(raw)
        assert exc_info.value.message == MESSAGE_DATE_CONSTRAINTS

    def test_parse_lesson_type_ignores_case(self) -> None:
        assert parse_lesson_type("Lecture") is LessonType.LECTURE

    def test_parse_tags_deduplicates(self) -> None:
        assert parse_tags(["a", "a", "b"]) == frozenset({Tag("a"), Tag("b")})


# ===========================================================================
# Command parser: general
# ===========================================================================


class TestGeneralCommands:
    def test_unknown_word(self, parser: CommandParser) -> None:
        with pytest.raises(ParseError) as exc_info:
            parser.parse("launch rockets")
        assert exc_info.value.message == MESSAGE_UNKNOWN_COMMAND

    def test_blank_input(self, parser: CommandParser) -> None:
        with pytest.raises(ParseError) as exc_info:
            parser.parse("   ")
        assert exc_info.value.message == MESSAGE_INVALID_COMMAND_FORMAT

    def test_simple_words(self, parser: CommandParser) -> None:
        assert parser.parse("clear") == ClearCommand()
        assert parser.parse("exit") == ExitCommand()
        assert parser.parse(" help ") == HelpCommand(ALL_USAGES)

    def test_upcoming(self, parser: CommandParser) -> None:
        assert parser.parse("upcoming") == UpcomingCommand()
        assert parser.parse("upcoming d/20/11/2026") == UpcomingCommand(date(2026, 11, 20))

    def test_upcoming_rejects_preamble(self, parser: CommandParser) -> None:
        with pytest.raises(ParseError) as exc_info:
            parser.parse("upcoming tomorrow")
        assert exc_info.value.usage == UpcomingCommand.USAGE

    def test_type_without_verb(self, parser: CommandParser) -> None:
        with pytest.raises(ParseError) as exc_info:
            parser.parse("T")
        assert exc_info.value.message == MESSAGE_INVALID_COMMAND_FORMAT
        assert AddTaskCommand.USAGE in str(exc_info.value)

    def test_unknown_verb(self, parser: CommandParser) -> None:
        with pytest.raises(ParseError) as exc_info:
            parser.parse("M rename CS2103T")
        assert exc_info.value.message == MESSAGE_UNKNOWN_COMMAND

    def test_type_is_case_sensitive(self, parser: CommandParser) -> None:
        with pytest.raises(ParseError):
            parser.parse("t list")

    def test_every_usage_listed_once(self) -> None:
        assert len(ALL_USAGES) == len(set(ALL_USAGES)) == 23


# ===========================================================================
# Command parser: contacts
# ===========================================================================


class TestContactCommands:
    def test_add(self, parser: CommandParser) -> None:
        command = parser.parse(
            "C add n/John Doe p/98765432 e/johnd@example.com a/311, Clementi Ave 2, #02-25 "
            "t/friends t/CS2103T"
        )
        expected = Contact(
            Name("John Doe"),
            Phone("98765432"),
            Email("johnd@example.com"),
            Address("311, Clementi Ave 2, #02-25"),
            frozenset({Tag("friends"), Tag("CS2103T")}),
        )
        assert command == AddContactCommand(expected)

    def test_add_missing_field(self, parser: CommandParser) -> None:
        with pytest.raises(ParseError) as exc_info:
            parser.parse("C add n/John Doe p/98765432 e/johnd@example.com")
        assert exc_info.value.message == MESSAGE_INVALID_COMMAND_FORMAT
        assert exc_info.value.usage == AddContactCommand.USAGE

    def test_add_invalid_field(self, parser: CommandParser) -> None:
        with pytest.raises(ParseError) as exc_info:
            parser.parse("C add n/John Doe p/phone e/johnd@example.com a/Somewhere")
        assert exc_info.value.message == Phone.MESSAGE_CONSTRAINTS

    def test_edit(self, parser: CommandParser) -> None:
        command = parser.parse("C edit 2 p/91234567 e/new@example.com")
        assert command == EditContactCommand(1, ContactEdit(phone=Phone("91234567"), email=Email("new@example.com")))

    def test_edit_empty_tag_clears(self, parser: CommandParser) -> None:
        command = parser.parse("C edit 1 t/")
        assert command == EditContactCommand(0, ContactEdit(tags=frozenset()))

    def test_edit_bad_index(self, parser: CommandParser) -> None:
        with pytest.raises(ParseError) as exc_info:
            parser.parse("C edit zero n/Name")
        assert exc_info.value.message == MESSAGE_INVALID_INDEX
        assert exc_info.value.usage == EditContactCommand.USAGE

    def test_delete_and_list(self, parser: CommandParser) -> None:
        assert parser.parse("C delete 3") == DeleteContactCommand(2)
        assert parser.parse("C list") == ListContactCommand()
        assert parser.parse("C list t/friends") == ListContactCommand(Tag("friends"))


# ===========================================================================
# Command parser: modules
# ===========================================================================


class TestModuleCommands:
    def test_add(self, parser: CommandParser) -> None:
        command = parser.parse("M add m/cs1231s n/Discrete Structures r/Proofs")
        assert command == AddModuleCommand(Module(Code("CS1231S"), Name("Discrete Structures"), "Proofs"))

    def test_add_without_description(self, parser: CommandParser) -> None:
        command = parser.parse("M add m/CS1231S n/Discrete Structures")
        assert command == AddModuleCommand(Module(Code("CS1231S"), Name("Discrete Structures")))

    def test_add_missing_code(self, parser: CommandParser) -> None:
        with pytest.raises(ParseError):
            parser.parse("M add n/Discrete Structures")

    def test_edit(self, parser: CommandParser) -> None:
        command = parser.parse("M edit CS1231S m/CS1231 n/Discrete Maths")
        assert command == EditModuleCommand(
            Code("CS1231S"), ModuleEdit(code=Code("CS1231"), name=Name("Discrete Maths"))
        )

    def test_edit_needs_code(self, parser: CommandParser) -> None:
        with pytest.raises(ParseError) as exc_info:
            parser.parse("M edit n/Discrete Maths")
        assert exc_info.value.usage == EditModuleCommand.USAGE

    def test_delete_view_list(self, parser: CommandParser) -> None:
        assert parser.parse("M delete CS2103T") == DeleteModuleCommand(Code("CS2103T"))
        assert parser.parse("M view cs2103t") == ViewModuleCommand(Code("CS2103T"))
        assert parser.parse("M list") == ListModuleCommand()

    def test_list_rejects_arguments(self, parser: CommandParser) -> None:
        with pytest.raises(ParseError) as exc_info:
            parser.parse("M list junk")
        assert exc_info.value.message == MESSAGE_INVALID_COMMAND_FORMAT
        assert exc_info.value.usage == ListModuleCommand.USAGE


# ===========================================================================
# Command parser: lessons
# ===========================================================================


class TestLessonCommands:
    def test_add(self, parser: CommandParser) -> None:
        command = parser.parse("L add m/CS2103T t/lecture d/Fri 16:00-18:00 a/I3-AUD")
        expected = Lesson(
            Code("CS2103T"),
            LessonType.LECTURE,
            LessonDateTime(Weekday.FRI, time(16, 0), time(18, 0)),
            Address("I3-AUD"),
        )
        assert command == AddLessonCommand(expected)

    def test_add_bad_type(self, parser: CommandParser) -> None:
        with pytest.raises(ParseError):
            parser.parse("L add m/CS2103T t/seminar d/Fri 16:00-18:00 a/I3-AUD")

    def test_add_bad_slot(self, parser: CommandParser) -> None:
        with pytest.raises(ParseError) as exc_info:
            parser.parse("L add m/CS2103T t/lecture d/Fri 18:00-16:00 a/I3-AUD")
        assert exc_info.value.message == LessonDateTime.MESSAGE_CONSTRAINTS

    def test_edit(self, parser: CommandParser) -> None:
        command = parser.parse("L edit m/CS3233 t/lecture d/Mon 17:45-21:00")
        assert command == EditLessonCommand(
            Code("CS3233"),
            LessonType.LECTURE,
            LessonEdit(date=LessonDateTime.parse("Mon 17:45-21:00")),
        )

    def test_delete_and_list(self, parser: CommandParser) -> None:
        assert parser.parse("L delete m/CS2103T t/tutorial") == DeleteLessonCommand(
            Code("CS2103T"), LessonType.TUTORIAL
        )
        assert parser.parse("L list") == ListLessonCommand()
        assert parser.parse("L list m/CS2103T") == ListLessonCommand(Code("CS2103T"))

    def test_delete_needs_type(self, parser: CommandParser) -> None:
        with pytest.raises(ParseError):
            parser.parse("L delete m/CS2103T")


# ===========================================================================
# Command parser: tasks
# ===========================================================================


class TestTaskCommands:
    def test_add(self, parser: CommandParser) -> None:
        command = parser.parse("T add n/Assignment 1 d/20/11/2026 m/CS2103T r/Focus on Chapters 1-3")
        expected = Task(Name("Assignment 1"), date(2026, 11, 20), Code("CS2103T"), "Focus on Chapters 1-3")
        assert command == AddTaskCommand(expected)

    def test_add_minimal(self, parser: CommandParser) -> None:
        command = parser.parse("T add n/Buy stationery d/01/11/2026")
        assert command == AddTaskCommand(Task(Name("Buy stationery"), date(2026, 11, 1)))

    def test_add_last_value_wins(self, parser: CommandParser) -> None:
        command = parser.parse("T add n/First n/Second d/01/11/2026")
        assert command == AddTaskCommand(Task(Name("Second"), date(2026, 11, 1)))

    def test_add_bad_date(self, parser: CommandParser) -> None:
        with pytest.raises(ParseError) as exc_info:
            parser.parse("T add n/Assignment 1 d/2026-11-20")
        assert exc_info.value.message == MESSAGE_DATE_CONSTRAINTS

    def test_add_with_preamble_rejected(self, parser: CommandParser) -> None:
        with pytest.raises(ParseError):
            parser.parse("T add 1 n/Assignment 1 d/20/11/2026")

    def test_edit(self, parser: CommandParser) -> None:
        command = parser.parse("T edit 1 d/21/11/2026 r/")
        assert command == EditTaskCommand(0, TaskEdit(date=date(2026, 11, 21), remark=""))

    def test_other_verbs(self, parser: CommandParser) -> None:
        assert parser.parse("T delete 1") == DeleteTaskCommand(0)
        assert parser.parse("T list m/cs2103t") == ListTaskCommand(Code("CS2103T"))
        assert parser.parse("T overdue") == OverdueTaskCommand()
        assert parser.parse("T future") == FutureTaskCommand()

    @pytest.mark.parametrize("raw", ["\u00b2", "\u0663", "\uff11"])
    def test_non_ascii_digits_are_not_indices(self, parser: CommandParser, raw: str) -> None:
        with pytest.raises(ParseError):
            parser.parse(f"T delete {raw}")
