"""Commands that are not tied to a single entity kind."""
from __future__ import annotations

from datetime import date

from trackit.commands.base import Command, CommandResult, ResultSection
from trackit.model.manager import ModelManager
from trackit.model.track import Track


class UpcomingCommand(Command):
    COMMAND_WORD = "upcoming"
    USAGE = (
        f"{COMMAND_WORD}: Shows the lessons and tasks of a day, today by default.\n"
        "Parameters: [d/DATE]\n"
        f"Example: {COMMAND_WORD} d/20/11/2026"
    )

    def __init__(self, day: date | None = None) -> None:
        self.day = day

    def execute(self, model: ModelManager) -> CommandResult:
        day = self.day if self.day is not None else model.today()
        lessons = tuple(model.get_day_upcoming_lessons(day))
        tasks = tuple(model.get_day_upcoming_tasks(day))
        return CommandResult(
            f"Upcoming on {day.strftime('%a %d/%m/%Y')}",
            sections=(
                ResultSection("Lessons", "lesson", lessons),
                ResultSection("Tasks due", "task", tasks),
            ),
        )


class ClearCommand(Command):
    COMMAND_WORD = "clear"
    USAGE = f"{COMMAND_WORD}: Deletes all contacts, modules, lessons and tasks."

    def execute(self, model: ModelManager) -> CommandResult:
        model.set_track(Track())
        model.show_all()
        return CommandResult("All data has been cleared!", mutated=True)


class HelpCommand(Command):
    COMMAND_WORD = "help"
    USAGE = f"{COMMAND_WORD}: Shows the usage of every command."

    def __init__(self, usages: tuple[str, ...] = ()) -> None:
        self.usages = usages

    def execute(self, model: ModelManager) -> CommandResult:
        return CommandResult("\n\n".join(self.usages) if self.usages else self.USAGE)


class ExitCommand(Command):
    COMMAND_WORD = "exit"
    USAGE = f"{COMMAND_WORD}: Exits the session."

    def execute(self, model: ModelManager) -> CommandResult:
        return CommandResult("Exiting as requested ...", should_exit=True)
