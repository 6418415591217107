"""Model façade used by the command and presentation layers.

``ModelManager`` owns one ``Track``, one ``FilteredView`` per entity
kind and the clock used by date-relative queries.  It forwards every
mutation to the Track unchanged and adds the derived queries the
commands need: upcoming lessons and tasks for a day, overdue and
future tasks, and per-module listings.

It also answers ``can_add_more_module``.  The module ceiling lives here
with the other cross-entity policy rather than inside the Track, so
``Track.add_module`` keeps succeeding past the limit and the decision
to refuse is made by the calling command.

Usage
-----
::

    from trackit.model import ModelManager

    model = ModelManager(track, today=lambda: date(2026, 10, 19))
    model.add_task(task)
    overdue = model.get_overdue_tasks()
"""
from __future__ import annotations

import logging
from datetime import date, timedelta

from trackit.config import Config
from trackit.model.entities import Contact, Lesson, LessonType, Module, Task
from trackit.model.fields import Code, Tag
from trackit.model.predicates import (
    SHOW_ALL,
    Clock,
    ContactHasTag,
    LessonHasCode,
    LessonOnWeekday,
    Predicate,
    TaskAfterDate,
    TaskHasCode,
    TaskIsOverdue,
    TaskOnDate,
    all_of,
)
from trackit.model.track import Track
from trackit.model.views import FilteredView

logger = logging.getLogger(__name__)

FUTURE_TASK_HORIZON = timedelta(weeks=1)


class ModelManager:
    """In-memory model of the application data.

    Parameters
    ----------
    track:
        Initial data, copied into a Track owned by the manager.
        Defaults to an empty Track.
    config:
        Application settings; only ``module_limit`` is read here.
    today:
        Zero-argument callable returning the current date.  Defaults to
        ``date.today``; tests pass a fixed clock.
    """

    def __init__(
        self,
        track: Track | None = None,
        config: Config | None = None,
        today: Clock = date.today,
    ) -> None:
        self._track = Track(track) if track is not None else Track()
        self._config = config if config is not None else Config()
        self._today = today
        self._contacts: FilteredView[Contact] = FilteredView(self._track.contact_list)
        self._modules: FilteredView[Module] = FilteredView(self._track.module_list)
        self._lessons: FilteredView[Lesson] = FilteredView(self._track.lesson_list)
        self._tasks: FilteredView[Task] = FilteredView(self._track.task_list)
        logger.debug("Initialised model with %r and %r", self._track, self._config)

    # ------------------------------------------------------------------
    # Track and settings
    # ------------------------------------------------------------------

    @property
    def track(self) -> Track:
        return self._track

    @property
    def config(self) -> Config:
        return self._config

    def today(self) -> date:
        return self._today()

    def set_track(self, track: Track) -> None:
        """Replace all data with the contents of ``track``.

        Raises
        ------
        InconsistentSnapshotError
            If ``track`` holds same-kind duplicates.
        """
        self._track.reset_data(track)

    # ------------------------------------------------------------------
    # Contacts
    # ------------------------------------------------------------------

    def has_contact(self, contact: Contact) -> bool:
        return self._track.has_contact(contact)

    def add_contact(self, contact: Contact) -> None:
        self._track.add_contact(contact)

    def delete_contact(self, contact: Contact) -> None:
        self._track.remove_contact(contact)

    def set_contact(self, target: Contact, edited: Contact) -> None:
        self._track.set_contact(target, edited)

    @property
    def filtered_contacts(self) -> FilteredView[Contact]:
        return self._contacts

    def update_filtered_contact_list(self, predicate: Predicate[Contact]) -> None:
        self._contacts.update_filter(predicate)

    def get_all_contacts(self) -> FilteredView[Contact]:
        self._contacts.update_filter(SHOW_ALL)
        return self._contacts

    def get_module_contacts(self, code: Code) -> FilteredView[Contact]:
        """Show the contacts tagged with the module code."""
        self._contacts.update_filter(ContactHasTag(Tag(code.value)))
        return self._contacts

    # ------------------------------------------------------------------
    # Modules
    # ------------------------------------------------------------------

    def has_module(self, module: Module) -> bool:
        return self._track.has_module(module)

    def has_module_code(self, code: Code) -> bool:
        return self._track.has_module_code(code)

    def get_module(self, code: Code) -> Module | None:
        return self._track.get_module(code)

    def add_module(self, module: Module) -> None:
        self._track.add_module(module)

    def delete_module(self, module: Module) -> None:
        self._track.remove_module(module)

    def set_module(self, target: Module, edited: Module) -> None:
        self._track.set_module(target, edited)

    def can_add_more_module(self) -> bool:
        """Return True while the module count is below ``config.module_limit``."""
        return len(self._track.modules) < self._config.module_limit

    @property
    def filtered_modules(self) -> FilteredView[Module]:
        return self._modules

    def update_filtered_module_list(self, predicate: Predicate[Module]) -> None:
        self._modules.update_filter(predicate)

    # ------------------------------------------------------------------
    # Lessons
    # ------------------------------------------------------------------

    def has_lesson(self, lesson: Lesson) -> bool:
        return self._track.has_lesson(lesson)

    def get_lesson(self, code: Code, lesson_type: LessonType) -> Lesson | None:
        return self._track.get_lesson(code, lesson_type)

    def add_lesson(self, lesson: Lesson) -> None:
        self._track.add_lesson(lesson)

    def delete_lesson(self, lesson: Lesson) -> None:
        self._track.remove_lesson(lesson)

    def set_lesson(self, target: Lesson, edited: Lesson) -> None:
        self._track.set_lesson(target, edited)

    @property
    def filtered_lessons(self) -> FilteredView[Lesson]:
        return self._lessons

    def update_filtered_lesson_list(self, predicate: Predicate[Lesson]) -> None:
        self._lessons.update_filter(predicate)

    def get_day_upcoming_lessons(self, day: date) -> FilteredView[Lesson]:
        """Show the lessons held on the weekday of ``day``, in start-time order.

        Lessons are re-sorted first so that the result is chronological.
        """
        self._track.sort_lessons()
        self._lessons.update_filter(LessonOnWeekday.for_date(day))
        return self._lessons

    def get_module_lessons(self, code: Code) -> FilteredView[Lesson]:
        self._lessons.update_filter(LessonHasCode(code))
        return self._lessons

    # ------------------------------------------------------------------
    # Tasks
    # ------------------------------------------------------------------

    def has_task(self, task: Task) -> bool:
        return self._track.has_task(task)

    def add_task(self, task: Task) -> None:
        self._track.add_task(task)

    def delete_task(self, task: Task) -> None:
        self._track.remove_task(task)

    def set_task(self, target: Task, edited: Task) -> None:
        self._track.set_task(target, edited)

    @property
    def filtered_tasks(self) -> FilteredView[Task]:
        return self._tasks

    def update_filtered_task_list(self, predicate: Predicate[Task]) -> None:
        self._tasks.update_filter(predicate)

    def get_overdue_tasks(self) -> FilteredView[Task]:
        """Show tasks due strictly before today.

        The predicate reads the clock on every evaluation, so the view
        stays correct across midnight without being refreshed.
        """
        self._tasks.update_filter(all_of(SHOW_ALL, TaskIsOverdue(self._today)))
        return self._tasks

    def get_future_tasks(self) -> FilteredView[Task]:
        """Show tasks due more than a week after today."""
        self._tasks.update_filter(all_of(SHOW_ALL, TaskAfterDate(self.today() + FUTURE_TASK_HORIZON)))
        return self._tasks

    def get_day_upcoming_tasks(self, day: date) -> FilteredView[Task]:
        self._tasks.update_filter(all_of(SHOW_ALL, TaskOnDate(day)))
        return self._tasks

    def get_module_tasks(self, code: Code) -> FilteredView[Task]:
        self._tasks.update_filter(TaskHasCode(code))
        return self._tasks

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------

    def show_all(self) -> None:
        for view in (self._contacts, self._modules, self._lessons, self._tasks):
            view.update_filter(SHOW_ALL)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ModelManager):
            return NotImplemented
        return (
            self._track == other._track
            and self._config == other._config
            and self._contacts == other._contacts
            and self._modules == other._modules
            and self._lessons == other._lessons
            and self._tasks == other._tasks
        )

    __hash__ = None  # type: ignore[assignment]
