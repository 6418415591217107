"""The Track: aggregate owner of the contact, module, lesson and task lists.

All mutations of tracked data go through the ``Track``.  It delegates
uniqueness to one ``UniqueEntityList`` per entity kind and adds the
operations that span lists: wholesale reset and identity lookups.

The Track does *not* enforce that a task's or lesson's module code
refers to an existing module, and it does not bound the number of
modules.  Both are policy decisions made by the command layer, which
asks ``has_module_code`` and ``ModelManager.can_add_more_module``
before mutating.

The Track is single-threaded.  It performs no locking; a host that
touches one Track from several threads must serialize every call.
"""
from __future__ import annotations

import logging

from trackit.model.entities import Contact, Lesson, LessonType, Module, Task
from trackit.model.fields import Code
from trackit.model.unique_list import UniqueEntityList

logger = logging.getLogger(__name__)


class Track:
    """In-memory store of all tracked entities.

    Parameters
    ----------
    other:
        Optional Track whose data is copied into the new instance via
        ``reset_data``.
    """

    def __init__(self, other: "Track | None" = None) -> None:
        self._contacts: UniqueEntityList[Contact] = UniqueEntityList(Contact.is_same_contact, "Contact")
        self._modules: UniqueEntityList[Module] = UniqueEntityList(Module.is_same_module, "Module")
        self._lessons: UniqueEntityList[Lesson] = UniqueEntityList(Lesson.is_same_lesson, "Lesson")
        self._tasks: UniqueEntityList[Task] = UniqueEntityList(Task.is_same_task, "Task")
        if other is not None:
            self.reset_data(other)

    # ------------------------------------------------------------------
    # Whole-state operations
    # ------------------------------------------------------------------

    def reset_data(self, other: "Track") -> None:
        """Replace all four lists with the contents of ``other``.

        Every incoming list is checked before any list is swapped, so a
        failure leaves this Track untouched.

        Raises
        ------
        InconsistentSnapshotError
            If any list in ``other`` holds two same-kind entities.  This
            can only happen when ``other`` was assembled from untrusted
            data without going through the ``add_*`` methods.
        """
        pairs = (
            (self._contacts, list(other.contacts)),
            (self._modules, list(other.modules)),
            (self._lessons, list(other.lessons)),
            (self._tasks, list(other.tasks)),
        )
        for target, incoming in pairs:
            target.check_unique(incoming)
        for target, incoming in pairs:
            target.reset_to(incoming)
        logger.debug("Track reset: %s", self)

    @classmethod
    def from_entities(
        cls,
        contacts: list[Contact] | tuple[Contact, ...] = (),
        modules: list[Module] | tuple[Module, ...] = (),
        lessons: list[Lesson] | tuple[Lesson, ...] = (),
        tasks: list[Task] | tuple[Task, ...] = (),
    ) -> "Track":
        """Build a Track from raw entity sequences, rejecting duplicates.

        Raises
        ------
        InconsistentSnapshotError
            If any sequence contains two same-kind entities.
        """
        track = cls()
        track._contacts.reset_to(contacts)
        track._modules.reset_to(modules)
        track._lessons.reset_to(lessons)
        track._tasks.reset_to(tasks)
        return track

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------

    @property
    def contacts(self) -> tuple[Contact, ...]:
        return self._contacts.as_tuple()

    @property
    def modules(self) -> tuple[Module, ...]:
        return self._modules.as_tuple()

    @property
    def lessons(self) -> tuple[Lesson, ...]:
        return self._lessons.as_tuple()

    @property
    def tasks(self) -> tuple[Task, ...]:
        return self._tasks.as_tuple()

    # Backing lists, for read-only wrappers such as ``FilteredView``.
    # Mutating them directly bypasses the Track.

    @property
    def contact_list(self) -> UniqueEntityList[Contact]:
        return self._contacts

    @property
    def module_list(self) -> UniqueEntityList[Module]:
        return self._modules

    @property
    def lesson_list(self) -> UniqueEntityList[Lesson]:
        return self._lessons

    @property
    def task_list(self) -> UniqueEntityList[Task]:
        return self._tasks

    # ------------------------------------------------------------------
    # Contacts
    # ------------------------------------------------------------------

    def has_contact(self, contact: Contact) -> bool:
        return self._contacts.contains(contact)

    def add_contact(self, contact: Contact) -> None:
        self._contacts.add(contact)

    def remove_contact(self, contact: Contact) -> None:
        self._contacts.remove(contact)

    def set_contact(self, target: Contact, edited: Contact) -> None:
        self._contacts.replace(target, edited)

    # ------------------------------------------------------------------
    # Modules
    # ------------------------------------------------------------------

    def has_module(self, module: Module) -> bool:
        return self._modules.contains(module)

    def has_module_code(self, code: Code) -> bool:
        """Return True if a module with ``code`` is stored.  Pure read."""
        return self.get_module(code) is not None

    def get_module(self, code: Code) -> Module | None:
        return self._modules.find(lambda m: m.code == code)

    def add_module(self, module: Module) -> None:
        """Add ``module``.  No module ceiling is checked here."""
        self._modules.add(module)

    def remove_module(self, module: Module) -> None:
        """Remove ``module``.  Tasks and lessons referring to it are kept."""
        self._modules.remove(module)

    def set_module(self, target: Module, edited: Module) -> None:
        self._modules.replace(target, edited)

    # ------------------------------------------------------------------
    # Lessons
    # ------------------------------------------------------------------

    def has_lesson(self, lesson: Lesson) -> bool:
        return self._lessons.contains(lesson)

    def get_lesson(self, code: Code, lesson_type: LessonType) -> Lesson | None:
        return self._lessons.find(lambda lesson: lesson.identity_key == (code, lesson_type))

    def add_lesson(self, lesson: Lesson) -> None:
        self._lessons.add(lesson)

    def remove_lesson(self, lesson: Lesson) -> None:
        self._lessons.remove(lesson)

    def set_lesson(self, target: Lesson, edited: Lesson) -> None:
        self._lessons.replace(target, edited)

    def sort_lessons(self) -> None:
        """Order lessons by weekday, then start time."""
        self._lessons.sort(key=lambda lesson: lesson.date.sort_key)

    # ------------------------------------------------------------------
    # Tasks
    # ------------------------------------------------------------------

    def has_task(self, task: Task) -> bool:
        return self._tasks.contains(task)

    def add_task(self, task: Task) -> None:
        self._tasks.add(task)

    def remove_task(self, task: Task) -> None:
        self._tasks.remove(task)

    def set_task(self, target: Task, edited: Task) -> None:
        self._tasks.replace(target, edited)

    # ------------------------------------------------------------------
    # Dunder methods
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Track):
            return NotImplemented
        return (
            self.contacts == other.contacts
            and self.modules == other.modules
            and self.lessons == other.lessons
            and self.tasks == other.tasks
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Track({len(self._contacts)} contact(s), {len(self._modules)} module(s), "
            f"{len(self._lessons)} lesson(s), {len(self._tasks)} task(s))"
        )
