"""Contact commands: ``C add``, ``C edit``, ``C delete`` and ``C list``."""
from __future__ import annotations

from dataclasses import dataclass, replace

from trackit.commands.base import Command, CommandError, CommandResult, ResultSection, pick
from trackit.commands.messages import (
    MESSAGE_DUPLICATE_CONTACT,
    MESSAGE_INVALID_CONTACT_INDEX,
    MESSAGE_NOT_EDITED,
)
from trackit.model.entities import Contact
from trackit.model.fields import Address, Email, Name, Phone, Tag
from trackit.model.manager import ModelManager
from trackit.model.predicates import SHOW_ALL, ContactHasTag

TYPE = "C"


def _contacts_section(model: ModelManager) -> ResultSection:
    return ResultSection("Contacts", "contact", tuple(model.filtered_contacts))


class AddContactCommand(Command):
    COMMAND_WORD = "add"
    USAGE = (
        f"{TYPE} {COMMAND_WORD}: Adds a contact. "
        "Parameters: n/NAME p/PHONE e/EMAIL a/ADDRESS [t/TAG]...\n"
        f"Example: {TYPE} {COMMAND_WORD} n/John Doe p/98765432 e/johnd@example.com "
        "a/311, Clementi Ave 2, #02-25 t/CS2103T t/friends"
    )

    def __init__(self, contact: Contact) -> None:
        self.contact = contact

    def execute(self, model: ModelManager) -> CommandResult:
        if model.has_contact(self.contact):
            raise CommandError(MESSAGE_DUPLICATE_CONTACT)
        model.add_contact(self.contact)
        model.update_filtered_contact_list(SHOW_ALL)
        return CommandResult(
            f"New contact added: {self.contact}",
            mutated=True,
            sections=(_contacts_section(model),),
        )


@dataclass(frozen=True)
class ContactEdit:
    """Fields to change on a contact; ``None`` leaves a field as it is."""

    name: Name | None = None
    phone: Phone | None = None
    email: Email | None = None
    address: Address | None = None
    tags: frozenset[Tag] | None = None

    def is_any_field_edited(self) -> bool:
        return any(v is not None for v in (self.name, self.phone, self.email, self.address, self.tags))

    def apply(self, contact: Contact) -> Contact:
        return replace(
            contact,
            name=self.name or contact.name,
            phone=self.phone or contact.phone,
            email=self.email or contact.email,
            address=self.address or contact.address,
            tags=self.tags if self.tags is not None else contact.tags,
        )


class EditContactCommand(Command):
    COMMAND_WORD = "edit"
    USAGE = (
        f"{TYPE} {COMMAND_WORD}: Edits the contact at INDEX in the displayed list. "
        "An empty t/ removes all tags.\n"
        "Parameters: INDEX [n/NAME] [p/PHONE] [e/EMAIL] [a/ADDRESS] [t/TAG]...\n"
        f"Example: {TYPE} {COMMAND_WORD} 1 p/91234567 e/johndoe@example.com"
    )

    def __init__(self, index: int, edit: ContactEdit) -> None:
        self.index = index
        self.edit = edit

    def execute(self, model: ModelManager) -> CommandResult:
        if not self.edit.is_any_field_edited():
            raise CommandError(MESSAGE_NOT_EDITED)
        target = pick(model.filtered_contacts, self.index, MESSAGE_INVALID_CONTACT_INDEX)
        edited = self.edit.apply(target)
        if not target.is_same_contact(edited) and model.has_contact(edited):
            raise CommandError(MESSAGE_DUPLICATE_CONTACT)
        model.set_contact(target, edited)
        model.update_filtered_contact_list(SHOW_ALL)
        return CommandResult(
            f"Edited contact: {edited}",
            mutated=True,
            sections=(_contacts_section(model),),
        )


class DeleteContactCommand(Command):
    COMMAND_WORD = "delete"
    USAGE = (
        f"{TYPE} {COMMAND_WORD}: Deletes the contact at INDEX in the displayed list.\n"
        "Parameters: INDEX (must be a positive integer)\n"
        f"Example: {TYPE} {COMMAND_WORD} 1"
    )

    def __init__(self, index: int) -> None:
        self.index = index

    def execute(self, model: ModelManager) -> CommandResult:
        target = pick(model.filtered_contacts, self.index, MESSAGE_INVALID_CONTACT_INDEX)
        model.delete_contact(target)
        return CommandResult(
            f"Deleted contact: {target}",
            mutated=True,
            sections=(_contacts_section(model),),
        )


class ListContactCommand(Command):
    COMMAND_WORD = "list"
    USAGE = (
        f"{TYPE} {COMMAND_WORD}: Lists all contacts, or those carrying TAG.\n"
        "Parameters: [t/TAG]\n"
        f"Example: {TYPE} {COMMAND_WORD} t/CS2103T"
    )

    def __init__(self, tag: Tag | None = None) -> None:
        self.tag = tag

    def execute(self, model: ModelManager) -> CommandResult:
        if self.tag is None:
            model.update_filtered_contact_list(SHOW_ALL)
            feedback = "Listed all contacts"
        else:
            model.update_filtered_contact_list(ContactHasTag(self.tag))
            feedback = f"Listed contacts tagged {self.tag}"
        return CommandResult(feedback, sections=(_contacts_section(model),))
