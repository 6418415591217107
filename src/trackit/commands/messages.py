"""User-facing messages shared by several commands."""
from __future__ import annotations

MESSAGE_NOT_EDITED = "At least one field to edit must be provided."

MESSAGE_INVALID_CONTACT_INDEX = "The contact index provided is invalid"
MESSAGE_INVALID_TASK_INDEX = "The task index provided is invalid"

MESSAGE_MODULE_DOES_NOT_EXIST = "The module does not exist"
MESSAGE_LESSON_DOES_NOT_EXIST = "The lesson does not exist"

MESSAGE_DUPLICATE_CONTACT = "This contact already exists"
MESSAGE_DUPLICATE_MODULE = "This module already exists"
MESSAGE_DUPLICATE_LESSON = "This lesson already exists"
MESSAGE_DUPLICATE_TASK = "This task already exists"

MESSAGE_MODULE_LIMIT_REACHED = "You can only track up to {limit} modules"
