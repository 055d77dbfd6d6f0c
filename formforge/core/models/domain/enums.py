"""
Domain enumerations shared by entities, services and API models.
"""

from __future__ import annotations

from enum import Enum


class UserRole(str, Enum):
    """Role assigned to a user account."""

    ADMIN = "admin"
    ORG_ADMIN = "org_admin"
    EDITOR = "editor"
    VIEWER = "viewer"


class ElementType(str, Enum):
    """Kinds of element that can be placed on a form."""

    TEXT_INPUT = "text_input"
    NUMBER_INPUT = "number_input"
    EMAIL_INPUT = "email_input"
    TEXTAREA = "textarea"
    PICKLIST = "picklist"
    MULTI_PICKLIST = "multi_picklist"
    DATE_PICKER = "date_picker"
    CHECKBOX = "checkbox"
    RADIO_GROUP = "radio_group"
    FILE_UPLOAD = "file_upload"
    SIGNATURE = "signature"
    EMAIL_VERIFY = "email_verify"


class SubmissionStatus(str, Enum):
    """Processing state of a form submission."""

    PENDING = "pending"
    PROCESSED = "processed"
    FAILED = "failed"
    SPAM = "spam"
