"""Initial schema for FormForge

Revision ID: 20261019_000000
Revises: None
Create Date: 2026-10-19 00:00:00.000000

Creates the organization, user, authentication (refresh tokens and email
verification codes), form, form element and submission tables.

Revision format: YYYYMMDD_HHMMSS_description

"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "20261019_000000"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

USER_ROLE = sa.Enum("ADMIN", "ORG_ADMIN", "EDITOR", "VIEWER", name="userrole")
ELEMENT_TYPE = sa.Enum(
    "TEXT_INPUT",
    "NUMBER_INPUT",
    "EMAIL_INPUT",
    "TEXTAREA",
    "PICKLIST",
    "MULTI_PICKLIST",
    "DATE_PICKER",
    "CHECKBOX",
    "RADIO_GROUP",
    "FILE_UPLOAD",
    "SIGNATURE",
    "EMAIL_VERIFY",
    name="elementtype",
)
SUBMISSION_STATUS = sa.Enum("PENDING", "PROCESSED", "FAILED", "SPAM", name="submissionstatus")


def upgrade() -> None:
    """Create all tables."""

    op.create_table(
        "ff_organizations",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("domain", sa.String(255), nullable=True),
        sa.Column("settings", sa.JSON(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_ff_organizations_domain", "ff_organizations", ["domain"], unique=True)

    op.create_table(
        "ff_users",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("first_name", sa.String(50), nullable=False),
        sa.Column("last_name", sa.String(50), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("role", USER_ROLE, nullable=False),
        sa.Column("organization_id", sa.String(36), sa.ForeignKey("ff_organizations.id"), nullable=True),
        sa.Column("is_email_verified", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_ff_users_email", "ff_users", ["email"], unique=True)
    op.create_index("ix_ff_users_organization_id", "ff_users", ["organization_id"])

    op.create_table(
        "ff_refresh_tokens",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("token", sa.Text(), nullable=False),
        sa.Column("user_id", sa.String(36), sa.ForeignKey("ff_users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("expires_at", sa.DateTime(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_ff_refresh_tokens_token", "ff_refresh_tokens", ["token"], unique=True)
    op.create_index("ix_ff_refresh_tokens_user_id", "ff_refresh_tokens", ["user_id"])
    op.create_index("ix_ff_refresh_tokens_expires_at", "ff_refresh_tokens", ["expires_at"])

    op.create_table(
        "ff_email_verifications",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("code", sa.String(6), nullable=False),
        sa.Column("expires_at", sa.DateTime(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email", "code", name="uq_ff_email_verifications_email_code"),
    )
    op.create_index("ix_ff_email_verifications_email", "ff_email_verifications", ["email"])

    op.create_table(
        "ff_forms",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("description", sa.String(500), nullable=True),
        sa.Column("settings", sa.JSON(), nullable=False),
        sa.Column("organization_id", sa.String(36), sa.ForeignKey("ff_organizations.id"), nullable=False),
        sa.Column("created_by", sa.String(36), sa.ForeignKey("ff_users.id"), nullable=False),
        sa.Column("is_published", sa.Boolean(), nullable=False),
        sa.Column("published_at", sa.DateTime(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_ff_forms_organization_id", "ff_forms", ["organization_id"])
    op.create_index("ix_ff_forms_created_by", "ff_forms", ["created_by"])
    op.create_index("ix_ff_forms_created_at", "ff_forms", ["created_at"])

    op.create_table(
        "ff_form_elements",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("form_id", sa.String(36), sa.ForeignKey("ff_forms.id", ondelete="CASCADE"), nullable=False),
        sa.Column("type", ELEMENT_TYPE, nullable=False),
        sa.Column("position", sa.JSON(), nullable=False),
        sa.Column("properties", sa.JSON(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_ff_form_elements_form_id", "ff_form_elements", ["form_id"])

    op.create_table(
        "ff_submissions",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("form_id", sa.String(36), sa.ForeignKey("ff_forms.id", ondelete="CASCADE"), nullable=False),
        sa.Column("data", sa.JSON(), nullable=False),
        sa.Column("submitted_by", sa.String(36), sa.ForeignKey("ff_users.id"), nullable=True),
        sa.Column("submitted_at", sa.DateTime(), nullable=False),
        sa.Column("ip_address", sa.String(45), nullable=False),
        sa.Column("user_agent", sa.String(512), nullable=False),
        sa.Column("status", SUBMISSION_STATUS, nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_ff_submissions_form_id", "ff_submissions", ["form_id"])
    op.create_index("ix_ff_submissions_submitted_at", "ff_submissions", ["submitted_at"])


def downgrade() -> None:
    """Drop all tables in reverse dependency order."""
    op.drop_table("ff_submissions")
    op.drop_table("ff_form_elements")
    op.drop_table("ff_forms")
    op.drop_table("ff_email_verifications")
    op.drop_table("ff_refresh_tokens")
    op.drop_table("ff_users")
    op.drop_table("ff_organizations")

    bind = op.get_bind()
    SUBMISSION_STATUS.drop(bind, checkfirst=True)
    ELEMENT_TYPE.drop(bind, checkfirst=True)
    USER_ROLE.drop(bind, checkfirst=True)
