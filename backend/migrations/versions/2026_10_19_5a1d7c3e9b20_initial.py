"""initial

Revision ID: 5a1d7c3e9b20
Revises:
Create Date: 2026-10-19 10:12:44.318502

"""

from alembic import op
import sqlalchemy as sa
import sqlmodel

from models import UtcAwareDateTime

# revision identifiers, used by Alembic.
revision = "5a1d7c3e9b20"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("email", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("username", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column(
            "username_lower", sqlmodel.sql.sqltypes.AutoString(), nullable=False
        ),
        sa.Column("password_hash", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("country", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("city", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("image_url", sqlmodel.sql.sqltypes.AutoString(), nullable=True),
        sa.Column("first_name", sqlmodel.sql.sqltypes.AutoString(), nullable=True),
        sa.Column("last_name", sqlmodel.sql.sqltypes.AutoString(), nullable=True),
        sa.Column("is_verified", sa.Boolean(), nullable=False),
        sa.Column("otp", sqlmodel.sql.sqltypes.AutoString(), nullable=True),
        sa.Column("otp_expires_at", UtcAwareDateTime(timezone=True), nullable=True),
        sa.Column("join_date", UtcAwareDateTime(timezone=True), nullable=False),
        sa.Column("updated_at", UtcAwareDateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("email"),
        sa.UniqueConstraint("username"),
    )
    with op.batch_alter_table("users", schema=None) as batch_op:
        batch_op.create_index(
            batch_op.f("ix_users_username_lower"), ["username_lower"], unique=True
        )

    op.create_table(
        "friends",
        sa.Column(
            "requester_email", sqlmodel.sql.sqltypes.AutoString(), nullable=False
        ),
        sa.Column(
            "recipient_email", sqlmodel.sql.sqltypes.AutoString(), nullable=False
        ),
        sa.Column(
            "status",
            sa.Enum("pending", "accepted", name="friendstatus"),
            nullable=False,
        ),
        sa.Column("requested_at", UtcAwareDateTime(timezone=True), nullable=True),
        sa.Column("responded_at", UtcAwareDateTime(timezone=True), nullable=True),
        sa.CheckConstraint(
            "requester_email <> recipient_email", name="ck_friend_not_self"
        ),
        sa.ForeignKeyConstraint(["recipient_email"], ["users.email"]),
        sa.ForeignKeyConstraint(["requester_email"], ["users.email"]),
        sa.PrimaryKeyConstraint("requester_email", "recipient_email"),
    )
    with op.batch_alter_table("friends", schema=None) as batch_op:
        batch_op.create_index(
            batch_op.f("ix_friends_recipient_email"), ["recipient_email"], unique=False
        )
        batch_op.create_index(batch_op.f("ix_friends_status"), ["status"], unique=False)

    op.create_table(
        "journals",
        sa.Column("id", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("email", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("date", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("content", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("created_at", UtcAwareDateTime(timezone=True), nullable=False),
        sa.Column("updated_at", UtcAwareDateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(["email"], ["users.email"]),
        sa.PrimaryKeyConstraint("id"),
    )
    with op.batch_alter_table("journals", schema=None) as batch_op:
        batch_op.create_index(batch_op.f("ix_journals_email"), ["email"], unique=False)

    op.create_table(
        "events",
        sa.Column("id", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("email", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("title", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("description", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("date", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("time", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("start_time", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("end_time", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column(
            "street_address", sqlmodel.sql.sqltypes.AutoString(), nullable=False
        ),
        sa.Column("postal_number", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("status", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column(
            "event_type",
            sa.Enum("public", "private", name="eventtype"),
            nullable=False,
        ),
        sa.Column("created_at", UtcAwareDateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["email"], ["users.email"]),
        sa.PrimaryKeyConstraint("id"),
    )
    with op.batch_alter_table("events", schema=None) as batch_op:
        batch_op.create_index(batch_op.f("ix_events_date"), ["date"], unique=False)
        batch_op.create_index(batch_op.f("ix_events_email"), ["email"], unique=False)


def downgrade() -> None:
    with op.batch_alter_table("events", schema=None) as batch_op:
        batch_op.drop_index(batch_op.f("ix_events_email"))
        batch_op.drop_index(batch_op.f("ix_events_date"))
    op.drop_table("events")

    with op.batch_alter_table("journals", schema=None) as batch_op:
        batch_op.drop_index(batch_op.f("ix_journals_email"))
    op.drop_table("journals")

    with op.batch_alter_table("friends", schema=None) as batch_op:
        batch_op.drop_index(batch_op.f("ix_friends_status"))
        batch_op.drop_index(batch_op.f("ix_friends_recipient_email"))
    op.drop_table("friends")

    with op.batch_alter_table("users", schema=None) as batch_op:
        batch_op.drop_index(batch_op.f("ix_users_username_lower"))
    op.drop_table("users")
