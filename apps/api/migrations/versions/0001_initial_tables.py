"""v1: character + employee + funtest

- One table per resource, UUID primary keys generated by the application.
- character.name has a plain index only: case-insensitive uniqueness is a
  service rule, not a DB constraint.
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa

revision = "0001_initial_tables"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    # --- character ---
    op.create_table(
        "character",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("class", sa.String(), nullable=False),  # Warrior|Mage|Rogue|Archer
        sa.Column("level", sa.Integer(), nullable=False),
        sa.Column("health", sa.Integer(), nullable=False),
        sa.Column("mana", sa.Integer(), nullable=False),
    )
    op.create_index("ix_character_name", "character", ["name"])

    # --- employee ---
    op.create_table(
        "employee",
        sa.Column("employee_id", sa.Uuid(), primary_key=True),
        sa.Column("first_name", sa.String(), nullable=False),
        sa.Column("last_name", sa.String(), nullable=False),
        sa.Column("email", sa.String(), nullable=False),
        sa.Column("phone", sa.String(), nullable=True),
        sa.Column("job_title", sa.String(), nullable=False),
        sa.Column("salary", sa.Integer(), nullable=False),
        sa.Column("hire_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    )

    # --- funtest ---
    op.create_table(
        "funtest",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("data", sa.String(), nullable=False),
    )


def downgrade() -> None:
    op.drop_table("funtest")
    op.drop_table("employee")
    op.drop_index("ix_character_name", table_name="character")
    op.drop_table("character")
