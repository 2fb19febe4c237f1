"""initial planning schema

Revision ID: 3c1f0a7d9b52
Revises:
Create Date: 2026-10-19 15:52:10.418203

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3c1f0a7d9b52'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps():
    return (
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
    )


def _fk_index(table: str, column: str) -> None:
    op.create_index(op.f(f"ix_{table}_{column}"), table, [column], unique=False)


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("username", sa.String(length=64), nullable=False),
        sa.Column("password", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=True),
        sa.Column("name", sa.String(length=255), nullable=True),
        sa.Column("role", sa.String(length=16), nullable=False),
        *_timestamps(),
        sa.CheckConstraint("role IN ('admin', 'management', 'staff')", name="ck_users_role"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("username"),
        sa.UniqueConstraint("email"),
    )
    op.create_table(
        "organizations",
        sa.Column("org_id", sa.Integer(), nullable=False),
        sa.Column("org_name", sa.String(length=255), nullable=False),
        sa.Column("vision", sa.Text(), nullable=True),
        sa.Column("mission", sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("org_id"),
    )
    op.create_table(
        "departments",
        sa.Column("department_id", sa.Integer(), nullable=False),
        sa.Column("department_name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("department_id"),
    )
    op.create_table(
        "risk_management_plans",
        sa.Column("risk_plan_id", sa.Integer(), nullable=False),
        sa.Column("plan_name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("year", sa.Integer(), nullable=True),
        sa.Column("status", sa.String(length=64), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("risk_plan_id"),
    )
    op.create_table(
        "strategy_plans",
        sa.Column("strategy_plan_id", sa.Integer(), nullable=False),
        sa.Column("org_id", sa.Integer(), nullable=True),
        sa.Column("plan_name", sa.String(length=255), nullable=False),
        sa.Column("start_date", sa.Date(), nullable=True),
        sa.Column("end_date", sa.Date(), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("status", sa.String(length=64), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["org_id"], ["organizations.org_id"]),
        sa.PrimaryKeyConstraint("strategy_plan_id"),
    )
    _fk_index("strategy_plans", "org_id")

    op.create_table(
        "strategic_goals",
        sa.Column("goal_id", sa.Integer(), nullable=False),
        sa.Column("strategy_plan_id", sa.Integer(), nullable=True),
        sa.Column("goal_description", sa.Text(), nullable=False),
        sa.Column("target_metric", sa.String(length=255), nullable=True),
        sa.Column("target_value", sa.String(length=255), nullable=True),
        sa.Column("deadline", sa.Date(), nullable=True),
        sa.Column("actual_value", sa.String(length=255), nullable=True),
        sa.Column("progress", sa.Integer(), server_default="0", nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(["strategy_plan_id"], ["strategy_plans.strategy_plan_id"]),
        sa.PrimaryKeyConstraint("goal_id"),
    )
    _fk_index("strategic_goals", "strategy_plan_id")

    # HR and digital development plans share one layout
    for table, pk in (("hr_dev_plans", "hr_plan_id"), ("digital_dev_plans", "digital_plan_id")):
        op.create_table(
            table,
            sa.Column(pk, sa.Integer(), nullable=False),
            sa.Column("strategy_plan_id", sa.Integer(), nullable=True),
            sa.Column("plan_name", sa.String(length=255), nullable=False),
            sa.Column("start_date", sa.Date(), nullable=True),
            sa.Column("end_date", sa.Date(), nullable=True),
            sa.Column("description", sa.Text(), nullable=True),
            sa.Column("status", sa.String(length=64), nullable=True),
            *_timestamps(),
            sa.ForeignKeyConstraint(["strategy_plan_id"], ["strategy_plans.strategy_plan_id"]),
            sa.PrimaryKeyConstraint(pk),
        )
        _fk_index(table, "strategy_plan_id")

    op.create_table(
        "hr_dev_initiatives",
        sa.Column("hr_initiative_id", sa.Integer(), nullable=False),
        sa.Column("hr_plan_id", sa.Integer(), nullable=True),
        sa.Column("initiative_name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("required_competencies", sa.Text(), nullable=True),
        sa.Column("training_resources", sa.Text(), nullable=True),
        sa.Column("budget", sa.Float(), nullable=True),
        sa.Column("responsible_person_id", sa.Integer(), nullable=True),
        sa.Column("status", sa.String(length=64), nullable=True),
        sa.Column("progress", sa.Integer(), server_default="0", nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(["hr_plan_id"], ["hr_dev_plans.hr_plan_id"]),
        sa.ForeignKeyConstraint(["responsible_person_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("hr_initiative_id"),
    )
    _fk_index("hr_dev_initiatives", "hr_plan_id")
    _fk_index("hr_dev_initiatives", "responsible_person_id")

    op.create_table(
        "digital_initiatives",
        sa.Column("digital_initiative_id", sa.Integer(), nullable=False),
        sa.Column("digital_plan_id", sa.Integer(), nullable=True),
        sa.Column("initiative_name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("technology_stack", sa.Text(), nullable=True),
        sa.Column("required_infrastructure", sa.Text(), nullable=True),
        sa.Column("budget", sa.Float(), nullable=True),
        sa.Column("responsible_person_id", sa.Integer(), nullable=True),
        sa.Column("status", sa.String(length=64), nullable=True),
        sa.Column("progress", sa.Integer(), server_default="0", nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(["digital_plan_id"], ["digital_dev_plans.digital_plan_id"]),
        sa.ForeignKeyConstraint(["responsible_person_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("digital_initiative_id"),
    )
    _fk_index("digital_initiatives", "digital_plan_id")
    _fk_index("digital_initiatives", "responsible_person_id")

    op.create_table(
        "action_plans",
        sa.Column("action_plan_id", sa.Integer(), nullable=False),
        sa.Column("strategy_plan_id", sa.Integer(), nullable=True),
        sa.Column("year", sa.Integer(), nullable=True),
        sa.Column("plan_name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("status", sa.String(length=64), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["strategy_plan_id"], ["strategy_plans.strategy_plan_id"]),
        sa.PrimaryKeyConstraint("action_plan_id"),
    )
    _fk_index("action_plans", "strategy_plan_id")

    op.create_table(
        "action_items",
        sa.Column("action_item_id", sa.Integer(), nullable=False),
        sa.Column("action_plan_id", sa.Integer(), nullable=True),
        sa.Column("goal_id", sa.Integer(), nullable=True),
        sa.Column("item_description", sa.Text(), nullable=False),
        sa.Column("responsible_department_id", sa.Integer(), nullable=True),
        sa.Column("responsible_person_id", sa.Integer(), nullable=True),
        sa.Column("start_date", sa.Date(), nullable=True),
        sa.Column("due_date", sa.Date(), nullable=True),
        sa.Column("kpi", sa.String(length=255), nullable=True),
        sa.Column("kpi_target", sa.String(length=255), nullable=True),
        sa.Column("kpi_actual", sa.String(length=255), nullable=True),
        sa.Column("budget", sa.Float(), nullable=True),
        sa.Column("status", sa.String(length=64), nullable=True),
        sa.Column("progress", sa.Integer(), server_default="0", nullable=False),
        sa.Column("progress_update", sa.Text(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["action_plan_id"], ["action_plans.action_plan_id"]),
        sa.ForeignKeyConstraint(["goal_id"], ["strategic_goals.goal_id"]),
        sa.ForeignKeyConstraint(["responsible_department_id"], ["departments.department_id"]),
        sa.ForeignKeyConstraint(["responsible_person_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("action_item_id"),
    )
    for column in ("action_plan_id", "goal_id", "responsible_department_id", "responsible_person_id"):
        _fk_index("action_items", column)

    op.create_table(
        "risks",
        sa.Column("risk_id", sa.Integer(), nullable=False),
        sa.Column("risk_plan_id", sa.Integer(), nullable=True),
        sa.Column("strategy_plan_id", sa.Integer(), nullable=True),
        sa.Column("action_item_id", sa.Integer(), nullable=True),
        sa.Column("risk_description", sa.Text(), nullable=False),
        sa.Column("likelihood", sa.String(length=64), nullable=True),
        sa.Column("impact", sa.String(length=64), nullable=True),
        sa.Column("risk_score", sa.Integer(), server_default="0", nullable=False),
        sa.Column("mitigation_strategy", sa.Text(), nullable=True),
        sa.Column("contingency_plan", sa.Text(), nullable=True),
        sa.Column("responsible_person_id", sa.Integer(), nullable=True),
        sa.Column("status", sa.String(length=64), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["risk_plan_id"], ["risk_management_plans.risk_plan_id"]),
        sa.ForeignKeyConstraint(["strategy_plan_id"], ["strategy_plans.strategy_plan_id"]),
        sa.ForeignKeyConstraint(["action_item_id"], ["action_items.action_item_id"]),
        sa.ForeignKeyConstraint(["responsible_person_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("risk_id"),
    )
    for column in ("risk_plan_id", "strategy_plan_id", "action_item_id", "responsible_person_id"):
        _fk_index("risks", column)


def downgrade() -> None:
    for table in (
        "risks",
        "action_items",
        "action_plans",
        "digital_initiatives",
        "hr_dev_initiatives",
        "digital_dev_plans",
        "hr_dev_plans",
        "strategic_goals",
        "strategy_plans",
        "risk_management_plans",
        "departments",
        "organizations",
        "users",
    ):
        op.drop_table(table)
