"""Read-only aggregates across the planning tables.

Every query here returns plain dicts (or an ``OverviewSchema``) so the
router can hand them straight to the response envelope.
"""
from __future__ import annotations
import logging
from typing import Any, Dict, List

from sqlalchemy import Date, cast, func, literal, null, select, union_all
from sqlalchemy.orm import Session

from actionitem.models import ActionItem
from actionplan.models import ActionPlan
from department.models import Department
from digitalinitiative.models import DigitalInitiative
from hrdevinitiative.models import HrDevInitiative
from risk.models import Risk
from riskplan.models import RiskManagementPlan
from strategicgoal.models import StrategicGoal
from strategyplan.models import StrategyPlan
from user.models import User
from .schema import ActivityEntry, OverviewSchema

logger = logging.getLogger(__name__)

RECENT_ACTIVITY_LIMIT = 10
UNDEFINED_STATUS = "Undefined"

# (label, model, id column, description column) for the progress-bearing families
_PROGRESS_FAMILIES = (
    ("Strategic Goal", StrategicGoal, StrategicGoal.goal_id, StrategicGoal.goal_description),
    ("HR Initiative", HrDevInitiative, HrDevInitiative.hr_initiative_id, HrDevInitiative.initiative_name),
    ("Digital Initiative", DigitalInitiative, DigitalInitiative.digital_initiative_id,
     DigitalInitiative.initiative_name),
    ("Action Item", ActionItem, ActionItem.action_item_id, ActionItem.item_description),
)


def _rows(db: Session, stmt) -> List[Dict[str, Any]]:
    return [dict(row) for row in db.execute(stmt).mappings()]


def count_and_progress(db: Session, model) -> tuple[int, float]:
    """Row count and mean progress for one table; an empty table averages to 0."""
    count, avg = db.execute(
        select(func.count(), func.coalesce(func.avg(model.progress), 0)).select_from(model)
    ).one()
    return count, float(avg)


def risk_status_summary(db: Session) -> Dict[str, int]:
    summary: Dict[str, int] = {}
    for status, n in db.execute(select(Risk.status, func.count()).group_by(Risk.status)):
        key = status or UNDEFINED_STATUS
        summary[key] = summary.get(key, 0) + n
    return summary


def recent_activity(db: Session, limit: int = RECENT_ACTIVITY_LIMIT) -> List[Dict[str, Any]]:
    feed = union_all(*(
        select(
            literal(label).label("type"),
            id_col.label("id"),
            desc_col.label("description"),
            model.progress.label("progress"),
            model.updated_at.label("updated_at"),
        )
        for label, model, id_col, desc_col in _PROGRESS_FAMILIES
    )).subquery()
    return _rows(db, select(feed).order_by(feed.c.updated_at.desc()).limit(limit))


def get_overview(db: Session) -> OverviewSchema:
    goals_n, goals_avg = count_and_progress(db, StrategicGoal)
    hr_n, hr_avg = count_and_progress(db, HrDevInitiative)
    digital_n, digital_avg = count_and_progress(db, DigitalInitiative)
    items_n, items_avg = count_and_progress(db, ActionItem)
    statuses = risk_status_summary(db)

    overview = OverviewSchema(
        strategic_goals_count=goals_n,
        hr_initiatives_count=hr_n,
        digital_initiatives_count=digital_n,
        action_items_count=items_n,
        risks_count=sum(statuses.values()),
        strategic_goals_progress=goals_avg,
        hr_initiatives_progress=hr_avg,
        digital_initiatives_progress=digital_avg,
        action_items_progress=items_avg,
        risk_status_summary=statuses,
        recent_activity=[ActivityEntry(**row) for row in recent_activity(db)],
    )
    logger.debug("overview: %d goals, %d items, %d risks", goals_n, items_n, overview.risks_count)
    return overview


def get_strategic_kpi(db: Session) -> List[Dict[str, Any]]:
    stmt = (
        select(
            StrategicGoal.goal_id,
            StrategicGoal.goal_description,
            StrategicGoal.target_metric,
            StrategicGoal.target_value,
            StrategicGoal.actual_value,
            StrategicGoal.progress,
            StrategyPlan.plan_name.label("strategy_plan"),
            StrategicGoal.deadline,
        )
        .outerjoin(StrategyPlan, StrategicGoal.strategy_plan_id == StrategyPlan.strategy_plan_id)
        .order_by(StrategicGoal.progress.desc())
    )
    return _rows(db, stmt)


def get_action_kpi(db: Session) -> List[Dict[str, Any]]:
    stmt = (
        select(
            ActionItem.action_item_id,
            ActionItem.item_description,
            ActionItem.kpi,
            ActionItem.kpi_target,
            ActionItem.kpi_actual,
            ActionItem.progress,
            ActionItem.status,
            ActionPlan.plan_name.label("action_plan"),
            ActionItem.due_date,
            User.name.label("responsible_person"),
            Department.department_name,
        )
        .outerjoin(ActionPlan, ActionItem.action_plan_id == ActionPlan.action_plan_id)
        .outerjoin(User, ActionItem.responsible_person_id == User.id)
        .outerjoin(Department, ActionItem.responsible_department_id == Department.department_id)
        .order_by(ActionItem.due_date.asc())
    )
    return _rows(db, stmt)


def get_risk_summary(db: Session) -> List[Dict[str, Any]]:
    stmt = (
        select(
            Risk.risk_id,
            Risk.risk_description,
            Risk.likelihood,
            Risk.impact,
            Risk.risk_score,
            Risk.status,
            User.name.label("responsible_person"),
            RiskManagementPlan.plan_name.label("risk_plan"),
            StrategyPlan.plan_name.label("strategy_plan"),
            ActionItem.item_description.label("action_item"),
        )
        .outerjoin(User, Risk.responsible_person_id == User.id)
        .outerjoin(RiskManagementPlan, Risk.risk_plan_id == RiskManagementPlan.risk_plan_id)
        .outerjoin(StrategyPlan, Risk.strategy_plan_id == StrategyPlan.strategy_plan_id)
        .outerjoin(ActionItem, Risk.action_item_id == ActionItem.action_item_id)
        .order_by(Risk.risk_score.desc())
    )
    return _rows(db, stmt)


def get_timeline(db: Session) -> List[Dict[str, Any]]:
    # initiatives carry no due date but still appear on the timeline
    no_date = cast(null(), Date)
    feed = union_all(
        select(
            literal("Strategic Goal").label("type"),
            StrategicGoal.goal_id.label("id"),
            StrategicGoal.goal_description.label("description"),
            StrategicGoal.deadline.label("due_date"),
            StrategicGoal.progress.label("progress"),
        ).where(StrategicGoal.deadline.is_not(None)),
        select(
            literal("Action Item").label("type"),
            ActionItem.action_item_id.label("id"),
            ActionItem.item_description.label("description"),
            ActionItem.due_date.label("due_date"),
            ActionItem.progress.label("progress"),
        ).where(ActionItem.due_date.is_not(None)),
        select(
            literal("HR Initiative").label("type"),
            HrDevInitiative.hr_initiative_id.label("id"),
            HrDevInitiative.initiative_name.label("description"),
            no_date.label("due_date"),
            HrDevInitiative.progress.label("progress"),
        ),
        select(
            literal("Digital Initiative").label("type"),
            DigitalInitiative.digital_initiative_id.label("id"),
            DigitalInitiative.initiative_name.label("description"),
            no_date.label("due_date"),
            DigitalInitiative.progress.label("progress"),
        ),
    ).subquery()
    return _rows(db, select(feed).order_by(feed.c.due_date.asc()))
