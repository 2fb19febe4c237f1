from datetime import date, datetime
from typing import Dict, List, Optional
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ActivityEntry(BaseModel):
    type: str
    id: int
    description: Optional[str] = None
    progress: Optional[int] = None
    updated_at: Optional[datetime] = None


class OverviewSchema(BaseModel):
    """Headline numbers; serialized with camelCase keys."""
    strategic_goals_count: int = 0
    hr_initiatives_count: int = 0
    digital_initiatives_count: int = 0
    action_items_count: int = 0
    risks_count: int = 0
    strategic_goals_progress: float = 0
    hr_initiatives_progress: float = 0
    digital_initiatives_progress: float = 0
    action_items_progress: float = 0
    risk_status_summary: Dict[str, int] = {}
    recent_activity: List[ActivityEntry] = []
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class StrategicKpiRow(BaseModel):
    goal_id: int
    goal_description: str
    target_metric: Optional[str] = None
    target_value: Optional[str] = None
    actual_value: Optional[str] = None
    progress: Optional[int] = None
    strategy_plan: Optional[str] = None
    deadline: Optional[date] = None


class ActionKpiRow(BaseModel):
    action_item_id: int
    item_description: str
    kpi: Optional[str] = None
    kpi_target: Optional[str] = None
    kpi_actual: Optional[str] = None
    progress: Optional[int] = None
    status: Optional[str] = None
    action_plan: Optional[str] = None
    due_date: Optional[date] = None
    responsible_person: Optional[str] = None
    department_name: Optional[str] = None


class RiskSummaryRow(BaseModel):
    risk_id: int
    risk_description: str
    likelihood: Optional[str] = None
    impact: Optional[str] = None
    risk_score: Optional[int] = None
    status: Optional[str] = None
    responsible_person: Optional[str] = None
    risk_plan: Optional[str] = None
    strategy_plan: Optional[str] = None
    action_item: Optional[str] = None


class TimelineEntry(BaseModel):
    type: str
    id: int
    description: Optional[str] = None
    due_date: Optional[date] = None
    progress: Optional[int] = None
