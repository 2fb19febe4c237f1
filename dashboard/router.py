from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from core.database import get_db
from core.response import Envelope, ListEnvelope, ok, ok_list
from auth.services.auth_service import get_current_user
from .schema import ActionKpiRow, OverviewSchema, RiskSummaryRow, StrategicKpiRow, TimelineEntry
from . import service

dashboard_router = APIRouter(prefix="/dashboard", tags=["Dashboard"], dependencies=[Depends(get_current_user)])

@dashboard_router.get("/overview", response_model=Envelope[OverviewSchema])
def overview(db: Session = Depends(get_db)):
    return ok(service.get_overview(db))

@dashboard_router.get("/strategic-kpi", response_model=ListEnvelope[StrategicKpiRow])
def strategic_kpi(db: Session = Depends(get_db)):
    return ok_list(service.get_strategic_kpi(db))

@dashboard_router.get("/action-kpi", response_model=ListEnvelope[ActionKpiRow])
def action_kpi(db: Session = Depends(get_db)):
    return ok_list(service.get_action_kpi(db))

@dashboard_router.get("/risk-summary", response_model=ListEnvelope[RiskSummaryRow])
def risk_summary(db: Session = Depends(get_db)):
    return ok_list(service.get_risk_summary(db))

# goals and action items by due date; initiatives have none
@dashboard_router.get("/timeline", response_model=ListEnvelope[TimelineEntry])
def timeline(db: Session = Depends(get_db)):
    return ok_list(service.get_timeline(db))
