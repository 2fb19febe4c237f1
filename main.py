import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware

from core.config_loader import settings
from core.database import create_db_engine, create_session_factory
from core.exceptions import register_exception_handlers
from core.initial_data import init_db

from auth.routes.auth_router import auth_router
from user.router import user_router
from organization.router import organization_router
from strategyplan.router import strategy_plan_router
from strategicgoal.router import strategic_goal_router
from hrdevplan.router import hr_dev_plan_router
from hrdevinitiative.router import hr_dev_initiative_router
from digitaldevplan.router import digital_dev_plan_router
from digitalinitiative.router import digital_initiative_router
from department.router import department_router
from actionplan.router import action_plan_router
from actionitem.router import action_item_router
from riskplan.router import risk_plan_router
from risk.router import risk_router
from dashboard.router import dashboard_router

logger = logging.getLogger(__name__)

openapi_tags = [
    {
        "name": "Auth",
        "description": "Login and current user",
    },
    {
        "name": "Dashboard",
        "description": "Read-only aggregates",
    },
    {
        "name": "Health Checks",
        "description": "Application health checks",
    }
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.basicConfig(level=settings.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s %(message)s")
    engine = create_db_engine(settings.DATABASE_URL)
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)
    init_db(engine, app.state.session_factory)
    logger.info("%s started (%s)", settings.PROJECT_NAME, settings.ENVIRONMENT)
    try:
        yield
    finally:
        engine.dispose()


app = FastAPI(title=settings.PROJECT_NAME, openapi_tags=openapi_tags, lifespan=lifespan)

if settings.cors_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

register_exception_handlers(app)

for router in (
    auth_router,
    user_router,
    organization_router,
    strategy_plan_router,
    strategic_goal_router,
    hr_dev_plan_router,
    hr_dev_initiative_router,
    digital_dev_plan_router,
    digital_initiative_router,
    department_router,
    action_plan_router,
    action_item_router,
    risk_plan_router,
    risk_router,
    dashboard_router,
):
    app.include_router(router, prefix=settings.api_prefix)


@app.get("/health", tags=['Health Checks'])
def read_root():
    return {"health": "true"}
