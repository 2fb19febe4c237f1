from __future__ import annotations
from typing import Optional

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from core.database import Base, TimestampMixin


class ActionPlan(TimestampMixin, Base):
    __tablename__ = "action_plans"

    action_plan_id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    strategy_plan_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("strategy_plans.strategy_plan_id"), index=True, nullable=True
    )
    year: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    plan_name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)
    status: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
