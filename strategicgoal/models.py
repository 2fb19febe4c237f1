from __future__ import annotations
from datetime import date
from typing import Optional

from sqlalchemy import Date, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from core.database import Base, TimestampMixin


class StrategicGoal(TimestampMixin, Base):
    __tablename__ = "strategic_goals"

    goal_id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    strategy_plan_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("strategy_plans.strategy_plan_id"), index=True, nullable=True
    )
    goal_description: Mapped[str] = mapped_column(Text(), nullable=False)
    target_metric: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    target_value: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    deadline: Mapped[Optional[date]] = mapped_column(Date(), nullable=True)
    actual_value: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    progress: Mapped[int] = mapped_column(Integer, default=0, server_default="0", nullable=False)
