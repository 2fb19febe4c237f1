from __future__ import annotations
from datetime import date
from typing import Optional

from sqlalchemy import Date, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from core.database import Base, TimestampMixin


class HrDevPlan(TimestampMixin, Base):
    __tablename__ = "hr_dev_plans"

    hr_plan_id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    strategy_plan_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("strategy_plans.strategy_plan_id"), index=True, nullable=True
    )
    plan_name: Mapped[str] = mapped_column(String(255), nullable=False)
    start_date: Mapped[Optional[date]] = mapped_column(Date(), nullable=True)
    end_date: Mapped[Optional[date]] = mapped_column(Date(), nullable=True)
    description: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)
    status: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
