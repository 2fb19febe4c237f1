from __future__ import annotations
from datetime import date
from typing import Optional

from sqlalchemy import Date, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from core.database import Base, TimestampMixin


class ActionItem(TimestampMixin, Base):
    __tablename__ = "action_items"

    action_item_id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    action_plan_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("action_plans.action_plan_id"), index=True, nullable=True
    )
    goal_id: Mapped[Optional[int]] = mapped_column(ForeignKey("strategic_goals.goal_id"), index=True, nullable=True)
    item_description: Mapped[str] = mapped_column(Text(), nullable=False)
    responsible_department_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("departments.department_id"), index=True, nullable=True
    )
    responsible_person_id: Mapped[Optional[int]] = mapped_column(ForeignKey("users.id"), index=True, nullable=True)
    start_date: Mapped[Optional[date]] = mapped_column(Date(), nullable=True)
    due_date: Mapped[Optional[date]] = mapped_column(Date(), nullable=True)
    kpi: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    kpi_target: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    kpi_actual: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    budget: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    status: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    progress: Mapped[int] = mapped_column(Integer, default=0, server_default="0", nullable=False)
    progress_update: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)
