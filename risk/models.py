from __future__ import annotations
from typing import Optional

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from core.database import Base, TimestampMixin


class Risk(TimestampMixin, Base):
    __tablename__ = "risks"

    risk_id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    risk_plan_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("risk_management_plans.risk_plan_id"), index=True, nullable=True
    )
    strategy_plan_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("strategy_plans.strategy_plan_id"), index=True, nullable=True
    )
    action_item_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("action_items.action_item_id"), index=True, nullable=True
    )
    risk_description: Mapped[str] = mapped_column(Text(), nullable=False)
    # free text, e.g. "High" / "Medium" / "Low"
    likelihood: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    impact: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    risk_score: Mapped[int] = mapped_column(Integer, default=0, server_default="0", nullable=False)
    mitigation_strategy: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)
    contingency_plan: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)
    responsible_person_id: Mapped[Optional[int]] = mapped_column(ForeignKey("users.id"), index=True, nullable=True)
    status: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
