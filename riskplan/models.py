from __future__ import annotations
from typing import Optional

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from core.database import Base, TimestampMixin


class RiskManagementPlan(TimestampMixin, Base):
    __tablename__ = "risk_management_plans"

    risk_plan_id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    plan_name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)
    year: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    status: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
