from __future__ import annotations
from typing import Optional

from sqlalchemy import Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from core.database import Base, TimestampMixin


class HrDevInitiative(TimestampMixin, Base):
    __tablename__ = "hr_dev_initiatives"

    hr_initiative_id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    hr_plan_id: Mapped[Optional[int]] = mapped_column(ForeignKey("hr_dev_plans.hr_plan_id"), index=True, nullable=True)
    initiative_name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)
    required_competencies: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)
    training_resources: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)
    budget: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    responsible_person_id: Mapped[Optional[int]] = mapped_column(ForeignKey("users.id"), index=True, nullable=True)
    status: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    progress: Mapped[int] = mapped_column(Integer, default=0, server_default="0", nullable=False)
