from __future__ import annotations
from typing import Optional

from sqlalchemy import Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from core.database import Base, TimestampMixin


class DigitalInitiative(TimestampMixin, Base):
    __tablename__ = "digital_initiatives"

    digital_initiative_id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    digital_plan_id: Mapped[Optional[int]] = mapped_column(ForeignKey("digital_dev_plans.digital_plan_id"), index=True, nullable=True)
    initiative_name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)
    technology_stack: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)
    required_infrastructure: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)
    budget: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    responsible_person_id: Mapped[Optional[int]] = mapped_column(ForeignKey("users.id"), index=True, nullable=True)
    status: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    progress: Mapped[int] = mapped_column(Integer, default=0, server_default="0", nullable=False)
