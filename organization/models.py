from typing import Optional

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from core.database import Base, TimestampMixin


class Organization(TimestampMixin, Base):
    __tablename__ = "organizations"

    org_id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    org_name: Mapped[str] = mapped_column(String(255), nullable=False)
    vision: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)
    mission: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)
