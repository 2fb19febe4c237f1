from typing import Optional

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from core.database import Base, TimestampMixin


class Department(TimestampMixin, Base):
    __tablename__ = "departments"

    department_id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    department_name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)
