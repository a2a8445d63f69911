"""User ORM — owner of reports; only its existence matters to the report service."""

from datetime import datetime, timezone

from sqlalchemy import BigInteger, Integer, String, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship

from reportdesk.db.base import Base


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer(), "sqlite"),
        primary_key=True, autoincrement=True,
    )
    login: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    reports: Mapped[list["Report"]] = relationship(
        "Report", back_populates="user",
        cascade="all, delete-orphan", passive_deletes=True,
    )
