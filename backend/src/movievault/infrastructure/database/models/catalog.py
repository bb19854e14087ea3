"""SQLAlchemy ORM models for the catalog tables."""
from datetime import datetime
from decimal import Decimal

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Index, Integer, Numeric, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from movievault.infrastructure.database.connection import Base

from .identity import UserModel


class MovieModel(Base):
    __tablename__ = "movies"
    __table_args__ = (
        Index("ix_movies_owner_id", "owner_id"),
        CheckConstraint("rating >= 0 AND rating <= 10", name="ck_movies_rating_range"),
        CheckConstraint("release_year >= 1888", name="ck_movies_release_year_min"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    owner_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    director: Mapped[str] = mapped_column(String(100), nullable=False)
    genre: Mapped[str] = mapped_column(String(50), nullable=False)
    release_year: Mapped[int] = mapped_column(Integer, nullable=False)
    rating: Mapped[Decimal] = mapped_column(Numeric(4, 2, asdecimal=True), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, server_default=func.now())

    owner: Mapped[UserModel] = relationship(back_populates="movies")
