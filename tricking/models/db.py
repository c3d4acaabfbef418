"""
SQLAlchemy ORM models for the trick catalog.

The catalog is read-only from the API's point of view; it is populated by
the catalog import job.
"""

from datetime import datetime

from sqlalchemy import (
    Boolean,
    DateTime,
    ForeignKey,
    Integer,
    SmallInteger,
    String,
    Text,
    func,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


class CategoryDB(Base):
    """
    A trick category (e.g., flips, kicks, twists).

    Categories may nest through parent_id.
    """

    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), index=True)
    parent_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("categories.id", ondelete="SET NULL"), nullable=True
    )

    def __repr__(self) -> str:
        return f"<CategoryDB(id={self.id}, name={self.name})>"


class TrickDB(Base):
    """
    A trick in the catalog.

    Stances are opaque category ids; the combo generator only compares
    them for equality.
    """

    __tablename__ = "tricks"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    slug: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    name: Mapped[str] = mapped_column(String(255), index=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    difficulty: Mapped[int | None] = mapped_column(Integer, nullable=True, index=True)
    execution_notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    creator_name: Mapped[str | None] = mapped_column(String(255), nullable=True)

    takeoff_stance_id: Mapped[int | None] = mapped_column(Integer, nullable=True)
    landing_stance_id: Mapped[int | None] = mapped_column(Integer, nullable=True)
    category_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("categories.id", ondelete="SET NULL"), nullable=True, index=True
    )
    rotation: Mapped[int | None] = mapped_column(Integer, nullable=True)

    # Relative likelihood of being picked for a combo
    weight: Mapped[int] = mapped_column(SmallInteger, default=1)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    videos: Mapped[list["TrickVideoDB"]] = relationship(
        back_populates="trick", cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        return f"<TrickDB(id={self.id}, name={self.name}, weight={self.weight})>"


class TrickVideoDB(Base):
    """A video demonstrating a trick."""

    __tablename__ = "trick_videos"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    trick_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("tricks.id", ondelete="CASCADE"), index=True
    )
    video_url: Mapped[str] = mapped_column(Text)
    thumbnail_url: Mapped[str] = mapped_column(Text, default="")
    performer_name: Mapped[str] = mapped_column(String(255), default="")
    is_featured: Mapped[bool] = mapped_column(Boolean, default=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    trick: Mapped["TrickDB"] = relationship(back_populates="videos")

    def __repr__(self) -> str:
        return f"<TrickVideoDB(trick_id={self.trick_id}, featured={self.is_featured})>"
