"""Database tables / schema"""

from typing import Optional

from sqlalchemy import String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class DBVideoGame(Base):
    """The catalog table. Owned and populated outside this service, which only reads it."""

    __tablename__ = "videogames"
    id: Mapped[int] = mapped_column(primary_key=True)
    title: Mapped[str] = mapped_column(String(255))
    developer: Mapped[str] = mapped_column(String(255))
    publisher: Mapped[str] = mapped_column(String(255))
    genre: Mapped[str] = mapped_column(String(255))
    platform: Mapped[str] = mapped_column(String(255))
    artwork_url: Mapped[Optional[str]] = mapped_column(Text)
