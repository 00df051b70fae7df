"""SQLAlchemy ORM models for the catalog and saved itineraries."""

from datetime import date, datetime
from typing import Any

from sqlalchemy import JSON, Date, DateTime, Float, ForeignKey, Index, Integer, Text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship
from sqlalchemy.sql import func

# JSONB on PostgreSQL, plain JSON elsewhere (SQLite in tests)
JsonType = JSON().with_variant(JSONB(), "postgresql")


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""

    pass


class Destination(Base):
    """Destination table - cities travellers can browse."""

    __tablename__ = "destination"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    country: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    image_url: Mapped[str] = mapped_column(Text, nullable=False)
    lat: Mapped[float] = mapped_column(Float, nullable=False)
    lng: Mapped[float] = mapped_column(Float, nullable=False)

    # Relationships
    activities: Mapped[list["Activity"]] = relationship("Activity", back_populates="destination")


class Flight(Base):
    """Flight table - mocked flight offers."""

    __tablename__ = "flight"
    __table_args__ = (Index("idx_flight_route", "departure_city", "arrival_city"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    airline: Mapped[str] = mapped_column(Text, nullable=False)
    flight_number: Mapped[str] = mapped_column(Text, nullable=False)
    departure_city: Mapped[str] = mapped_column(Text, nullable=False)
    arrival_city: Mapped[str] = mapped_column(Text, nullable=False)
    departure_time: Mapped[str] = mapped_column(Text, nullable=False)
    arrival_time: Mapped[str] = mapped_column(Text, nullable=False)
    price: Mapped[float] = mapped_column(Float, nullable=False)
    duration: Mapped[str] = mapped_column(Text, nullable=False)


class Hotel(Base):
    """Hotel table - mocked lodging offers."""

    __tablename__ = "hotel"
    __table_args__ = (Index("idx_hotel_city", "city"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    city: Mapped[str] = mapped_column(Text, nullable=False)
    address: Mapped[str] = mapped_column(Text, nullable=False)
    image_url: Mapped[str] = mapped_column(Text, nullable=False)
    price: Mapped[float] = mapped_column(Float, nullable=False)
    rating: Mapped[float] = mapped_column(Float, nullable=False)
    amenities: Mapped[list[str]] = mapped_column(JsonType, nullable=False, default=list)


class Activity(Base):
    """Activity table - bookable things to do at a destination."""

    __tablename__ = "activity"
    __table_args__ = (Index("idx_activity_destination", "destination_id"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    destination_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("destination.id"), nullable=False
    )
    description: Mapped[str] = mapped_column(Text, nullable=False)
    image_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    price: Mapped[float] = mapped_column(Float, nullable=False)
    duration: Mapped[str] = mapped_column(Text, nullable=False)

    # Relationships
    destination: Mapped["Destination"] = relationship("Destination", back_populates="activities")


class Itinerary(Base):
    """Itinerary table - saved trip plans; day plans stored as a JSON document."""

    __tablename__ = "itinerary"
    __table_args__ = (Index("idx_itinerary_user", "user_id", "created_at"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    user_id: Mapped[int | None] = mapped_column(Integer, nullable=True)
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)
    total_cost: Mapped[float] = mapped_column(Float, nullable=False)
    days: Mapped[list[dict[str, Any]]] = mapped_column(JsonType, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
