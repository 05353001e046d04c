"""
db/models.py

SQLAlchemy 2.0 async ORM model definitions.
Maps the device table read by the smoke alert dispatcher.
The dispatcher only reads; the schema is owned by the upstream application.
"""

from sqlalchemy import String, Uuid
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, sessionmaker

from config import settings

# Async engine with connection pool settings
engine = create_async_engine(
    f"postgresql+asyncpg://{settings.postgres_user}:{settings.postgres_password}"
    f"@{settings.postgres_host}:{settings.postgres_port}/{settings.postgres_db}",
    pool_size=5,
    max_overflow=10,
    pool_pre_ping=True,
)

AsyncSessionLocal = sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


class Device(Base):
    """A physical smoke monitoring unit and its registered push token."""

    __tablename__ = "device"

    id: Mapped[str] = mapped_column(Uuid(as_uuid=False), primary_key=True)
    fcm_token: Mapped[str | None] = mapped_column(String, nullable=True)
    area: Mapped[str | None] = mapped_column(String, nullable=True)
    unit_no: Mapped[str | None] = mapped_column(String, nullable=True)
