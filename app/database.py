# app/database.py
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from app.core.config import settings

logger = logging.getLogger(__name__)

DATABASE_URL = settings.DATABASE_URL

# echo=True gibt alle SQL-Statements aus. Über SQL_ECHO steuerbar.
engine = create_async_engine(DATABASE_URL, echo=settings.SQL_ECHO)

AsyncSessionFactory = async_sessionmaker(
    bind=engine, class_=AsyncSession, autoflush=False, expire_on_commit=False
)

Base = declarative_base()


async def get_db_session():
    async with AsyncSessionFactory() as session:
        try:
            yield session
        except Exception:
            await session.rollback()  # Rollback bei Fehlern
            raise


async def create_db_and_tables():
    """
    Legt die Tabelle `responses` an, falls sie noch fehlt.

    Es gibt keine Migrationen; ``create_all`` ist idempotent. Ist die
    Datenbank beim Start nicht erreichbar, wird das nur geloggt: die
    Requests liefern dann selbst einen 500er.
    """
    # Modelle importieren, damit sie in Base.metadata registriert sind
    from app import models  # noqa: F401

    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    except (SQLAlchemyError, OSError):
        logger.exception("Could not create database tables at startup")
        return False
    logger.info("Database tables ready")
    return True
