"""Generate database sessions"""

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.core.config import Settings
from src.db.schema import Base


def build_session_factory(settings: Settings) -> sessionmaker[Session]:
    """Engine + session factory for the configured URL. Makes sure all tables exist."""
    connect_args = (
        {"check_same_thread": False}
        if settings.database_url.startswith("sqlite")
        else {}
    )
    engine = create_engine(
        settings.database_url, echo=settings.database_echo, connect_args=connect_args
    )
    Base.metadata.create_all(bind=engine)
    return sessionmaker(bind=engine)
