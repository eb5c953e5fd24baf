from sqlalchemy import create_engine, QueuePool, StaticPool
from sqlalchemy.orm import sessionmaker
from photobooth.config.settings import settings
from photobooth.db.base import Base
# registers every mapped class before the first session is opened
from photobooth.db.models import Admin, Event, Photo, DeviceStorageItem  # noqa: F401


def build_engine(database_url: str):
    if database_url.startswith("sqlite"):
        # in-memory databases live on a single shared connection
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            return create_engine(
                database_url,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
            )
        return create_engine(database_url, connect_args={"check_same_thread": False})

    return create_engine(
        database_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=10,
        pool_timeout=30,
        pool_recycle=1800  # recycle connections every 30 minutes
    )


engine = build_engine(settings.DATABASE_URL)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def init_db():
    """Create all tables that do not exist yet."""
    Base.metadata.create_all(bind=engine)
