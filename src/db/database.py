from sqlalchemy import create_engine, Column, String, Float, Text, JSON
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool
from starlette.requests import Request
import os
import uuid
import logging

# Get logger
logger = logging.getLogger(__name__)

DATABASE_URL = os.getenv("DB_URL", "sqlite:///./yelp_camp.db")
Base = declarative_base()


def new_id():
    return uuid.uuid4().hex


# Define the Campground table structure
class CampgroundDB(Base):
    __tablename__ = "campgrounds"
    id = Column(String(32), primary_key=True, index=True, default=new_id)
    title = Column(String, nullable=False)
    price = Column(Float, nullable=True)
    image = Column(String, nullable=True)
    description = Column(Text, nullable=True)
    location = Column(String, nullable=True)
    reviews = Column(JSON, nullable=False, default=list)  # Ordered Review ids


# Define the Review table structure
class ReviewDB(Base):
    __tablename__ = "reviews"
    id = Column(String(32), primary_key=True, index=True, default=new_id)
    body = Column(Text, nullable=False)
    rating = Column(Float, nullable=False)


class Store:
    """
    Owns the engine and session factory for one database.

    Nothing connects until open() is called; close() releases the pool.
    """

    def __init__(self, url=DATABASE_URL):
        self.url = url
        self.engine = None
        self.SessionLocal = None

    @property
    def is_open(self):
        return self.engine is not None

    def open(self):
        if self.is_open:
            return self

        kwargs = {}
        if self.url.startswith("sqlite"):
            kwargs["connect_args"] = {"check_same_thread": False}
            if self.url in ("sqlite://", "sqlite:///:memory:"):
                # In-memory databases live and die with a single connection
                kwargs["poolclass"] = StaticPool

        self.engine = create_engine(self.url, **kwargs)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)
        logger.info(f"Database connected: {self.engine.url.render_as_string(hide_password=True)}")

        self.create_tables()
        return self

    def create_tables(self):
        try:
            Base.metadata.create_all(bind=self.engine)
            logger.info("Database tables created (if they didn't exist previously).")
        except Exception as e:
            logger.error(f"Error creating database tables: {e}")
            raise

    def session(self):
        if not self.is_open:
            raise RuntimeError("Store is not open")
        return self.SessionLocal()

    def close(self):
        if not self.is_open:
            return
        self.engine.dispose()
        self.engine = None
        self.SessionLocal = None
        logger.info("Database connection closed")


def get_db(request: Request):
    db = request.app.state.store.session()
    try:
        yield db
    finally:
        db.close()
