"""
Pytest configuration and shared fixtures.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from booklending.core.database import Base, get_db
from booklending.main import app
from booklending.models import models
from booklending.services.borrowing import BorrowingService
from booklending.services.catalog import BookCatalog
from booklending.services.users import UserDirectory


@pytest.fixture
def db_session():
    """In-memory SQLite database, fresh for every test."""
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False},
                           poolclass=StaticPool)
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(autoflush=False, bind=engine)
    session = TestingSession()
    yield session
    session.close()
    engine.dispose()


@pytest.fixture
def users(db_session):
    return UserDirectory(db_session)


@pytest.fixture
def catalog(db_session):
    return BookCatalog(db_session)


@pytest.fixture
def borrowing(db_session, users, catalog):
    return BorrowingService(db_session, users, catalog)


@pytest.fixture
def client(db_session):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def stored_user(db_session):
    user = models.User(user_name="Test User")
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def stored_book(db_session):
    book = models.Book(title="Test Book", author="Test Author")
    db_session.add(book)
    db_session.commit()
    db_session.refresh(book)
    return book
