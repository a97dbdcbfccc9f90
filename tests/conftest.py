# tests/conftest.py
import os

# must be set before app.config is imported
os.environ.setdefault("ENV", "test")
os.environ.setdefault("DATABASE_URL", "sqlite://")

from decimal import Decimal
from typing import List

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from app.client.errors import BadRequestError, BookNotFoundError, TransientNetworkError
from app.database import get_session
from app.main import app
from app.models.book import Book
from app.schemas.book_schemas import BookCreate, BookFields, BookResponse, BookUpdate
from app.services import book_service


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def client(engine):
    """TestClient whose requests share the in-memory test database."""

    def override_get_session():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def make_book(title="Dune", classification="Fiction", price="9.99", **overrides) -> dict:
    book = {
        "title": title,
        "author": "Frank Herbert",
        "publisher": "Chilton",
        "isbn": "978-0441013593",
        "classification": classification,
        "pageCount": 412,
        "price": float(price),
    }
    book.update(overrides)
    return book


def make_response(book_id: int, title="Dune", classification="Fiction", price="9.99") -> BookResponse:
    return BookResponse(
        id=book_id,
        title=title,
        author="Author",
        publisher="Publisher",
        isbn="",
        classification=classification,
        page_count=100,
        price=Decimal(price),
    )


@pytest.fixture
def twelve_books() -> List[BookResponse]:
    """12 books in 3 categories: 7 Fiction, 3 Biography, 2 History."""
    categories = ["Fiction"] * 7 + ["Biography"] * 3 + ["History"] * 2
    return [
        make_response(i + 1, title=f"Book {i + 1:02d}", classification=category)
        for i, category in enumerate(categories)
    ]


class FakeCatalogApi:
    """
    In-process stand-in for CatalogApiClient backed by the real store service.

    `fail_with` makes every call raise the given error; `on_list` runs inside
    list_books() before it returns, to simulate events while a fetch is in
    flight.
    """

    def __init__(self, session: Session):
        self.session = session
        self.fail_with: Exception | None = None
        self.on_list = None
        self.calls: List[str] = []

    def _check(self, name: str):
        self.calls.append(name)
        if self.fail_with is not None:
            raise self.fail_with

    def list_books(self) -> List[BookResponse]:
        self._check("list")
        books = [BookResponse.model_validate(b) for b in book_service.list_books(self.session)]
        if self.on_list is not None:
            self.on_list()
        return books

    def get_book(self, book_id: int) -> BookResponse:
        self._check("get")
        book = book_service.get_book(self.session, book_id)
        if not book:
            raise BookNotFoundError(book_id)
        return BookResponse.model_validate(book)

    def create_book(self, book: BookFields) -> BookResponse:
        self._check("create")
        created = book_service.insert_book(self.session, BookCreate.model_validate(book))
        return BookResponse.model_validate(created)

    def update_book(self, book_id: int, book: BookUpdate) -> None:
        self._check("update")
        if book.id != book_id:
            raise BadRequestError("ID mismatch")
        if not book_service.replace_book(self.session, book_id, book):
            raise BookNotFoundError(book_id)

    def delete_book(self, book_id: int) -> None:
        self._check("delete")
        if not book_service.delete_book(self.session, book_id):
            raise BookNotFoundError(book_id)


@pytest.fixture
def fake_api(session):
    return FakeCatalogApi(session)


@pytest.fixture
def offline_error():
    return TransientNetworkError("Could not reach catalog API: connection refused")


@pytest.fixture
def stored_book(session) -> Book:
    return book_service.insert_book(session, BookCreate.model_validate(make_book()))
