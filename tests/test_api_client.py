# tests/test_api_client.py
import json
from decimal import Decimal

import pytest
import requests

from app.client.api import CatalogApiClient
from app.client.errors import (
    BadRequestError,
    BookNotFoundError,
    CatalogApiError,
    TransientNetworkError,
)
from app.schemas.book_schemas import BookFields, BookUpdate
from tests.conftest import make_book


def fake_response(status_code, body=None):
    response = requests.Response()
    response.status_code = status_code
    response._content = b"" if body is None else json.dumps(body).encode()
    return response


class RecordingSession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def request(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        if self.error is not None:
            raise self.error
        return self.response


def client_for(response=None, error=None):
    session = RecordingSession(response, error)
    return CatalogApiClient("http://books.test/", session=session, timeout=3), session


def test_list_books_parses_camel_case():
    api, session = client_for(fake_response(200, [{**make_book(), "bookID": 4}]))

    books = api.list_books()

    assert session.calls[0][:2] == ("GET", "http://books.test/api/books")
    assert session.calls[0][2]["timeout"] == 3
    assert books[0].id == 4
    assert books[0].page_count == 412
    assert books[0].price == Decimal("9.99")


def test_create_sends_camel_case_without_id():
    api, session = client_for(fake_response(201, {**make_book(), "bookID": 1}))

    created = api.create_book(BookFields(title="Dune", page_count=412, price=Decimal("9.99")))

    method, url, kwargs = session.calls[0]
    assert (method, url) == ("POST", "http://books.test/api/books")
    assert kwargs["json"]["pageCount"] == 412
    assert kwargs["json"]["price"] == 9.99
    assert "bookID" not in kwargs["json"]
    assert created.id == 1


def test_update_sends_body_id():
    api, session = client_for(fake_response(204))

    api.update_book(5, BookUpdate(id=5, title="x"))

    method, url, kwargs = session.calls[0]
    assert (method, url) == ("PUT", "http://books.test/api/books/5")
    assert kwargs["json"]["bookID"] == 5


def test_404_maps_to_not_found():
    api, _ = client_for(fake_response(404, {"detail": "Book not found"}))

    with pytest.raises(BookNotFoundError) as exc:
        api.get_book(9)

    assert exc.value.book_id == 9


def test_400_maps_to_bad_request():
    api, _ = client_for(fake_response(400, {"detail": "ID mismatch"}))

    with pytest.raises(BadRequestError, match="ID mismatch"):
        api.update_book(1, BookUpdate(id=2))


def test_other_errors_keep_status():
    api, _ = client_for(fake_response(500, {"detail": "server exploded"}))

    with pytest.raises(CatalogApiError) as exc:
        api.delete_book(1)

    assert exc.value.status_code == 500
    assert exc.value.message == "server exploded"


def test_connection_failure_is_transient_and_not_retried():
    api, session = client_for(error=requests.ConnectionError("refused"))

    with pytest.raises(TransientNetworkError):
        api.list_books()

    assert len(session.calls) == 1
