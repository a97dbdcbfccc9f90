import logging
from decimal import Decimal
from typing import List

import requests

from app.client.errors import (
    BadRequestError,
    BookNotFoundError,
    CatalogApiError,
    TransientNetworkError,
)
from app.config import settings
from app.schemas.book_schemas import BookCreate, BookFields, BookResponse, BookUpdate

logger = logging.getLogger(__name__)

BOOKS_PATH = "/api/books"


class CatalogApiClient:
    """
    HTTP binding of the catalog API used by the client views.

    No retries: every failure is raised once as a CatalogApiError subclass.
    """

    def __init__(
        self,
        base_url: str | None = None,
        session: requests.Session | None = None,
        timeout: float | None = None,
    ):
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout if timeout is not None else settings.request_timeout

    def _request(self, method: str, path: str, *, book_id: int | None = None, **kwargs):
        url = f"{self.base_url}{path}"
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            logger.error(f"{method} {url} failed: {e}")
            raise TransientNetworkError(f"Could not reach catalog API: {e}") from e

        if response.status_code == 404:
            raise BookNotFoundError(book_id)
        if response.status_code == 400:
            raise BadRequestError(_detail(response))
        if response.status_code >= 400:
            raise CatalogApiError(_detail(response), status_code=response.status_code)

        return response

    def list_books(self) -> List[BookResponse]:
        response = self._request("GET", BOOKS_PATH)
        return [BookResponse.model_validate(item) for item in response.json(parse_float=Decimal)]

    def get_book(self, book_id: int) -> BookResponse:
        response = self._request("GET", f"{BOOKS_PATH}/{book_id}", book_id=book_id)
        return BookResponse.model_validate(response.json(parse_float=Decimal))

    def create_book(self, book: BookFields) -> BookResponse:
        response = self._request(
            "POST",
            BOOKS_PATH,
            json=BookCreate.model_validate(book).model_dump(mode="json", by_alias=True),
        )
        return BookResponse.model_validate(response.json(parse_float=Decimal))

    def update_book(self, book_id: int, book: BookFields) -> None:
        payload = BookUpdate.model_validate(book).model_dump(mode="json", by_alias=True)
        self._request("PUT", f"{BOOKS_PATH}/{book_id}", book_id=book_id, json=payload)

    def delete_book(self, book_id: int) -> None:
        self._request("DELETE", f"{BOOKS_PATH}/{book_id}", book_id=book_id)


def _detail(response: requests.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or f"HTTP {response.status_code}"

    if isinstance(body, dict) and "detail" in body:
        return str(body["detail"])
    return str(body)
