class CatalogApiError(Exception):
    """
    Base error for calls to the catalog API.

    Carries the HTTP status when the server answered, None otherwise.
    """

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class BookNotFoundError(CatalogApiError):
    """The referenced book does not exist (or was deleted mid-update)."""

    def __init__(self, book_id: int):
        super().__init__(f"Book not found: {book_id}", status_code=404)
        self.book_id = book_id


class BadRequestError(CatalogApiError):
    """The server rejected the request, e.g. an id mismatch on update."""

    def __init__(self, message: str):
        super().__init__(message, status_code=400)


class TransientNetworkError(CatalogApiError):
    """The request never got an HTTP answer (connection refused, timeout)."""
