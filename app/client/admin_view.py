import logging
from typing import Any, List

from app.client.api import CatalogApiClient
from app.client.cancellation import ScopeOwner
from app.client.errors import BookNotFoundError, CatalogApiError
from app.constants.catalog import LOAD_ERROR_MESSAGE
from app.schemas.book_schemas import BookFields, BookResponse, BookUpdate

logger = logging.getLogger(__name__)


class AdminView:
    """
    Book manager screen: one form used for both create and update.

    With an id staged by edit() the form saves as an update of that book,
    otherwise as a new book. Every successful write resets the form and
    refetches the whole list.
    """

    def __init__(self, api: CatalogApiClient):
        self._api = api
        self._scopes = ScopeOwner()

        self.books: List[BookResponse] = []
        self.form = BookFields()
        self.editing_id: int | None = None
        self.error: str | None = None

    def mount(self) -> None:
        self.refresh()

    def unmount(self) -> None:
        self._scopes.abort()

    def refresh(self) -> None:
        scope = self._scopes.open()
        try:
            books = self._api.list_books()
        except CatalogApiError as e:
            if not scope.aborted:
                logger.error(f"Error fetching books: {e}")
                self.error = LOAD_ERROR_MESSAGE
            return

        if scope.aborted:
            logger.debug("Discarding book list from an aborted fetch")
            return

        self.books = list(books)
        if self.error == LOAD_ERROR_MESSAGE:
            self.error = None

    # ---------- form ----------

    def update_form(self, **changes: Any) -> None:
        # numeric fields arrive as text from inputs; validation coerces them
        self.form = BookFields.model_validate({**self.form.model_dump(), **changes})

    def reset_form(self) -> None:
        self.form = BookFields()

    def edit(self, book: BookResponse) -> None:
        self.form = BookFields.model_validate(book.model_dump())
        self.editing_id = book.id

    def cancel_edit(self) -> None:
        self.editing_id = None
        self.reset_form()

    @property
    def submit_label(self) -> str:
        return "Update Book" if self.editing_id is not None else "Add Book"

    # ---------- writes ----------

    def submit(self) -> bool:
        try:
            if self.editing_id is not None:
                book = BookUpdate(**self.form.model_dump(), id=self.editing_id)
                self._api.update_book(self.editing_id, book)
            else:
                self._api.create_book(self.form)
        except CatalogApiError as e:
            # form is kept so the user can retry
            logger.error(f"Saving book failed: {e}")
            self.error = f"Could not save book: {e.message}"
            return False

        self.error = None
        self.editing_id = None
        self.reset_form()
        self.refresh()
        return True

    def delete(self, book_id: int) -> bool:
        try:
            self._api.delete_book(book_id)
        except BookNotFoundError as e:
            # already gone; the list is stale
            logger.warning(f"Delete of missing book: {e}")
            self.error = f"Book {book_id} no longer exists."
            self.refresh()
            return False
        except CatalogApiError as e:
            logger.error(f"Deleting book {book_id} failed: {e}")
            self.error = f"Could not delete book: {e.message}"
            return False

        self.error = None
        if self.editing_id == book_id:
            self.cancel_edit()
        self.refresh()
        return True
