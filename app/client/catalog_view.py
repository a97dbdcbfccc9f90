import logging
from concurrent.futures import Executor, Future
from typing import List, Sequence

from app.client.api import CatalogApiClient
from app.client.cancellation import ScopeOwner
from app.client.cart import Cart
from app.client.errors import CatalogApiError
from app.constants.catalog import (
    ALL_CATEGORIES,
    DEFAULT_PAGE_SIZE,
    LOAD_ERROR_MESSAGE,
    PAGE_SIZE_OPTIONS,
    SORT_TRANSITIONS,
)
from app.schemas.book_schemas import BookResponse
from app.utils.pagination import paginate

logger = logging.getLogger(__name__)


def filter_books(books: Sequence[BookResponse], category: str) -> List[BookResponse]:
    if category == ALL_CATEGORIES:
        return list(books)
    return [book for book in books if book.classification == category]


def title_sort_key(book: BookResponse):
    # case-insensitive order, original case breaks ties
    return (book.title.casefold(), book.title)


def sort_books(books: Sequence[BookResponse], direction: str | None) -> List[BookResponse]:
    if direction is None:
        return list(books)
    return sorted(books, key=title_sort_key, reverse=(direction == "desc"))


def category_options(books: Sequence[BookResponse]) -> List[str]:
    seen = dict.fromkeys(book.classification for book in books)
    return [ALL_CATEGORIES, *seen]


class CatalogView:
    """
    State behind the book list screen.

    The fetched list is kept as an immutable tuple; the visible page is always
    derived from it as filter -> sort -> paginate, so repeated sort toggles
    never compound.
    """

    def __init__(self, api: CatalogApiClient, cart: Cart, page_size: int = DEFAULT_PAGE_SIZE):
        self._api = api
        self.cart = cart

        self._books: tuple[BookResponse, ...] = ()
        self._scopes = ScopeOwner()

        self.loading = True
        self.error: str | None = None

        self.selected_category = ALL_CATEGORIES
        self.sort_direction: str | None = None
        self.page_size = self._check_page_size(page_size)
        self.current_page = 1

    # ---------- lifecycle ----------

    def mount(self, executor: Executor | None = None) -> Future | None:
        """Fetch the full list, in the background when an executor is given."""
        if executor is not None:
            return executor.submit(self.refresh)
        self.refresh()
        return None

    def unmount(self) -> None:
        self._scopes.abort()

    def refresh(self) -> None:
        scope = self._scopes.open()

        try:
            books = self._api.list_books()
        except CatalogApiError as e:
            if scope.aborted:
                logger.debug(f"Ignoring failure of an aborted book fetch: {e}")
                return
            logger.error(f"Error fetching books: {e}")
            self.error = LOAD_ERROR_MESSAGE
            self.loading = False
            return

        if scope.aborted:
            logger.debug("Discarding book list from an aborted fetch")
            return

        self._books = tuple(books)
        self.error = None
        self.loading = False

    # ---------- inputs ----------

    @staticmethod
    def _check_page_size(page_size: int) -> int:
        if page_size not in PAGE_SIZE_OPTIONS:
            raise ValueError(f"page size must be one of {PAGE_SIZE_OPTIONS}, got {page_size}")
        return page_size

    def select_category(self, category: str) -> None:
        self.selected_category = category
        self.current_page = 1

    def set_page_size(self, page_size: int) -> None:
        self.page_size = self._check_page_size(page_size)
        self.current_page = 1

    def go_to_page(self, page: int) -> None:
        self.current_page = max(page, 1)

    def toggle_sort(self) -> None:
        self.sort_direction = SORT_TRANSITIONS[self.sort_direction]

    # ---------- derived ----------

    @property
    def books(self) -> tuple[BookResponse, ...]:
        return self._books

    @property
    def categories(self) -> List[str]:
        return category_options(self._books)

    @property
    def filtered_books(self) -> List[BookResponse]:
        filtered = filter_books(self._books, self.selected_category)
        return sort_books(filtered, self.sort_direction)

    @property
    def page(self):
        return paginate(items=self.filtered_books, page=self.current_page, limit=self.page_size)

    @property
    def total_pages(self) -> int:
        return self.page["total_pages"]

    @property
    def visible_books(self) -> List[BookResponse]:
        if self.loading or self.error:
            return []
        return self.page["results"]

    # ---------- cart ----------

    def add_to_cart(self, book: BookResponse) -> None:
        self.cart.add_book(book, quantity=1)

    def cart_summary(self) -> str:
        count = self.cart.total_items
        plural = "s" if count != 1 else ""
        return f"{count} item{plural} | Total: ${self.cart.total_cost}"
