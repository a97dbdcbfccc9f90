import json
import logging
from decimal import Decimal
from typing import List

from pydantic import TypeAdapter, ValidationError

from app.client.storage import SessionStorage
from app.config import settings
from app.schemas.book_schemas import BookResponse
from app.schemas.cart_schemas import CartItem

logger = logging.getLogger(__name__)

CENTS = Decimal("0.01")

_items_adapter = TypeAdapter(List[CartItem])


class Cart:
    """
    Session-scoped shopping cart keyed by book id.

    Holds at most one CartItem per book. Every mutation writes the whole cart
    back to session storage before returning.
    """

    def __init__(self, storage: SessionStorage, key: str | None = None):
        self._storage = storage
        self._key = key or settings.cart_storage_key
        self._items: dict[int, CartItem] = self._restore()

    def _restore(self) -> dict[int, CartItem]:
        raw = self._storage.get_item(self._key)
        if raw is None:
            return {}

        try:
            # prices stay exact decimals
            saved = _items_adapter.validate_python(json.loads(raw, parse_float=Decimal))
        except ValidationError as e:
            logger.warning(f"Discarding invalid cart in session storage: {e.error_count()} errors")
            return {}
        except ValueError as e:
            logger.warning(f"Discarding unparseable cart in session storage: {e}")
            return {}

        items: dict[int, CartItem] = {}
        for item in saved:
            existing = items.get(item.book_id)
            if existing:
                item = existing.model_copy(update={"quantity": existing.quantity + item.quantity})
            items[item.book_id] = item
        return items

    def _persist(self) -> None:
        payload = _items_adapter.dump_json(list(self._items.values()), by_alias=True)
        self._storage.set_item(self._key, payload.decode("utf-8"))

    def add(self, item: CartItem) -> None:
        existing = self._items.get(item.book_id)
        if existing:
            self._items[item.book_id] = existing.model_copy(
                update={"quantity": existing.quantity + item.quantity}
            )
        else:
            self._items[item.book_id] = item.model_copy()

        self._persist()

    def add_book(self, book: BookResponse, quantity: int = 1) -> None:
        self.add(CartItem(book_id=book.id, title=book.title, price=book.price, quantity=quantity))

    def remove(self, book_id: int) -> None:
        if self._items.pop(book_id, None) is None:
            return
        self._persist()

    def clear(self) -> None:
        self._items.clear()
        self._persist()

    @property
    def items(self) -> List[CartItem]:
        return list(self._items.values())

    def __len__(self) -> int:
        return len(self._items)

    @property
    def total_items(self) -> int:
        return sum(item.quantity for item in self._items.values())

    @property
    def total_cost(self) -> Decimal:
        total = sum((item.subtotal for item in self._items.values()), Decimal("0"))
        return total.quantize(CENTS)
