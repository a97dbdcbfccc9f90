from typing import List

from app.client.cart import Cart

EMPTY_CART_MESSAGE = "Your cart is empty."


class CartView:
    """Shopping cart screen: one row per item plus the running total."""

    def __init__(self, cart: Cart):
        self.cart = cart

    @property
    def is_empty(self) -> bool:
        return len(self.cart) == 0

    def rows(self) -> List[dict]:
        return [
            {
                "book_id": item.book_id,
                "title": item.title,
                "price": f"${item.price:.2f}",
                "quantity": item.quantity,
                "subtotal": f"${item.subtotal:.2f}",
            }
            for item in self.cart.items
        ]

    @property
    def total(self) -> str:
        return f"${self.cart.total_cost}"

    def remove(self, book_id: int) -> None:
        self.cart.remove(book_id)

    def clear(self) -> None:
        self.cart.clear()
