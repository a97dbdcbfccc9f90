from decimal import Decimal

from pydantic import AliasChoices, BaseModel, Field, field_serializer


class CartItem(BaseModel):
    book_id: int = Field(
        validation_alias=AliasChoices("bookID", "book_id"),
        serialization_alias="bookID",
    )
    title: str
    # captured when the book was added; never refreshed from the server
    price: Decimal
    quantity: int = Field(default=1, gt=0)

    @field_serializer("price")
    def serialize_price(self, price: Decimal) -> float:
        return float(price)

    @property
    def subtotal(self) -> Decimal:
        return self.price * self.quantity
