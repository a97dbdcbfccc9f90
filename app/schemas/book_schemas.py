from decimal import Decimal
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_serializer


# JSON uses camel case (bookID, pageCount); python attributes stay snake case.
# Both spellings are accepted on input.

class BookFields(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    title: str = ""
    author: str = ""
    publisher: str = ""
    isbn: str = ""
    classification: str = ""
    page_count: int = Field(
        default=0,
        validation_alias=AliasChoices("pageCount", "page_count"),
        serialization_alias="pageCount",
    )
    # same precision as the column; more decimals are rejected, not rounded
    price: Decimal = Field(default=Decimal("0"), max_digits=10, decimal_places=2)

    @field_serializer("price")
    def serialize_price(self, price: Decimal) -> float:
        return float(price)


class BookCreate(BookFields):
    """Body of POST /api/books. Any bookID sent by the client is ignored."""


class BookUpdate(BookFields):
    """Body of PUT /api/books/{id}. bookID must match the path id."""

    id: Optional[int] = Field(
        default=None,
        validation_alias=AliasChoices("bookID", "id"),
        serialization_alias="bookID",
    )


class BookResponse(BookFields):
    id: int = Field(
        validation_alias=AliasChoices("bookID", "id"),
        serialization_alias="bookID",
    )
