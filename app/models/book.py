from decimal import Decimal
from typing import Optional

from sqlmodel import SQLModel, Field


class Book(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)

    title: str = ""
    author: str = ""
    publisher: str = ""
    isbn: str = ""          # not validated
    classification: str = Field(default="", index=True)

    page_count: int = 0
    price: Decimal = Field(default=Decimal("0"), max_digits=10, decimal_places=2)
