import logging
from typing import Sequence

from sqlalchemy.exc import InvalidRequestError
from sqlalchemy.orm.exc import StaleDataError
from sqlmodel import Session, select

from app.models.book import Book
from app.schemas.book_schemas import BookFields

logger = logging.getLogger(__name__)

# fields a client may write; id is never among them
WRITABLE_FIELDS = tuple(BookFields.model_fields)


def list_books(session: Session) -> Sequence[Book]:
    return session.exec(select(Book).order_by(Book.id)).all()


def get_book(session: Session, book_id: int) -> Book | None:
    return session.get(Book, book_id)


def insert_book(session: Session, data: BookFields) -> Book:
    book = Book(**data.model_dump(include=set(WRITABLE_FIELDS)))

    session.add(book)
    session.commit()
    session.refresh(book)

    logger.info(f"Created book {book.id} ({book.title!r})")
    return book


def replace_book(session: Session, book_id: int, data: BookFields) -> Book | None:
    """
    Overwrite every writable field of a book.

    Returns None when the row does not exist, including the case where it was
    deleted after the lookup but before the commit.
    """
    book = session.get(Book, book_id)
    if not book:
        return None

    for field in WRITABLE_FIELDS:
        setattr(book, field, getattr(data, field))

    session.add(book)
    try:
        session.commit()
    except StaleDataError:
        session.rollback()
        logger.warning(f"Book {book_id} vanished before update was written")
        return None

    try:
        session.refresh(book)
    except InvalidRequestError:
        # nothing was dirty, so no UPDATE ran and the delete went unnoticed
        logger.warning(f"Book {book_id} vanished before update was written")
        return None

    logger.info(f"Updated book {book_id}")
    return book


def delete_book(session: Session, book_id: int) -> bool:
    book = session.get(Book, book_id)
    if not book:
        return False

    session.delete(book)
    session.commit()

    logger.info(f"Deleted book {book_id}")
    return True
