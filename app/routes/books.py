from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from sqlmodel import Session

from app.database import get_session
from app.schemas.book_schemas import BookCreate, BookResponse, BookUpdate
from app.services import book_service

router = APIRouter()


@router.get("", response_model=List[BookResponse])
def list_books(session: Session = Depends(get_session)):
    return book_service.list_books(session)


@router.get("/{book_id}", response_model=BookResponse)
def get_book(book_id: int, session: Session = Depends(get_session)):
    book = book_service.get_book(session, book_id)
    if not book:
        raise HTTPException(404, "Book not found")

    return book


@router.post("", response_model=BookResponse, status_code=status.HTTP_201_CREATED)
def create_book(
    data: BookCreate,
    request: Request,
    response: Response,
    session: Session = Depends(get_session),
):
    book = book_service.insert_book(session, data)

    response.headers["Location"] = request.url_for("get_book", book_id=book.id).path
    return book


@router.put("/{book_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_book(
    book_id: int,
    data: BookUpdate,
    session: Session = Depends(get_session),
):
    # checked before any lookup or write
    if data.id != book_id:
        raise HTTPException(400, "ID mismatch")

    book = book_service.replace_book(session, book_id, data)
    if not book:
        raise HTTPException(404, "Book not found")

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{book_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_book(book_id: int, session: Session = Depends(get_session)):
    if not book_service.delete_book(session, book_id):
        raise HTTPException(404, "Book not found")

    return Response(status_code=status.HTTP_204_NO_CONTENT)
