from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session
from typing import List, Optional

from booklending.core.database import get_db
from booklending.schemas import schemas
from booklending.services.borrowing import BorrowingService
from booklending.services.catalog import BookCatalog
from booklending.services.users import UserDirectory

books_router = APIRouter(prefix="/books", tags=["books"])
users_router = APIRouter(prefix="/users", tags=["users"])


def get_user_directory(db: Session = Depends(get_db)) -> UserDirectory:
    return UserDirectory(db)


def get_book_catalog(db: Session = Depends(get_db)) -> BookCatalog:
    return BookCatalog(db)


def get_borrowing_service(db: Session = Depends(get_db),
                          users: UserDirectory = Depends(get_user_directory),
                          catalog: BookCatalog = Depends(get_book_catalog)) -> BorrowingService:
    return BorrowingService(db, users, catalog)


# -----------------------------
# Books
# -----------------------------
@books_router.get("", response_model=List[schemas.BookOut])
def list_books(catalog: BookCatalog = Depends(get_book_catalog)):
    return catalog.get_all()


@books_router.get("/search", response_model=List[schemas.BookOut],
                  responses={204: {"description": "No book matches"}})
def search_books(title: Optional[str] = Query(None), author: Optional[str] = Query(None),
                 catalog: BookCatalog = Depends(get_book_catalog)):
    books = catalog.search(title, author)
    if not books:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return books


@books_router.get("/user/{user_id}", response_model=List[schemas.BookOut])
def books_by_user(user_id: int, borrowing: BorrowingService = Depends(get_borrowing_service)):
    return borrowing.books_borrowed_by(user_id)


@books_router.get("/{book_id}", response_model=schemas.BookOut)
def read_book(book_id: int, catalog: BookCatalog = Depends(get_book_catalog)):
    return catalog.get(book_id)


@books_router.post("", response_model=schemas.BookOut, status_code=status.HTTP_201_CREATED)
def create_book(book_in: schemas.BookCreate, catalog: BookCatalog = Depends(get_book_catalog)):
    return catalog.create(book_in)


@books_router.put("/{book_id}", response_model=schemas.BookOut)
def update_book(book_id: int, book_upd: schemas.BookUpdate,
                catalog: BookCatalog = Depends(get_book_catalog)):
    return catalog.update(book_id, book_upd)


@books_router.delete("/{book_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_book(book_id: int, catalog: BookCatalog = Depends(get_book_catalog)):
    # the catalog deletes blindly, the API still answers 404 for unknown ids
    catalog.get(book_id)
    catalog.remove(book_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@books_router.put("/borrow/{book_id}/{user_id}", response_model=schemas.BookOut)
def borrow_book(book_id: int, user_id: int,
                borrowing: BorrowingService = Depends(get_borrowing_service)):
    return borrowing.borrow_book(book_id, user_id)


@books_router.put("/return/{book_id}", response_model=schemas.BookOut)
def return_book(book_id: int, borrowing: BorrowingService = Depends(get_borrowing_service)):
    return borrowing.return_book(book_id)


# -----------------------------
# Users
# -----------------------------
@users_router.get("", response_model=List[schemas.UserOut])
def list_users(users: UserDirectory = Depends(get_user_directory)):
    return users.get_all()


@users_router.get("/{user_id}", response_model=schemas.UserOut)
def read_user(user_id: int, users: UserDirectory = Depends(get_user_directory)):
    return users.get(user_id)


@users_router.post("", response_model=schemas.UserOut, status_code=status.HTTP_201_CREATED)
def create_user(user_in: schemas.UserCreate, users: UserDirectory = Depends(get_user_directory)):
    return users.create(user_in)
