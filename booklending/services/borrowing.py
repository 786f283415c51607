"""Borrow and return transitions for books.

A book is either Available (``is_available`` true, no borrower) or Borrowed
(``is_available`` false, ``borrower_id`` set). The state check and the write
are one conditional UPDATE, so a failed or losing call leaves the stored book
as it was.
"""
import logging
from typing import List

from sqlalchemy.orm import Session

from booklending.core.exceptions import ConflictError, NotFoundError
from booklending.models import models
from booklending.services.catalog import BookCatalog
from booklending.services.users import UserDirectory

logger = logging.getLogger(__name__)


class BorrowingService:

    def __init__(self, db: Session, users: UserDirectory, catalog: BookCatalog):
        self.db = db
        self.users = users
        self.catalog = catalog

    def borrow_book(self, book_id: int, user_id: int) -> models.Book:
        # the user is checked first, even if the book is missing too
        if not self.users.exists(user_id):
            raise NotFoundError(f"User not found with id: {user_id}")
        book = self.catalog.get(book_id)
        if not self.catalog.change_availability(book_id, was_available=True, borrower_id=user_id):
            self.db.rollback()
            raise ConflictError("Book is already borrowed")
        self.db.commit()
        self.db.refresh(book)
        logger.info(f"User {user_id} borrowed book {book_id}")
        return book

    def return_book(self, book_id: int) -> models.Book:
        book = self.catalog.get(book_id)
        if not self.catalog.change_availability(book_id, was_available=False, borrower_id=None):
            self.db.rollback()
            raise ConflictError("Book is not currently borrowed")
        self.db.commit()
        self.db.refresh(book)
        logger.info(f"Book {book_id} returned")
        return book

    def books_borrowed_by(self, user_id: int) -> List[models.Book]:
        if not self.users.exists(user_id):
            raise NotFoundError(f"User not found with id: {user_id}")
        return (
            self.db.query(models.Book)
            .filter(models.Book.borrower_id == user_id)
            .order_by(models.Book.id)
            .all()
        )
