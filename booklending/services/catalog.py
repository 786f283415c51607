import logging
from typing import List, Optional

from sqlalchemy import update
from sqlalchemy.orm import Session

from booklending.core.exceptions import DuplicateRecordError, InvalidInputError, NotFoundError
from booklending.models import models
from booklending.schemas import schemas

logger = logging.getLogger(__name__)


class BookCatalog:
    """Lookup, search and maintenance of book records.

    Availability and borrower are only set here on create and through
    :meth:`change_availability`, which :class:`BorrowingService` drives.
    """

    def __init__(self, db: Session):
        self.db = db

    def get_all(self) -> List[models.Book]:
        return self.db.query(models.Book).order_by(models.Book.id).all()

    def get(self, book_id: int) -> models.Book:
        book = self.db.query(models.Book).filter(models.Book.id == book_id).first()
        if not book:
            raise NotFoundError(f"Book not found with id: {book_id}")
        return book

    def exists(self, book_id: int) -> bool:
        return self.db.query(models.Book.id).filter(models.Book.id == book_id).first() is not None

    def search(self, title: Optional[str] = None, author: Optional[str] = None) -> List[models.Book]:
        """Case-insensitive substring search on title AND author.

        A blank parameter matches every book, but at least one of the two must
        carry text.
        """
        title = title.strip() if title is not None else ""
        author = author.strip() if author is not None else ""
        if not title and not author:
            raise InvalidInputError("At least one search parameter (title or author) must be provided")
        query = self.db.query(models.Book).filter(
            models.Book.title.icontains(title, autoescape=True),
            models.Book.author.icontains(author, autoescape=True),
        )
        return query.order_by(models.Book.id).all()

    def create(self, book_in: schemas.BookCreate) -> models.Book:
        # id 0 is treated like an absent id and left to the store
        book_id = book_in.id or None
        if book_id is not None and self.exists(book_id):
            raise DuplicateRecordError(f"Book with ID {book_id} already exists")
        book = models.Book(
            id=book_id,
            title=book_in.title,
            author=book_in.author,
            is_available=book_in.is_available,
            borrower_id=book_in.borrower_id,
        )
        book = self.save(book)
        logger.info(f"Created book id={book.id} title={book.title}")
        return book

    def update(self, book_id: int, book_in: schemas.BookUpdate) -> models.Book:
        book = self.db.query(models.Book).filter(models.Book.id == book_id).first()
        if not book:
            raise NotFoundError(f"Book with ID {book_id} not found")
        book.title = book_in.title
        book.author = book_in.author
        book = self.save(book)
        logger.info(f"Updated book id={book.id}")
        return book

    def remove(self, book_id: int) -> None:
        self.db.query(models.Book).filter(models.Book.id == book_id).delete()
        self.db.commit()
        logger.info(f"Deleted book id={book_id}")

    def save(self, book: models.Book) -> models.Book:
        self.db.add(book)
        self.db.commit()
        self.db.refresh(book)
        return book

    def change_availability(self, book_id: int, was_available: bool, borrower_id: Optional[int]) -> bool:
        """Flip a book's availability in one conditional UPDATE.

        The row only changes if it is still in the ``was_available`` state, so
        two sessions racing on the same book cannot both win. Returns whether
        the row changed; the caller commits.
        """
        result = self.db.execute(
            update(models.Book)
            .where(models.Book.id == book_id, models.Book.is_available == was_available)
            .values(is_available=not was_available, borrower_id=borrower_id)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount == 1
