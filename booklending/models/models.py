from sqlalchemy import Column, Integer, String, Boolean, CheckConstraint

from booklending.core.database import Base


class Book(Base):
    __tablename__ = "books"
    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False, index=True)
    author = Column(String, nullable=False, index=True)
    is_available = Column(Boolean, nullable=False, default=True)
    # weak reference to users.id, not a foreign key
    borrower_id = Column(Integer, nullable=True, index=True)

    __table_args__ = (
        CheckConstraint(
            "(is_available AND borrower_id IS NULL) OR "
            "(NOT is_available AND borrower_id IS NOT NULL)",
            name="ck_books_borrower_matches_availability",
        ),
    )


class User(Base):
    __tablename__ = "users"
    id = Column(Integer, primary_key=True, index=True)
    user_name = Column(String, nullable=False)
