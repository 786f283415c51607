from pydantic import BaseModel, ConfigDict, Field, constr, model_validator
from typing import Optional


class BookBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: constr(strip_whitespace=True, min_length=1)
    author: constr(strip_whitespace=True, min_length=1)


class BookCreate(BookBase):
    id: Optional[int] = None
    is_available: bool = Field(default=True, alias="available")
    borrower_id: Optional[int] = Field(default=None, alias="borrowerId")

    @model_validator(mode="after")
    def borrower_matches_availability(self):
        if (self.borrower_id is None) != self.is_available:
            raise ValueError("borrowerId must be set if and only if the book is not available")
        return self


class BookUpdate(BookBase):
    pass


class BookOut(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    title: str
    author: str
    is_available: bool = Field(alias="available")
    borrower_id: Optional[int] = Field(default=None, alias="borrowerId")


class UserCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[int] = None
    user_name: constr(min_length=1) = Field(alias="userName")


class UserOut(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    user_name: str = Field(alias="userName")
