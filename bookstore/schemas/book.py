from pydantic import BaseModel
from datetime import date
from typing import Optional

class BookBase(BaseModel):
    title: Optional[str] = None
    author: Optional[str] = None
    isbn: Optional[str] = None
    publish_date: Optional[date] = None

class BookCreate(BookBase):
    pass
