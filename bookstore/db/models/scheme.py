from sqlalchemy import Column, String, Integer, Date, DateTime
from sqlalchemy.orm import declarative_base
from datetime import datetime

Base = declarative_base()

# Every column except the key is nullable: the schema is advisory, not enforced.

class Book(Base):
    __tablename__ = "books"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String)
    author = Column(String, index=True)
    isbn = Column(String)
    publish_date = Column(Date)
    created_at = Column(DateTime, default=datetime.now)


class Magazine(Base):
    __tablename__ = "magazines"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String)
    author = Column(String, index=True)
    isbn = Column(String)
    publish_date = Column(Date)
    issue = Column(String)
    created_at = Column(DateTime, default=datetime.now)
