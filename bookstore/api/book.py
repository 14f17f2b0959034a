from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import RedirectResponse
from sqlalchemy.ext.asyncio import AsyncSession
from datetime import date
from typing import Optional
from bookstore.db.session import get_db
from bookstore.schemas.book import BookCreate
from bookstore.services.book import get_book_service
from bookstore.services.grouping import BOOK_GROUP_FIELDS
from bookstore.utils.templates import templates

router = APIRouter()


def book_form(
    title: Optional[str] = Form(None),
    author: Optional[str] = Form(None),
    isbn: Optional[str] = Form(None),
    publish_date: Optional[date] = Form(None),
) -> BookCreate:
    return BookCreate(title=title, author=author, isbn=isbn, publish_date=publish_date)


@router.get("")
async def list_books(request: Request, session: AsyncSession = Depends(get_db)):
    books = await get_book_service(session).list_books()
    return templates.TemplateResponse(request, "books/index.html", {"books": books})


@router.post("/add")
async def add_book(book: BookCreate = Depends(book_form), session: AsyncSession = Depends(get_db)):
    await get_book_service(session).create_book(book)
    return RedirectResponse("/books", status_code=303)


@router.get("/edit/{book_id}")
async def edit_book_form(book_id: str, request: Request, session: AsyncSession = Depends(get_db)):
    book = await get_book_service(session).get_book(book_id)
    return templates.TemplateResponse(request, "books/edit.html", {"book": book})


@router.post("/edit/{book_id}")
async def edit_book(book_id: str, book: BookCreate = Depends(book_form), session: AsyncSession = Depends(get_db)):
    await get_book_service(session).update_book(book_id, book)
    return RedirectResponse("/books", status_code=303)


@router.post("/delete/{book_id}")
async def delete_book(book_id: str, session: AsyncSession = Depends(get_db)):
    await get_book_service(session).delete_book(book_id)
    return RedirectResponse("/books", status_code=303)


@router.get("/aggregate")
async def books_by_author(request: Request, session: AsyncSession = Depends(get_db)):
    groups = await get_book_service(session).group_by_author()
    return templates.TemplateResponse(
        request,
        "author_groups.html",
        {"kind": "Books", "groups": groups, "fields": BOOK_GROUP_FIELDS},
    )
