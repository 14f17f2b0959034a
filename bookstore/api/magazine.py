from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import RedirectResponse
from sqlalchemy.ext.asyncio import AsyncSession
from datetime import date
from typing import Optional
from bookstore.db.session import get_db
from bookstore.schemas.magazine import MagazineCreate
from bookstore.services.magazine import get_magazine_service
from bookstore.services.grouping import MAGAZINE_GROUP_FIELDS
from bookstore.utils.templates import templates

router = APIRouter()


def magazine_form(
    title: Optional[str] = Form(None),
    author: Optional[str] = Form(None),
    isbn: Optional[str] = Form(None),
    publish_date: Optional[date] = Form(None),
    issue: Optional[str] = Form(None),
) -> MagazineCreate:
    return MagazineCreate(title=title, author=author, isbn=isbn, publish_date=publish_date, issue=issue)


@router.get("")
async def list_magazines(request: Request, session: AsyncSession = Depends(get_db)):
    magazines = await get_magazine_service(session).list_magazines()
    return templates.TemplateResponse(request, "magazines/index.html", {"magazines": magazines})


@router.post("/add")
async def add_magazine(magazine: MagazineCreate = Depends(magazine_form), session: AsyncSession = Depends(get_db)):
    await get_magazine_service(session).create_magazine(magazine)
    return RedirectResponse("/magazines", status_code=303)


@router.get("/edit/{magazine_id}")
async def edit_magazine_form(magazine_id: str, request: Request, session: AsyncSession = Depends(get_db)):
    magazine = await get_magazine_service(session).get_magazine(magazine_id)
    return templates.TemplateResponse(request, "magazines/edit.html", {"magazine": magazine})


@router.post("/edit/{magazine_id}")
async def edit_magazine(
    magazine_id: str,
    magazine: MagazineCreate = Depends(magazine_form),
    session: AsyncSession = Depends(get_db),
):
    await get_magazine_service(session).update_magazine(magazine_id, magazine)
    return RedirectResponse("/magazines", status_code=303)


@router.post("/delete/{magazine_id}")
async def delete_magazine(magazine_id: str, session: AsyncSession = Depends(get_db)):
    await get_magazine_service(session).delete_magazine(magazine_id)
    return RedirectResponse("/magazines", status_code=303)


@router.get("/aggregate")
async def magazines_by_author(request: Request, session: AsyncSession = Depends(get_db)):
    groups = await get_magazine_service(session).group_by_author()
    return templates.TemplateResponse(
        request,
        "author_groups.html",
        {"kind": "Magazines", "groups": groups, "fields": MAGAZINE_GROUP_FIELDS},
    )
