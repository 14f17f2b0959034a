import logging
from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession
from bookstore.db.session import get_db
from bookstore.services.book import get_book_service
from bookstore.services.magazine import get_magazine_service
from bookstore.utils.templates import templates

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/")
async def home(request: Request, session: AsyncSession = Depends(get_db)):
    books = await get_book_service(session).list_books()
    magazines = await get_magazine_service(session).list_magazines()
    logger.info(f"Data fetched: {len(books)} books, {len(magazines)} magazines")
    return templates.TemplateResponse(request, "home.html", {"books": books, "magazines": magazines})


@router.get("/health")
def health_check():
    return {"status": "ok"}
