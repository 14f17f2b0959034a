from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession
from bookstore.db.session import get_db
from bookstore.services.aggregate import get_aggregate_service
from bookstore.utils.templates import templates

router = APIRouter()


@router.get("")
async def combined_by_author(request: Request, session: AsyncSession = Depends(get_db)):
    aggregated = await get_aggregate_service(session).combined_by_author()
    return templates.TemplateResponse(request, "aggregate.html", {"aggregated_data": aggregated})
