"""Book of the day endpoints for API v1."""

from fastapi import APIRouter, Depends, HTTPException, status

from dashboard_api.app.schemas.base import DeleteResult
from dashboard_api.app.schemas.daily_book import DailyBookCreate, DailyBookRead, DailyBookUpdate
from dashboard_api.app.services import DashboardServices

from .deps import day_param, get_services


router = APIRouter()


@router.get("", response_model=DailyBookRead)
async def get_book(
    day: str = Depends(day_param),
    services: DashboardServices = Depends(get_services),
) -> DailyBookRead:
    return await services.books.require(day)


@router.put("", response_model=DailyBookRead)
async def put_book(
    book_in: DailyBookCreate,
    services: DashboardServices = Depends(get_services),
) -> DailyBookRead:
    """Set the book for the day in the body, replacing any previous pick."""
    return await services.books.upsert(book_in)


@router.patch("", response_model=DailyBookRead)
async def update_book(
    book_in: DailyBookUpdate,
    day: str = Depends(day_param),
    services: DashboardServices = Depends(get_services),
) -> DailyBookRead:
    book = await services.books.update(book_in, day)
    if book is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Daily book not found")
    return book


@router.delete("", response_model=DeleteResult)
async def delete_book(
    day: str = Depends(day_param),
    services: DashboardServices = Depends(get_services),
) -> DeleteResult:
    if not await services.books.delete(day):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Daily book not found")
    return DeleteResult()
