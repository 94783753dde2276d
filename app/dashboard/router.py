from fastapi import APIRouter

from app.dashboard.pages import PAGES


router = APIRouter(prefix="/dashboard")


@router.get("/pages")
def get_pages():
    """Query names loaded by each dashboard page."""
    return {"data": {page: list(names) for page, names in PAGES.items()}}
