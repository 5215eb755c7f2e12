"""Dashboard Route — the couple's overview."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from weddingsite.api.deps import get_current_user_id
from weddingsite.infrastructure.database import get_db
from weddingsite.schemas.dashboard import DashboardOverview
from weddingsite.services.dashboard_service import DashboardService

router = APIRouter(prefix="/api/v1/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardOverview | None)
async def get_dashboard(
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Null until the user has a profile and a wedding."""
    return await DashboardService(db).get_overview(user_id)
