"""Public Site Routes — what wedding guests reach without an account.

Invariants:
    - No X-User-Id required on any route here
    - Password-protected sites expect the password in X-Site-Password
"""

from fastapi import APIRouter, Depends, Header, Query
from sqlalchemy.ext.asyncio import AsyncSession

from weddingsite.core.errors import ResourceNotFoundError
from weddingsite.infrastructure.database import get_db
from weddingsite.schemas.household import HouseholdSearchResult
from weddingsite.schemas.rsvp import RsvpSubmission
from weddingsite.schemas.website import (
    PublicWebsiteResponse, SitePasswordSubmit, WeddingPageResponse,
)
from weddingsite.services.household_management import HouseholdManagementService
from weddingsite.services.rsvp_submission import RsvpSubmissionService
from weddingsite.services.website_service import WebsiteService

router = APIRouter(prefix="/api/v1/public", tags=["public"])


@router.get("/websites/{sub_url}", response_model=PublicWebsiteResponse)
async def get_public_website(sub_url: str, db: AsyncSession = Depends(get_db)):
    website = await WebsiteService(db).get_by_sub_url(sub_url)
    if not website:
        raise ResourceNotFoundError("Website", message="This website does not exist.")
    return website


@router.get("/weddings/{sub_url}", response_model=WeddingPageResponse)
async def get_wedding_page(
    sub_url: str,
    x_site_password: str | None = Header(default=None),
    db: AsyncSession = Depends(get_db),
):
    return await WebsiteService(db).fetch_wedding_data(sub_url, x_site_password)


@router.post("/weddings/{sub_url}/unlock")
async def unlock_wedding_page(
    sub_url: str,
    body: SitePasswordSubmit,
    db: AsyncSession = Depends(get_db),
):
    return {"success": await WebsiteService(db).verify_password(sub_url, body.password)}


@router.get("/households/search", response_model=list[HouseholdSearchResult])
async def search_households(
    search_text: str = Query(..., min_length=2, max_length=100),
    sub_url: str | None = Query(None),
    db: AsyncSession = Depends(get_db),
):
    return await HouseholdManagementService(db).search_households(search_text, sub_url)


@router.post("/rsvp")
async def submit_rsvp(body: RsvpSubmission, db: AsyncSession = Depends(get_db)):
    return await RsvpSubmissionService(db).submit_rsvp(body)
