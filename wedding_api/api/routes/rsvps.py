from fastapi import APIRouter, Depends, status
from wedding_api.schemas import RsvpCreate, RsvpOut, ErrorOut
from wedding_api.db.session import get_session
from wedding_api.services.rsvp_service import RSVPService
from sqlalchemy.ext.asyncio import AsyncSession

router = APIRouter(prefix="/rsvps", tags=["rsvps"])


def get_rsvp_service(session: AsyncSession = Depends(get_session)) -> RSVPService:
    return RSVPService(session)


@router.post(
    "",
    response_model=RsvpOut,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorOut}},
)
async def create_rsvp_endpoint(
    payload: RsvpCreate,
    rsvp_service: RSVPService = Depends(get_rsvp_service)
):
    """Submit an attendance request. New RSVPs start as PENDING."""
    return await rsvp_service.create_rsvp(payload)


@router.get("/{rsvp_id}", response_model=RsvpOut, responses={404: {"model": ErrorOut}})
async def get_rsvp_endpoint(
    rsvp_id: str,
    rsvp_service: RSVPService = Depends(get_rsvp_service)
):
    return await rsvp_service.get_rsvp(rsvp_id)
