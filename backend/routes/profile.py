from fastapi import APIRouter, Depends
from sqlmodel import Session

from models.common import get_session
from models.users import Profile, ProfileUpdate
from routes.deps import current_email
from services import profile as profile_service

router = APIRouter(prefix="/profile")


@router.get("", response_model=Profile)
async def get_profile(
    email: str = Depends(current_email), session: Session = Depends(get_session)
):
    return profile_service.get_profile(session, email)


@router.put("")
async def update_profile(
    body: ProfileUpdate,
    email: str = Depends(current_email),
    session: Session = Depends(get_session),
):
    profile_service.update_profile(session, email, body)
    return {"message": "Successfully updated profile"}
