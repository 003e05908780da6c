from fastapi import APIRouter, Depends
from sqlmodel import Session

from models.common import get_session
from models.users import (
    EmailRequest,
    LoginRequest,
    ResetPasswordRequest,
    SignupRequest,
    UserInfo,
    UserSearchResult,
    VerifyEmailRequest,
)
from routes.deps import current_email
from routes.ratelimit import auth_limiter
from services import users
from services.errors import InvalidRequestError

router = APIRouter()


@router.post("/signup", dependencies=[Depends(auth_limiter)])
async def signup(body: SignupRequest, session: Session = Depends(get_session)):
    users.signup(session, body)
    return {"message": "Signup successful. Please verify your email."}


@router.post("/login", dependencies=[Depends(auth_limiter)])
async def login(body: LoginRequest, session: Session = Depends(get_session)):
    return {"token": users.login(session, body.email, body.password)}


@router.post("/resend-otp", dependencies=[Depends(auth_limiter)])
async def resend_otp(body: EmailRequest, session: Session = Depends(get_session)):
    users.resend_otp(session, body.email)
    return {"message": "A new OTP has been sent to your email address."}


@router.post("/verify-email")
async def verify_email(
    body: VerifyEmailRequest, session: Session = Depends(get_session)
):
    token = users.verify_email(session, body.email, body.otp)
    return {"message": "Email verified successfully", "token": token}


@router.post("/forgot-password")
async def forgot_password(body: EmailRequest, session: Session = Depends(get_session)):
    if not body.email.strip():
        raise InvalidRequestError("Email is required")
    users.forgot_password(session, body.email)
    return {"message": "If the email exists, an OTP has been sent."}


@router.post("/reset-password")
async def reset_password(
    body: ResetPasswordRequest, session: Session = Depends(get_session)
):
    users.reset_password(session, body.email, body.otp, body.new_password)
    return {"message": "Password has been reset successfully."}


@router.get("/me", response_model=UserInfo)
async def me(
    email: str = Depends(current_email), session: Session = Depends(get_session)
):
    return users.get_user_info(session, email)


@router.get("/users/search", response_model=list[UserSearchResult])
async def search_users(
    query: str = "",
    email: str = Depends(current_email),
    session: Session = Depends(get_session),
):
    if not query.strip():
        raise InvalidRequestError("Query parameter is required")
    return users.search_users(session, email, query)
