from datetime import timedelta

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from authx import AuthX, AuthXConfig, TokenPayload
from core.config import settings
from core.database import get_db
from schemas.auth import LoginIn, TokenOut
from services.auth_services import AuthService
router = APIRouter(prefix="/api/auth", tags=["auth"])

_cookie_samesite = settings.JWT_COOKIE_SAMESITE.lower() if settings.JWT_COOKIE_SAMESITE else None
_cookie_domain = settings.JWT_COOKIE_DOMAIN or None

config = AuthXConfig(
    JWT_SECRET_KEY=settings.SECRET_KEY,
    JWT_ALGORITHM=settings.JWT_ALG,
    JWT_ACCESS_TOKEN_EXPIRES=timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
    JWT_TOKEN_LOCATION=["headers", "cookies"],
    JWT_ACCESS_COOKIE_NAME=settings.JWT_ACCESS_COOKIE_NAME,
    JWT_COOKIE_SAMESITE=_cookie_samesite or "lax",
    JWT_COOKIE_SECURE=settings.JWT_COOKIE_SECURE,
    JWT_COOKIE_DOMAIN=_cookie_domain,
    JWT_COOKIE_CSRF_PROTECT=settings.JWT_COOKIE_CSRF_PROTECT,
)

security = AuthX(config=config)


def current_user_id(payload: TokenPayload = Depends(security.access_token_required)) -> int:
    try:
        return int(payload.sub)
    except (TypeError, ValueError) as exc:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized request") from exc


def _issue_token(user_id: int, response: Response) -> TokenOut:
    token = security.create_access_token(uid=str(user_id))
    security.set_access_cookies(token, response)
    return TokenOut(auth_token=token)


@router.post("/token", response_model=TokenOut)
async def post_login(response: Response, data: LoginIn, db: Session = Depends(get_db)):
    svc = AuthService(db)
    user = svc.login(username=data.username, password=data.password)
    return _issue_token(user.id, response)


@router.patch("/token", response_model=TokenOut)
async def refresh_token(
    response: Response,
    user_id: int = Depends(current_user_id),
    db: Session = Depends(get_db),
):
    if AuthService(db).get_user(user_id) is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized request")
    return _issue_token(user_id, response)


@router.get("/me")
async def me(user_id: int = Depends(current_user_id)):
    return {"user_id": user_id}
