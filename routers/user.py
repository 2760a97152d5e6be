from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from core.database import get_db
from schemas.auth import RegisterIn, UserOut
from services.auth_services import AuthService

router = APIRouter(prefix="/api/user", tags=["users"])


@router.post("", response_model=UserOut, status_code=201)
async def register(data: RegisterIn, db: Session = Depends(get_db)):
    svc = AuthService(db)
    user = svc.register(username=data.username, name=data.name, password=data.password)
    return UserOut.model_validate(user, from_attributes=True)
