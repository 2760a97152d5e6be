from sqlalchemy.orm import Session
from fastapi import HTTPException
from repositories.user_repo import UserRepository
from core.security import hash_password, verify_password
from services.language_service import LanguageService
from typing import Union
from pydantic import SecretStr


class AuthService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = UserRepository(db)
        self.languages = LanguageService(db)

    def register(self, *, username: str, name: str, password: Union[str, SecretStr]):
        if self.repo.get_by_username(username):
            raise HTTPException(status_code=400, detail="Username already taken")
        # the account and its starter languages commit together
        try:
            user = self.repo.create(
                username=username, name=name, password_hash=hash_password(password), commit=False
            )
            self.languages.seed_default_languages(user.id, commit=False)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(user)
        return user

    def login(self, *, username: str, password: Union[str, SecretStr]):
        user = self.repo.get_by_username(username)
        if not user or not verify_password(password, user.password_hash):
            raise HTTPException(status_code=400, detail="Incorrect username or password")
        return user

    def get_user(self, user_id: int):
        return self.repo.get_by_id(user_id)
