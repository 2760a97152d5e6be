from sqlalchemy.orm import Session
from sqlalchemy import select
from models.user import User


class UserRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_by_username(self, username: str) -> User | None:
        return self.db.execute(select(User).where(User.username == username)).scalar_one_or_none()

    def get_by_id(self, user_id: int) -> User | None:
        return self.db.get(User, user_id)

    def create(self, *, username: str, name: str, password_hash: str, commit: bool = True) -> User:
        user = User(username=username, name=name, password_hash=password_hash)
        self.db.add(user)
        if not commit:
            self.db.flush()
            return user
        self.db.commit()
        self.db.refresh(user)
        return user
