"""Utility helpers for test factories."""

from __future__ import annotations

from types import SimpleNamespace

from models.language import Language
from models.user import User
from repositories.language_repo import LanguageRepository


def create_user(db, **kwargs) -> User:
    defaults = {
        "username": "user",
        "name": "Test user",
        "password_hash": "x",
    }
    defaults.update(kwargs)
    user = User(**defaults)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def create_language(db, user_id: int, *, name: str = "Test language", size: int = 5) -> Language:
    pairs = [(f"original {i}", f"translation {i}") for i in range(1, size + 1)]
    return LanguageRepository(db).create_language(user_id=user_id, name=name, pairs=pairs)


def make_header(head, *, id: int = 1, name: str = "Test language", user_id: int = 1, total_score: int = 0):
    return SimpleNamespace(id=id, name=name, user_id=user_id, head=head, total_score=total_score)


def make_rows(*links, memory_values=None):
    """Build word rows from ``(id, next)`` pairs."""
    memory_values = memory_values or {}
    return [
        SimpleNamespace(
            id=word_id,
            original=f"original {word_id}",
            translation=f"translation {word_id}",
            next=next_id,
            memory_value=memory_values.get(word_id, 1),
            correct_count=0,
            incorrect_count=0,
        )
        for word_id, next_id in links
    ]
