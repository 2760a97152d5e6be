import logging
from typing import Sequence

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from core.exceptions import DataIntegrityError, StaleChainError
from models.language import Language
from models.word import Word
from services.chain_mapper import ChainUpdate

logger = logging.getLogger(__name__)


class LanguageRepository:
    def __init__(self, db: Session):
        self.db = db

    def list_languages(self, user_id: int) -> list[Language]:
        stmt = select(Language).where(Language.user_id == user_id).order_by(Language.id)
        return list(self.db.execute(stmt).scalars())

    def get_language(self, language_id: int) -> Language | None:
        return self.db.get(Language, language_id)

    def get_words(self, language_id: int) -> list[Word]:
        stmt = select(Word).where(Word.language_id == language_id)
        return list(self.db.execute(stmt).scalars())

    def get_head_word(self, language_id: int) -> Word | None:
        stmt = (
            select(Word)
            .join(Language, Language.head == Word.id)
            .where(Language.id == language_id)
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def create_language(
        self,
        *,
        user_id: int,
        name: str,
        pairs: Sequence[tuple[str, str]],
        commit: bool = True,
    ) -> Language:
        """Insert a language and its words linked in the given order.

        With ``commit=False`` the rows are only flushed and the caller owns the
        transaction.
        """
        try:
            language = Language(user_id=user_id, name=name, total_score=0)
            self.db.add(language)
            self.db.flush()

            words = [
                Word(language_id=language.id, original=original, translation=translation, memory_value=1)
                for original, translation in pairs
            ]
            self.db.add_all(words)
            self.db.flush()

            for word, following in zip(words, words[1:]):
                word.next = following.id
            language.head = words[0].id if words else None
            if commit:
                self.db.commit()
            else:
                self.db.flush()
        except Exception:
            self.db.rollback()
            raise
        if commit:
            self.db.refresh(language)
        return language

    def commit_chain(self, chain_update: ChainUpdate, *, expected_head: int | None) -> None:
        """Write a whole chain back atomically.

        The header only moves if its ``head`` is still ``expected_head``; a
        concurrent guess that committed first makes this one roll back.
        """
        header = chain_update.header
        try:
            result = self.db.execute(
                update(Language)
                .where(Language.id == header.id, Language.head == expected_head)
                .values(head=header.head, total_score=header.total_score)
            )
            if result.rowcount != 1:
                raise StaleChainError()

            for word in chain_update.words:
                result = self.db.execute(
                    update(Word)
                    .where(Word.id == word.id, Word.language_id == header.id)
                    .values(
                        next=word.next,
                        memory_value=word.memory_value,
                        correct_count=word.correct_count,
                        incorrect_count=word.incorrect_count,
                    )
                )
                if result.rowcount != 1:
                    raise DataIntegrityError(f"Word {word.id} no longer belongs to language {header.id}")

            self.db.commit()
        except Exception:
            self.db.rollback()
            logger.warning("Rolled back chain write for language %s", header.id)
            raise
