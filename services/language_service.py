import logging

from sqlalchemy.orm import Session

from core.chain import Chain
from core.exceptions import DataIntegrityError, EmptyCollectionError, InvalidGuessInput
from models.language import Language
from models.word import Word
from repositories.language_repo import LanguageRepository
from services.chain_mapper import build_chain, serialize_for_persistence
from services.scheduler import GuessResult, apply_guess

logger = logging.getLogger(__name__)


# seeded for every new account, in chain order
DEFAULT_LANGUAGES: dict[str, list[tuple[str, str]]] = {
    "l337$p34k": [
        ("1337", "leet"),
        ("h3110", "hello"),
        ("c001", "cool"),
        ("7r4n$l473", "translate"),
        ("w3rd", "word"),
        ("4m4z1n5", "amazing"),
        ("d0g", "dog"),
        ("c47", "cat"),
    ],
    "French": [
        ("entraine toi", "practice"),
        ("bonjour", "hello"),
        ("maison", "house"),
        ("développeur", "developer"),
        ("traduire", "translate"),
        ("incroyable", "amazing"),
        ("chien", "dog"),
        ("chat", "cat"),
    ],
}


class LanguageService:
    def __init__(self, db: Session):
        self.repo = LanguageRepository(db)

    def list_languages(self, user_id: int) -> list[Language]:
        return self.repo.list_languages(user_id)

    def get_language(self, language_id: int) -> Language | None:
        return self.repo.get_language(language_id)

    def get_head(self, language: Language) -> Word:
        if language.head is None:
            raise EmptyCollectionError()
        word = self.repo.get_head_word(language.id)
        if word is None:
            raise DataIntegrityError(f"Language {language.id}: head points at missing word {language.head}")
        return word

    def get_chain(self, language: Language) -> Chain:
        words = self.repo.get_words(language.id)
        if language.head is None and not words:
            return Chain(id=language.id, name=language.name, user_id=language.user_id, total_score=language.total_score or 0)
        return build_chain(language, words)

    def submit_guess(self, language: Language, guess: str | None) -> GuessResult:
        if not guess:
            raise InvalidGuessInput()
        if language.head is None:
            raise EmptyCollectionError()

        expected_head = language.head
        chain = build_chain(language, self.repo.get_words(language.id))
        result = apply_guess(chain, guess)
        self.repo.commit_chain(serialize_for_persistence(chain), expected_head=expected_head)

        logger.info(
            "Language %s: guess %s, word moved back %s, total score %s",
            language.id,
            "correct" if result.is_correct else "incorrect",
            result.memory_value,
            result.total_score,
        )
        return result

    def seed_default_languages(self, user_id: int, *, commit: bool = True) -> list[Language]:
        return [
            self.repo.create_language(user_id=user_id, name=name, pairs=pairs, commit=commit)
            for name, pairs in DEFAULT_LANGUAGES.items()
        ]
