import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from core.database import get_db
from core.exceptions import DataIntegrityError, WordChainError
from models.language import Language
from routers.auth import current_user_id
from schemas.language import GuessIn, GuessOut, HeadOut, LanguageChainOut, LanguageOut, WordOut
from services.language_service import LanguageService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/language", tags=["language"])


def _to_http(exc: WordChainError) -> HTTPException:
    if isinstance(exc, DataIntegrityError):
        logger.error("Corrupted word chain: %s", exc.detail)
    return HTTPException(status_code=exc.status_code, detail=exc.detail)


def _owned_language(svc: LanguageService, language_id: int, user_id: int) -> Language:
    language = svc.get_language(language_id)
    if language is None:
        raise HTTPException(status_code=404, detail="Language doesn't exist")
    if language.user_id != user_id:
        raise HTTPException(status_code=403, detail="That language doesn't belong to you! Silly!")
    return language


@router.get("", response_model=list[LanguageOut])
async def list_languages(
    user_id: int = Depends(current_user_id),
    db: Session = Depends(get_db),
):
    svc = LanguageService(db)
    return [LanguageOut.model_validate(language) for language in svc.list_languages(user_id)]


@router.get("/{language_id}", response_model=LanguageChainOut)
async def get_language(
    language_id: int,
    user_id: int = Depends(current_user_id),
    db: Session = Depends(get_db),
):
    svc = LanguageService(db)
    language = _owned_language(svc, language_id, user_id)
    try:
        chain = svc.get_chain(language)
    except WordChainError as exc:
        raise _to_http(exc) from exc
    return LanguageChainOut(
        language=LanguageOut.model_validate(language),
        words=[WordOut.model_validate(word) for word in chain],
    )


@router.get("/{language_id}/head", response_model=HeadOut)
async def get_language_head(
    language_id: int,
    user_id: int = Depends(current_user_id),
    db: Session = Depends(get_db),
):
    svc = LanguageService(db)
    language = _owned_language(svc, language_id, user_id)
    try:
        word = svc.get_head(language)
    except WordChainError as exc:
        raise _to_http(exc) from exc
    return HeadOut(
        next_word=word.original,
        total_score=language.total_score or 0,
        word_correct_count=word.correct_count or 0,
        word_incorrect_count=word.incorrect_count or 0,
    )


@router.post("/{language_id}/guess", response_model=GuessOut)
async def post_guess(
    language_id: int,
    data: GuessIn,
    user_id: int = Depends(current_user_id),
    db: Session = Depends(get_db),
):
    svc = LanguageService(db)
    language = _owned_language(svc, language_id, user_id)
    try:
        result = svc.submit_guess(language, data.guess)
    except WordChainError as exc:
        raise _to_http(exc) from exc
    return GuessOut(
        next_word=result.next_word,
        total_score=result.total_score,
        word_correct_count=result.word_correct_count,
        word_incorrect_count=result.word_incorrect_count,
        answer=result.answer,
        is_correct=result.is_correct,
    )
