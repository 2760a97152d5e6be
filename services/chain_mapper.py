"""Rows <-> chain mapping: rebuild a chain from stored words and flatten it back."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from core.chain import Chain, ChainWord
from core.exceptions import DataIntegrityError, EmptyCollectionError


@dataclass(frozen=True)
class HeaderUpdate:
    id: int
    head: int | None
    total_score: int


@dataclass(frozen=True)
class WordUpdate:
    id: int
    memory_value: int
    correct_count: int
    incorrect_count: int
    next: int | None


@dataclass(frozen=True)
class ChainUpdate:
    header: HeaderUpdate
    words: list[WordUpdate]


def _zero_or_value(value: int | None) -> int:
    return int(value or 0)


def _to_chain_word(row) -> ChainWord:
    return ChainWord(
        id=row.id,
        original=row.original,
        translation=row.translation,
        memory_value=max(int(row.memory_value or 1), 1),
        correct_count=_zero_or_value(row.correct_count),
        incorrect_count=_zero_or_value(row.incorrect_count),
    )


def build_chain(language, words: Iterable) -> Chain:
    """Follow ``head``/``next`` pointers through ``words`` and return the chain.

    ``language`` and the word rows only need attribute access, so ORM rows and
    plain namespaces both work.  Any pointer that leaves the supplied set,
    loops back, or leaves rows unreachable means the stored chain is broken.
    """
    if language.head is None:
        raise EmptyCollectionError()

    rows = {}
    for row in words:
        if row.id in rows:
            raise DataIntegrityError(f"Word {row.id} appears twice in language {language.id}")
        rows[row.id] = row

    chain = Chain(
        id=language.id,
        name=language.name,
        user_id=getattr(language, "user_id", None),
        total_score=_zero_or_value(language.total_score),
    )

    tail = None
    word_id = language.head
    while word_id is not None:
        row = rows.get(word_id)
        if row is None:
            source = "head" if tail is None else f"word {tail}"
            raise DataIntegrityError(
                f"Language {language.id}: {source} points at word {word_id} which is not in the language"
            )
        if word_id in chain:
            raise DataIntegrityError(f"Language {language.id}: word {word_id} is linked twice (cycle)")
        chain.insert_at_tail(_to_chain_word(row))
        tail = word_id
        word_id = row.next

    if len(chain) != len(rows):
        orphans = sorted(set(rows) - {word.id for word in chain})
        raise DataIntegrityError(f"Language {language.id}: words {orphans} are not reachable from head")

    return chain


def serialize_for_persistence(chain: Chain) -> ChainUpdate:
    return ChainUpdate(
        header=HeaderUpdate(id=chain.id, head=chain.head, total_score=chain.total_score),
        words=[
            WordUpdate(
                id=word.id,
                memory_value=word.memory_value,
                correct_count=word.correct_count,
                incorrect_count=word.incorrect_count,
                next=next_id,
            )
            for word, next_id in chain.links()
        ],
    )
