from dataclasses import dataclass

from core.chain import Chain
from core.exceptions import EmptyCollectionError


@dataclass(frozen=True)
class GuessResult:
    answer: str
    is_correct: bool
    memory_value: int
    next_word: str
    total_score: int
    word_correct_count: int
    word_incorrect_count: int


def apply_guess(chain: Chain, guess: str) -> GuessResult:
    """Grade ``guess`` against the head word and move that word back.

    A correct answer doubles the word's memory value and scores a point; a
    wrong one resets it to 1.  The new memory value is how many places the word
    is pushed back, so only the answered word changes position.
    """
    word = chain.head_word
    if word is None:
        raise EmptyCollectionError()

    answer = word.translation
    is_correct = guess == answer
    if is_correct:
        word.memory_value = max(word.memory_value, 1) * 2
        word.correct_count += 1
        chain.total_score += 1
    else:
        word.memory_value = 1
        word.incorrect_count += 1

    chain.shift_head_by(word.memory_value)

    next_word = chain.head_word
    return GuessResult(
        answer=answer,
        is_correct=is_correct,
        memory_value=word.memory_value,
        next_word=next_word.original,
        total_score=chain.total_score,
        word_correct_count=next_word.correct_count,
        word_incorrect_count=next_word.incorrect_count,
    )
