from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class LanguageOut(CamelModel):
    id: int
    name: str
    user_id: int
    head: int | None = None
    total_score: int


class WordOut(CamelModel):
    id: int
    original: str
    translation: str
    memory_value: int
    correct_count: int
    incorrect_count: int


class LanguageChainOut(BaseModel):
    language: LanguageOut
    words: list[WordOut]


class GuessIn(BaseModel):
    guess: str | None = None


class HeadOut(CamelModel):
    next_word: str
    total_score: int
    word_correct_count: int
    word_incorrect_count: int


class GuessOut(HeadOut):
    answer: str
    is_correct: bool
