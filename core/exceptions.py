class WordChainError(Exception):
    """Base class for failures raised by the word-chain core."""

    status_code: int = 500
    detail: str = "Word chain error"

    def __init__(self, detail: str | None = None):
        if detail is not None:
            self.detail = detail
        super().__init__(self.detail)


class DataIntegrityError(WordChainError):
    """Stored head/next pointers do not form a valid chain over the language's words."""

    status_code = 500
    detail = "Stored word chain is corrupted"


class EmptyCollectionError(WordChainError):
    status_code = 400
    detail = "Language has no words"


class InvalidGuessInput(WordChainError):
    status_code = 400
    detail = "Missing 'guess' in request body"


class StaleChainError(WordChainError):
    """The language header moved on between reading the chain and writing it back."""

    status_code = 409
    detail = "Language was updated by another request, fetch the head and try again"
