"""In-memory singly-linked chain of words.

Nodes live in an arena keyed by word id; ordering is an explicit next-id map,
so no node ever holds a reference to another node.  A chain is rebuilt for
every request and thrown away afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass
class ChainWord:
    id: int
    original: str
    translation: str
    memory_value: int = 1
    correct_count: int = 0
    incorrect_count: int = 0


class Chain:
    def __init__(self, *, id: int, name: str, user_id: int | None = None, total_score: int = 0):
        self.id = id
        self.name = name
        self.user_id = user_id
        self.total_score = total_score
        self.head: int | None = None
        self._words: dict[int, ChainWord] = {}
        self._next: dict[int, int | None] = {}

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word_id: object) -> bool:
        return word_id in self._words

    def __iter__(self) -> Iterator[ChainWord]:
        for word, _ in self.links():
            yield word

    def links(self) -> Iterator[tuple[ChainWord, int | None]]:
        """Yield ``(word, next_id)`` pairs from head to tail."""
        word_id = self.head
        while word_id is not None:
            next_id = self._next[word_id]
            yield self._words[word_id], next_id
            word_id = next_id

    @property
    def head_word(self) -> ChainWord | None:
        if self.head is None:
            return None
        return self._words[self.head]

    def get(self, word_id: int) -> ChainWord | None:
        return self._words.get(word_id)

    def next_of(self, word_id: int) -> int | None:
        return self._next[word_id]

    def clear(self) -> None:
        self.head = None
        self._words.clear()
        self._next.clear()

    def _register(self, word: ChainWord) -> None:
        if word.id in self._words:
            raise ValueError(f"Word {word.id} is already in chain {self.id}")
        self._words[word.id] = word

    def _find_tail(self) -> int | None:
        tail = self.head
        if tail is None:
            return None
        while self._next[tail] is not None:
            tail = self._next[tail]
        return tail

    def _node_at(self, index: int) -> int | None:
        if index < 0:
            return None
        count = 0
        node = self.head
        while count < index and node is not None:
            node = self._next[node]
            count += 1
        return node

    def insert_at_head(self, word: ChainWord) -> None:
        self._register(word)
        self._next[word.id] = self.head
        self.head = word.id

    def insert_at_tail(self, word: ChainWord) -> None:
        tail = self._find_tail()
        self._register(word)
        self._next[word.id] = None
        if tail is None:
            self.head = word.id
        else:
            self._next[tail] = word.id

    def insert_at(self, index: int, word: ChainWord) -> None:
        """Splice ``word`` in at ``index``.

        Anything that has no predecessor to splice after (index <= 0, an empty
        chain, an index past the end) lands on the tail instead.
        """
        before = self._node_at(index - 1) if index > 0 else None
        if before is None:
            self.insert_at_tail(word)
            return
        self._register(word)
        self._next[word.id] = self._next[before]
        self._next[before] = word.id

    def remove_head(self) -> ChainWord:
        if self.head is None:
            raise IndexError("remove from empty chain")
        removed = self.head
        self.head = self._next.pop(removed)
        return self._words.pop(removed)

    def remove_tail(self) -> ChainWord:
        if self.head is None:
            raise IndexError("remove from empty chain")
        if self._next[self.head] is None:
            return self.remove_head()

        prev = self.head
        current = self._next[prev]
        while self._next[current] is not None:
            prev = current
            current = self._next[current]

        self._next[prev] = None
        del self._next[current]
        return self._words.pop(current)

    def remove_at(self, index: int) -> ChainWord:
        before = self._node_at(index - 1) if index > 0 else None
        if before is None or self._next[before] is None:
            return self.remove_tail()
        removed = self._next[before]
        self._next[before] = self._next.pop(removed)
        return self._words.pop(removed)

    def shift_head_by(self, distance: int) -> None:
        """Move the head word ``distance`` places back.

        The distance is counted from the new first node, so a shift of 1 puts
        the old head right behind the new one.
        """
        word = self.remove_head()
        self.insert_at(distance, word)

    def to_list(self) -> list[ChainWord]:
        return list(self)
