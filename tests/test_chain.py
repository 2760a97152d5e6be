import pytest

from core.chain import Chain, ChainWord


def _word(word_id: int, memory_value: int = 1) -> ChainWord:
    return ChainWord(id=word_id, original=f"o{word_id}", translation=f"t{word_id}", memory_value=memory_value)


def _chain(*ids: int) -> Chain:
    chain = Chain(id=1, name="test")
    for word_id in ids:
        chain.insert_at_tail(_word(word_id))
    return chain


def _ids(chain: Chain) -> list[int]:
    return [word.id for word in chain]


def test_insert_at_head_and_tail():
    chain = Chain(id=1, name="test")
    chain.insert_at_tail(_word(2))
    chain.insert_at_head(_word(1))
    chain.insert_at_tail(_word(3))

    assert _ids(chain) == [1, 2, 3]
    assert chain.head == 1
    assert len(chain) == 3
    assert chain.next_of(3) is None


def test_insert_at_splices_after_predecessor():
    chain = _chain(1, 2, 3)
    chain.insert_at(1, _word(9))
    assert _ids(chain) == [1, 9, 2, 3]

    chain.insert_at(4, _word(10))
    assert _ids(chain) == [1, 9, 2, 3, 10]


@pytest.mark.parametrize("index", [0, -3, 6, 50])
def test_insert_at_without_predecessor_falls_back_to_tail(index):
    chain = _chain(1, 2, 3)
    chain.insert_at(index, _word(9))
    assert _ids(chain)[-1] == 9
    assert _ids(chain)[:-1] == [1, 2, 3]


def test_insert_at_on_empty_chain_becomes_head():
    chain = Chain(id=1, name="test")
    chain.insert_at(3, _word(7))
    assert chain.head == 7
    assert _ids(chain) == [7]


def test_duplicate_word_is_rejected():
    chain = _chain(1, 2)
    with pytest.raises(ValueError):
        chain.insert_at_tail(_word(2))
    assert _ids(chain) == [1, 2]


def test_remove_head():
    chain = _chain(1, 2, 3)
    removed = chain.remove_head()
    assert removed.id == 1
    assert _ids(chain) == [2, 3]
    assert 1 not in chain


def test_remove_head_of_single_node_empties_chain():
    chain = _chain(1)
    chain.remove_head()
    assert chain.head is None
    assert len(chain) == 0
    assert chain.head_word is None


def test_remove_tail():
    chain = _chain(1, 2, 3)
    assert chain.remove_tail().id == 3
    assert _ids(chain) == [1, 2]
    assert chain.next_of(2) is None

    chain.remove_tail()
    chain.remove_tail()
    assert len(chain) == 0


def test_remove_at():
    chain = _chain(1, 2, 3, 4)
    assert chain.remove_at(2).id == 3
    assert _ids(chain) == [1, 2, 4]

    assert chain.remove_at(0).id == 4
    assert chain.remove_at(10).id == 2
    assert _ids(chain) == [1]


def test_removal_from_empty_chain_raises():
    chain = Chain(id=1, name="test")
    with pytest.raises(IndexError):
        chain.remove_head()
    with pytest.raises(IndexError):
        chain.remove_tail()
    with pytest.raises(IndexError):
        chain.remove_at(1)


@pytest.mark.parametrize(
    ("distance", "expected"),
    [
        (1, [2, 1, 3, 4, 5]),
        (2, [2, 3, 1, 4, 5]),
        (3, [2, 3, 4, 1, 5]),
        (4, [2, 3, 4, 5, 1]),
        (8, [2, 3, 4, 5, 1]),
    ],
)
def test_shift_head_by(distance, expected):
    chain = _chain(1, 2, 3, 4, 5)
    chain.shift_head_by(distance)
    assert _ids(chain) == expected
    assert chain.head == 2


def test_shift_head_by_keeps_payload():
    chain = Chain(id=1, name="test")
    chain.insert_at_tail(_word(1, memory_value=4))
    chain.insert_at_tail(_word(2))
    chain.shift_head_by(1)
    assert chain.get(1).memory_value == 4
    assert _ids(chain) == [2, 1]


def test_links_report_successor_ids():
    chain = _chain(3, 1, 2)
    assert [(word.id, next_id) for word, next_id in chain.links()] == [(3, 1), (1, 2), (2, None)]


def test_clear():
    chain = _chain(1, 2)
    chain.clear()
    assert chain.to_list() == []
    assert chain.head is None
