import numpy as np
import pytest

from spotle.consts import DEFAULT_MASK_ROWS
from spotle.mask import Mask


def test_default_mask():
    mask = Mask.default()
    assert (mask.max_attempts, mask.word_length) == (6, 5)

    masked_cells = [
        (attempt, position)
        for attempt in range(mask.max_attempts)
        for position in range(mask.word_length)
        if mask.is_masked(attempt, position)
    ]
    assert masked_cells == [(0, 2), (1, 1), (2, 1), (3, 2), (4, 2)]


def test_default_mask_is_cropped_and_padded():
    assert Mask.default(max_attempts=3, word_length=2).to_list() == [
        [False, False],
        [False, True],
        [False, True],
    ]
    assert Mask.default(max_attempts=7, word_length=6).to_list()[5:] == [[False] * 6, [False] * 6]


def test_empty_mask():
    mask = Mask.empty(max_attempts=2, word_length=3)
    assert mask.to_list() == [[False] * 3, [False] * 3]


def test_from_flat():
    assert Mask.from_flat(DEFAULT_MASK_ROWS) == Mask.default(max_attempts=5)
    assert Mask.from_flat([True, False, False, True], word_length=2).to_list() == [[True, False], [False, True]]

    with pytest.raises(ValueError):
        Mask.from_flat([True, False, False], word_length=2)


def test_out_of_range_lookups():
    mask = Mask.default()
    for attempt, position in [(6, 0), (0, 5), (-1, 0), (0, -1)]:
        with pytest.raises(IndexError):
            mask.is_masked(attempt, position)


def test_mask_is_read_only():
    table = np.zeros((2, 2), dtype=bool)
    mask = Mask(table)
    table[0, 0] = True
    assert not mask.is_masked(0, 0)

    with pytest.raises(ValueError):
        mask.items[0, 0] = True


def test_mask_requires_a_table():
    with pytest.raises(ValueError):
        Mask([True, False])
