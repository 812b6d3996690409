"""Tests for row-major flat traversal.

Covers element order, element counts, non-contiguous views and the
odometer's end-of-sequence behavior.
"""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from dazzlearraylib import BufferArray, FlatIterator, iter_indexed
from dazzlearraylib.testing import arange_array, transposed_array, row_major_indices


def test_flat_two_by_three():
    """2-D array:
    1 2 3
    4 5 6
    """
    array = BufferArray.from_values([1, 2, 3, 4, 5, 6], (2, 3))

    assert list(array.flat()) == [1, 2, 3, 4, 5, 6]


def test_flat_three_dimensional():
    array = arange_array((2, 3, 4))

    assert list(array.flat()) == list(range(1, 25))


def test_flat_one_dimensional():
    array = BufferArray.from_values(["a", "b", "c"], (3,))

    assert list(array.flat()) == ["a", "b", "c"]


@pytest.mark.parametrize("shape", [(1,), (5,), (2, 3), (3, 1, 2), (2, 2, 2, 2), (1, 1, 1)])
def test_flat_yields_product_of_extents(shape):
    array = arange_array(shape)

    expected = 1
    for extent in shape:
        expected *= extent

    assert len(list(array.flat())) == expected
    assert array.size == expected


def test_flat_index_order_is_lexicographic():
    """Last axis varies fastest, axis 0 slowest."""
    array = arange_array((2, 2, 3))

    indices = [index for index, _ in iter_indexed(array)]

    assert indices == row_major_indices((2, 2, 3))
    assert indices == sorted(indices)


def test_flat_over_transposed_view():
    """Non-contiguous strides are followed, not the buffer order."""
    # Transpose of [[1, 2, 3], [4, 5, 6]]
    view = transposed_array((3, 2))

    assert view.strides() == (1, 3)
    assert list(view.flat()) == [1, 4, 2, 5, 3, 6]


def test_flat_over_sliced_view():
    array = arange_array((4, 5))
    view = array.slice((range(1, 3), range(2, 5)))

    assert list(view.flat()) == [8, 9, 10, 13, 14, 15]


def test_flat_over_negative_strides():
    array = BufferArray([1, 2, 3, 4], (4,), strides=(-1,), offset=3)

    assert list(array.flat()) == [4, 3, 2, 1]


def test_flat_zero_dimensional():
    """A 0-d array holds exactly one element."""
    array = BufferArray([42], ())

    assert list(array.flat()) == [42]


@pytest.mark.parametrize("shape", [(0,), (2, 0), (0, 3), (2, 0, 4)])
def test_flat_zero_extent_yields_nothing(shape):
    array = arange_array(shape)

    assert list(array.flat()) == []


def test_flat_stays_exhausted():
    iterator = FlatIterator(arange_array((2, 2)))

    assert list(iterator) == [1, 2, 3, 4]
    assert next(iterator, "done") == "done"
    assert next(iterator, "done") == "done"


def test_flat_counter_overflows_axis_zero():
    """The counter runs past the last index; axis 0 is never reset."""
    iterator = FlatIterator(arange_array((2, 3)))

    list(iterator)

    assert iterator.indices[0] >= 2


def test_flat_counter_carries():
    iterator = FlatIterator(arange_array((2, 3)))

    assert iterator.indices == (0, 0)
    next(iterator)
    next(iterator)
    assert iterator.indices == (0, 2)
    next(iterator)
    assert iterator.indices == (1, 0)


def test_flat_reconstruct_to_retraverse():
    array = arange_array((2, 3))

    first = list(array.flat())
    second = list(array.flat())

    assert first == second


def test_array_is_iterable():
    array = arange_array((3, 2))

    assert [value for value in array] == [1, 2, 3, 4, 5, 6]
    assert array.to_list() == [1, 2, 3, 4, 5, 6]
