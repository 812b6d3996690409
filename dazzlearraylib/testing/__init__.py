"""Testing utilities for DazzleArrayLib consumers."""

from .fixtures import ArrayTestHelper, arange_array, transposed_array, row_major_indices

__all__ = ['ArrayTestHelper', 'arange_array', 'transposed_array', 'row_major_indices']
