"""DazzleArrayLib - Strided Array Traversal Library.

DazzleArrayLib walks fixed-dimensionality, strided array views without
hand-written nested index loops. It works the same over owned arrays and
over non-contiguous views of them.

Three traversals:
━━━━━━━━━━━━━━━━━━━━━━━━━━
Elements, row-major:
    for value in array.flat(): ...

Axis metadata:
    for extent, stride in array.axes(): ...

Slabs along an axis:
    for row in array.axis_view(0): ...
━━━━━━━━━━━━━━━━━━━━━━━━━━

Arrays come from an adapter: BufferArray over any Python sequence, or
NumpyArray over a numpy ndarray.
"""

__version__ = "0.1.0"

# Core components
from .core.array import StridedArray, SliceOutOfBoundsError
from .core.axes import AxisIterator
from .core.flat import FlatIterator
from .core.axis_view import AxisViewIterator, AxisOutOfBoundsError

# Adapters
from .adapters.buffer import BufferArray, contiguous_strides
from .adapters.numpy_array import NumpyArray

# Configuration and planning
from .config import TraversalConfig, TraversalKind, LimitConfig
from .planning import ExecutionPlan, TraversalConfigError

# High-level API
from .api import (
    flat,
    axes,
    axis_view,
    traverse_array,
    collect_flat,
    count_elements,
    iter_rows,
    iter_columns,
    iter_indexed,
    get_array_stats,
)

__all__ = [
    "__version__",
    # Core
    'StridedArray',
    'SliceOutOfBoundsError',
    'AxisIterator',
    'FlatIterator',
    'AxisViewIterator',
    'AxisOutOfBoundsError',
    # Adapters
    'BufferArray',
    'contiguous_strides',
    'NumpyArray',
    # Config
    'TraversalConfig',
    'TraversalKind',
    'LimitConfig',
    'ExecutionPlan',
    'TraversalConfigError',
    # API
    'flat',
    'axes',
    'axis_view',
    'traverse_array',
    'collect_flat',
    'count_elements',
    'iter_rows',
    'iter_columns',
    'iter_indexed',
    'get_array_stats',
]
