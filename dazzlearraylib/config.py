"""Configuration re-export.

The configuration lives in the ``_common`` package; this module is the
public import location.
"""

from ._common.config import (
    TraversalConfig,
    TraversalKind,
    LimitConfig,
)

__all__ = [
    'TraversalConfig',
    'TraversalKind',
    'LimitConfig',
]
