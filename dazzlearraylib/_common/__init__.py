"""Common components for DazzleArrayLib.

This internal package contains configuration shared by the planning layer
and the high-level API. It should NOT be imported directly by users.

Important: This package must NEVER import from planning or api to avoid
circular dependencies.
"""

from .config import (
    TraversalConfig,
    TraversalKind,
    LimitConfig,
)

__all__ = [
    'TraversalConfig',
    'TraversalKind',
    'LimitConfig',
]
