"""Configuration system for DazzleArrayLib.

This module defines how users describe a traversal: which kind of walk to
perform, along which axis, and how many items they are willing to consume.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional


class TraversalKind(Enum):
    """What a traversal yields."""
    FLAT = "flat"              # Every element, row-major
    AXES = "axes"              # (extent, stride) per axis
    AXIS_VIEW = "axis_view"    # One slab view per position along an axis


@dataclass
class LimitConfig:
    """Limits on how much of a traversal is consumed."""

    max_items: Optional[int] = None  # Stop after this many items

    def check_item_limit(self, item_count: int) -> bool:
        """Check if item limit exceeded.

        Args:
            item_count: Number of items yielded so far

        Returns:
            True if within limits or no limit set
        """
        if self.max_items is None:
            return True
        return item_count <= self.max_items


@dataclass
class TraversalConfig:
    """Complete configuration for an array traversal.

    The ExecutionPlan validates this configuration against the array it is
    applied to.
    """

    kind: TraversalKind = TraversalKind.FLAT
    axis: Optional[int] = None  # Required for AXIS_VIEW

    limits: LimitConfig = field(default_factory=LimitConfig)

    # Progress reporting
    progress_callback: Optional[Callable[[int, Optional[int]], None]] = None
    progress_interval: int = 100  # Report every N items

    # Convenience constructors for common configurations

    @classmethod
    def flat_scan(cls, max_items: Optional[int] = None) -> 'TraversalConfig':
        """Create config for a row-major element scan."""
        return cls(kind=TraversalKind.FLAT, limits=LimitConfig(max_items=max_items))

    @classmethod
    def axis_scan(cls, axis: int) -> 'TraversalConfig':
        """Create config yielding one slab per position along ``axis``."""
        return cls(kind=TraversalKind.AXIS_VIEW, axis=axis)

    @classmethod
    def rows(cls) -> 'TraversalConfig':
        """Create config yielding the slabs along axis 0."""
        return cls.axis_scan(0)

    @classmethod
    def columns(cls) -> 'TraversalConfig':
        """Create config yielding the slabs along axis 1."""
        return cls.axis_scan(1)

    @classmethod
    def introspection(cls) -> 'TraversalConfig':
        """Create config yielding (extent, stride) per axis."""
        return cls(kind=TraversalKind.AXES)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Bounds that depend on the array (axis < ndim) are checked by the
        ExecutionPlan, not here.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.kind == TraversalKind.AXIS_VIEW and self.axis is None:
            errors.append("axis required when kind is AXIS_VIEW")

        if self.axis is not None and self.axis < 0:
            errors.append("axis cannot be negative")

        if self.limits.max_items is not None and self.limits.max_items <= 0:
            errors.append("max_items must be positive")

        if self.progress_interval <= 0:
            errors.append("progress_interval must be positive")

        return errors
