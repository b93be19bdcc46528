#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Base classes for renderer options.

Options are frozen dataclasses: they are created once per render and passed
by reference through every recursive call. Modified copies are made with
:meth:`CloneFrozenMixin.create_updated`.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)
