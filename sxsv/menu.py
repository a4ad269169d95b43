"""Selection state for menus whose cursor wraps around."""

from __future__ import annotations


class CyclicSelection:
    """A selected index within a list of fixed size that wraps at both ends."""

    def __init__(self, size: int, selected: int | None = 0) -> None:
        if size < 1:
            raise ValueError(f"size must be positive, got {size}")
        if selected is not None and not 0 <= selected < size:
            raise ValueError(f"selected index {selected} out of range for size {size}")
        self.size = size
        self.selected = selected

    def select_next(self) -> int:
        """Move down one item, wrapping to the first; returns the new index."""
        if self.selected is None or self.selected >= self.size - 1:
            self.selected = 0
        else:
            self.selected += 1
        return self.selected

    def select_previous(self) -> int:
        """Move up one item, wrapping to the last; returns the new index.

        With nothing selected, the first item is selected.
        """
        if self.selected is None:
            self.selected = 0
        elif self.selected == 0:
            self.selected = self.size - 1
        else:
            self.selected -= 1
        return self.selected

    def __repr__(self) -> str:
        return f"CyclicSelection(size={self.size}, selected={self.selected})"