"""Character budget for verbatim diff content.

Contains:
- DEFAULT_MAX_CHARS: Default ceiling for verbatim diff characters per build
- CharBudget: Running total of admitted characters against a fixed ceiling
"""

from dataclasses import dataclass

# Global character ceiling (roughly 12k tokens at ~4 chars/token)
DEFAULT_MAX_CHARS = 50000


@dataclass
class CharBudget:
    """Running total of admitted diff characters for one build.

    Admission is all-or-nothing and strictly sequential: whether a candidate
    fits depends only on what was admitted before it.
    """

    max_chars: int = DEFAULT_MAX_CHARS
    used: int = 0

    def __post_init__(self) -> None:
        if self.max_chars < 0:
            raise ValueError(f"max_chars must not be negative, got {self.max_chars}")

    @property
    def remaining(self) -> int:
        """Characters still available."""
        return self.max_chars - self.used

    def try_admit(self, length: int) -> bool:
        """Admit ``length`` characters if they fit under the ceiling.

        Args:
            length: Size of the candidate payload.

        Returns:
            True if the payload was admitted (and counted), False otherwise.
            A rejected candidate leaves the budget unchanged.
        """
        if length < 0:
            raise ValueError(f"length must not be negative, got {length}")
        if self.used + length > self.max_chars:
            return False
        self.used += length
        return True
