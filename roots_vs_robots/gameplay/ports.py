"""
Protocols for the collaborators the gameplay core talks to.
NO UI DEPENDENCIES.
"""
from typing import Protocol, Tuple, runtime_checkable

Color = Tuple[int, int, int]


@runtime_checkable
class RandomSource(Protocol):
    """
    Source of uniform random integers.
    random.Random satisfies this protocol.
    """

    def randint(self, a: int, b: int) -> int:
        """Return a random integer N such that a <= N <= b."""
        ...


@runtime_checkable
class Canvas(Protocol):
    """
    Drawing surface the renderer calls into once per frame.
    Commands are fire-and-forget.
    """

    def clear(self, color: Color) -> None:
        """Fill the whole surface with a color."""
        ...

    def fill_rect(self, x: float, y: float, width: float, height: float, color: Color) -> None:
        """Draw a filled rectangle with its top-left corner at (x, y)."""
        ...

    def fill_circle(self, x: float, y: float, radius: float, color: Color) -> None:
        """Draw a filled circle centred on (x, y)."""
        ...

    def draw_text(self, text: str, x: float, y: float, size: int, color: Color) -> None:
        """Draw text with its top-left corner at (x, y)."""
        ...
