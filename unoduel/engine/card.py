"""Card, Color and Kind types for UNO duel."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class Color(str, Enum):
    """Card colors."""

    RED = "red"
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"


class Kind(str, Enum):
    """Card kinds.

    CLASSIC cards carry a number and match by color or number.
    Every other kind matches by color or by kind and has an effect
    registered in rules.
    """

    CLASSIC = "classic"
    DRAW_TWO = "draw_two"
    SKIP = "skip"
    REVERSE = "reverse"


class Actor(str, Enum):
    """The two sides of a duel."""

    HUMAN = "human"
    OPPONENT = "opponent"

    @property
    def other(self) -> "Actor":
        return Actor.OPPONENT if self is Actor.HUMAN else Actor.HUMAN


NUMBERS = range(0, 10)


@dataclass
class Presentation:
    """Renderer-facing state. Carries no game-rule meaning."""

    face_up: bool = False
    target_rotation: float = 0.0
    zoom_requested: bool = False


@dataclass(frozen=True, eq=False)
class Card:
    """A UNO card.

    Identity is fixed at creation. Two cards with the same color, kind and
    number are still distinct instances, so equality is by identity; use
    ``same_face`` to compare faces.
    """

    color: Color
    kind: Kind = Kind.CLASSIC
    number: Optional[int] = None
    presentation: Presentation = field(default_factory=Presentation, compare=False, repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.color, Color):
            raise ValueError(f"Invalid card color: {self.color!r}")
        if not isinstance(self.kind, Kind):
            raise ValueError(f"Invalid card kind: {self.kind!r}")
        if self.kind is Kind.CLASSIC:
            if self.number not in NUMBERS:
                raise ValueError(f"Classic cards need a number 0-9, got {self.number!r}")
        elif self.number is not None:
            raise ValueError(f"{self.kind.value} cards carry no number")

    @property
    def is_classic(self) -> bool:
        return self.kind is Kind.CLASSIC

    def same_face(self, other: "Card") -> bool:
        return (self.color, self.kind, self.number) == (other.color, other.kind, other.number)

    def __str__(self) -> str:
        if self.is_classic:
            return f"{self.color.value}_{self.number}"
        return f"{self.color.value}_{self.kind.value}"
