"""Input events and screen transitions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


class Key(Enum):
    """Key codes a screen reacts to."""

    CHAR = auto()
    ENTER = auto()
    ESC = auto()
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    HOME = auto()
    END = auto()
    BACKSPACE = auto()
    DELETE = auto()
    TAB = auto()


@dataclass(frozen=True)
class KeyEvent:
    """A key press; ``char`` carries the character for ``Key.CHAR``."""

    code: Key
    char: Optional[str] = None

    def __post_init__(self) -> None:
        if self.code is Key.CHAR:
            if not isinstance(self.char, str) or len(self.char) != 1:
                raise ValueError("a CHAR key event needs exactly one character")
        elif self.char is not None:
            raise ValueError(f"{self.code.name} key event takes no character")


@dataclass(frozen=True)
class MouseEvent:
    """A mouse event; screens ignore these."""

    column: int
    row: int
    button: str = "left"


@dataclass(frozen=True)
class MenuTarget:
    """Destination: the main menu, optionally with a toast message."""

    toast: Optional[str] = None


@dataclass(frozen=True)
class Transition:
    """What a screen asks for after handling an event."""

    target: object = None

    @classmethod
    def stay(cls) -> "Transition":
        return cls(None)

    @classmethod
    def to(cls, target: object) -> "Transition":
        if target is None:
            raise ValueError("a transition needs a target")
        return cls(target)

    def is_stay(self) -> bool:
        return self.target is None