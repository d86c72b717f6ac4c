"""Solutions on enums: message variants and processing them into a state."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Point:
    """A position on a grid."""

    x: int
    y: int


@dataclass(frozen=True)
class Quit:
    """Ask the state to stop."""


@dataclass(frozen=True)
class Echo:
    """Print a piece of text."""

    text: str


@dataclass(frozen=True)
class Move:
    """Move to a new position."""

    point: Point


@dataclass(frozen=True)
class ChangeColor:
    """Switch to a new RGB colour."""

    color: tuple[int, int, int]


@dataclass
class State:
    """Colour, position and quit flag changed by processed messages."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    has_quit: bool = False

    def change_color(self, color: tuple[int, int, int]) -> None:
        self.color = color

    def quit(self) -> None:
        self.has_quit = True

    def echo(self, s: str) -> None:
        print(s)

    def move_position(self, p: Point) -> None:
        self.position = p

    def process(self, message: Quit | Echo | Move | ChangeColor) -> None:
        """Apply a message to the state."""
        match message:
            case ChangeColor(color=color):
                self.change_color(color)
            case Quit():
                self.quit()
            case Echo(text=text):
                self.echo(text)
            case Move(point=point):
                self.move_position(point)
            case _:
                raise TypeError(f"unknown message: {message!r}")