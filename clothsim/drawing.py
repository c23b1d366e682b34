"""Drawing interfaces and a plain-text viewer."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from clothsim.mass import Mass
    from clothsim.spring import Spring


class Drawable(ABC):
    """Something that can draw itself on a canvas."""

    @abstractmethod
    def draw_on(self, canvas: Canvas) -> None:
        """Draw this object on the given canvas."""


class Canvas(ABC):
    """A surface that knows how to draw masses and springs."""

    @abstractmethod
    def draw_mass(self, mass: Mass) -> None:
        """Draw one mass."""

    @abstractmethod
    def draw_spring(self, spring: Spring) -> None:
        """Draw one spring."""


class TextViewer(Canvas):
    """A canvas that writes the textual description of each object to a stream."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream if stream is not None else sys.stdout

    def draw_mass(self, mass: Mass) -> None:
        self.stream.write(str(mass))

    def draw_spring(self, spring: Spring) -> None:
        self.stream.write(str(spring))