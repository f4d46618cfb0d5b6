"""The base of everything that lives in the game world."""

from __future__ import annotations

import itertools
from typing import Any, ClassVar


class GameObject:
    """A named object with a unique id that can be updated and drawn.

    ``state`` is the game state the object belongs to; it supplies the
    drawing backend, the camera offsets, the debug flag and asset paths.
    """

    _ids: ClassVar[itertools.count] = itertools.count(1)

    def __init__(self, state: Any, name: str = "") -> None:
        self.state = state
        self.name = name
        self.id = next(GameObject._ids)
        self.active = True

    def update(self, dt: float) -> None:
        """Advance the object by ``dt`` milliseconds."""

    def init(self) -> None:
        """Prepare the object before its first frame."""

    def draw(self) -> None:
        """Paint the object."""