"""Random-move scramble generator for the 3x3x3 cube."""

from __future__ import annotations

import random

from kubia_timer.constants.timer_constants import SCRAMBLE_LENGTH

_AXES: dict[str, int] = {"U": 0, "D": 0, "L": 1, "R": 1, "F": 2, "B": 2}
_FACES = list(_AXES)
_SUFFIXES = ["", "'", "2"]


class ScrambleGenerator:
    """Produces scrambles in standard face-turn notation.

    A move never turns the same face as the move before it, and no three
    consecutive moves share an axis (``R L R`` would collapse to ``R2 L``).
    """

    def __init__(self, seed: int | None = None, length: int = SCRAMBLE_LENGTH) -> None:
        if length < 1:
            raise ValueError("Scramble length must be positive.")
        self._length = length
        self._rng = random.Random(seed)

    def set_seed(self, seed: int | None) -> None:
        self._rng.seed(seed)

    def next_moves(self) -> list[str]:
        faces: list[str] = []
        while len(faces) < self._length:
            face = self._rng.choice(_FACES)
            if faces and faces[-1] == face:
                continue
            if len(faces) >= 2 and _AXES[faces[-1]] == _AXES[faces[-2]] == _AXES[face]:
                continue
            faces.append(face)
        return [face + self._rng.choice(_SUFFIXES) for face in faces]

    def next_scramble(self) -> str:
        return " ".join(self.next_moves())
