"""glauber_nucleus/nucleon.py
Author: Sabin Thapa <sthapa3@kent.edu>

A nucleon is just a transverse point plus a participant flag.

Positions are written only by the owning nucleus (``Nucleus`` calls
``_set_position``); everyone else reads them. The participant flag belongs to
whatever collision code runs afterwards.
"""

from __future__ import annotations


class Nucleon:
    __slots__ = ("_x", "_y", "_participant")

    def __init__(self) -> None:
        self._x = 0.0
        self._y = 0.0
        self._participant = False

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    @property
    def position(self) -> tuple[float, float]:
        return self._x, self._y

    @property
    def is_participant(self) -> bool:
        return self._participant

    def set_participant(self) -> None:
        """Mark as wounded. Cleared again by the next position update."""
        self._participant = True

    def _set_position(self, x: float, y: float) -> None:
        # a fresh configuration has no participants yet
        self._x = float(x)
        self._y = float(y)
        self._participant = False

    def __repr__(self) -> str:
        return f"Nucleon(x={self._x:.4f}, y={self._y:.4f}, participant={self._participant})"
