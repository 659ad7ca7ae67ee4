"""A ship made of segments that can be damaged."""

from __future__ import annotations

from dataclasses import dataclass

from seabattle.enums import ShipSegmentState

_SEGMENT_HP = 2


@dataclass
class _Segment:
    state: ShipSegmentState = ShipSegmentState.INTACT
    hp: int = _SEGMENT_HP


class Ship:
    """A ship of a fixed length; it sinks once every segment is destroyed."""

    def __init__(self, length: int) -> None:
        if length <= 0:
            raise ValueError(
                "Invalid length passed in ship constructor. Length must be greater than 0"
            )
        self.length = length
        self._health = length
        self._segments = [_Segment() for _ in range(length)]

    def _segment(self, index: int) -> _Segment:
        if not 0 <= index < self.length:
            raise IndexError("Index out of range")
        return self._segments[index]

    def take_damage(self, segment_index: int, damage: int) -> None:
        """Deal damage to one segment; destroyed segments ignore further hits."""
        segment = self._segment(segment_index)
        if segment.state is ShipSegmentState.DESTROYED:
            return
        segment.hp -= damage
        if segment.hp <= 0:
            self._health -= 1
            segment.state = ShipSegmentState.DESTROYED
        else:
            segment.state = ShipSegmentState.DAMAGED

    def segment_hp(self, index: int) -> int:
        """Hit points left in the segment at ``index``."""
        return self._segment(index).hp

    def segment_state(self, index: int) -> ShipSegmentState:
        """State of the segment at ``index``."""
        return self._segment(index).state

    def is_alive(self) -> bool:
        """True while at least one segment is not destroyed."""
        return self._health > 0

    def __repr__(self) -> str:
        states = ", ".join(s.state.name for s in self._segments)
        return f"Ship(length={self.length}, segments=[{states}])"