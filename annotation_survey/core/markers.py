import itertools
from typing import Dict, List, Optional, Callable, Iterator

from annotation_survey.core.geometry import Timeline, Number

CURSOR_POINTER = "pointer"
CURSOR_DEFAULT = "default"

class Marker:
    """A single listener-chosen timestamp on the timeline."""

    def __init__(self, marker_id: int, position: Number) -> None:
        self.id: int = marker_id
        self.position: Number = position

    def __repr__(self) -> str:
        return f"Marker(id={self.id}, position={self.position})"

class MarkerSet:
    """
    Owns the markers of the current sample.

    Every mutation clamps through the Timeline, so drag, programmatic add and
    reset share one definition of the valid range. The optional `redraw`
    callback runs synchronously at the end of every mutating operation.
    """

    def __init__(self, timeline: Timeline, redraw: Optional[Callable[[], None]] = None,
                 on_cursor_changed: Optional[Callable[[str], None]] = None) -> None:
        self.timeline: Timeline = timeline
        self.redraw: Optional[Callable[[], None]] = redraw
        self.on_cursor_changed: Optional[Callable[[str], None]] = on_cursor_changed
        self._markers: Dict[int, Marker] = {}
        self._ids: Iterator[int] = itertools.count(1)
        self.hovered_id: Optional[int] = None
        self.cursor: str = CURSOR_DEFAULT

    def __len__(self) -> int:
        return len(self._markers)

    def __contains__(self, marker_id: object) -> bool:
        return marker_id in self._markers

    def __iter__(self) -> Iterator[Marker]:
        return iter(list(self._markers.values()))

    @property
    def markers(self) -> List[Marker]:
        return list(self._markers.values())

    def get(self, marker_id: int) -> Optional[Marker]:
        return self._markers.get(marker_id)

    def positions(self) -> List[Number]:
        return sorted(m.position for m in self._markers.values())

    def _create(self, position: Number) -> Marker:
        marker = Marker(next(self._ids), self.timeline.clamp(position))
        self._markers[marker.id] = marker
        return marker

    def _changed(self) -> None:
        if self.redraw is not None:
            self.redraw()

    def add_marker(self, x: Number) -> Marker:
        marker = self._create(x)
        self._changed()
        return marker

    def move_marker(self, marker_id: int, raw_x: Number, raw_y: Optional[Number] = None) -> Optional[Marker]:
        """Drag update. Only the horizontal component is honoured; raw_y is discarded."""
        marker = self._markers.get(marker_id)
        if marker is None:
            return None
        marker.position = self.timeline.clamp(raw_x)
        self._changed()
        return marker

    def delete_marker(self, marker_id: int, modifier_held: bool) -> bool:
        if not modifier_held or marker_id not in self._markers:
            return False
        del self._markers[marker_id]
        if self.hovered_id == marker_id:
            self._set_hover(None)
        self._changed()
        return True

    def insert_marker_from_background(self, x: Number, modifier_held: bool) -> Optional[Marker]:
        if not modifier_held or not self.timeline.contains_open(x):
            return None
        return self.add_marker(x)

    def reset(self) -> Marker:
        """Drops every marker and seeds a single one at the midpoint."""
        self._markers.clear()
        self._set_hover(None)
        marker = self._create(self.timeline.midpoint)
        self._changed()
        return marker

    def marker_at(self, x: Number, radius: Number) -> Optional[Marker]:
        best = None
        for m in self._markers.values():
            d = abs(m.position - x)
            if d <= radius and (best is None or d < abs(best.position - x)):
                best = m
        return best

    # Hover affordance (observational only)
    def hover_enter(self, marker_id: int) -> None:
        if marker_id in self._markers:
            self._set_hover(marker_id)

    def hover_leave(self, marker_id: int) -> None:
        if self.hovered_id == marker_id:
            self._set_hover(None)

    def _set_hover(self, marker_id: Optional[int]) -> None:
        self.hovered_id = marker_id
        cursor = CURSOR_POINTER if marker_id is not None else CURSOR_DEFAULT
        if cursor != self.cursor:
            self.cursor = cursor
            if self.on_cursor_changed is not None:
                self.on_cursor_changed(cursor)
