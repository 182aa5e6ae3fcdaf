from dataclasses import dataclass
from typing import Callable, Dict, Optional

from annotation_survey.core.geometry import Number
from annotation_survey.core.markers import MarkerSet


class GestureKind:
    HOVER_ENTER = "hover_enter"
    HOVER_LEAVE = "hover_leave"
    PRIMARY_CLICK = "primary_click"
    MODIFIED_CLICK = "modified_click"
    DRAG_MOVE = "drag_move"


@dataclass(frozen=True)
class Gesture:
    kind: str
    x: Number = 0
    y: Optional[Number] = None
    marker_id: Optional[int] = None  # None means the empty timeline background
    shift: bool = False
    ctrl: bool = False


def classify_click(marker_id: Optional[int], shift: bool = False, ctrl: bool = False, x: Number = 0, y: Optional[Number] = None) -> Gesture:
    kind = GestureKind.MODIFIED_CLICK if (shift or ctrl) else GestureKind.PRIMARY_CLICK
    return Gesture(kind=kind, x=x, y=y, marker_id=marker_id, shift=shift, ctrl=ctrl)


def _hover_enter(markers: MarkerSet, g: Gesture):
    if g.marker_id is not None:
        markers.hover_enter(g.marker_id)


def _hover_leave(markers: MarkerSet, g: Gesture):
    if g.marker_id is not None:
        markers.hover_leave(g.marker_id)


def _primary_click(markers: MarkerSet, g: Gesture):
    # Ordinary clicks never delete or insert.
    if g.marker_id is not None:
        return markers.delete_marker(g.marker_id, modifier_held=False)
    return markers.insert_marker_from_background(g.x, modifier_held=False)


def _modified_click(markers: MarkerSet, g: Gesture):
    # Shift deletes a marker, Ctrl inserts on the background.
    if g.marker_id is not None:
        return markers.delete_marker(g.marker_id, modifier_held=g.shift)
    return markers.insert_marker_from_background(g.x, modifier_held=g.ctrl)


def _drag_move(markers: MarkerSet, g: Gesture):
    if g.marker_id is not None:
        return markers.move_marker(g.marker_id, g.x, g.y)
    return None


GESTURE_HANDLERS: Dict[str, Callable[[MarkerSet, Gesture], object]] = {
    GestureKind.HOVER_ENTER: _hover_enter,
    GestureKind.HOVER_LEAVE: _hover_leave,
    GestureKind.PRIMARY_CLICK: _primary_click,
    GestureKind.MODIFIED_CLICK: _modified_click,
    GestureKind.DRAG_MOVE: _drag_move,
}


def dispatch(markers: MarkerSet, gesture: Gesture):
    """Routes a gesture to its state transition. Unknown kinds are ignored."""
    handler = GESTURE_HANDLERS.get(gesture.kind)
    if handler is None:
        return None
    return handler(markers, gesture)
