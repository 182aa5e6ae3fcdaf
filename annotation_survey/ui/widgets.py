from PyQt6.QtWidgets import QWidget
from PyQt6.QtCore import Qt, QPointF, pyqtSignal
from PyQt6.QtGui import QPainter, QColor, QBrush, QPen

from annotation_survey.core.config import SurveyConfig
from annotation_survey.core.geometry import Timeline
from annotation_survey.core.markers import MarkerSet, CURSOR_POINTER
from annotation_survey.core.gestures import Gesture, GestureKind, classify_click, dispatch

class TimelineCanvas(QWidget):
    """Fixed-size drawing surface holding the timeline line and the markers of the current sample."""
    markersChanged = pyqtSignal()

    def __init__(self, width=None, height=None, parent=None):
        super().__init__(parent)
        self.canvas_width = width or SurveyConfig.CANVAS_WIDTH
        self.canvas_height = height or SurveyConfig.CANVAS_HEIGHT
        self.setFixedSize(self.canvas_width, self.canvas_height)
        self.setMouseTracking(True) # Hover affordance

        self.timeline = Timeline(SurveyConfig.LINE_BEGIN, SurveyConfig.line_end(self.canvas_width))
        self.markers = MarkerSet(self.timeline, redraw=self.update, on_cursor_changed=self.apply_cursor)
        self.radius = SurveyConfig.marker_radius(self.canvas_width)

        self.dragging_id = None
        self.drag_start_x = 0.0
        self.drag_start_position = 0.0

    @property
    def line_y(self):
        return self.canvas_height / 2

    def marker_under(self, pos):
        if abs(pos.y() - self.line_y) > self.radius:
            return None
        return self.markers.marker_at(pos.x(), self.radius)

    def handle_gesture(self, gesture):
        result = dispatch(self.markers, gesture)
        if gesture.kind not in (GestureKind.HOVER_ENTER, GestureKind.HOVER_LEAVE):
            self.markersChanged.emit()
        return result

    def apply_cursor(self, cursor):
        if cursor == CURSOR_POINTER:
            self.setCursor(Qt.CursorShape.PointingHandCursor)
        else:
            self.setCursor(Qt.CursorShape.ArrowCursor)

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.fillRect(self.rect(), QColor(SurveyConfig.BACKGROUND_COLOR))

        lh = SurveyConfig.LINE_HEIGHT
        painter.fillRect(int(self.timeline.lower_bound), int(self.line_y - lh / 2),
                         int(self.timeline.length), lh, QColor(SurveyConfig.LINE_COLOR))

        painter.setBrush(QBrush(QColor(SurveyConfig.MARKER_FILL)))
        painter.setPen(QPen(QColor(SurveyConfig.MARKER_STROKE_COLOR), SurveyConfig.MARKER_STROKE))
        for m in self.markers:
            painter.drawEllipse(QPointF(m.position, self.line_y), self.radius, self.radius)

    def mousePressEvent(self, event):
        if event.button() != Qt.MouseButton.LeftButton:
            return super().mousePressEvent(event)

        pos = event.position()
        mods = event.modifiers()
        shift = bool(mods & Qt.KeyboardModifier.ShiftModifier)
        ctrl = bool(mods & Qt.KeyboardModifier.ControlModifier)
        hit = self.marker_under(pos)

        gesture = classify_click(hit.id if hit else None, shift=shift, ctrl=ctrl, x=pos.x(), y=pos.y())
        self.handle_gesture(gesture)

        if hit is not None and hit.id in self.markers and gesture.kind == GestureKind.PRIMARY_CLICK:
            self.dragging_id = hit.id
            self.drag_start_x = pos.x()
            self.drag_start_position = hit.position

    def mouseMoveEvent(self, event):
        pos = event.position()
        if self.dragging_id is not None:
            dx = pos.x() - self.drag_start_x
            self.handle_gesture(Gesture(GestureKind.DRAG_MOVE, x=self.drag_start_position + dx,
                                        y=pos.y(), marker_id=self.dragging_id))
            return

        hit = self.marker_under(pos)
        hovered = self.markers.hovered_id
        if hovered is not None and (hit is None or hit.id != hovered):
            self.handle_gesture(Gesture(GestureKind.HOVER_LEAVE, marker_id=hovered))
        if hit is not None and hit.id != hovered:
            self.handle_gesture(Gesture(GestureKind.HOVER_ENTER, marker_id=hit.id))

    def mouseReleaseEvent(self, event):
        self.dragging_id = None

    def leaveEvent(self, event):
        if self.dragging_id is None and self.markers.hovered_id is not None:
            self.handle_gesture(Gesture(GestureKind.HOVER_LEAVE, marker_id=self.markers.hovered_id))
        super().leaveEvent(event)
