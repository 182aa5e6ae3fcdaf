import os
import sys
import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication
from PyQt6.QtCore import Qt, QPointF, QEvent
from PyQt6.QtGui import QMouseEvent, QColor

from annotation_survey.ui.widgets import TimelineCanvas
from annotation_survey.ui.main_window import SurveyWindow

@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv)
    yield app

def mouse(kind, x, y, modifiers=Qt.KeyboardModifier.NoModifier, button=Qt.MouseButton.LeftButton):
    buttons = Qt.MouseButton.NoButton if kind == QEvent.Type.MouseButtonRelease else Qt.MouseButton.LeftButton
    if kind == QEvent.Type.MouseMove:
        button = Qt.MouseButton.NoButton
    return QMouseEvent(kind, QPointF(x, y), QPointF(x, y), button, buttons, modifiers)

def test_canvas_geometry(qapp):
    canvas = TimelineCanvas()
    assert canvas.width() == 800
    assert canvas.height() == 100
    assert canvas.timeline.lower_bound == 107
    assert canvas.timeline.upper_bound == 612
    assert canvas.radius == 10

def test_canvas_ctrl_click_inserts_marker(qapp):
    canvas = TimelineCanvas()
    canvas.markers.reset()
    canvas.mousePressEvent(mouse(QEvent.Type.MouseButtonPress, 200, 50))
    assert len(canvas.markers) == 1
    canvas.mousePressEvent(mouse(QEvent.Type.MouseButtonPress, 200, 50, Qt.KeyboardModifier.ControlModifier))
    assert len(canvas.markers) == 2
    # On the endpoint: ignored even with Ctrl
    canvas.mousePressEvent(mouse(QEvent.Type.MouseButtonPress, 612, 50, Qt.KeyboardModifier.ControlModifier))
    assert len(canvas.markers) == 2

def test_canvas_shift_click_deletes_marker(qapp):
    canvas = TimelineCanvas()
    seed = canvas.markers.reset()
    x = seed.position
    canvas.mousePressEvent(mouse(QEvent.Type.MouseButtonPress, x, 50))
    canvas.mouseReleaseEvent(mouse(QEvent.Type.MouseButtonRelease, x, 50))
    assert len(canvas.markers) == 1
    canvas.mousePressEvent(mouse(QEvent.Type.MouseButtonPress, x, 50, Qt.KeyboardModifier.ShiftModifier))
    assert len(canvas.markers) == 0

def test_canvas_drag_stays_on_line(qapp):
    canvas = TimelineCanvas()
    seed = canvas.markers.reset()
    start = seed.position
    canvas.mousePressEvent(mouse(QEvent.Type.MouseButtonPress, start + 3, 52))
    assert canvas.dragging_id == seed.id
    canvas.mouseMoveEvent(mouse(QEvent.Type.MouseMove, start + 53, 90))
    assert seed.position == start + 50
    canvas.mouseMoveEvent(mouse(QEvent.Type.MouseMove, 2000, 0))
    assert seed.position == 612
    canvas.mouseMoveEvent(mouse(QEvent.Type.MouseMove, -2000, 100))
    assert seed.position == 107
    canvas.mouseReleaseEvent(mouse(QEvent.Type.MouseButtonRelease, -2000, 100))
    assert canvas.dragging_id is None

def test_canvas_hover_cursor(qapp):
    canvas = TimelineCanvas()
    seed = canvas.markers.reset()
    canvas.mouseMoveEvent(mouse(QEvent.Type.MouseMove, seed.position, 50))
    assert canvas.cursor().shape() == Qt.CursorShape.PointingHandCursor
    canvas.mouseMoveEvent(mouse(QEvent.Type.MouseMove, 20, 50))
    assert canvas.cursor().shape() == Qt.CursorShape.ArrowCursor

def test_canvas_renders(qapp):
    canvas = TimelineCanvas()
    canvas.markers.reset()
    canvas.markers.add_marker(150)
    pixmap = canvas.grab()
    assert not pixmap.isNull()

def test_window_progression(qapp):
    window = SurveyWindow(["a.wav", "b.wav", "c.wav"], loop=False)
    completed = []
    window.surveyCompleted.connect(lambda: completed.append(True))

    assert window.sample_title.text() == "Sample 1"
    assert window.next_btn.text() == "Next"
    assert len(window.canvas.markers) == 1

    window.canvas.markers.add_marker(200)
    window.next_btn.click()
    assert window.sample_title.text() == "Sample 2"
    assert window.next_btn.text() == "Next"
    assert len(window.canvas.markers) == 1

    window.next_btn.click()
    assert window.sample_title.text() == "Sample 3"
    assert window.next_btn.text() == "Submit"

    window.next_btn.click()
    assert not window.next_btn.isEnabled()
    assert window.stack.currentWidget() is window.thank_you_page
    window.next_btn.click()
    window.next_submit()
    assert completed == [True]
    window.close()

def test_window_loop_checkbox(qapp):
    window = SurveyWindow(["a.wav"], loop=False)
    assert window.audio.loop is False
    window.loop_check.setChecked(True)
    assert window.audio.loop is True
    assert window.next_btn.text() == "Submit"
    window.close()

def test_modified_press_on_marker_never_starts_drag(qapp):
    canvas = TimelineCanvas()
    seed = canvas.markers.reset()
    x = seed.position
    # Ctrl over a marker hits the marker, not the background: nothing inserted, nothing removed
    canvas.mousePressEvent(mouse(QEvent.Type.MouseButtonPress, x + 4, 50, Qt.KeyboardModifier.ControlModifier))
    assert len(canvas.markers) == 1
    assert canvas.dragging_id is None
    canvas.mouseMoveEvent(mouse(QEvent.Type.MouseMove, x + 100, 50))
    assert seed.position == x

    other = canvas.markers.add_marker(200)
    canvas.mousePressEvent(mouse(QEvent.Type.MouseButtonPress, 200, 50, Qt.KeyboardModifier.ShiftModifier))
    assert other.id not in canvas.markers
    assert canvas.dragging_id is None

def test_canvas_palette_colors(qapp):
    from annotation_survey.core.config import SurveyConfig
    fill = QColor(SurveyConfig.MARKER_FILL)
    assert fill.isValid()
    assert (fill.red(), fill.green(), fill.blue(), fill.alpha()) == (0x42, 0x85, 0xF4, 0x22)
    assert QColor(SurveyConfig.LINE_COLOR).isValid()

def test_window_status_tracks_marker_count(qapp):
    window = SurveyWindow(["a.wav", "b.wav"], loop=False)
    assert window.status_bar.currentMessage() == "Sample 1: 1 marker"
    window.canvas.mousePressEvent(mouse(QEvent.Type.MouseButtonPress, 200, 50, Qt.KeyboardModifier.ControlModifier))
    assert window.status_bar.currentMessage() == "Sample 1: 2 markers"
    window.next_btn.click()
    assert window.status_bar.currentMessage() == "Sample 2: 1 marker"
    window.close()
