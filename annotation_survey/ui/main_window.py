import time
from PyQt6.QtWidgets import (QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
                             QLabel, QPushButton, QCheckBox, QStatusBar,
                             QStackedWidget)
from PyQt6.QtCore import Qt, QSize, pyqtSignal

from annotation_survey.core.config import SurveyConfig
from annotation_survey.core.progression import SampleProgressionController
from annotation_survey.ui.adapters import QtAudioPlayer, QtTextLabel, QtAdvanceButton, StackedCompletion
from annotation_survey.ui.widgets import TimelineCanvas

class SurveyWindow(QMainWindow):
    surveyCompleted = pyqtSignal()

    def __init__(self, samples, loop=None):
        boot_start = time.time()
        super().__init__()
        self.samples = list(samples)
        self.audio = QtAudioPlayer()
        self.audio.player.errorOccurred.connect(self.on_media_error)

        self.init_ui()
        self.controller = SampleProgressionController(
            self.samples,
            self.canvas.markers,
            self.audio,
            QtTextLabel(self.sample_title),
            QtAdvanceButton(self.next_btn),
            StackedCompletion(self.stack, self.thank_you_page, self.on_survey_completed),
        )

        self.loop_check.setChecked(SurveyConfig.LOOP_DEFAULT if loop is None else bool(loop))
        self.set_loop()
        self.controller.start()
        self.update_marker_count()
        print(f"[BOOT] Survey ready with {len(self.samples)} sample(s) in {time.time() - boot_start:.3f}s")

    def init_ui(self):
        self.setWindowTitle(SurveyConfig.WINDOW_TITLE)
        self.setMinimumSize(QSize(SurveyConfig.CANVAS_WIDTH + 60, 320))

        self.stack = QStackedWidget()
        self.setCentralWidget(self.stack)

        # --- SURVEY PAGE ---
        self.survey_page = QWidget()
        layout = QVBoxLayout(self.survey_page)

        self.sample_title = QLabel()
        self.sample_title.setStyleSheet("font-size: 20px; font-weight: bold;")
        layout.addWidget(self.sample_title)

        controls = QHBoxLayout()
        self.play_btn = QPushButton("▶ Play / Pause")
        self.play_btn.clicked.connect(self.toggle_playback)
        controls.addWidget(self.play_btn)

        self.loop_check = QCheckBox("Loop")
        self.loop_check.toggled.connect(self.set_loop)
        controls.addWidget(self.loop_check)
        controls.addStretch()
        layout.addLayout(controls)

        self.canvas = TimelineCanvas()
        self.canvas.markersChanged.connect(self.update_marker_count)
        layout.addWidget(self.canvas, alignment=Qt.AlignmentFlag.AlignHCenter)

        hint = QLabel("Drag a marker along the line. Ctrl+Click the line to add a marker, Shift+Click a marker to remove it.")
        hint.setStyleSheet("color: #777;")
        hint.setWordWrap(True)
        layout.addWidget(hint)

        nav = QHBoxLayout()
        nav.addStretch()
        self.next_btn = QPushButton(SurveyConfig.NEXT_LABEL)
        self.next_btn.setObjectName("next-submit-button")
        self.next_btn.clicked.connect(self.next_submit)
        nav.addWidget(self.next_btn)
        layout.addLayout(nav)

        self.stack.addWidget(self.survey_page)

        # --- THANK YOU PAGE ---
        self.thank_you_page = QWidget()
        ty = QVBoxLayout(self.thank_you_page)
        msg = QLabel(SurveyConfig.THANK_YOU_TEXT)
        msg.setAlignment(Qt.AlignmentFlag.AlignCenter)
        msg.setStyleSheet("font-size: 22px; font-weight: bold;")
        ty.addWidget(msg)
        self.stack.addWidget(self.thank_you_page)

        self.status_bar = QStatusBar()
        self.setStatusBar(self.status_bar)

        self.setStyleSheet("""
            QMainWindow { background-color: #ffffff; }
            QPushButton { background-color: #4285F4; color: white; padding: 6px 18px; border-radius: 4px; }
            QPushButton:disabled { background-color: #bbbbbb; }
        """)

    def set_loop(self, *_):
        self.audio.set_loop(self.loop_check.isChecked())

    def toggle_playback(self):
        self.audio.toggle()

    def next_submit(self):
        if self.controller.state.finished:
            return
        self.canvas.dragging_id = None
        self.controller.advance()
        if not self.controller.state.finished:
            self.update_marker_count()

    def update_marker_count(self):
        n = len(self.canvas.markers)
        self.status_bar.showMessage(f"{self.sample_title.text()}: {n} marker{'s' if n != 1 else ''}")

    def on_survey_completed(self):
        self.audio.player.stop()
        print("[SURVEY] All samples annotated. Showing completion page.")
        self.surveyCompleted.emit()

    def on_media_error(self, error, message):
        self.status_bar.showMessage(f"Audio error: {message}")
        print(f"[AUDIO] {error}: {message}")
