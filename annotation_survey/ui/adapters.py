import os
from PyQt6.QtCore import QUrl
from PyQt6.QtMultimedia import QMediaPlayer, QAudioOutput

class QtAudioPlayer:
    """Audio collaborator backed by QMediaPlayer. Source swaps are fire-and-forget."""

    def __init__(self, volume=0.8):
        self.player = QMediaPlayer()
        self.audio_output = QAudioOutput()
        self.player.setAudioOutput(self.audio_output)
        self.audio_output.setVolume(volume)
        self.source = None
        self.loop = False

    def set_source(self, source):
        self.source = source
        self.player.setSource(QUrl.fromLocalFile(os.path.abspath(source)))

    def load(self):
        # Rewind the freshly assigned source without starting playback
        self.player.stop()
        self.player.setPosition(0)

    def set_loop(self, enabled):
        self.loop = bool(enabled)
        self.player.setLoops(QMediaPlayer.Loops.Infinite if self.loop else QMediaPlayer.Loops.Once)

    def is_playing(self):
        return self.player.playbackState() == QMediaPlayer.PlaybackState.PlayingState

    def toggle(self):
        if self.is_playing():
            self.player.pause()
        else:
            self.player.play()

class QtTextLabel:
    def __init__(self, label):
        self.label = label

    def set_text(self, text):
        self.label.setText(text)

class QtAdvanceButton:
    def __init__(self, button):
        self.button = button

    def set_text(self, text):
        self.button.setText(text)

    def set_enabled(self, enabled):
        self.button.setEnabled(enabled)

class StackedCompletion:
    """Completion target: flips a QStackedWidget to its final page, once."""

    def __init__(self, stack, page, on_complete=None):
        self.stack = stack
        self.page = page
        self.on_complete = on_complete
        self.visits = 0

    def navigate(self):
        if self.visits:
            return
        self.visits += 1
        self.stack.setCurrentWidget(self.page)
        if self.on_complete:
            self.on_complete()
