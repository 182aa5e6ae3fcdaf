import os
from dotenv import load_dotenv

load_dotenv()

class SurveyConfig:
    """Centralized configuration for the Audio Annotation Survey."""

    # Canvas (fixed size, created once at startup)
    CANVAS_WIDTH = 800
    CANVAS_HEIGHT = 100

    # Timeline insets reserved for chrome on either side of the line
    LINE_BEGIN = 107
    LINE_END_MARGIN = 188
    LINE_HEIGHT = 2

    # Markers
    MARKER_RADIUS_DIVISOR = 80
    MARKER_STROKE = 2

    # Palette
    BACKGROUND_COLOR = "#fafafa"
    LINE_COLOR = "#666666"
    MARKER_FILL = "#224285F4" # #AARRGGBB
    MARKER_STROKE_COLOR = "#4285F4"

    # Samples
    SAMPLES_DIR = os.getenv("SURVEY_SAMPLES_DIR", "samples")
    AUDIO_EXTENSIONS = ('.wav', '.mp3', '.flac', '.ogg', '.m4a')
    LOOP_DEFAULT = os.getenv("SURVEY_LOOP", "0").lower() in ("1", "true", "yes")

    # Labels
    WINDOW_TITLE = os.getenv("SURVEY_TITLE", "Audio Annotation Survey")
    NEXT_LABEL = "Next"
    SUBMIT_LABEL = "Submit"
    THANK_YOU_TEXT = "Thank you for taking part in the survey!"

    @classmethod
    def line_end(cls, width=None):
        return (width or cls.CANVAS_WIDTH) - cls.LINE_END_MARGIN

    @classmethod
    def marker_radius(cls, width=None):
        return (width or cls.CANVAS_WIDTH) / cls.MARKER_RADIUS_DIVISOR

    @classmethod
    def is_audio_file(cls, filename):
        """Returns True if the filename carries one of the supported audio extensions."""
        return str(filename).lower().endswith(cls.AUDIO_EXTENSIONS)

    @classmethod
    def discover_samples(cls, directory=None):
        """Lists the audio files of a directory, sorted by name."""
        directory = directory or cls.SAMPLES_DIR
        if not os.path.isdir(directory):
            return []
        names = sorted(f for f in os.listdir(directory) if cls.is_audio_file(f))
        return [os.path.join(directory, f) for f in names]
