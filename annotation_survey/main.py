import os
import sys
import argparse
from typing import List, Optional

from annotation_survey.core.config import SurveyConfig

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Audio Annotation Survey - mark timestamps on audio samples")
    parser.add_argument("samples", nargs="*", help="Audio files to present, in order")
    parser.add_argument("--samples-dir", type=str, help=f"Directory to scan for audio files (default: {SurveyConfig.SAMPLES_DIR})")
    parser.add_argument("--loop", action="store_true", help="Start with looping enabled")
    parser.add_argument("--list", action="store_true", help="Print the resolved sample list and exit")
    return parser

def resolve_samples(files: List[str], samples_dir: Optional[str] = None) -> List[str]:
    """Explicit files first, then the directory scan. Missing files raise FileNotFoundError."""
    missing = [f for f in files if not os.path.isfile(f)]
    if missing:
        raise FileNotFoundError(f"Sample file(s) not found: {', '.join(missing)}")
    samples = list(files)
    if samples_dir or not files:
        samples.extend(SurveyConfig.discover_samples(samples_dir))
    if not samples:
        raise FileNotFoundError(f"No audio samples found in '{samples_dir or SurveyConfig.SAMPLES_DIR}'")
    return samples

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        samples = resolve_samples(args.samples, args.samples_dir)
    except FileNotFoundError as e:
        print(f"[BOOT] {e}")
        if args.list:
            return 1
        from PyQt6.QtWidgets import QApplication
        from annotation_survey.ui.dialogs import show_error
        app = QApplication.instance() or QApplication(sys.argv)
        show_error(None, "No Samples", "The survey could not start because no audio samples are available.", e)
        return 1

    if args.list:
        print("\n=== Survey Samples ===")
        for i, s in enumerate(samples):
            print(f"  Sample {i + 1}: {s}")
        print("======================\n")
        return 0

    from PyQt6.QtWidgets import QApplication
    from annotation_survey.ui.main_window import SurveyWindow
    app = QApplication.instance() or QApplication(sys.argv)
    window = SurveyWindow(samples, loop=True if args.loop else None)
    window.show()
    return app.exec()

if __name__ == "__main__":
    sys.exit(main())
