from typing import List, Optional, Sequence, Protocol

from annotation_survey.core.config import SurveyConfig

class AudioPlayer(Protocol):
    def set_source(self, source: str) -> None: ...
    def load(self) -> None: ...

class TextLabel(Protocol):
    def set_text(self, text: str) -> None: ...

class AdvanceControl(Protocol):
    def set_text(self, text: str) -> None: ...
    def set_enabled(self, enabled: bool) -> None: ...

class CompletionTarget(Protocol):
    def navigate(self) -> None: ...

class Resettable(Protocol):
    def reset(self) -> object: ...

class ProgressionState:
    """Index of the current sample plus the terminal flag."""

    def __init__(self, sample_count: int) -> None:
        if sample_count < 1:
            raise ValueError("At least one sample is required")
        self.sample_count: int = sample_count
        self.sample_index: int = 0
        self.finished: bool = False

    @property
    def is_final(self) -> bool:
        return self.sample_index == self.sample_count - 1

    @property
    def display_number(self) -> int:
        return self.sample_index + 1

    def __repr__(self) -> str:
        if self.finished:
            return "Finished"
        return f"Playing({self.sample_index})"

def sample_label(index: int) -> str:
    return f"Sample {index + 1}"

class SampleProgressionController:
    """
    Walks the listener through the fixed sample list.

    `advance` is only ever triggered by the listener. From the last sample it
    disables the control and reaches the completion target once; after that
    every call is ignored.
    """

    def __init__(self, samples: Sequence[str], markers: Resettable, player: AudioPlayer,
                 label: TextLabel, control: AdvanceControl, completion: CompletionTarget) -> None:
        self.samples: List[str] = list(samples)
        self.state: ProgressionState = ProgressionState(len(self.samples))
        self.markers: Resettable = markers
        self.player: AudioPlayer = player
        self.label: TextLabel = label
        self.control: AdvanceControl = control
        self.completion: CompletionTarget = completion
        self.started: bool = False

    @property
    def current_sample(self) -> Optional[str]:
        if self.state.finished:
            return None
        return self.samples[self.state.sample_index]

    def start(self) -> None:
        """Enters Playing(0)."""
        self.state.sample_index = 0
        self.state.finished = False
        self.started = True
        self.control.set_enabled(True)
        self.control.set_text(SurveyConfig.SUBMIT_LABEL if self.state.is_final else SurveyConfig.NEXT_LABEL)
        self._enter_sample(0)

    def advance(self) -> bool:
        """Moves to the next sample or finishes. Returns False when ignored."""
        if not self.started or self.state.finished:
            return False

        if self.state.is_final:
            self.state.finished = True
            self.control.set_enabled(False)
            self.completion.navigate()
            return True

        new_index = self.state.sample_index + 1
        self.state.sample_index = new_index
        if self.state.is_final:
            self.control.set_text(SurveyConfig.SUBMIT_LABEL)
        self._enter_sample(new_index)
        return True

    def _enter_sample(self, index: int) -> None:
        self.player.set_source(self.samples[index])
        self.player.load()
        self.label.set_text(sample_label(index))
        self.markers.reset()
