from collections.abc import Sequence

from classfold.models import Range


class RecordingRenderer:
    """Keeps the decorations of the latest scan."""

    def __init__(self) -> None:
        self.unfolded: list[Range] = []
        self.faded: list[Range] = []
        self.folded: list[Range] = []
        self.call_count = 0

    def set_decorations(
        self,
        unfolded: Sequence[Range],
        faded: Sequence[Range],
        folded: Sequence[Range],
    ) -> None:
        self.unfolded = list(unfolded)
        self.faded = list(faded)
        self.folded = list(folded)
        self.call_count += 1
