from collections.abc import Sequence
from typing import Protocol

from classfold.models import Range


class DecorationRenderer(Protocol):
    def set_decorations(
        self,
        unfolded: Sequence[Range],
        faded: Sequence[Range],
        folded: Sequence[Range],
    ) -> None: ...
