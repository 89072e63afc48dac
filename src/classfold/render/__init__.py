from classfold.render.console import ConsoleRenderer
from classfold.render.recording import RecordingRenderer

__all__ = ["ConsoleRenderer", "RecordingRenderer"]
