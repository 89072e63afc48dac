from classfold.editor.buffer import TextBuffer
from classfold.editor.json_store import JsonFileConfigurationStore, get_settings_path
from classfold.editor.memory import InMemoryConfigurationStore, InMemoryEditor

__all__ = [
    "InMemoryConfigurationStore",
    "InMemoryEditor",
    "JsonFileConfigurationStore",
    "TextBuffer",
    "get_settings_path",
]
