from typing import Any, Protocol


class ConfigurationStore(Protocol):
    def get(self, key: str) -> Any: ...

    def set(self, key: str, value: Any) -> None: ...
