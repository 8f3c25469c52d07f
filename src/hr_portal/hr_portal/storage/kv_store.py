from __future__ import annotations

from typing import Optional, Protocol


class KeyValueStore(Protocol):
    """Durable string-to-string storage, shaped like browser localStorage.

    Note (DIP): the store adapter depends on this interface, not on a concrete backend.
    """

    def get_item(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set_item(self, key: str, value: str) -> None:
        raise NotImplementedError

    def remove_item(self, key: str) -> None:
        raise NotImplementedError
