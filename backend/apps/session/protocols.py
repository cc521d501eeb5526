from __future__ import annotations

from typing import Any, List, Optional, Protocol


class SessionStoreProtocol(Protocol):
    @property
    def session_id(self) -> Optional[str]:
        ...

    def ensure(self) -> str:
        ...

    def get(self, key: str, default: Any = None) -> Any:
        ...

    def set(self, key: str, value: Any) -> None:
        ...

    def attribute_names(self) -> List[str]:
        ...
