"""Key-value cache interface used for refresh tokens and presence"""

from abc import ABC, abstractmethod
from typing import Optional


class ICacheClient(ABC):

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        pass

    @abstractmethod
    def set_with_expiry(self, key: str, value: str, ttl_seconds: int) -> None:
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        pass

    @abstractmethod
    def ping(self) -> bool:
        pass

    @abstractmethod
    def close(self) -> None:
        pass
