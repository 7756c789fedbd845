from abc import ABC, abstractmethod
from typing import Any


class IClient(ABC):
    """Interface for every client that hands out an underlying transport client"""

    @abstractmethod
    def get_client(self) -> Any:
        """Get the underlying client"""
        raise NotImplementedError
