from abc import ABC, abstractmethod
import enum
import logging
from typing import Any, Callable, Generic, NamedTuple, Optional, TypeVar

from rb_trees.logging_config import get_logger

# Get logger for this module
logger = get_logger("RBTree")

K = TypeVar("K")
V = TypeVar("V")

EqualsFn = Callable[[Any, Any], bool]
LessFn = Callable[[Any, Any], bool]
VisitFn = Callable[[Any, Any], None]


class Color(enum.IntEnum):
    BLACK = 0
    RED = 1


RED = Color.RED
BLACK = Color.BLACK


class Item(NamedTuple):
    """A (key, value) pair as handed back to callers."""
    key: Any
    value: Any = None

    def short_key(self) -> str:
        """Create a short representation of the key for display purposes."""
        if isinstance(self.key, (bytes, bytearray)):
            s = self.key.hex()
        else:
            s = str(self.key)
        return s if len(s) <= 10 else f"{s[:3]}...{s[-3:]}"

    def __str__(self):
        return f"Item(key={self.short_key()}, value={self.value})"


class AbstractSortedMap(ABC, Generic[K, V]):
    """
    Abstract base class for an ordered key-value container that tolerates
    duplicate keys.
    """

    @abstractmethod
    def insert(self, key: K, value: Optional[V] = None) -> None:
        """
        Insert a key-value pair. Equal keys are kept side by side.

        Parameters:
            key: The key to insert; must be ordered by the container's predicates.
            value: Optional payload.
        """

    @abstractmethod
    def search(self, key: K) -> Optional[Item]:
        """
        Look up a key.

        Returns:
            Optional[Item]: The matching (key, value) pair, or None if absent.
        """

    @abstractmethod
    def delete(self, key: K) -> Optional[Item]:
        """
        Remove one pair with the given key.

        Returns:
            Optional[Item]: The removed (key, value) pair, or None if absent.
        """

    @abstractmethod
    def is_empty(self) -> bool:
        pass


def debug_log(message, *args, **kwargs):
    """Log a debug message only if debug logging is enabled"""
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(message, *args, **kwargs)
