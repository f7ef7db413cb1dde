"""
Base classes for record admission
"""

from abc import ABC, abstractmethod

from ..severity import Severity


class LogFilter(ABC):
    """Abstract base class for admission filters"""

    @abstractmethod
    def admits(self, severity: Severity) -> bool:
        """Cheap check made before a record is built"""
        pass
