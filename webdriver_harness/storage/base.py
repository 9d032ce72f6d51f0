"""Abstract base class for result storage backends."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from webdriver_harness.models.result import Result


@dataclass(frozen=True, kw_only=True)
class ResultStorage(ABC):
    """Abstract base for stores that persist test results."""

    @abstractmethod
    async def store(self, result: Result) -> str:
        """Persist a finished result.

        Args:
            result: Result record, already stamped with its end time

        Returns:
            Identifier assigned to the stored document

        """
