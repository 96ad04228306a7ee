"""
Email store port interface for addresses collected by the desktop contact form.
"""

from abc import ABC, abstractmethod


class EmailStorePort(ABC):
    @abstractmethod
    def add(self, email: str) -> bool:
        """
        Record an email address.

        Args:
            email: Address submitted by a visitor

        Returns:
            True if the address was new, False if it was already collected

        Raises:
            ValueError: If the address is not plausibly an email
        """
        pass

    @abstractmethod
    def collected(self) -> list[str]:
        """Collected addresses in submission order."""
        pass
