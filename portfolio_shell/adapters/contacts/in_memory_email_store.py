"""
In-memory store of emails collected through the desktop contact form.
"""

import logging
import threading
from typing import Optional

from typing_extensions import override

from portfolio_shell.ports.contacts.email_store_port import EmailStorePort


class InMemoryEmailStore(EmailStorePort):
    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._emails: list[str] = []
        self._lock = threading.Lock()
        self._logger = logger or logging.getLogger(__name__)

    @override
    def add(self, email: str) -> bool:
        normalized = (email or "").strip().lower()
        local, _, domain = normalized.partition("@")
        if not local or not domain or " " in normalized:
            raise ValueError(f"Not an email address: {email!r}")
        with self._lock:
            if normalized in self._emails:
                return False
            self._emails.append(normalized)
        self._logger.info(f"Collected email: {normalized}")
        return True

    @override
    def collected(self) -> list[str]:
        with self._lock:
            return list(self._emails)
