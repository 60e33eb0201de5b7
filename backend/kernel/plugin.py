"""Contract for service packages that plug routes and capabilities into the kernel."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from .kernel import Kernel


class ServicePlugin(ABC):
    """Base contract that every service plugin must implement."""

    name: str

    @abstractmethod
    def setup(self, kernel: "Kernel") -> None:
        """Register capabilities and routers on the kernel."""


__all__ = ["ServicePlugin"]
