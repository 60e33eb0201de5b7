"""Process-wide registry for the bootstrapped kernel.

Lambda keeps the process alive between warm invocations, so whatever the
kernel caches here (AWS clients, HTTP sessions) is reused across requests.
"""

from __future__ import annotations

from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from .kernel import Kernel


_kernel: Optional["Kernel"] = None


def set_kernel(kernel: "Kernel") -> None:
    global _kernel
    _kernel = kernel


def get_kernel() -> "Kernel":
    """Return the active kernel instance."""

    if _kernel is None:
        raise RuntimeError("Kernel has not been initialised yet")
    return _kernel


def has_kernel() -> bool:
    return _kernel is not None


def reset_kernel() -> None:
    """Forget the active kernel so the next bootstrap starts from scratch."""

    global _kernel
    _kernel = None


__all__ = ["get_kernel", "has_kernel", "reset_kernel", "set_kernel"]
