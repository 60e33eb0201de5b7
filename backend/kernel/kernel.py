"""Microkernel bootstrapper that wires FastAPI, AWS clients and plugins."""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional

import boto3
import requests
from botocore.config import Config
from fastapi import APIRouter, FastAPI

from core.config import Settings, get_settings, set_settings

from .plugin import ServicePlugin
from .runtime import set_kernel


CapabilityFactory = Callable[["Kernel"], Any]

CAPABILITY_SETTINGS = "settings"
CAPABILITY_TRANSCRIBE_CLIENT = "transcribe_client"
CAPABILITY_HTTP_SESSION = "http_session"


class Kernel:
    """Application runtime that coordinates shared infrastructure and plugins."""

    def __init__(
        self,
        *,
        settings: Optional[Settings] = None,
        debug: Optional[bool] = None,
        title: str = "Transcribe Gateway",
    ) -> None:
        self.settings = settings or get_settings()
        set_settings(self.settings)
        self.debug = bool(debug) if debug is not None else False

        self.app = FastAPI(debug=self.debug, title=title)

        self._capability_factories: Dict[str, CapabilityFactory] = {}
        self._capability_cache: Dict[str, Any] = {}
        self._capability_singletons: Dict[str, bool] = {}
        self._registered_plugins: Dict[str, ServicePlugin] = {}

        set_kernel(self)
        self._bootstrap_infrastructure()

    # ------------------------------------------------------------------
    # Capability and dependency management
    # ------------------------------------------------------------------
    def register_capability(
        self,
        name: str,
        factory: CapabilityFactory,
        *,
        singleton: bool = True,
    ) -> None:
        """Register a lazily-created capability that other modules can resolve."""

        if name in self._capability_factories:
            raise ValueError(f"Capability '{name}' already registered")
        self._capability_factories[name] = factory
        self._capability_singletons[name] = singleton

    def resolve(self, name: str) -> Any:
        if name not in self._capability_factories:
            raise KeyError(f"Capability '{name}' is not registered")

        if name in self._capability_cache:
            return self._capability_cache[name]

        instance = self._capability_factories[name](self)
        if self._capability_singletons.get(name, True):
            self._capability_cache[name] = instance
        return instance

    # ------------------------------------------------------------------
    # Router helpers
    # ------------------------------------------------------------------
    def include_router(self, router: APIRouter, *, prefix: str = "") -> None:
        self.app.include_router(router, prefix=prefix)

    # ------------------------------------------------------------------
    # Plugin lifecycle
    # ------------------------------------------------------------------
    def register_plugin(self, plugin: ServicePlugin) -> None:
        if plugin.name in self._registered_plugins:
            raise ValueError(f"Plugin '{plugin.name}' already registered")
        plugin.setup(self)
        self._registered_plugins[plugin.name] = plugin

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _bootstrap_infrastructure(self) -> None:
        """Initialise shared infrastructure managed by the kernel."""

        self.register_capability(CAPABILITY_SETTINGS, lambda _: self.settings)
        self.register_capability(CAPABILITY_TRANSCRIBE_CLIENT, _create_transcribe_client)
        self.register_capability(CAPABILITY_HTTP_SESSION, lambda _: requests.Session())


def _create_transcribe_client(kernel: Kernel):
    return boto3.client(
        "transcribe",
        region_name=kernel.settings.AWS_REGION,
        config=Config(
            retries={"max_attempts": 5, "mode": "standard"},
            connect_timeout=5,
            read_timeout=30,
        ),
    )


__all__ = [
    "CAPABILITY_HTTP_SESSION",
    "CAPABILITY_SETTINGS",
    "CAPABILITY_TRANSCRIBE_CLIENT",
    "Kernel",
]
