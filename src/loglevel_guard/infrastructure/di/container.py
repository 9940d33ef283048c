"""Dependency Injection Container for loglevel-guard."""

from typing import Any, Optional, cast

from loglevel_guard.domain.config import ConfigurationLoader
from loglevel_guard.infrastructure.config_file_loader import ConfigFileLoader
from loglevel_guard.infrastructure.gateways.astroid_gateway import AstroidGateway
from loglevel_guard.infrastructure.gateways.filesystem_gateway import FileSystemGateway


class LogLevelGuardContainer:
    """Holds the singletons shared by the pylint plugin and the CLI."""

    _instance: Optional["LogLevelGuardContainer"] = None

    def __init__(self, config_dict: Optional[dict[str, object]] = None) -> None:
        self._singletons: dict[str, Any] = {}
        self._register_defaults(config_dict)

    @classmethod
    def get_instance(cls) -> "LogLevelGuardContainer":
        """Process-wide container, created on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def _register_defaults(self, config_dict: Optional[dict[str, object]]) -> None:
        """Register default implementations for protocols."""
        if config_dict is None:
            config_dict = ConfigFileLoader.load_config_from_fs()
        self.register_singleton("ConfigurationLoader", ConfigurationLoader(config_dict))
        self.register_singleton("AstroidGateway", AstroidGateway())
        self.register_singleton("FileSystemGateway", FileSystemGateway())

    def register_singleton(self, key: str, instance: object) -> None:
        self._singletons[key] = instance

    def get(self, key: str) -> Any:
        """Look up a registered singleton. Raises KeyError when missing."""
        return self._singletons[key]

    def get_config_loader(self) -> ConfigurationLoader:
        return cast(ConfigurationLoader, self.get("ConfigurationLoader"))

    def get_astroid_gateway(self) -> AstroidGateway:
        return cast(AstroidGateway, self.get("AstroidGateway"))

    def get_filesystem_gateway(self) -> FileSystemGateway:
        return cast(FileSystemGateway, self.get("FileSystemGateway"))
