"""Domain protocols. Infrastructure implements these; the domain only depends on them."""

from typing import Optional, Protocol

import astroid


class SymbolResolverProtocol(Protocol):
    """Resolves a member access to the qualified name of the method it refers to."""

    def resolve_method_qname(self, node: astroid.nodes.NodeNG) -> Optional[str]:
        """Return e.g. 'log4net.ILog.Debug', or None when the symbol is unknown."""
        ...


class CancellationSignal(Protocol):
    """Cooperative cancellation flag passed through from the host (threading.Event fits)."""

    def is_set(self) -> bool:
        """True once cancellation was requested."""
        ...


class AstroidProtocol(SymbolResolverProtocol, Protocol):
    """Parsing plus symbol resolution."""

    def parse_file(self, file_path: str) -> astroid.nodes.Module:
        """Parse a file into an astroid Module. Raises astroid.AstroidSyntaxError on bad source."""
        ...


class FileSystemProtocol(Protocol):
    """File discovery used by the standalone audit."""

    def glob_python_files(self, path: str) -> list[str]:
        """All Python files under path (recursive for directories)."""
        ...

    def exists(self, path: str) -> bool:
        """True when path names an existing file or directory."""
        ...
