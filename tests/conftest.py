"""Pytest configuration.

Run pytest from this project's root; pythonpath in pyproject.toml puts src/ and the
project root on sys.path so `from tests.linter_test_utils import ...` works.
"""

from unittest.mock import MagicMock


def interface_resolver(prefix: str = "log4net.ILog.") -> MagicMock:
    """Resolver mock that maps every member access to prefix + attribute name."""
    resolver = MagicMock()
    resolver.resolve_method_qname.side_effect = lambda node: f"{prefix}{node.attrname}"
    return resolver


def cli_required_deps(**overrides: object) -> dict[str, object]:
    """Return required dependency mocks for CLIDependencies. Pass overrides to customize."""
    base = {
        "config_loader": MagicMock(),
        "astroid_gateway": MagicMock(),
        "filesystem": MagicMock(),
    }
    base.update(overrides)
    return base
