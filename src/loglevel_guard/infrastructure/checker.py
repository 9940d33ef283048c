"""
Pylint plugin entry point - composition root for the checker plugin.
Lives in infrastructure as it creates the container and wires dependencies.

Enable with: pylint --load-plugins=loglevel_guard.infrastructure.checker
"""

from pylint.lint import PyLinter

from loglevel_guard.domain.config import ConfigurationError
from loglevel_guard.infrastructure.di.container import LogLevelGuardContainer
from loglevel_guard.use_cases.checks.log_level import LogLevelChecker


def register(linter: PyLinter) -> None:
    """Register checkers. An invalid [tool.loglevel-guard] table is reported and defaults are used."""
    try:
        container = LogLevelGuardContainer.get_instance()
    except ConfigurationError as exc:
        linter.add_message("config-parse-error", line=0, args=f"[tool.loglevel-guard] {exc}")
        container = LogLevelGuardContainer(config_dict={})
    linter.register_checker(
        LogLevelChecker(
            linter,
            resolver=container.get_astroid_gateway(),
            config_loader=container.get_config_loader(),
        )
    )
