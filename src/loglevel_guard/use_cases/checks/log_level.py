"""Log level guard check (E9601)."""

from typing import TYPE_CHECKING, Optional

import astroid

if TYPE_CHECKING:
    from pylint.lint import PyLinter

from pylint.checkers import BaseChecker

from loglevel_guard.domain.config import ConfigurationLoader
from loglevel_guard.domain.constants import (
    DEFAULT_FORMAT_SUFFIX,
    DEFAULT_INTERFACE_PREFIX,
    DEFAULT_LOG_CALL_PREFIX,
    PYLINT_MSG_ID,
)
from loglevel_guard.domain.protocols import SymbolResolverProtocol
from loglevel_guard.domain.rule_msgs import RuleMsgBuilder
from loglevel_guard.domain.rules.log_level import LogLevelGuardRule

OPTION_NAMES = ("log-call-prefix", "format-suffix", "interface-prefix", "guard-template")


class LogLevelChecker(BaseChecker):
    """E9601: unguarded debug logging. Thin: delegates to LogLevelGuardRule."""

    name: str = "loglevel-guard"
    msgs = RuleMsgBuilder.build_msgs()
    options = (
        (
            "log-call-prefix",
            {
                "default": None,
                "type": "string",
                "metavar": "<prefix>",
                "help": f"Method name prefix of guarded logging calls (default {DEFAULT_LOG_CALL_PREFIX!r}).",
            },
        ),
        (
            "format-suffix",
            {
                "default": None,
                "type": "string",
                "metavar": "<suffix>",
                "help": f"Suffix stripped before building the guard name (default {DEFAULT_FORMAT_SUFFIX!r}).",
            },
        ),
        (
            "interface-prefix",
            {
                "default": None,
                "type": "string",
                "metavar": "<qualified name>",
                "help": f"Qualified name prefix of the logging interface (default {DEFAULT_INTERFACE_PREFIX!r}).",
            },
        ),
        (
            "guard-template",
            {
                "default": None,
                "type": "string",
                "metavar": "<template>",
                "help": "Guard property template, '{level}' is the stripped method name.",
            },
        ),
    )

    def __init__(
        self,
        linter: "PyLinter",
        resolver: SymbolResolverProtocol,
        config_loader: Optional[ConfigurationLoader] = None,
    ) -> None:
        super().__init__(linter)
        self._resolver = resolver
        self._config_loader = config_loader or ConfigurationLoader()
        self._rule = LogLevelGuardRule(resolver, self._config_loader.convention)

    def open(self) -> None:
        """Rebuild the rule once pylint options are parsed; options win over pyproject values."""
        overrides: dict[str, Optional[str]] = {}
        for option in OPTION_NAMES:
            value = getattr(self.linter.config, option.replace("-", "_"), None)
            overrides[option.replace("-", "_")] = value if isinstance(value, str) else None
        loader = self._config_loader.with_overrides(**overrides)
        self._rule = LogLevelGuardRule(self._resolver, loader.convention)

    def visit_call(self, node: astroid.nodes.Call) -> None:
        """Delegate E9601 to the domain rule; report each finding via add_message."""
        for finding in self._rule.check(node):
            self.add_message(
                PYLINT_MSG_ID,
                node=finding.node,
                args=finding.message_args,
            )
