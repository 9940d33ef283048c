"""Domain entities for log level guard analysis."""

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Optional

import astroid

from loglevel_guard.domain.protocols import CancellationSignal

if TYPE_CHECKING:
    from loglevel_guard.domain.rules import Finding


class Severity(Enum):
    """Diagnostic severity levels."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclass(frozen=True)
class LogCallSite:
    """A logging invocation that matched the configured convention.

    Created per matched call and dropped once that call has been analysed.
    """

    invocation: astroid.nodes.Call
    method_reference: astroid.nodes.Attribute
    method_name: str
    receiver: str
    guard_property: str


@dataclass(frozen=True)
class GuardCandidate:
    """A member access inside an enclosing condition that may be a level check."""

    expression: astroid.nodes.Attribute
    receiver: str
    negated: bool


@dataclass(frozen=True)
class AnalysisContext:
    """What the host hands to the rule for one node: a sink and a cancellation signal."""

    report: Callable[["Finding"], None]
    cancellation: Optional[CancellationSignal] = None

    @property
    def cancelled(self) -> bool:
        """True when the host asked to stop."""
        return self.cancellation is not None and self.cancellation.is_set()


@dataclass(frozen=True)
class AuditResult:
    """Aggregated result of a standalone audit over files."""

    findings: list["Finding"] = field(default_factory=list)
    files_checked: int = 0
    parse_errors: list[str] = field(default_factory=list)
    cancelled: bool = False
    missing_paths: list[str] = field(default_factory=list)

    @property
    def has_findings(self) -> bool:
        """True when at least one call site was flagged."""
        return bool(self.findings)
