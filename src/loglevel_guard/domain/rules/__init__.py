"""Domain models for rules and findings."""

from dataclasses import dataclass

__all__ = [
    "Checkable",
    "Finding",
]

from typing import Protocol

import astroid

from loglevel_guard.domain.constants import RULE_CATEGORY, RULE_TITLE
from loglevel_guard.domain.entities import Severity


@dataclass(frozen=True)
class Finding:
    """A reported call site: rule id, severity, message and the span of the flagged node."""

    rule_id: str
    severity: Severity
    message: str
    location: str
    line: int
    column: int
    end_line: int | None
    end_column: int | None
    node: astroid.nodes.NodeNG
    message_args: tuple[str, ...] = ()
    """Args for pylint add_message, e.g. ('IsDebugEnabled',)."""
    category: str = RULE_CATEGORY
    title: str = RULE_TITLE

    @property
    def path(self) -> str:
        """File path part of location."""
        return self.location.rsplit(":", 2)[0]

    def to_dict(self) -> dict[str, object]:
        """Plain representation for JSON output. The node is left out."""
        return {
            "rule_id": self.rule_id,
            "severity": self.severity.value,
            "category": self.category,
            "title": self.title,
            "message": self.message,
            "path": self.path,
            "line": self.line,
            "column": self.column,
            "end_line": self.end_line,
            "end_column": self.end_column,
        }

    @staticmethod
    def _location_from_node(node: astroid.nodes.NodeNG) -> str:
        """Compute path:lineno:col_offset from an astroid node. Used by from_node."""
        root = node.root()
        path = getattr(root, "file", "") or ""
        lineno = getattr(node, "lineno", 0)
        col_offset = getattr(node, "col_offset", 0)
        return f"{path}:{lineno}:{col_offset}"

    @classmethod
    def from_node(
        cls,
        *,
        rule_id: str,
        severity: Severity,
        message: str,
        node: astroid.nodes.NodeNG,
        message_args: tuple[str, ...] = (),
    ) -> "Finding":
        """Build a Finding located at node's span. Prefer over manual location=."""
        return cls(
            rule_id=rule_id,
            severity=severity,
            message=message,
            location=cls._location_from_node(node),
            line=getattr(node, "lineno", 0) or 0,
            column=getattr(node, "col_offset", 0) or 0,
            end_line=getattr(node, "end_lineno", None),
            end_column=getattr(node, "end_col_offset", None),
            node=node,
            message_args=message_args,
        )


class Checkable(Protocol):
    """One-and-done check: given a node, return findings."""

    code: str
    description: str

    def check(self, node: astroid.nodes.NodeNG) -> list[Finding]:
        """Interrogate a node for the rule's anti-pattern."""
        ...
