"""Log level guard rule (E9601): debug logging calls without an 'is enabled' check."""

from typing import Optional

import astroid

from loglevel_guard.domain.config import LoggingConvention
from loglevel_guard.domain.constants import MESSAGE_TEMPLATE, RULE_DESCRIPTION, RULE_ID
from loglevel_guard.domain.entities import (
    AnalysisContext,
    GuardCandidate,
    LogCallSite,
    Severity,
)
from loglevel_guard.domain.protocols import SymbolResolverProtocol
from loglevel_guard.domain.rules import Checkable, Finding


class LogLevelGuardRule(Checkable):
    """Flags debug-tier logging calls that no enclosing if-statement guards.

    Stateless apart from the convention and resolver given at construction, so one
    instance may serve concurrent checks.
    """

    code: str = RULE_ID
    description: str = RULE_DESCRIPTION

    def __init__(
        self,
        resolver: SymbolResolverProtocol,
        convention: Optional[LoggingConvention] = None,
    ) -> None:
        self._resolver = resolver
        self._convention = convention or LoggingConvention()

    def check(self, node: astroid.nodes.NodeNG) -> list[Finding]:
        """Check a Call node. Call once per invocation."""
        call_site = self.match_call_site(node)
        if call_site is None:
            return []

        condition = self.resolve_guard_condition(call_site)
        if condition is None:
            return [self._finding(call_site)]

        return [
            self._finding(call_site)
            for candidate in self.guard_candidates(condition)
            if not self.is_valid_guard(call_site, candidate)
        ]

    def analyze(self, node: astroid.nodes.NodeNG, context: AnalysisContext) -> list[Finding]:
        """Host entry point: check node and push findings to context.report.

        Cancellation is honoured before and after the check; a cancelled run reports nothing.
        """
        if context.cancelled:
            return []
        findings = self.check(node)
        if context.cancelled:
            return []
        for finding in findings:
            context.report(finding)
        return findings

    def match_call_site(self, node: astroid.nodes.NodeNG) -> Optional[LogCallSite]:
        """Return the call site when node is `<receiver>.<Prefix...>(...)` on the logging interface."""
        if not isinstance(node, astroid.nodes.Call):
            return None
        method_ref = node.func
        if not isinstance(method_ref, astroid.nodes.Attribute):
            return None
        if not method_ref.attrname.startswith(self._convention.log_call_prefix):
            return None

        qname = self._resolver.resolve_method_qname(method_ref)
        if not qname or not qname.startswith(self._convention.interface_prefix):
            return None

        return LogCallSite(
            invocation=node,
            method_reference=method_ref,
            method_name=method_ref.attrname,
            receiver=self.receiver_token(method_ref),
            guard_property=self._convention.guard_property_for(method_ref.attrname),
        )

    def resolve_guard_condition(self, call_site: LogCallSite) -> Optional[astroid.nodes.NodeNG]:
        """Condition of the innermost enclosing if whose text mentions the guard property.

        Matching is a plain substring test on the condition source, so a string literal
        or an unrelated name containing the property also counts.
        """
        for ancestor in call_site.method_reference.node_ancestors():
            if not isinstance(ancestor, astroid.nodes.If):
                continue
            if call_site.guard_property in ancestor.test.as_string():
                return ancestor.test
        return None

    def guard_candidates(self, condition: astroid.nodes.NodeNG) -> list[GuardCandidate]:
        """The condition itself when it is a member access, else every member access inside it."""
        if isinstance(condition, astroid.nodes.Attribute):
            expressions = [condition]
        else:
            expressions = list(condition.nodes_of_class(astroid.nodes.Attribute))
        return [
            GuardCandidate(
                expression=expr,
                receiver=self.receiver_token(expr),
                negated=self._is_negated(expr),
            )
            for expr in expressions
        ]

    def is_valid_guard(self, call_site: LogCallSite, candidate: GuardCandidate) -> bool:
        """A guard counts only when it is not negated and checks the same receiver."""
        return not candidate.negated and candidate.receiver == call_site.receiver

    @staticmethod
    def receiver_token(node: astroid.nodes.NodeNG) -> str:
        """Leftmost name of a member access chain: `self.log.Debug` -> 'self'."""
        current = node
        while True:
            if isinstance(current, astroid.nodes.Attribute):
                current = current.expr
            elif isinstance(current, astroid.nodes.Call):
                current = current.func
            elif isinstance(current, astroid.nodes.Subscript):
                current = current.value
            else:
                break
        if isinstance(current, astroid.nodes.Name):
            return current.name
        return current.as_string()

    @staticmethod
    def _is_negated(node: astroid.nodes.NodeNG) -> bool:
        parent = node.parent
        return isinstance(parent, astroid.nodes.UnaryOp) and parent.op == "not"

    def _finding(self, call_site: LogCallSite) -> Finding:
        return Finding.from_node(
            rule_id=RULE_ID,
            severity=Severity.ERROR,
            message=MESSAGE_TEMPLATE.format(guard=call_site.guard_property),
            node=call_site.method_reference,
            message_args=(call_site.guard_property,),
        )
