"""Reporters for audit results: text lines or JSON."""

import json
from typing import TYPE_CHECKING, Protocol, TextIO

if TYPE_CHECKING:
    from loglevel_guard.domain.entities import AuditResult


class AuditReporter(Protocol):
    """Protocol for reporting audit results."""

    def report_audit(self, audit_result: "AuditResult", stream: TextIO) -> None:
        """Write the audit result to stream."""
        ...


class TextAuditReporter:
    """One `path:line:col: RULE severity: message` line per finding, then a summary."""

    def report_audit(self, audit_result: "AuditResult", stream: TextIO) -> None:
        for finding in audit_result.findings:
            stream.write(
                f"{finding.path}:{finding.line}:{finding.column}: "
                f"{finding.rule_id} {finding.severity.value}: {finding.message}\n"
            )
        for path in audit_result.parse_errors:
            stream.write(f"{path}: could not be parsed\n")
        for path in audit_result.missing_paths:
            stream.write(f"{path}: no such file or directory\n")
        summary = f"{len(audit_result.findings)} finding(s) in {audit_result.files_checked} file(s)"
        if audit_result.cancelled:
            summary += " (cancelled)"
        stream.write(summary + "\n")


class JsonAuditReporter:
    """Machine-readable output for build pipelines."""

    def report_audit(self, audit_result: "AuditResult", stream: TextIO) -> None:
        payload = {
            "findings": [finding.to_dict() for finding in audit_result.findings],
            "files_checked": audit_result.files_checked,
            "parse_errors": audit_result.parse_errors,
            "missing_paths": audit_result.missing_paths,
            "cancelled": audit_result.cancelled,
        }
        json.dump(payload, stream, indent=2)
        stream.write("\n")
