"""Use Case: Check Audit - walk Python files and collect log level findings."""

import logging
from typing import TYPE_CHECKING, Iterable, Optional

import astroid

from loglevel_guard.domain.entities import AnalysisContext, AuditResult
from loglevel_guard.domain.protocols import (
    AstroidProtocol,
    CancellationSignal,
    FileSystemProtocol,
)
from loglevel_guard.domain.rules import Finding
from loglevel_guard.domain.rules.log_level import LogLevelGuardRule

if TYPE_CHECKING:
    from loglevel_guard.domain.config import ConfigurationLoader

logger = logging.getLogger(__name__)


class CheckAuditUseCase:
    """Run the log level rule over every call in the given files."""

    def __init__(
        self,
        astroid_gateway: AstroidProtocol,
        filesystem: FileSystemProtocol,
        config_loader: "ConfigurationLoader",
    ) -> None:
        self.astroid_gateway = astroid_gateway
        self.filesystem = filesystem
        self.config_loader = config_loader
        self.rule = LogLevelGuardRule(astroid_gateway, config_loader.convention)

    def execute(
        self,
        target_paths: Iterable[str],
        cancellation: Optional[CancellationSignal] = None,
    ) -> AuditResult:
        """
        Audit every Python file under target_paths.

        Targets that do not exist are recorded in missing_paths. Files matching an
        exclude-paths fragment are skipped. Files that fail to parse are recorded in
        parse_errors and do not stop the run. When cancellation is set the audit stops
        and returns what it had so far with cancelled=True; a file interrupted midway
        is not counted as checked.
        """
        findings: list[Finding] = []
        parse_errors: list[str] = []
        files_checked = 0
        files, missing_paths = self._collect_files(target_paths)

        for file_path in files:
            if self._cancelled(cancellation):
                break
            try:
                module = self.astroid_gateway.parse_file(file_path)
            except astroid.AstroidBuildingError as exc:
                logger.warning("Skipping %s: %s", file_path, exc)
                parse_errors.append(file_path)
                continue
            findings.extend(self.check_module(module, cancellation))
            if self._cancelled(cancellation):
                break
            files_checked += 1

        if self._cancelled(cancellation):
            logger.info("Audit cancelled after %d files", files_checked)
            return AuditResult(
                findings, files_checked, parse_errors, cancelled=True, missing_paths=missing_paths
            )
        logger.info("Checked %d files, %d findings", files_checked, len(findings))
        return AuditResult(findings, files_checked, parse_errors, missing_paths=missing_paths)

    def check_module(
        self,
        module: astroid.nodes.Module,
        cancellation: Optional[CancellationSignal] = None,
    ) -> list[Finding]:
        """Visit each Call in the module and return the findings in source order."""
        module_findings: list[Finding] = []
        context = AnalysisContext(report=module_findings.append, cancellation=cancellation)
        for call in module.nodes_of_class(astroid.nodes.Call):
            self.rule.analyze(call, context)
        return module_findings

    @staticmethod
    def _cancelled(cancellation: Optional[CancellationSignal]) -> bool:
        return cancellation is not None and cancellation.is_set()

    def _collect_files(self, target_paths: Iterable[str]) -> tuple[list[str], list[str]]:
        excludes = self.config_loader.exclude_paths
        files: list[str] = []
        missing: list[str] = []
        for target in target_paths:
            if not self.filesystem.exists(target):
                logger.warning("No such file or directory: %s", target)
                missing.append(target)
                continue
            for file_path in self.filesystem.glob_python_files(target):
                if any(fragment in file_path for fragment in excludes):
                    logger.debug("Excluded %s", file_path)
                    continue
                files.append(file_path)
        return files, missing
