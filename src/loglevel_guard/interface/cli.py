"""CLI entry points for loglevel-guard - Thin Controller using Typer."""

import logging
import sys
from dataclasses import dataclass
from pathlib import Path

import typer

from loglevel_guard.domain.config import ConfigurationError, ConfigurationLoader
from loglevel_guard.domain.protocols import AstroidProtocol, FileSystemProtocol
from loglevel_guard.domain.rule_msgs import RuleMsgBuilder
from loglevel_guard.interface.reporters import (
    AuditReporter,
    JsonAuditReporter,
    TextAuditReporter,
)
from loglevel_guard.use_cases.check_audit import CheckAuditUseCase

EXIT_CLEAN = 0
EXIT_FINDINGS = 1
EXIT_ERROR = 2


@dataclass(frozen=True)
class CLIDependencies:
    """Explicit dependencies for the CLI. All dependencies injected at composition root."""

    config_loader: ConfigurationLoader
    astroid_gateway: AstroidProtocol
    filesystem: FileSystemProtocol


class CLIAppFactory:
    """Creates the Typer app."""

    REPORTERS: dict[str, type] = {
        "text": TextAuditReporter,
        "json": JsonAuditReporter,
    }

    @staticmethod
    def configure_logging(verbose: bool) -> None:
        """Root logger at DEBUG with --verbose, WARNING otherwise. Logs go to stderr."""
        logging.basicConfig(
            level=logging.DEBUG if verbose else logging.WARNING,
            format="%(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
            force=True,
        )

    @staticmethod
    def exit_code_for(findings: int, errors: int) -> int:
        """1 when anything was flagged, 2 when only parse or path errors occurred, else 0."""
        if findings:
            return EXIT_FINDINGS
        if errors:
            return EXIT_ERROR
        return EXIT_CLEAN

    @staticmethod
    def create_app(deps: CLIDependencies) -> typer.Typer:
        """Create the Typer app with explicitly injected dependencies."""
        app = typer.Typer(
            name="loglevel-guard",
            help="Find debug logging calls that run without an 'is enabled' check.",
            no_args_is_help=True,
        )

        @app.command()
        def check(
            paths: list[Path] = typer.Argument(None, help="Files or directories to audit (default: .)"),  # noqa: B008
            output_format: str = typer.Option("text", "--format", help="Output format: text or json"),
            verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging on stderr"),
            log_call_prefix: str | None = typer.Option(None, help="Method name prefix of logging calls"),
            format_suffix: str | None = typer.Option(None, help="Suffix stripped before building the guard name"),
            interface_prefix: str | None = typer.Option(None, help="Qualified name prefix of the logging interface"),
            guard_template: str | None = typer.Option(None, help="Guard property template containing '{level}'"),
        ) -> None:
            """Audit Python files and report unguarded debug logging calls."""
            CLIAppFactory.configure_logging(verbose)
            reporter_cls = CLIAppFactory.REPORTERS.get(output_format)
            if reporter_cls is None:
                typer.echo(f"Unknown format {output_format!r}; use text or json.", err=True)
                raise typer.Exit(code=EXIT_ERROR)
            try:
                config_loader = deps.config_loader.with_overrides(
                    log_call_prefix=log_call_prefix,
                    format_suffix=format_suffix,
                    interface_prefix=interface_prefix,
                    guard_template=guard_template,
                )
            except ConfigurationError as exc:
                typer.echo(f"Configuration error: {exc}", err=True)
                raise typer.Exit(code=EXIT_ERROR) from exc

            use_case = CheckAuditUseCase(
                astroid_gateway=deps.astroid_gateway,
                filesystem=deps.filesystem,
                config_loader=config_loader,
            )
            targets = [str(p) for p in paths] if paths else ["."]
            audit_result = use_case.execute(targets)
            reporter: AuditReporter = reporter_cls()
            reporter.report_audit(audit_result, sys.stdout)
            raise typer.Exit(
                code=CLIAppFactory.exit_code_for(
                    len(audit_result.findings),
                    len(audit_result.parse_errors) + len(audit_result.missing_paths),
                )
            )

        @app.command()
        def rules() -> None:
            """List the rules this tool reports."""
            for row in RuleMsgBuilder.rule_rows():
                typer.echo(f"{row['rule_id']} ({row['pylint_id']}, {row['symbol']}): {row['description']}")

        return app
