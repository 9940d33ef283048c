"""Package entry point - composition root. Wire dependencies and run the CLI app."""

import typer

from loglevel_guard.domain.config import ConfigurationError
from loglevel_guard.infrastructure.di.container import LogLevelGuardContainer
from loglevel_guard.interface.cli import EXIT_ERROR, CLIAppFactory, CLIDependencies


def main() -> None:
    """Entry point: wire dependencies at composition root, create app, run."""
    try:
        container = LogLevelGuardContainer()
    except ConfigurationError as exc:
        typer.echo(f"Configuration error: {exc}", err=True)
        raise SystemExit(EXIT_ERROR) from exc
    deps = CLIDependencies(
        config_loader=container.get_config_loader(),
        astroid_gateway=container.get_astroid_gateway(),
        filesystem=container.get_filesystem_gateway(),
    )
    app = CLIAppFactory.create_app(deps)
    app()


if __name__ == "__main__":
    main()
