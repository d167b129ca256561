from pathlib import Path

import typer

from envcheck.core import paths
from envcheck.core.output_utils import configure_console
from envcheck.core.validator import check_environment
from envcheck.utils.env_utils import is_color_disabled
from envcheck.utils.log_utils import setup_logging

app = typer.Typer(help="Validate the Supabase credentials in a project's .env file", add_completion=False)


@app.command()
def check(
    env_file: Path | None = typer.Option(
        None,
        "--env-file",
        help="Environment file to validate, relative to the working directory [default: .env].",
    ),
    template: Path | None = typer.Option(
        None,
        "--template",
        help="Template copied to the environment file when it does not exist [default: .env.example].",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable ANSI colors (also disabled by setting NO_COLOR).",
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        help="Diagnostic log level; defaults to ENVCHECK_LOG_LEVEL or WARNING.",
    ),
):
    """Check that the environment file holds a valid Supabase URL and anon key."""
    logger = setup_logging("envcheck", level=log_level, force_reconfigure=True)
    configure_console(no_color=no_color or is_color_disabled())

    env_path = paths.resolve_path(env_file) if env_file is not None else paths.get_env_path()
    template_path = paths.resolve_path(template) if template is not None else paths.get_template_path()
    logger.debug(f"Checking {env_path} (template: {template_path})")

    outcome = check_environment(env_path, template_path)
    logger.info(f"Environment check finished: {outcome.status.value}")
    raise typer.Exit(code=outcome.exit_code)


def main():
    app()


if __name__ == "__main__":
    main()
