from pathlib import Path

ENV_FILE_NAME = ".env"
TEMPLATE_FILE_NAME = ".env.example"


def resolve_path(path: str | Path, cwd: Path | None = None) -> Path:
    """
    Returns ``path`` unchanged when absolute, otherwise joined onto ``cwd``
    (the current working directory by default).
    """
    path = Path(path)
    if path.is_absolute():
        return path
    return (cwd or Path.cwd()) / path


def get_env_path(cwd: Path | None = None) -> Path:
    return resolve_path(ENV_FILE_NAME, cwd)


def get_template_path(cwd: Path | None = None) -> Path:
    return resolve_path(TEMPLATE_FILE_NAME, cwd)
