"""
Locating, seeding and parsing the environment file.
"""
import logging
import shutil
from pathlib import Path
from typing import Iterable

from envcheck.core.output_utils import log
from envcheck.core.requirements import REQUIRED_VARIABLES, RequirementSpec

logger = logging.getLogger(__name__)


def ensure_environment_file(
    env_path: Path,
    template_path: Path,
    requirements: Iterable[RequirementSpec] = REQUIRED_VARIABLES,
) -> bool:
    """
    Make sure there is an environment file to validate.

    Returns True only when ``env_path`` already existed. When it is missing but
    ``template_path`` exists, the template is copied over and False is returned:
    the copy still holds placeholders, so the user has to edit it before the
    next run. When both are missing, guidance is printed and False is returned.
    """
    if env_path.exists():
        logger.debug(f"Found environment file at {env_path}")
        return True

    log("yellow", f"⚠️  No {env_path.name} file found")

    if template_path.exists():
        log("blue", f"💡 Found {template_path.name} - copying to {env_path.name}...")
        shutil.copyfile(template_path, env_path)
        logger.info(f"Seeded {env_path} from {template_path}")
        log("green", f"✅ Created {env_path.name} file from template")
        log("yellow", f"⚠️  Please fill in your Supabase credentials in {env_path.name}")
        return False

    logger.debug(f"Neither {env_path} nor {template_path} exists")
    log("red", f"❌ No {template_path.name} found either")
    log("yellow", f"💡 Create {env_path.name} with these variables:")
    for requirement in requirements:
        log("blue", f"   {requirement.name}={requirement.example}")
    return False


def parse_env_content(contents: str) -> dict[str, str]:
    """
    Parse ``KEY=VALUE`` lines into a dict.

    Only the first ``=`` separates key from value; any further ``=`` stay in the
    value. Lines without ``=`` or with a blank key are skipped. Keys and values
    are stripped, and a repeated key keeps its last value. Quotes, comments and
    ``export`` prefixes get no special treatment.
    """
    env_vars: dict[str, str] = {}
    for line in contents.split("\n"):
        key, sep, value = line.partition("=")
        key = key.strip()
        if not sep or not key:
            continue
        env_vars[key] = value.strip()
    return env_vars


def read_env_file(env_path: Path) -> dict[str, str]:
    """
    Read ``env_path`` as UTF-8 and parse it.

    A leading byte order mark is dropped and undecodable bytes become U+FFFD,
    so a stray non-UTF-8 line never hides the variables on other lines.
    """
    contents = env_path.read_text(encoding="utf-8-sig", errors="replace")
    env_vars = parse_env_content(contents)
    logger.debug(f"Parsed {len(env_vars)} variables from {env_path}")
    return env_vars
