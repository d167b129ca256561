"""
Validation of the environment file against the required variables, and the
end-to-end check that ties seeding, parsing and validation together.
"""
import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterable, Optional

from envcheck.core.env_file import ensure_environment_file, read_env_file
from envcheck.core.output_utils import blank_line, log
from envcheck.core.requirements import REQUIRED_VARIABLES, SUPABASE_KEY_VAR, SUPABASE_URL_VAR, RequirementSpec
from envcheck.utils.redact import preview_value

logger = logging.getLogger(__name__)

SUPABASE_HELP_STEPS = [
    "1. Go to https://app.supabase.com",
    "2. Select your project (or create new)",
    "3. Go to Settings → API",
    f'4. Copy "Project URL" to {SUPABASE_URL_VAR}',
    f'5. Copy "anon public" key to {SUPABASE_KEY_VAR}',
]


class RequirementStatus(str, Enum):
    VALID = "valid"
    MISSING = "missing"
    INVALID_FORMAT = "invalid_format"


class CheckStatus(str, Enum):
    MISSING_ENVIRONMENT_FILE = "missing_environment_file"
    TEMPLATE_SEEDED = "template_seeded"
    VALIDATION_FAILED = "validation_failed"
    SUCCESS = "success"


@dataclass
class RequirementResult:
    requirement: RequirementSpec
    status: RequirementStatus
    preview: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status is RequirementStatus.VALID


@dataclass
class ValidationOutcome:
    results: list[RequirementResult] = field(default_factory=list)

    @property
    def all_valid(self) -> bool:
        return all(result.ok for result in self.results)


@dataclass
class CheckOutcome:
    status: CheckStatus
    validation: Optional[ValidationOutcome] = None
    project_id: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status is CheckStatus.SUCCESS

    @property
    def exit_code(self) -> int:
        return 0 if self.ok else 1


def check_requirement(requirement: RequirementSpec, env_vars: dict[str, str]) -> RequirementResult:
    """Check one requirement and print its status line(s)."""
    value = env_vars.get(requirement.name, "").strip()

    if not value:
        log("red", f"❌ {requirement.name} is missing")
        log("yellow", f"   Description: {requirement.description}")
        return RequirementResult(requirement, RequirementStatus.MISSING)

    if not requirement.matches(value):
        preview = preview_value(value)
        log("red", f"❌ {requirement.name} format is invalid")
        log("yellow", f"   Description: {requirement.description}")
        log("yellow", f"   Current value: {preview}")
        return RequirementResult(requirement, RequirementStatus.INVALID_FORMAT, preview=preview)

    log("green", f"✅ {requirement.name}")
    return RequirementResult(requirement, RequirementStatus.VALID)


def validate(
    env_vars: dict[str, str],
    requirements: Iterable[RequirementSpec] = REQUIRED_VARIABLES,
) -> ValidationOutcome:
    """
    Check every requirement in order.

    All requirements are checked and reported even after a failure, so a single
    run shows every problem.
    """
    outcome = ValidationOutcome()
    for requirement in requirements:
        result = check_requirement(requirement, env_vars)
        logger.debug(f"{requirement.name}: {result.status.value}")
        outcome.results.append(result)
    return outcome


def derive_project_id(env_vars: dict[str, str]) -> Optional[str]:
    """
    Return the Supabase project id, the first host label of the project URL.

    Expects a URL that already passed validation.
    """
    supabase_url = env_vars.get(SUPABASE_URL_VAR)
    if not supabase_url or "//" not in supabase_url:
        return None
    return supabase_url.split("//")[1].split(".")[0]


def report_success(project_id: Optional[str]) -> None:
    log("green", "🎉 All environment variables are valid!")
    log("blue", "📋 Additional information:")
    if project_id:
        log("blue", f"   Supabase Project ID: {project_id}")
    log("blue", "   Environment variables will be embedded at build time")
    log("blue", "   Ready for: npm run build")


def report_failure() -> None:
    log("red", "❌ Environment validation failed")
    blank_line()
    log("yellow", "💡 To get your Supabase credentials:")
    for step in SUPABASE_HELP_STEPS:
        log("blue", f"   {step}")


def check_environment(
    env_path: Path,
    template_path: Path,
    requirements: Iterable[RequirementSpec] = REQUIRED_VARIABLES,
) -> CheckOutcome:
    """
    Run the whole check: seed or locate the environment file, parse it,
    validate it and print the report.
    """
    requirements = tuple(requirements)
    log("blue", "🔍 Validating environment configuration...")
    blank_line()

    if not ensure_environment_file(env_path, template_path, requirements):
        if env_path.exists():
            return CheckOutcome(CheckStatus.TEMPLATE_SEEDED)
        return CheckOutcome(CheckStatus.MISSING_ENVIRONMENT_FILE)

    env_vars = read_env_file(env_path)

    log("blue", "📋 Checking required variables:")
    validation = validate(env_vars, requirements)
    blank_line()

    if not validation.all_valid:
        report_failure()
        return CheckOutcome(CheckStatus.VALIDATION_FAILED, validation=validation)

    project_id = derive_project_id(env_vars)
    report_success(project_id)
    return CheckOutcome(CheckStatus.SUCCESS, validation=validation, project_id=project_id)
