"""
Required environment variables and the formats their values must have.
"""

import re
from dataclasses import dataclass

SUPABASE_URL_VAR = "REACT_APP_SUPABASE_URL"
SUPABASE_KEY_VAR = "REACT_APP_SUPABASE_KEY"


@dataclass(frozen=True)
class RequirementSpec:
    name: str
    pattern: re.Pattern
    description: str
    example: str = ""

    def matches(self, value: str) -> bool:
        """True when the whole value matches the pattern."""
        return self.pattern.fullmatch(value) is not None


REQUIRED_VARIABLES: tuple[RequirementSpec, ...] = (
    RequirementSpec(
        name=SUPABASE_URL_VAR,
        pattern=re.compile(r"^https://[a-z0-9]+\.supabase\.co$"),
        description="Supabase project URL",
        example="https://your-project.supabase.co",
    ),
    RequirementSpec(
        name=SUPABASE_KEY_VAR,
        # header.payload[.signature], base64url segments of a JWT
        pattern=re.compile(r"^eyJ[A-Za-z0-9\-_=]+\.[A-Za-z0-9\-_=]+\.?[A-Za-z0-9\-_.+/=]*$"),
        description="Supabase anon key (JWT format)",
        example="your-anon-key",
    ),
)
