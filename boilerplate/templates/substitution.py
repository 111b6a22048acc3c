"""
Variable substitution: {@Name} → value.

Not a template language: no conditionals, loops or expressions.

Rules:
- literal str.replace per key, never regex
- keys applied in mapping iteration order against the current string, so a
  value that introduces {@Other} is substituted again if Other comes later
- unknown placeholders stay verbatim
"""

import re
from collections.abc import Mapping

from boilerplate.domain.constants import PLACEHOLDER_CLOSE, PLACEHOLDER_OPEN

# {@Name}: anything up to the first closing brace
PLACEHOLDER_PATTERN = re.compile(
    re.escape(PLACEHOLDER_OPEN) + r"([^{}]+?)" + re.escape(PLACEHOLDER_CLOSE)
)


def make_token(key: str) -> str:
    """Token for a key: QueryName → {@QueryName}."""
    return f"{PLACEHOLDER_OPEN}{key}{PLACEHOLDER_CLOSE}"


def substitute(template: str, variables: Mapping[str, str]) -> str:
    """
    Replace every {@key} with its value.

    Args:
        template: raw template body
        variables: key → value, applied in iteration order

    Returns:
        substituted text
    """
    for key, value in variables.items():
        template = template.replace(make_token(key), value)
    return template


def find_placeholders(text: str) -> list[str]:
    """
    Placeholder names in order of appearance (duplicates kept).

    "{@A} {@B} {@A}" → ["A", "B", "A"]
    """
    return PLACEHOLDER_PATTERN.findall(text)



def unresolved_placeholders(template: str, variables: Mapping[str, str]) -> list[str]:
    """Distinct placeholder names still present after substitution."""
    return list(dict.fromkeys(find_placeholders(substitute(template, variables))))
