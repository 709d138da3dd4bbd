"""Name casing helpers shared by the CLI and the generator."""

import re

_PASCAL_RE = re.compile(r"^[A-Z][a-z]+(?:[A-Z][a-z]+)*$")


def kebab_case(name: str) -> str:
    """Convert PascalCase or camelCase to kebab-case: 'BookingService' -> 'booking-service'."""
    dashed = re.sub(r"([A-Z])", r"-\1", name).lower()
    return re.sub(r"^-(\w)", r"\1", dashed)


def pascal_case(name: str) -> str:
    """Convert kebab-case, snake_case or spaced words to PascalCase.

    Names already in PascalCase are returned as-is.
    """
    if _PASCAL_RE.match(name):
        return name
    return re.sub(r"(?:^|\s|_|-)(\w)", lambda m: m.group(1).upper(), name.lower())
