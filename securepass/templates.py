"""
Generation Templates
=====================

Named :class:`GenerationOptions` presets for common use cases, plus
helpers to look them up, recognise them and recommend them by context.
"""

from __future__ import annotations

from typing import Optional

from securepass.core.errors import UnknownTemplateError
from securepass.core.models import GenerationOptions, PasswordTemplate

WEBSITE = PasswordTemplate(
    key="website",
    name="Website",
    description="Balanced security for most websites and services",
    options=GenerationOptions(length=16, exclude_similar=True),
)

HIGH_SECURITY = PasswordTemplate(
    key="high-security",
    name="High Security",
    description="Maximum security for banking and critical accounts",
    options=GenerationOptions(
        length=24, exclude_similar=True, prevent_repeating=True
    ),
    readable_format=True,
)

PIN = PasswordTemplate(
    key="pin",
    name="PIN Number",
    description="Numeric PIN for devices and simple access",
    options=GenerationOptions(
        length=6,
        include_uppercase=False,
        include_lowercase=False,
        include_symbols=False,
        prevent_repeating=True,
    ),
)

SIMPLE = PasswordTemplate(
    key="simple",
    name="Simple",
    description="Easy to type, no special characters",
    options=GenerationOptions(
        length=12, include_symbols=False, exclude_similar=True
    ),
    readable_format=True,
)

TEMPLATES: dict[str, PasswordTemplate] = {
    t.key: t for t in (WEBSITE, HIGH_SECURITY, PIN, SIMPLE)
}

_CONTEXT_RECOMMENDATIONS: dict[str, tuple[PasswordTemplate, ...]] = {
    "banking": (HIGH_SECURITY, WEBSITE),
    "financial": (HIGH_SECURITY, WEBSITE),
    "crypto": (HIGH_SECURITY, WEBSITE),
    "social": (WEBSITE, SIMPLE),
    "email": (WEBSITE, SIMPLE),
    "shopping": (WEBSITE, SIMPLE),
    "device": (PIN, SIMPLE),
    "phone": (PIN, SIMPLE),
    "tablet": (PIN, SIMPLE),
}


def get_template(key: str) -> PasswordTemplate:
    """Look up a template by key or display name (case-insensitive).

    Raises:
        UnknownTemplateError: No template matches *key*.
    """
    wanted = key.strip().lower()
    for template in TEMPLATES.values():
        if wanted in (template.key, template.name.lower()):
            return template
    raise UnknownTemplateError(
        f"Unknown template {key!r}; choose from {', '.join(TEMPLATES)}"
    )


def detect_template(options: GenerationOptions) -> Optional[PasswordTemplate]:
    """Return the template whose options equal *options*, if any."""
    for template in TEMPLATES.values():
        if template.options == options:
            return template
    return None


def recommended_templates(context: Optional[str] = None) -> list[PasswordTemplate]:
    """Templates suited to a usage context; all templates when unknown."""
    if context:
        picks = _CONTEXT_RECOMMENDATIONS.get(context.strip().lower())
        if picks:
            return list(picks)
    return list(TEMPLATES.values())
