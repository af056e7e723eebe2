"""Placeholder substitution for the page template.

The page template is plain HTML with ``{{TOKEN}}`` markers (two braces,
uppercase letters and underscores, two braces). Each recognized token maps to
one field of ``PageContext``; all tokens are replaced in a single pass, so a
fragment that happens to contain a token-like string is never re-expanded.
"""

from __future__ import annotations

import re
from dataclasses import asdict, dataclass

PLACEHOLDER_RE = re.compile(r"\{\{([A-Z_]+)\}\}")


@dataclass(frozen=True)
class PageContext:
    """Rendered HTML fragments, one per recognized placeholder token.

    Field ``weather_temp`` fills ``{{WEATHER_TEMP}}`` and so on.
    """

    weather_temp: str = ""
    weather_high_low: str = ""
    forecast: str = ""
    feast_day_title: str = ""
    feast_day_description: str = ""
    readings: str = ""

    def tokens(self) -> dict[str, str]:
        """Token name -> fragment."""
        return {name.upper(): value for name, value in asdict(self).items()}


def substitute_placeholders(template: str, context: PageContext, *, strip_unknown: bool = False) -> str:
    """Replace every recognized token with its fragment.

    Unrecognized tokens are left in place, or blanked with ``strip_unknown``.
    """
    tokens = context.tokens()

    def _replace(match: re.Match[str]) -> str:
        name = match.group(1)
        if name in tokens:
            return tokens[name]
        return "" if strip_unknown else match.group(0)

    return PLACEHOLDER_RE.sub(_replace, template)
