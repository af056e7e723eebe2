"""Feast-day fragments: title line, description and readings."""

from __future__ import annotations

from typing import TYPE_CHECKING

from feastday_clock.renderers import render_template

if TYPE_CHECKING:
    from feastday_clock.schemas import LiturgicalDay


def build_feast_title_html(day: LiturgicalDay, *, show_fasting: bool = True) -> str:
    """Feast title, with the fasting note in parentheses when enabled."""
    if not day.feast_title and not (show_fasting and day.fasting_note):
        return ""
    return render_template(
        "feast_title.html.j2",
        title=day.feast_title,
        fasting_note=day.fasting_note if show_fasting else "",
    )


def build_feast_description_html(day: LiturgicalDay) -> str:
    return render_template("feast_description.html.j2", description=day.feast_description)


def build_readings_html(day: LiturgicalDay) -> str:
    if not day.readings:
        return ""
    return render_template("readings.html.j2", readings=day.readings)
