"""Pure rendering functions: structured data -> HTML strings.

All renderers follow the same pattern:
  - Input: pydantic model (from schemas) or primitives
  - Output: str (HTML fragment, not a full page)
  - No side effects, no I/O

Used by flows/page.py, which fetches the data and fills the page template.

Public API:
  - weather: build_weather_temp_html, build_high_low_html, build_forecast_html
  - feast: build_feast_title_html, build_feast_description_html, build_readings_html
  - page: PageContext, substitute_placeholders
  - weather_utils: WeatherCondition, lookup_condition

Adding a page section
---------------------
1. Create a build function in ``renderers/{name}.py``::

       from feastday_clock.renderers import render_template

       def build_mywidget_html(data: MyModel) -> str:
           return render_template("mywidget.html.j2", value=data.value)

2. Create a Jinja2 template in ``templates/{name}.html.j2``.
   Templates produce HTML fragments; autoescaping is on, so upstream text
   is always escaped.

3. Wire into the page:
   - Add a field to ``PageContext`` named after the token (``MY_WIDGET``
     -> ``my_widget``).
   - Fill it in ``flows/page.py``.
   - Add the ``{{MY_WIDGET}}`` token to ``templates/index.html``.

4. Add tests: call your build function with sample data and assert
   the returned HTML contains expected content.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import jinja2

# Shared Jinja2 environment for all renderers
_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
_jinja_env = jinja2.Environment(
    loader=jinja2.FileSystemLoader(str(_TEMPLATE_DIR)),
    autoescape=True,
)


def render_template(template_name: str, **kwargs: Any) -> str:
    """Render a Jinja2 template by name."""
    return _jinja_env.get_template(template_name).render(**kwargs)
