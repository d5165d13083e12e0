"""
"Day N of Building a SaaS" card.

Rendering is a pure function of ``(day, check_list)``: the templates are
compiled when this module is imported, so a render never reads files, opens
sockets or touches shared state. Items are rendered in the order given and
each item doubles as its own ``data-key``; keeping items unique within one
card is up to the caller.
"""
from __future__ import annotations

from typing import List, Optional, Sequence

from jinja2 import Environment, StrictUndefined
from markupsafe import Markup
from pydantic import BaseModel, ConfigDict, Field, field_validator

CARD_SOURCE = """\
<div class="font-mono flex flex-col gap-2 bg-gradient-to-r from-neutral-900 p-6">
  <h1>
    <span class="font-bold bg-gradient-to-br from-red-500 to-red-700 px-2 py-1 opacity-75">Day {{ card.day }}</span> of
    <span class="bg-gradient-to-b bg-clip-text text-transparent from-neutral-100 to-neutral-300">Building a SaaS</span>
  </h1>
  <ul class="flex flex-col text-sm text-neutral-400 font-semibold">
{% for item in card.check_list %}
    <li data-key="{{ item }}">{{ item }}</li>
{% endfor %}
  </ul>
</div>
"""

PAGE_SOURCE = """\
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>{{ title }}</title>
</head>
<body>
{{ card_html }}
</body>
</html>
"""

_env = Environment(
    autoescape=True,
    undefined=StrictUndefined,
    trim_blocks=True,
    lstrip_blocks=True,
)
_card_template = _env.from_string(CARD_SOURCE)
_page_template = _env.from_string(PAGE_SOURCE)


class DayCard(BaseModel):
    """Input for one card; ``checkList`` is accepted as an alias of ``check_list``"""
    day: str
    check_list: List[str] = Field(default_factory=list, alias='checkList')

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @field_validator('day', mode='before')
    @classmethod
    def day_as_text(cls, v):
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v


def _build(day, check_list: Sequence[str]) -> DayCard:
    if isinstance(check_list, (str, bytes)):
        raise TypeError("check_list must be a sequence of strings, not a single string")
    return DayCard(day=day, check_list=list(check_list))


def render_day_card(day, check_list: Sequence[str]) -> str:
    """Render the card as an HTML fragment"""
    return _card_template.render(card=_build(day, check_list))


def render_day_page(day, check_list: Sequence[str], title: Optional[str] = None) -> str:
    """Render the card inside a standalone HTML document"""
    card = _build(day, check_list)
    return _page_template.render(
        title=title or f"Day {card.day} of Building a SaaS",
        card_html=Markup(_card_template.render(card=card)),
    )
