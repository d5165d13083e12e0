"""
Display component for the Building a SaaS log
"""
from saasday_ui.card import DayCard, render_day_card, render_day_page

__all__ = [
    'DayCard',
    'render_day_card',
    'render_day_page',
]
