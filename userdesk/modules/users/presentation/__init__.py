"""
Presentation

HTML rendering for the user pages.
"""

from .html_renderer import (
    render_page,
    render_user_detail,
    render_user_detail_page,
    render_user_list_page,
    render_users_table,
)

__all__ = [
    "render_page",
    "render_users_table",
    "render_user_detail",
    "render_user_list_page",
    "render_user_detail_page",
]
