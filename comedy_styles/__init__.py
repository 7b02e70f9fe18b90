"""Comedic style registry and built-in style loading."""
from .core import (
    SURPRISE_ME,
    StyleMeta,
    VisualTemplates,
    ComedyStyle,
    render_style_template,
    COMEDY_STYLES,
    register_style,
    resolve_style_name,
    is_surprise_me,
    get_comedy_style,
    list_style_names,
    list_style_meta,
    load_builtin_styles,
)

load_builtin_styles()

__all__ = [
    "SURPRISE_ME",
    "StyleMeta",
    "VisualTemplates",
    "ComedyStyle",
    "render_style_template",
    "COMEDY_STYLES",
    "register_style",
    "resolve_style_name",
    "is_surprise_me",
    "get_comedy_style",
    "list_style_names",
    "list_style_meta",
    "load_builtin_styles",
]
