"""Core utilities and registry for comedic styles."""
from __future__ import annotations

import pkgutil
import re
from collections import defaultdict
from importlib import import_module
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict

SURPRISE_ME = "surprise-me"


class StyleMeta(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str  # hyphenated lowercase form used by the UI, e.g. "self-deprecating"
    name: str  # canonical StyleId returned to callers, e.g. "Self-deprecating"
    label: str
    emoji: str = ""


class VisualTemplates(BaseModel):
    model_config = ConfigDict(frozen=True)

    with_headshot: str
    without_headshot: str


class ComedyStyle(BaseModel):
    model_config = ConfigDict(frozen=True)

    meta: StyleMeta
    instructions: str  # block for the comedic excuse
    visuals: VisualTemplates


class _SafeDict(defaultdict):
    def __missing__(self, key):  # type: ignore[override]
        return ""


def render_style_template(template: str, ctx: Dict[str, Any]) -> str:
    return template.format_map(_SafeDict(str, **ctx))


COMEDY_STYLES: Dict[str, ComedyStyle] = {}
_ALIASES: Dict[str, str] = {}


def _alias_key(value: str) -> str:
    return re.sub(r"[\s_]+", "-", value.strip().lower())


def register_style(style: ComedyStyle) -> None:
    COMEDY_STYLES[style.meta.name] = style
    for alias in (style.meta.name, style.meta.id, style.meta.label):
        _ALIASES[_alias_key(alias)] = style.meta.name


def resolve_style_name(value: str) -> Optional[str]:
    """Map a caller-supplied style to its canonical name.

    Matching is case-insensitive and tolerates spaces/underscores in place of
    hyphens ("deadpan" -> "Deadpan", "self deprecating" -> "Self-deprecating").
    Returns None for unknown styles and for the surprise-me sentinel.
    """
    return _ALIASES.get(_alias_key(value))


def is_surprise_me(value: str) -> bool:
    return _alias_key(value) == SURPRISE_ME


def get_comedy_style(name: str) -> ComedyStyle:
    return COMEDY_STYLES[name]


def list_style_names() -> list[str]:
    return list(COMEDY_STYLES)


def list_style_meta() -> list[StyleMeta]:
    return [s.meta for s in COMEDY_STYLES.values()]


_loaded_builtin_styles = False


def load_builtin_styles() -> None:
    global _loaded_builtin_styles
    if _loaded_builtin_styles:
        return

    package_name = f"{__package__}.definitions"
    package = import_module(package_name)

    # Sorted so the registry order (and therefore random draws from it) is stable
    names = sorted(m.name for m in pkgutil.iter_modules(package.__path__))  # type: ignore[attr-defined]
    for name in names:
        if name.startswith("_"):
            continue
        import_module(f"{package_name}.{name}")

    _loaded_builtin_styles = True


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
