"""Rendering of extension marks (``@tag[attrs]{value}``).

Shared by the HTML and LaTeX renderers:

- ``char``: the first character of the value
- ``emoji``: ``;``-separated GitHub emoji aliases (``@emoji{smile;+1}``);
  unknown names are kept as `` name `` so the text stays readable
- ``kbd``: ``+``-separated keys (``@kbd{cmd+c}``), ``cmd`` shown as ``⌘``
- every other tag: the raw value, for hooks or downstream tools

"""

from __future__ import annotations

from enum import Enum, auto

import emoji

from concisemark.nodes import Node
from concisemark.utils.text import escape_html, escape_latex

KBD_SEPARATOR = "+"
EMOJI_SEPARATOR = ";"
_KEY_SYMBOLS = {"cmd": "⌘"}


class RenderTarget(Enum):
    """Output format a mark is rendered for."""

    HTML = auto()
    LATEX = auto()


def _escape(text: str, target: RenderTarget) -> str:
    return escape_html(text) if target is RenderTarget.HTML else escape_latex(text)


def lookup_emoji(name: str) -> str | None:
    """Return the emoji for a GitHub alias such as ``smile`` or ``+1``."""
    alias = f":{name}:"
    glyph = emoji.emojize(alias, language="alias")
    return None if glyph == alias else glyph


def render_mark(node: Node, target: RenderTarget) -> str | None:
    """Render an EXTENSION node from its ``name`` and ``value`` attributes.

    Returns:
        The rendered text, or None when the node carries no tag name.
    """
    name = node.get_attr("name")
    if not name:
        return None
    value = node.get_attr("value")

    match name:
        case "char":
            return _escape(value[:1], target)
        case "emoji":
            glyphs: list[str] = []
            for alias in value.strip().split(EMOJI_SEPARATOR):
                alias = alias.strip()
                glyph = lookup_emoji(alias)
                glyphs.append(glyph if glyph is not None else f" {alias} ")
            return "".join(glyphs)
        case "kbd":
            keys = []
            for key in value.strip().split(KBD_SEPARATOR):
                key = key.strip()
                key = _escape(_KEY_SYMBOLS.get(key, key), target)
                keys.append(f"<kbd>{key}</kbd>" if target is RenderTarget.HTML else key)
            return KBD_SEPARATOR.join(keys)
        case _:
            return value
