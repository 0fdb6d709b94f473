"""
Template filling for agent prompts. The app owns the template text (see
api/prompt_builders); agents only receive finished strings.
"""

from __future__ import annotations

from typing import Any


class _BlankMissing(dict):
    """str.format_map mapping: unknown placeholders render as empty text."""

    def __missing__(self, key: str) -> str:
        return ""


def build_from_template(template: str, *, strip: bool = True, **kwargs: Any) -> str:
    """
    Fill `template` with kwargs. None and missing values render as "".
    Literal braces in templates must be doubled ({{ and }}).
    """
    if not template:
        return ""
    values = {k: ("" if v is None else v) for k, v in kwargs.items()}
    text = template.format_map(_BlankMissing(values))
    return text.strip() if strip else text
