"""Lightweight string templating utilities."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, MutableMapping

from .naming import label_case

__all__ = [
    "TemplateRenderer",
    "TemplateRenderingError",
    "go_comment",
    "go_string",
]


_PLACEHOLDER_PATTERN = re.compile(r"{{\s*(?P<expression>[^{}]+?)\s*}}")

_GO_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    "\\": "\\\\",
    '"': '\\"',
}


class TemplateRenderingError(RuntimeError):
    """Raised when the renderer cannot evaluate a placeholder."""


def _go_escape_char(char: str) -> str:
    if char in _GO_ESCAPES:
        return _GO_ESCAPES[char]
    if char.isprintable():
        return char
    code = ord(char)
    if code < 0x80:
        return f"\\x{code:02x}"
    if code <= 0xFFFF:
        return f"\\u{code:04x}"
    return f"\\U{code:08x}"


def go_string(value: Any) -> str:
    """Escape ``value`` for use inside a double quoted Go string literal.

    Follows ``strconv.Quote``: quotes, backslashes and the usual control
    characters get their short escapes, other non-printable characters are
    written as ``\\x``, ``\\u`` or ``\\U`` sequences.
    """

    return "".join(_go_escape_char(char) for char in str(value))


def go_comment(value: Any) -> str:
    """Collapse whitespace runs, line breaks included, into single spaces."""

    return " ".join(str(value).split())


def _resolve_value(context: Mapping[str, Any], dotted_path: str) -> Any:
    value: Any = context
    for segment in dotted_path.split("."):
        if isinstance(value, Mapping):
            if segment not in value:
                raise KeyError(segment)
            value = value[segment]
            continue
        if hasattr(value, segment):
            value = getattr(value, segment)
            if callable(value):
                value = value()
            continue
        raise KeyError(segment)
    return value


def _apply_filter(value: Any, filter_name: str, filters: Mapping[str, Callable[[Any], Any]]) -> Any:
    try:
        filter_func = filters[filter_name]
    except KeyError as exc:
        raise TemplateRenderingError(f"unknown filter '{filter_name}'") from exc

    return filter_func(value)


@dataclass(slots=True)
class TemplateRenderer:
    """Render templates with ``{{ placeholder|filters }}`` expressions.

    Placeholders may use dotted paths, which resolve mapping keys first and
    attributes second, so ``{{ tab.display_name|go_string }}`` works with a
    :class:`~dashforge.schema.TabSpec` in the context.
    """

    filters: MutableMapping[str, Callable[[Any], Any]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.filters:
            self.filters.update(
                {
                    "lower": lambda value: str(value).lower(),
                    "label": lambda value: label_case(str(value)),
                    "go_string": go_string,
                    "go_comment": go_comment,
                }
            )

    def render_string(self, template: str, context: Mapping[str, Any]) -> str:
        """Render ``template`` using ``context``.

        Every placeholder must resolve; an unknown key or filter raises
        :class:`TemplateRenderingError` so two templates can never disagree on
        a name silently.
        """

        def substitute(match: re.Match[str]) -> str:
            expression = match.group("expression")
            parts = [part.strip() for part in expression.split("|") if part.strip()]
            if not parts:
                return match.group(0)

            key, *filters = parts
            try:
                value = _resolve_value(context, key)
            except KeyError as exc:
                raise TemplateRenderingError(f"missing value for '{key}'") from exc

            for filter_name in filters:
                value = _apply_filter(value, filter_name, self.filters)

            return str(value)

        return _PLACEHOLDER_PATTERN.sub(substitute, template)
