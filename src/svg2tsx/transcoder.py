"""Text transforms between raw SVG markup and generated component source.

Everything here works on flat text with regular expressions rather than a
tag tree. Nested elements that share a tag name are not paired correctly by
the self-closing normalization; callers that need structural fidelity should
swap this module out rather than patch around it.
"""

from __future__ import annotations

import re
from collections.abc import Callable

from .prettyprint import pretty_print

XML_DECLARATION_RE = re.compile(r"<\?xml.*?\?>")
DOCTYPE_RE = re.compile(r"<!DOCTYPE.*?>")
TAG_RE = re.compile(r"<[A-Za-z](?:[^<>\"']|\"[^\"]*\"|'[^']*')*>")
ATTRIBUTE_RE = re.compile(
    r"(\s)([A-Za-z][\w:.-]*)(\s*=)(\s*(?:\"[^\"]*\"|'[^']*'|\{[^}]*\}+|[^\s\"'>{}]+))"
)
DASH_LETTER_RE = re.compile(r"-([a-z])")
STYLE_ATTRIBUTE_RE = re.compile(r'style="([^"]*)"')
EMPTY_PAIR_RE = re.compile(r"<(\w+)([^>]*)></\1>")
LINE_BREAKS_RE = re.compile(r"[\r\n]+")
SPACE_RUN_RE = re.compile(r"\s{2,}")
SVG_SPAN_RE = re.compile(r"<svg[\s\S]*?</svg>")

NUMERIC_EXPRESSION_RE = re.compile(r"=\{(\d+)\}")
STRING_EXPRESSION_RE = re.compile(r"=\{['\"]([^'\"]+)['\"]\}")
FRAGMENT_RE = re.compile(r"<>|</>")

COMPONENT_TEMPLATE = "const {name} = () => (\n  {markup}\n);\n\nexport default {name};\n"


def looks_like_svg(text: str | None) -> bool:
    """Return True when the trimmed *text* starts with ``<svg``."""

    if not isinstance(text, str):
        return False
    return text.strip().startswith("<svg")


def dash_to_camel(name: str) -> str:
    return DASH_LETTER_RE.sub(lambda match: match.group(1).upper(), name)


def attribute_to_prop(name: str) -> str:
    """Map an SVG attribute name to its component prop name."""

    if name == "class":
        return "className"
    return dash_to_camel(name)


def parse_style(value: str) -> list[tuple[str, str]]:
    """Parse an inline style string into ordered ``(property, value)`` pairs.

    Segments without a property or a value are dropped.
    """

    declarations: list[tuple[str, str]] = []
    for segment in value.split(";"):
        key, _, raw = segment.partition(":")
        key = key.strip()
        raw = raw.strip()
        if key and raw:
            declarations.append((dash_to_camel(key), raw))
    return declarations


def style_to_object_literal(value: str) -> str:
    body = ", ".join(f"{key}: '{raw}'" for key, raw in parse_style(value))
    return f"style={{{{ {body} }}}}"


def _rewrite_attribute_names(markup: str, rename: Callable[[str], str]) -> str:
    def _attribute(match: re.Match[str]) -> str:
        space, name, equals, value = match.groups()
        return f"{space}{rename(name)}{equals}{value}"

    def _tag(match: re.Match[str]) -> str:
        return ATTRIBUTE_RE.sub(_attribute, match.group(0))

    return TAG_RE.sub(_tag, markup)


def strip_declarations(markup: str) -> str:
    markup = XML_DECLARATION_RE.sub("", markup)
    return DOCTYPE_RE.sub("", markup)


def rename_class_attributes(markup: str) -> str:
    return _rewrite_attribute_names(markup, lambda name: "className" if name == "class" else name)


def camelize_attribute_names(markup: str) -> str:
    return _rewrite_attribute_names(markup, attribute_to_prop)


def convert_style_attributes(markup: str) -> str:
    return STYLE_ATTRIBUTE_RE.sub(lambda match: style_to_object_literal(match.group(1)), markup)


def self_close_empty_elements(markup: str) -> str:
    return EMPTY_PAIR_RE.sub(r"<\1\2 />", markup)


def collapse_whitespace(markup: str) -> str:
    markup = LINE_BREAKS_RE.sub(" ", markup)
    return SPACE_RUN_RE.sub(" ", markup).strip()


def svg_to_jsx_markup(svg: str) -> str:
    """Normalize SVG markup into single-line JSX markup without a wrapper."""

    markup = strip_declarations(svg)
    markup = rename_class_attributes(markup)
    markup = camelize_attribute_names(markup)
    markup = convert_style_attributes(markup)
    markup = self_close_empty_elements(markup)
    return collapse_whitespace(markup)


def svg_to_component_source(svg: str, *, component_name: str = "Icon") -> str:
    markup = svg_to_jsx_markup(svg)
    return COMPONENT_TEMPLATE.format(name=component_name, markup=markup)


def component_source_to_svg(source: str) -> str:
    """Turn component source (or JSX markup) back into indented SVG markup.

    Only ``={123}`` and ``={'text'}`` expression values are restored; any other
    expression is left untouched.
    """

    markup = re.sub(r"\bclassName=", "class=", source)
    markup = NUMERIC_EXPRESSION_RE.sub(r'="\1"', markup)
    markup = STRING_EXPRESSION_RE.sub(r'="\1"', markup)
    markup = FRAGMENT_RE.sub("", markup)
    return pretty_print(markup)


def extract_svg(text: str) -> str | None:
    """Return the first ``<svg …>…</svg>`` span found in *text*."""

    match = SVG_SPAN_RE.search(text)
    if match is None:
        return None
    return match.group(0)


def replace_color(svg: str, color: str) -> str:
    if not color:
        return svg
    return re.sub(re.escape(color), "currentColor", svg)


__all__ = [
    "attribute_to_prop",
    "camelize_attribute_names",
    "collapse_whitespace",
    "component_source_to_svg",
    "convert_style_attributes",
    "dash_to_camel",
    "extract_svg",
    "looks_like_svg",
    "parse_style",
    "rename_class_attributes",
    "replace_color",
    "self_close_empty_elements",
    "strip_declarations",
    "style_to_object_literal",
    "svg_to_component_source",
    "svg_to_jsx_markup",
]
