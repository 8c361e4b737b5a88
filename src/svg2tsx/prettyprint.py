"""Heuristic indentation for single-line markup.

The printer keeps a running depth counter instead of a tag stack, so deeply
nested or malformed markup can come out mis-indented.
"""

from __future__ import annotations

import re

TAG_BOUNDARY_RE = re.compile(r"(>)(<)(/*)")
INLINE_PAIR_RE = re.compile(r".+</\w[^>]*>$")
CLOSING_TAG_RE = re.compile(r"^</\w")
OPENING_TAG_RE = re.compile(r"^<\w([^>]*[^/])?>.*$")

INDENT = "  "


def line_depth_change(line: str) -> tuple[int, int]:
    """Return ``(before, after)`` depth adjustments for one output line."""

    if INLINE_PAIR_RE.search(line):
        return 0, 0
    if CLOSING_TAG_RE.match(line):
        return -1, 0
    if OPENING_TAG_RE.match(line):
        return 0, 1
    return 0, 0


def pretty_print(markup: str) -> str:
    split = TAG_BOUNDARY_RE.sub(r"\1\n\2\3", markup)
    lines: list[str] = []
    depth = 0
    for raw in split.split("\n"):
        line = raw.strip()
        if not line:
            lines.append("")
            continue
        before, after = line_depth_change(line)
        depth = max(depth + before, 0)
        lines.append(f"{INDENT * depth}{line}")
        depth += after
    return "\n".join(lines).strip()


__all__ = ["pretty_print", "line_depth_change"]
