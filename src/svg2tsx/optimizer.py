from __future__ import annotations

from collections.abc import Mapping
from types import SimpleNamespace
from typing import Any, Protocol
from xml.parsers.expat import ExpatError

from scour import scour

from .errors import OptimizerFailureError
from .models import OptimizerResult
from .rules import enabled_rules

MAX_PASSES = 10

# rule name -> [(scour option, inverted)]
RULE_OPTIONS: dict[str, tuple[tuple[str, bool], ...]] = {
    "removeComments": (("strip_comments", False),),
    "removeMetadata": (("remove_metadata", False),),
    "removeTitle": (("remove_titles", False),),
    "removeDesc": (("remove_descriptions", False),),
    "removeXMLProcInst": (("strip_xml_prolog", False),),
    "removeEditorsNSData": (("keep_editor_data", True),),
    "cleanupIDs": (("strip_ids", False), ("shorten_ids", False)),
    "convertColors": (("simple_colors", False),),
    "collapseGroups": (("group_collapse", False),),
    "moveElemsAttrsToGroup": (("group_create", False),),
    "inlineStyles": (("style_to_xml", False),),
    "removeUselessDefs": (("keep_defs", True),),
}


class Optimizer(Protocol):
    def optimize(self, markup: str, rule_set: Mapping[str, Any]) -> OptimizerResult:  # pragma: no cover - interface
        ...


def scour_options(rule_set: Mapping[str, Any]) -> dict[str, Any]:
    """Translate a rule set into keyword options understood by scour."""

    options: dict[str, Any] = {
        "quiet": True,
        "newlines": False,
        "indent_type": "none",
        "strip_xml_space_attribute": True,
    }
    rules = enabled_rules(rule_set)
    for rule, enabled in rules.items():
        for option, inverted in RULE_OPTIONS.get(rule, ()):
            options[option] = not enabled if inverted else enabled
    precision = rule_set.get("floatPrecision")
    if isinstance(precision, int) and precision > 0:
        options["digits"] = precision
    js2svg = rule_set.get("js2svg")
    if isinstance(js2svg, Mapping) and js2svg.get("pretty"):
        options["newlines"] = True
        options["indent_type"] = "space"
        indent = js2svg.get("indent", 2)
        options["indent_depth"] = int(indent) if isinstance(indent, int) else 2
    return options


class ScourOptimizer:
    """Optimizer backed by :func:`scour.scour.scourString`."""

    def __init__(self, max_passes: int = MAX_PASSES) -> None:
        self._max_passes = max(1, max_passes)

    def optimize(self, markup: str, rule_set: Mapping[str, Any]) -> OptimizerResult:
        options = scour.sanitizeOptions(SimpleNamespace(**scour_options(rule_set)))
        passes = self._max_passes if rule_set.get("multipass") else 1
        current = markup
        completed = 0
        for _ in range(passes):
            try:
                candidate = scour.scourString(current, options).strip()
            except (ExpatError, ValueError) as exc:
                raise OptimizerFailureError(
                    f"Optimizer could not parse SVG: {exc}", info={"passes": completed}
                ) from exc
            completed += 1
            shrunk = len(candidate) < len(current)
            current = candidate
            if not shrunk and completed > 1:
                break
        return OptimizerResult(data=current or None, info={"engine": "scour", "passes": completed})


__all__ = ["Optimizer", "ScourOptimizer", "RULE_OPTIONS", "scour_options"]
