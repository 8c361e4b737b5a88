"""Optimizer rule sets: baseline defaults, overrides and the plugin catalogue."""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any

RuleSet = dict[str, Any]

PRESET_DEFAULT = "preset-default"

# Hand-maintained; not discovered from the optimizer.
PLUGIN_CATALOGUE: tuple[str, ...] = (
    "removeDoctype",
    "removeXMLProcInst",
    "removeComments",
    "removeMetadata",
    "removeEditorsNSData",
    "cleanupAttrs",
    "mergeStyles",
    "inlineStyles",
    "minifyStyles",
    "cleanupIDs",
    "removeUselessDefs",
    "cleanupNumericValues",
    "convertColors",
    "removeUnknownsAndDefaults",
    "removeNonInheritableGroupAttrs",
    "removeUselessStrokeAndFill",
    "removeViewBox",
    "cleanupEnableBackground",
    "removeHiddenElems",
    "removeEmptyText",
    "convertShapeToPath",
    "convertEllipseToCircle",
    "moveElemsAttrsToGroup",
    "moveGroupAttrsToElems",
    "collapseGroups",
    "convertPathData",
    "convertTransform",
    "removeEmptyAttrs",
    "removeEmptyContainers",
    "mergePaths",
    "removeUnusedNS",
    "sortAttrs",
    "sortDefsChildren",
    "removeTitle",
    "removeDesc",
    "removeDimensions",
    "removeEnableBackground",
)

BASELINE_RULE_SET: RuleSet = {
    "multipass": True,
    "plugins": [
        {
            "name": PRESET_DEFAULT,
            "params": {
                "overrides": {
                    "removeViewBox": False,
                    "removeTitle": False,
                    "removeDesc": False,
                },
            },
        },
    ],
}

# Client-side default sent with every optimize request.
DEFAULT_CLIENT_RULE_SET: RuleSet = {
    "multipass": True,
    "plugins": [
        {
            "name": PRESET_DEFAULT,
            "params": {
                "overrides": {
                    "removeViewBox": False,
                    "removeTitle": False,
                    "removeDesc": False,
                    "removeDoctype": True,
                    "removeXMLProcInst": True,
                    "removeComments": True,
                    "removeMetadata": True,
                    "removeEditorsNSData": True,
                    "cleanupAttrs": True,
                    "mergeStyles": True,
                    "inlineStyles": True,
                    "minifyStyles": True,
                    "cleanupIDs": True,
                    "removeUselessDefs": True,
                    "convertPathData": True,
                    "convertColors": True,
                    "removeUnknownsAndDefaults": True,
                    "removeUselessStrokeAndFill": True,
                    "removeEnableBackground": True,
                    "removeHiddenElems": True,
                    "removeEmptyText": True,
                    "convertShapeToPath": True,
                    "moveElemsAttrsToGroup": True,
                    "moveGroupAttrsToElems": True,
                    "collapseGroups": True,
                    "convertEllipseToCircle": True,
                    "convertTransform": True,
                    "removeEmptyAttrs": True,
                    "removeEmptyContainers": True,
                    "mergePaths": True,
                    "cleanupNumericValues": True,
                    "sortAttrs": True,
                    "sortDefsChildren": True,
                    "removeDimensions": True,
                },
            },
        },
    ],
}


def merge_rule_sets(baseline: Mapping[str, Any], override: Mapping[str, Any] | None) -> RuleSet:
    """Combine *baseline* with *override* at the top level only.

    A key present in *override* replaces the baseline value wholesale, so an
    override ``plugins`` list discards every baseline plugin entry.
    """

    merged = copy.deepcopy(dict(baseline))
    if override is None:
        return merged
    merged.update(copy.deepcopy(dict(override)))
    return merged


def plugin_name(entry: object) -> str | None:
    if isinstance(entry, str):
        return entry
    if isinstance(entry, Mapping):
        name = entry.get("name")
        return str(name) if name else None
    return None


def enabled_rules(rule_set: Mapping[str, Any]) -> dict[str, bool]:
    """Resolve the ``plugins`` list of *rule_set* into a rule → enabled map."""

    resolved: dict[str, bool] = {}
    plugins = rule_set.get("plugins") or []
    if not isinstance(plugins, list):
        return resolved
    for entry in plugins:
        name = plugin_name(entry)
        if not name:
            continue
        active = True
        if isinstance(entry, Mapping) and "active" in entry:
            active = bool(entry["active"])
        if name == PRESET_DEFAULT:
            if not active:
                continue
            for rule in PLUGIN_CATALOGUE:
                resolved[rule] = True
            params = entry.get("params") if isinstance(entry, Mapping) else None
            overrides = params.get("overrides") if isinstance(params, Mapping) else None
            if isinstance(overrides, Mapping):
                for rule, value in overrides.items():
                    resolved[str(rule)] = bool(value)
            continue
        resolved[name] = active
    return resolved


__all__ = [
    "BASELINE_RULE_SET",
    "DEFAULT_CLIENT_RULE_SET",
    "PLUGIN_CATALOGUE",
    "PRESET_DEFAULT",
    "RuleSet",
    "enabled_rules",
    "merge_rule_sets",
    "plugin_name",
]
