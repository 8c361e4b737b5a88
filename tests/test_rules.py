from svg2tsx.rules import BASELINE_RULE_SET, PRESET_DEFAULT, enabled_rules, merge_rule_sets


def test_merge_without_override_returns_baseline_copy() -> None:
    merged = merge_rule_sets(BASELINE_RULE_SET, None)
    assert merged == BASELINE_RULE_SET
    merged["plugins"].append("removeComments")
    assert "removeComments" not in BASELINE_RULE_SET["plugins"]


def test_merge_replaces_plugin_list_wholesale() -> None:
    baseline = {"multipass": True, "plugins": ["A", "B"]}
    merged = merge_rule_sets(baseline, {"plugins": ["C"]})
    assert merged == {"multipass": True, "plugins": ["C"]}
    assert baseline["plugins"] == ["A", "B"]


def test_enabled_rules_applies_preset_overrides() -> None:
    rules = enabled_rules(BASELINE_RULE_SET)
    assert rules["removeComments"] is True
    assert rules["removeViewBox"] is False
    assert rules["removeTitle"] is False


def test_enabled_rules_without_preset_only_lists_named_rules() -> None:
    rules = enabled_rules(
        {"plugins": ["removeComments", {"name": "removeMetadata", "active": False}, {"name": PRESET_DEFAULT, "active": False}]}
    )
    assert rules == {"removeComments": True, "removeMetadata": False}


def test_enabled_rules_ignores_malformed_plugins() -> None:
    assert enabled_rules({"plugins": "removeComments"}) == {}
    assert enabled_rules({"plugins": [42, {"params": {}}]}) == {}
