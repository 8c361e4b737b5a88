import pytest

from svg2tsx.errors import OptimizerFailureError
from svg2tsx.optimizer import ScourOptimizer, scour_options
from svg2tsx.rules import BASELINE_RULE_SET


def test_scour_options_follow_rule_overrides() -> None:
    options = scour_options(BASELINE_RULE_SET)
    assert options["strip_comments"] is True
    assert options["remove_titles"] is False
    assert options["remove_descriptions"] is False
    assert options["keep_editor_data"] is False
    assert options["quiet"] is True


def test_scour_options_precision_and_pretty() -> None:
    options = scour_options({"floatPrecision": 2, "js2svg": {"pretty": True, "indent": 4}})
    assert options["digits"] == 2
    assert options["newlines"] is True
    assert options["indent_type"] == "space"
    assert options["indent_depth"] == 4


def test_scour_optimizer_strips_comments() -> None:
    svg = (
        '<?xml version="1.0"?>\n'
        '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">'
        "<!-- exported -->"
        '<path d="M 0 0 L 10 10"/>'
        "</svg>"
    )
    result = ScourOptimizer().optimize(svg, BASELINE_RULE_SET)
    assert result.data is not None
    assert result.data.startswith("<svg")
    assert "<!--" not in result.data
    assert "viewBox" in result.data
    assert result.info["engine"] == "scour"
    assert result.info["passes"] >= 1


def test_scour_optimizer_rejects_malformed_markup() -> None:
    with pytest.raises(OptimizerFailureError):
        ScourOptimizer().optimize("<svg><path></svg>", {"multipass": False})
