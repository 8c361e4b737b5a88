import pytest

from svg2tsx.transcoder import (
    attribute_to_prop,
    collapse_whitespace,
    component_source_to_svg,
    extract_svg,
    looks_like_svg,
    parse_style,
    replace_color,
    self_close_empty_elements,
    style_to_object_literal,
    svg_to_component_source,
    svg_to_jsx_markup,
)


def test_svg_to_component_source_full_pipeline() -> None:
    svg = (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<!DOCTYPE svg PUBLIC "-//W3C//DTD SVG 1.1//EN" "http://www.w3.org/Graphics/SVG/1.1/DTD/svg11.dtd">\n'
        '<svg class="icon" stroke-width="2"><path d="M0 0"></path></svg>'
    )
    assert svg_to_component_source(svg) == (
        "const Icon = () => (\n"
        '  <svg className="icon" strokeWidth="2"><path d="M0 0" /></svg>\n'
        ");\n\nexport default Icon;\n"
    )


def test_component_name_is_configurable() -> None:
    source = svg_to_component_source("<svg></svg>", component_name="HomeOutline")
    assert source.startswith("const HomeOutline = () => (")
    assert source.endswith("export default HomeOutline;\n")


@pytest.mark.parametrize("name", ["stroke-width", "class", "fill-rule", "viewBox", "xlink:href"])
def test_attribute_to_prop_is_idempotent(name: str) -> None:
    once = attribute_to_prop(name)
    assert attribute_to_prop(once) == once


def test_attribute_to_prop_mapping() -> None:
    assert attribute_to_prop("class") == "className"
    assert attribute_to_prop("stroke-linejoin") == "strokeLinejoin"
    assert attribute_to_prop("clip-path") == "clipPath"


def test_attribute_values_are_not_rewritten() -> None:
    markup = svg_to_jsx_markup('<svg><a href="page?data-x=1" stroke-linecap="round"></a></svg>')
    assert 'href="page?data-x=1"' in markup
    assert 'strokeLinecap="round"' in markup


def test_style_object_literal_keeps_order_and_drops_bad_segments() -> None:
    assert style_to_object_literal("color:red; margin:0") == "style={{ color: 'red', margin: '0' }}"
    assert parse_style("color:red; bad; font-size : 12px;") == [("color", "red"), ("fontSize", "12px")]


def test_parse_style_splits_on_first_colon() -> None:
    assert parse_style("background:url(http://example.com/a.png)") == [
        ("background", "url(http://example.com/a.png)")
    ]


def test_style_attribute_is_converted_in_pipeline() -> None:
    markup = svg_to_jsx_markup('<svg><path style="fill-opacity:0.5;stroke:none" d="M0 0"/></svg>')
    assert "style={{ fillOpacity: '0.5', stroke: 'none' }}" in markup


def test_self_close_empty_elements() -> None:
    assert self_close_empty_elements('<path d="M0 0"></path>') == '<path d="M0 0" />'


def test_self_close_only_handles_adjacent_pairs() -> None:
    # Text-based limitation: whitespace between the tags keeps the pair open.
    assert self_close_empty_elements('<path d="M0 0">\n</path>') == '<path d="M0 0">\n</path>'


def test_self_close_is_single_pass_for_nested_same_named_tags() -> None:
    # Only the innermost pair closes; the emptied outer pair stays open.
    assert self_close_empty_elements("<g><g></g></g>") == "<g><g /></g>"
    assert self_close_empty_elements('<g id="a"><g></g><g></g></g>') == '<g id="a"><g /><g /></g>'
    assert self_close_empty_elements("<g><path/></g>") == "<g><path/></g>"


def test_attribute_names_after_quoted_angle_bracket_are_converted() -> None:
    markup = svg_to_jsx_markup('<svg><path data-label="a>b" stroke-width="2" d="M0 0"/></svg>')
    assert markup == '<svg><path dataLabel="a>b" strokeWidth="2" d="M0 0"/></svg>'


def test_collapse_whitespace() -> None:
    assert collapse_whitespace('<svg\n  width="1">\r\n<path/></svg>') == '<svg width="1"> <path/></svg>'


def test_component_source_to_svg_restores_literal_expressions() -> None:
    svg = component_source_to_svg('<svg className="icon" width={24} fill={"none"}><path d={path} /></svg>')
    assert svg == '<svg class="icon" width="24" fill="none">\n  <path d={path} />\n</svg>'


def test_component_source_to_svg_removes_fragments() -> None:
    assert component_source_to_svg('<><svg><path d="M0 0" /></svg></>') == '<svg>\n  <path d="M0 0" />\n</svg>'


def test_round_trip_preserves_attribute_values() -> None:
    svg = (
        '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24" class="icon">'
        '<path fill="#000" stroke-width="2" d="M1 1L2 2"></path></svg>'
    )
    back = component_source_to_svg(svg_to_component_source(svg))
    for value in ["http://www.w3.org/2000/svg", "0 0 24 24", "icon", "#000", "2", "M1 1L2 2"]:
        assert f'"{value}"' in back
    assert 'class="icon"' in back


def test_looks_like_svg() -> None:
    assert looks_like_svg("  \n<svg viewBox='0 0 1 1'></svg>")
    assert not looks_like_svg('<?xml version="1.0"?><svg></svg>')
    assert not looks_like_svg("")
    assert not looks_like_svg(None)


def test_extract_svg() -> None:
    source = svg_to_component_source('<svg><path d="M0 0"/></svg>')
    assert extract_svg(source) == '<svg><path d="M0 0"/></svg>'
    assert extract_svg("export const nothing = 1;") is None


def test_replace_color() -> None:
    svg = '<svg><path fill="#2B2B2B" stroke="#FFF"/></svg>'
    assert replace_color(svg, "#2B2B2B") == '<svg><path fill="currentColor" stroke="#FFF"/></svg>'
    assert replace_color(svg, "") == svg
