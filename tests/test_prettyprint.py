from svg2tsx.prettyprint import line_depth_change, pretty_print


def test_pretty_print_nested_markup() -> None:
    assert pretty_print('<svg><g><path d="a"/></g></svg>') == (
        '<svg>\n  <g>\n    <path d="a"/>\n  </g>\n</svg>'
    )


def test_pretty_print_inline_pair_keeps_depth() -> None:
    assert pretty_print("<svg><title>Hi</title></svg>") == "<svg>\n  <title>Hi</title>\n</svg>"


def test_pretty_print_never_goes_below_zero() -> None:
    assert pretty_print("</g></svg>") == "</g>\n</svg>"


def test_pretty_print_is_idempotent() -> None:
    once = pretty_print('<svg><g><path d="a"/><circle r="1"></circle></g></svg>')
    assert pretty_print(once) == once


def test_line_depth_change() -> None:
    assert line_depth_change("<g>") == (0, 1)
    assert line_depth_change("</g>") == (-1, 0)
    assert line_depth_change("<path />") == (0, 0)
    assert line_depth_change("<text>a</text>") == (0, 0)
