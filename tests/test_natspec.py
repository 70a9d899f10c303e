"""Tests for doc-comment association."""

from interface_builder.extractors.natspec import NatspecAssociator, format_natspec

MARKERS = ["/// @custom:interface"]


def _natspec(source: str, line_number: int) -> str:
    return NatspecAssociator(source.split("\n"), MARKERS).natspec_for_line(line_number)


def test_single_line_comments_in_order():
    source = "\n".join([
        "uint256 x;",
        "    /// @notice First",
        "    /// @param a Second",
        "    /// @return Third",
        "    function f(uint256 a) external returns (uint256) {",
    ])
    assert _natspec(source, 5) == "/// @notice First\n/// @param a Second\n/// @return Third"


def test_directive_lines_are_transparent():
    source = "\n".join([
        "/// @notice First",
        "/// @custom:interface exclude g",
        "/// @dev Second",
        "function f() external {",
    ])
    assert _natspec(source, 4) == "/// @notice First\n/// @dev Second"


def test_block_comment():
    source = "\n".join([
        "uint256 x;",
        "/**",
        " * @notice Block",
        "",
        " * @dev More",
        " */",
        "function f() external {",
    ])
    assert _natspec(source, 7) == "/**\n* @notice Block\n\n* @dev More\n*/"


def test_block_comment_stops_at_code():
    source = "\n".join([
        "uint256 x;",
        " * @notice orphan",
        " */",
        "function f() external {",
    ])
    assert _natspec(source, 4) == "* @notice orphan\n*/"

    source = "\n".join([
        "uint256 x;",
        "    @notice not a continuation",
        " */",
        "function f() external {",
    ])
    assert _natspec(source, 4) == "*/"


def test_blank_lines_and_plain_comments_skipped():
    source = "\n".join([
        "/// @notice Kept",
        "",
        "// plain comment",
        "",
        "function f() external {",
    ])
    assert _natspec(source, 5) == "/// @notice Kept"


def test_stops_at_code():
    source = "\n".join([
        "/// @notice Belongs to x",
        "uint256 x;",
        "function f() external {",
    ])
    assert _natspec(source, 3) == ""


def test_first_line_has_no_doc():
    assert _natspec("function f() external {", 1) == ""


def test_format_natspec_reindents_and_drops_blanks():
    assert format_natspec("/**\n* a\n\n*/", "    ") == "    /**\n    * a\n    */"
    assert format_natspec("") == ""
