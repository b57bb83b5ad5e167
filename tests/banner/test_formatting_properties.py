"""
Property-based tests for the banner formatting primitives.

Tests dasherize, column justification, option signatures and literal
rendering of defaults using hypothesis.
"""

import allure
import pytest
from hypothesis import given, settings, strategies as st

from cli_banner.banner.formatting import (
    alias_name,
    dasherize,
    extended_argument,
    extended_option,
    help_row,
    justify,
    literal,
    option_signature,
)
from cli_banner.banner.models import Argument, Option


# Strategies for generating test data

def snake_name_strategy():
    """Generate snake_case identifiers."""
    return st.from_regex(r"^[a-z][a-z0-9]{0,8}(_[a-z0-9]{1,8}){0,3}$", fullmatch=True)


def alias_strategy():
    """Generate pre-formatted short flags like -v."""
    return st.from_regex(r"^-[a-zA-Z]$", fullmatch=True)


@allure.feature("Banner Formatting")
@allure.story("Dasherize")
@allure.severity(allure.severity_level.NORMAL)
@pytest.mark.parametrize(
    "name, expected",
    [
        ("verbose", "verbose"),
        ("dry_run", "dry-run"),
        ("dryRun", "dry-run"),
        ("DryRun", "dry-run"),
        ("HTTPServer", "http-server"),
        ("max_retry_count", "max-retry-count"),
        ("log level", "log-level"),
        ("ipv6Only", "ipv6-only"),
    ],
)
def test_dasherize_examples(name: str, expected: str):
    """Test that identifier styles convert to hyphenated lowercase names."""
    assert dasherize(name) == expected


@allure.feature("Banner Formatting")
@allure.story("Dasherize")
@allure.severity(allure.severity_level.CRITICAL)
@settings(max_examples=100)
@given(name=snake_name_strategy())
def test_dasherize_snake_case_replaces_underscores(name: str):
    """
    For any snake_case identifier, dasherize SHALL only swap underscores
    for hyphens.
    """
    assert dasherize(name) == name.replace("_", "-")
    assert dasherize(dasherize(name)) == dasherize(name)


@allure.feature("Banner Formatting")
@allure.story("Justify never truncates")
@allure.severity(allure.severity_level.CRITICAL)
@settings(max_examples=100)
@given(
    text=st.text(alphabet=st.characters(blacklist_categories=("Cs",)), max_size=60),
    width=st.integers(min_value=0, max_value=40),
)
def test_justify_pads_without_truncating(text: str, width: int):
    """
    Justified text SHALL start with the original text, be at least the
    column width long, and be padded with spaces only.
    """
    result = justify(text, width)

    assert result.startswith(text)
    assert len(result) == max(len(text), width)
    assert set(result[len(text):]) <= {" "}


@allure.feature("Banner Formatting")
@allure.story("Option signatures")
@allure.severity(allure.severity_level.CRITICAL)
def test_option_signature_kinds():
    """Test the boolean, array and value forms of the option signature."""
    assert option_signature(Option("verbose", alias_names=["-v"], boolean=True)) == (
        "--[no-]verbose, -v"
    )
    assert option_signature(Option("tags", array=True)) == "--tags=VALUE1,VALUE2,.."
    assert option_signature(Option("log_level")) == "--log-level=VALUE"
    assert option_signature(Option("output", alias_names=["-o", "-O"])) == (
        "--output=VALUE, -o, -O"
    )


@allure.feature("Banner Formatting")
@allure.story("Option signatures")
@allure.severity(allure.severity_level.NORMAL)
def test_option_signature_boolean_wins_over_array():
    """Test that an option flagged both boolean and array renders as boolean."""
    option = Option("force", boolean=True, array=True)
    assert option_signature(option) == "--[no-]force"


@allure.feature("Banner Formatting")
@allure.story("Option signatures")
@allure.severity(allure.severity_level.CRITICAL)
@settings(max_examples=100)
@given(
    name=snake_name_strategy(),
    aliases=st.lists(alias_strategy(), max_size=3),
    kind=st.sampled_from(["boolean", "array", "value"]),
)
def test_option_signature_structure(name: str, aliases: list[str], kind: str):
    """
    For any option, the signature SHALL start with ``--``, contain the
    dasherized name, and end with the aliases in declared order.
    """
    option = Option(
        name,
        alias_names=aliases,
        boolean=kind == "boolean",
        array=kind == "array",
    )
    signature = option_signature(option)

    assert signature.startswith("--")
    assert dasherize(name) in signature
    if aliases:
        assert signature.endswith(", " + ", ".join(aliases))
    if kind == "boolean":
        assert signature.startswith(f"--[no-]{dasherize(name)}")


@allure.feature("Banner Formatting")
@allure.story("Extended lines")
@allure.severity(allure.severity_level.CRITICAL)
def test_extended_option_layout():
    """Test column alignment, REQUIRED marker and default annotation."""
    option = Option(
        "tags",
        array=True,
        required=True,
        description="Tags to apply",
        default=["a", "b"],
    )
    line = extended_option(option)

    assert line == (
        "  " + "--tags=VALUE1,VALUE2,..".ljust(32)
        + "  # REQUIRED Tags to apply, default: [\"a\", \"b\"]"
    )


@allure.feature("Banner Formatting")
@allure.story("Extended lines")
@allure.severity(allure.severity_level.NORMAL)
def test_extended_option_false_default_is_rendered():
    """Test that a falsy but present default still shows up."""
    line = extended_option(Option("color", boolean=True, default=False))
    assert line.endswith("# , default: false")


@allure.feature("Banner Formatting")
@allure.story("Extended lines")
@allure.severity(allure.severity_level.NORMAL)
def test_extended_option_long_signature_is_not_truncated():
    """Test that signatures wider than the column push the comment right."""
    option = Option("a_really_long_option_name_for_testing", alias_names=["-l"])
    line = extended_option(option)

    assert line == "  --a-really-long-option-name-for-testing=VALUE, -l  # "


@allure.feature("Banner Formatting")
@allure.story("Extended lines")
@allure.severity(allure.severity_level.NORMAL)
def test_extended_argument_layout():
    """Test the Arguments table row for required and optional arguments."""
    assert extended_argument(Argument("name", required=True, description="Who")) == (
        "  NAME" + " " * 28 + "  # REQUIRED Who"
    )
    assert extended_argument(Argument("times", description="How many")) == (
        "  TIMES" + " " * 27 + "  # How many"
    )


@allure.feature("Banner Formatting")
@allure.story("Help row")
@allure.severity(allure.severity_level.CRITICAL)
def test_help_row_uses_narrower_column():
    """Test that the help row pads 'help, -h' to 30 after the '--' prefix."""
    assert help_row() == "  --help, -h" + " " * 22 + "  # Print this help"


@allure.feature("Banner Formatting")
@allure.story("Literal rendering")
@allure.severity(allure.severity_level.CRITICAL)
@pytest.mark.parametrize(
    "value, expected",
    [
        ("text", '"text"'),
        ("", '""'),
        ('say "hi"', '"say \\"hi\\""'),
        ("a\\b", '"a\\\\b"'),
        ("line\nbreak", '"line\\nbreak"'),
        ("tab\there", '"tab\\there"'),
        ("\x1b[0m", '"\\e[0m"'),
        ("\x01", '"\\u0001"'),
        ("#{name}", '"\\#{name}"'),
        ("# comment", '"# comment"'),
        ("héllo", '"héllo"'),
        (True, "true"),
        (False, "false"),
        (0, "0"),
        (-42, "-42"),
        (1.5, "1.5"),
        (3.0, "3.0"),
        (1e20, "1.0e+20"),
        (2.5e-07, "2.5e-07"),
        (float("inf"), "Infinity"),
        (float("-inf"), "-Infinity"),
        (float("nan"), "NaN"),
        (["a", "b"], '["a", "b"]'),
        ((1, 2), "[1, 2]"),
        ([], "[]"),
        ([None, True], "[nil, true]"),
        ({"key": 1}, '{"key" => 1}'),
        ({}, "{}"),
    ],
)
def test_literal_rendering(value, expected: str):
    """Test the fixed literal policy for every supported value kind."""
    assert literal(value) == expected


@allure.feature("Banner Formatting")
@allure.story("Literal rendering")
@allure.severity(allure.severity_level.NORMAL)
@settings(max_examples=100)
@given(values=st.lists(st.integers(), max_size=5))
def test_literal_integer_lists(values: list[int]):
    """
    For any list of integers, the literal SHALL be the bracketed,
    comma-space separated decimal values.
    """
    assert literal(values) == "[" + ", ".join(str(v) for v in values) + "]"


@allure.feature("Banner Formatting")
@allure.story("Alias names")
@allure.severity(allure.severity_level.NORMAL)
def test_alias_name_formatting():
    """Test formatting of bare aliases into flags."""
    assert alias_name("v") == "-v"
    assert alias_name("verb") == "--verb"
    assert alias_name("-x") == "-x"
    assert alias_name("--long") == "--long"
