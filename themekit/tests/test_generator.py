# themekit/tests/test_generator.py
"""
Unit tests for theme file-name derivation, property building and validation.
"""
import pytest

from themekit.exceptions import ThemeValidationError
from themekit.generator import (
    FALLBACK_NAME,
    MAX_FILE_NAME_BYTES,
    THEME_JSON_SUFFIX,
    ThemeFileNameGenerator,
    build_file_name,
    build_properties,
    sanitize_name,
    validate,
)
from themekit.schemas.config import ThemeDefaults
from themekit.schemas.theme import ThemeRequest, ValidationIssue

AWKWARD_NAMES = [
    "MyTheme",
    "Dark/Forest",
    "back\\slash",
    'quote"d',
    "a:b*c?d<e>f|g",
    "  padded  ",
    "multi   space",
    "tab\there",
    "new\nline",
    "...dots...",
    ".hidden",
    "CON",
    "con.dark",
    "LPT9",
    "CON .dark",
    "com\u00b2",
    "Ünïcödé 🎨",
    "　wide　space　",
    "\ud800lone surrogate",
    "AUX" + "." * 241 + "b",
    "a" * 300,
    "é" * 200,
    "x " * 200,
    "///",
    "",
]


# --- sanitize_name ---


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("MyTheme", "MyTheme"),
        ("Dark/Forest", "DarkForest"),
        ("a:b*c?d<e>f|g", "abcdefg"),
        ('Say "hi"', "Say hi"),
        ("back\\slash", "backslash"),
        ("  My Theme  ", "My Theme"),
        ("multi   space", "multi space"),
        ("tab\there", "tabhere"),
        ("...dots...", "dots"),
        ("Ünïcödé 🎨", "Ünïcödé 🎨"),
    ],
)
def test_sanitize_name_strips_illegal_characters(raw, expected):
    """Verify that reserved punctuation and control characters are removed and whitespace tidied."""
    assert sanitize_name(raw) == expected


@pytest.mark.parametrize("raw", ["", "   ", "///", "...", "\x00\x01", ' :*?"<>| '])
def test_sanitize_name_falls_back_when_nothing_is_left(raw):
    """Verify that inputs with no usable characters produce the fallback stem."""
    assert sanitize_name(raw) == FALLBACK_NAME


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("CON", "_CON"),
        ("nul", "_nul"),
        ("con.dark", "_con.dark"),
        ("COM1", "_COM1"),
        ("COM10", "COM10"),
        ("CON .dark", "_CON .dark"),
        ("aux  .x", "_aux .x"),
        ("COM\u00b9", "_COM\u00b9"),
        ("lpt\u00b3.dark", "_lpt\u00b3.dark"),
    ],
)
def test_sanitize_name_guards_reserved_device_names(raw, expected):
    """Verify that Windows device names cannot become the file-name stem."""
    assert sanitize_name(raw) == expected


def test_sanitize_name_uses_replacement():
    """Verify that a configured replacement substitutes each illegal character."""
    assert sanitize_name("Dark/Forest", replacement="_") == "Dark_Forest"
    assert sanitize_name("a//b", replacement="-") == "a--b"


def test_sanitize_name_truncates_to_file_name_limit():
    """Verify that the full file name never exceeds the per-component byte limit."""
    ascii_name = build_file_name("a" * 300)
    assert len(ascii_name.encode("utf-8")) == MAX_FILE_NAME_BYTES

    stem = sanitize_name("é" * 200)
    assert stem == "é" * 122
    assert len(build_file_name("é" * 200).encode("utf-8")) <= MAX_FILE_NAME_BYTES


@pytest.mark.parametrize("raw", AWKWARD_NAMES)
def test_sanitize_name_is_idempotent(raw):
    """Sanitizing an already sanitized name must not change it."""
    once = sanitize_name(raw)
    assert sanitize_name(once) == once


@pytest.mark.parametrize("replacement", ["", "_", " ", "."])
@pytest.mark.parametrize("raw", AWKWARD_NAMES)
def test_sanitize_name_is_idempotent_with_replacement(raw, replacement):
    """Idempotence also holds for every legal replacement string."""
    once = sanitize_name(raw, replacement)
    assert sanitize_name(once, replacement) == once


# --- build_file_name ---


@pytest.mark.parametrize("raw", AWKWARD_NAMES)
def test_build_file_name_is_always_a_safe_theme_json_name(raw):
    """Verify the suffix and the absence of separators and reserved characters."""
    file_name = build_file_name(raw)
    assert file_name.endswith(THEME_JSON_SUFFIX)
    assert len(file_name) > len(THEME_JSON_SUFFIX)
    assert not any(c in file_name for c in '/\\:*?"<>|')
    assert all(ord(c) >= 32 for c in file_name)
    assert len(file_name.encode("utf-8")) <= MAX_FILE_NAME_BYTES


def test_build_file_name_example():
    assert build_file_name("Dark/Forest") == "DarkForest.theme.json"
    assert build_file_name("") == "theme.theme.json"


# --- build_properties ---


def test_build_properties():
    """Verify the property map passed to the template."""
    assert build_properties("MyTheme", True) == {"NAME": "MyTheme", "IS_DARK": "true"}
    assert build_properties("Dark/Forest", False) == {"NAME": "Dark/Forest", "IS_DARK": "false"}


def test_build_properties_keeps_raw_name():
    """The name is not sanitized or escaped in the property map."""
    assert build_properties('a "b" \\ c', True)["NAME"] == 'a "b" \\ c'


# --- validate ---


@pytest.mark.parametrize("name", ["", "   ", "\t\n"])
def test_validate_rejects_blank_names(name):
    result = validate(name)
    assert result.ok is False
    assert result.issue == ValidationIssue.EMPTY_NAME
    assert result.issue.value == "EmptyName"
    assert result.message == "Theme name is empty"


def test_validate_accepts_name():
    result = validate("MyTheme")
    assert result.ok is True
    assert result.issue is None


def test_validate_has_no_length_limit_by_default():
    assert validate("x" * 10_000).ok is True


def test_validate_enforces_configured_max_length():
    """Verify the optional maximum applies to the trimmed name."""
    assert validate("  abcde  ", max_length=5).ok is True

    result = validate("abcdef", max_length=5)
    assert result.issue == ValidationIssue.NAME_TOO_LONG
    assert "5" in result.message


# --- ThemeFileNameGenerator ---


def test_generator_generate():
    """Verify the generator composes file name and properties for a request."""
    generated = ThemeFileNameGenerator().generate(ThemeRequest(name="Dark/Forest", is_dark=False))
    assert generated.file_name == "DarkForest.theme.json"
    assert generated.properties == {"NAME": "Dark/Forest", "IS_DARK": "false"}


def test_generator_generate_rejects_blank_name():
    """Verify that generate raises with the validation result attached."""
    with pytest.raises(ThemeValidationError) as exc_info:
        ThemeFileNameGenerator().generate(ThemeRequest(name="   ", is_dark=True))

    assert exc_info.value.result.issue == ValidationIssue.EMPTY_NAME
    assert "Theme name is empty" in str(exc_info.value)


def test_generator_uses_configured_defaults():
    """Verify that replacement and max length come from ThemeDefaults."""
    generator = ThemeFileNameGenerator(ThemeDefaults(replacement="_", max_name_length=3))
    assert generator.build_file_name("a/b") == "a_b.theme.json"
    assert generator.validate("abcd").issue == ValidationIssue.NAME_TOO_LONG


@pytest.mark.parametrize("raw", ["Caf\udcc3", "\udcff\udcfe", "a/\ud800/b"])
def test_sanitize_name_output_is_encodable(raw):
    """Undecodable argv bytes arrive as lone surrogates; the stem must still encode as UTF-8."""
    stem = sanitize_name(raw)
    stem.encode("utf-8")
    assert stem == sanitize_name(stem)
