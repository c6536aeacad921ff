"""Tests for the language registry."""

import pytest

from mdrun.lib.languages import Language, LanguageRegistry


REQUIRED_TAGS = [
    "sh", "bash", "zsh", "fish", "dash", "ksh", "ash", "shell",
    "awk", "js", "javascript", "py", "python", "rb", "ruby",
    "php", "cmd", "batch", "powershell",
]


@pytest.fixture
def registry():
    return LanguageRegistry.default()


def test_builtin_tags_registered(registry):
    for tag in REQUIRED_TAGS:
        assert tag in registry


def test_lookup_is_case_insensitive(registry):
    assert registry.get("Bash") is registry.get("bash")
    assert "PYTHON" in registry


def test_unknown_and_empty_tags(registry):
    assert registry.get("text") is None
    assert registry.get("") is None
    assert registry.get(None) is None
    assert "" not in registry


@pytest.mark.parametrize(
    "tag, expected",
    [
        ("sh", ["sh", "-euc", "echo hi", "--"]),
        ("bash", ["bash", "-euc", "echo hi", "--"]),
        ("shell", ["sh", "-euc", "echo hi", "--"]),
        ("awk", ["awk", "echo hi"]),
        ("js", ["node", "-e", "echo hi"]),
        ("py", ["python", "-c", "echo hi"]),
        ("ruby", ["ruby", "-e", "echo hi"]),
        ("php", ["php", "-r", "echo hi"]),
        ("batch", ["cmd.exe", "/c", "echo hi"]),
        ("powershell", ["powershell.exe", "-c", "echo hi"]),
    ],
)
def test_invocations(registry, tag, expected):
    assert registry.get(tag).build_argv("echo hi") == expected


def test_trailing_args_appended_verbatim(registry):
    argv = registry.get("sh").build_argv('echo "$1"', ["a b", "--flag"])
    assert argv == ["sh", "-euc", 'echo "$1"', "--", "a b", "--flag"]


def test_code_is_a_single_argument(registry):
    code = "echo one\necho 'two three'\n"
    argv = registry.get("bash").build_argv(code)
    assert argv[2] == code
    assert len(argv) == 4


def test_placeholders_replace_whole_tokens_only():
    lang = Language("x", "x", ("x", "pre$CODE", "$NAME", "$CODE"))
    assert lang.build_argv("body") == ["x", "pre$CODE", "x", "body"]


def test_overrides_replace_and_extend():
    registry = LanguageRegistry.with_overrides(
        {"Deno": ("deno", ["deno", "eval", "$CODE"]), "py": ("python3", ["python3", "-c", "$CODE"])}
    )
    assert registry.get("deno").build_argv("1") == ["deno", "eval", "1"]
    assert registry.get("py").program == "python3"
    assert "sh" in registry


def test_registry_is_read_only(registry):
    with pytest.raises(TypeError):
        registry._languages["evil"] = Language("evil", "rm", ("rm",))
