"""Unit tests for the platform adapter (core.platform_adapter).

Tests cover:
- OS detection and os_name labels
- path helpers (join/resolve/normalize)
- validate_file_name rules on Windows and POSIX hosts
- format_project_name normalisation and idempotency
- format_command, get_eol, get_system_info
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from core.platform_adapter import (
    format_command,
    format_project_name,
    get_eol,
    get_env_var,
    get_system_info,
    is_linux,
    is_macos,
    is_windows,
    join_path,
    normalize_path,
    os_name,
    resolve_path,
    validate_file_name,
)

PLATFORMS = ("win32", "linux", "darwin")
CONTROL_CODES = [*range(0x00, 0x20), 0x7F]


# ---------------------------------------------------------------------------
# OS detection
# ---------------------------------------------------------------------------


class TestOsDetection:
    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("platform", "expected"),
        [("win32", "Windows"), ("darwin", "macOS"), ("linux", "Linux"), ("freebsd13", "freebsd13")],
    )
    def test_os_name(self, platform: str, expected: str):
        assert os_name(platform=platform) == expected

    @pytest.mark.unit
    def test_flags_are_exclusive(self):
        assert is_windows(platform="win32")
        assert not is_linux(platform="win32")
        assert is_macos(platform="darwin")
        assert not is_windows(platform="darwin")
        assert is_linux(platform="linux")


# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------


class TestPaths:
    @pytest.mark.unit
    def test_join_path(self):
        assert join_path("a", "b", "c") == Path("a") / "b" / "c"

    @pytest.mark.unit
    def test_resolve_path_is_absolute(self, tmp_path: Path):
        resolved = resolve_path(tmp_path, "my-app")
        assert resolved.is_absolute()
        assert resolved == tmp_path / "my-app"

    @pytest.mark.unit
    def test_resolve_current_directory(self, tmp_path: Path):
        assert resolve_path(tmp_path, ".") == tmp_path

    @pytest.mark.unit
    def test_resolve_relative_uses_cwd(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.chdir(tmp_path)
        assert resolve_path("my-app") == Path(os.getcwd()) / "my-app"

    @pytest.mark.unit
    def test_resolve_normalises_parent_segments(self, tmp_path: Path):
        assert resolve_path(tmp_path, "a", "..", "b") == tmp_path / "b"

    @pytest.mark.unit
    def test_normalize_path(self):
        assert normalize_path(os.path.join("a", ".", "b", "..", "c")) == Path("a") / "c"

    @pytest.mark.unit
    def test_get_env_var_default(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.delenv("FE_SCAFFOLD_MISSING", raising=False)
        assert get_env_var("FE_SCAFFOLD_MISSING", "fallback") == "fallback"
        monkeypatch.setenv("FE_SCAFFOLD_MISSING", "value")
        assert get_env_var("FE_SCAFFOLD_MISSING", "fallback") == "value"


# ---------------------------------------------------------------------------
# validate_file_name
# ---------------------------------------------------------------------------


class TestValidateFileName:
    @pytest.mark.unit
    @pytest.mark.parametrize("platform", PLATFORMS)
    @pytest.mark.parametrize("name", ["", "   ", "\t", None])
    def test_empty_names(self, platform: str, name):
        result = validate_file_name(name, platform=platform)
        assert not result.valid
        assert result.error == "Project name must not be empty"

    @pytest.mark.unit
    @pytest.mark.parametrize("platform", PLATFORMS)
    def test_length_limit(self, platform: str):
        assert validate_file_name("a" * 255, platform=platform).valid
        result = validate_file_name("a" * 256, platform=platform)
        assert not result.valid
        assert "255" in (result.error or "")

    @pytest.mark.unit
    def test_length_counts_utf16_code_units(self):
        # 128 emoji = 256 code units (surrogate pairs)
        assert not validate_file_name("😀" * 128, platform="linux").valid
        assert validate_file_name("😀" * 127, platform="linux").valid

    @pytest.mark.unit
    @pytest.mark.parametrize("platform", PLATFORMS)
    def test_leading_dot(self, platform: str):
        result = validate_file_name(".hidden", platform=platform)
        assert not result.valid
        assert result.error == "Project name must not start with a dot"

    @pytest.mark.unit
    @pytest.mark.parametrize("platform", PLATFORMS)
    @pytest.mark.parametrize("code", CONTROL_CODES)
    def test_control_characters_always_invalid(self, platform: str, code: int):
        assert not validate_file_name(f"app{chr(code)}name", platform=platform).valid

    @pytest.mark.unit
    @pytest.mark.parametrize("platform", PLATFORMS)
    def test_trailing_newline_is_rejected(self, platform: str):
        assert not validate_file_name("my-app\n", platform=platform).valid

    @pytest.mark.unit
    @pytest.mark.parametrize("name", ["CON", "con", "Prn", "AUX", "nul", "COM1", "com3", "LPT9"])
    def test_windows_reserved_names(self, name: str):
        result = validate_file_name(name, platform="win32")
        assert not result.valid
        assert "reserved" in (result.error or "")

    @pytest.mark.unit
    @pytest.mark.parametrize("name", ["CON", "com3", "LPT1"])
    def test_reserved_names_valid_on_posix(self, name: str):
        assert validate_file_name(name, platform="linux").valid
        assert validate_file_name(name, platform="darwin").valid

    @pytest.mark.unit
    @pytest.mark.parametrize("name", ["con.txt", "COM10", "LPT0", "console"])
    def test_reserved_match_is_exact(self, name: str):
        assert validate_file_name(name, platform="win32").valid

    @pytest.mark.unit
    @pytest.mark.parametrize("char", list('<>:"/\\|?*'))
    def test_windows_invalid_characters(self, char: str):
        result = validate_file_name(f"my{char}app", platform="win32")
        assert not result.valid
        assert "Windows does not allow these characters" in (result.error or "")

    @pytest.mark.unit
    @pytest.mark.parametrize("name", ["my-app.", "my-app "])
    def test_windows_trailing_dot_or_space(self, name: str):
        result = validate_file_name(name, platform="win32")
        assert not result.valid
        assert "ending in a space or a dot" in (result.error or "")

    @pytest.mark.unit
    def test_posix_rejects_slash_and_nul(self):
        assert validate_file_name("a/b", platform="linux").error == (
            "Project name must not contain / or the NUL character"
        )
        assert not validate_file_name("a\x00b", platform="darwin").valid

    @pytest.mark.unit
    def test_posix_allows_windows_only_characters(self):
        assert validate_file_name("my:app?", platform="linux").valid

    @pytest.mark.unit
    @pytest.mark.parametrize("platform", PLATFORMS)
    def test_valid_name_is_deterministic(self, platform: str):
        first = validate_file_name("my-react-app", platform=platform)
        second = validate_file_name("my-react-app", platform=platform)
        assert first.valid and second.valid
        assert first == second
        assert first.error is None

    @pytest.mark.unit
    def test_first_failing_rule_wins(self):
        # leading dot is checked before the reserved/char rules
        result = validate_file_name(".CON<", platform="win32")
        assert result.error == "Project name must not start with a dot"


# ---------------------------------------------------------------------------
# format_project_name
# ---------------------------------------------------------------------------


class TestFormatProjectName:
    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("My App", "my-app"),
            ("my_react__app", "my-react-app"),
            ("--Hello--World--", "hello-world"),
            ("already-ok", "already-ok"),
            ("Ünïcödé Name", "n-c-d-name"),
            ("***", ""),
            ("", ""),
        ],
    )
    def test_examples(self, raw: str, expected: str):
        assert format_project_name(raw) == expected

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "raw",
        ["My App", "a--b", "-x-", "İstanbul", "ß", "Ⅻ Roman", "tab\tname", "日本語", "A1_b2-C3"],
    )
    def test_idempotent(self, raw: str):
        once = format_project_name(raw)
        assert format_project_name(once) == once


# ---------------------------------------------------------------------------
# format_command / EOL / system info
# ---------------------------------------------------------------------------


class TestUtilities:
    @pytest.mark.unit
    def test_format_command_windows(self):
        assert format_command("npm install", platform="win32") == "npm.cmd install"
        assert format_command("npm", platform="win32") == "npm.cmd"

    @pytest.mark.unit
    @pytest.mark.parametrize("platform", ["linux", "darwin"])
    def test_format_command_posix_identity(self, platform: str):
        assert format_command("npm install", platform=platform) == "npm install"

    @pytest.mark.unit
    def test_format_command_only_rewrites_leading_npm_token(self):
        assert format_command("npx create", platform="win32") == "npx create"
        assert format_command("cd my-npm-app", platform="win32") == "cd my-npm-app"

    @pytest.mark.unit
    def test_get_eol(self):
        assert get_eol() == os.linesep

    @pytest.mark.unit
    def test_system_info_snapshot(self):
        info = get_system_info()
        assert info.path_separator == os.sep
        assert info.path_delimiter == os.pathsep
        assert info.os_name == os_name()
        assert info.runtime_version.count(".") >= 1
        assert info.home_dir == Path.home()
