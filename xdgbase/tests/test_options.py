# xdgbase - XDG base directory resolver
# Copyright (C) 2018 Marcin Kurczewski
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.

"""Tests for xdgbase.cfg module."""

from pathlib import Path

import pytest

from xdgbase.cfg import ConfigError, OptionsConfig


def test_factory_defaults() -> None:
    """Test whether options start with the bundled defaults."""
    opt = OptionsConfig()
    assert opt["resolver"]["absolute_defaults"] is False
    assert opt["basic"]["log_level"] == "warning"
    assert "resolver" in opt
    assert opt.get("missing", 5) == 5


def test_user_file_overrides_defaults(tmp_path: Path) -> None:
    """Test whether the user file only overrides the keys it mentions.

    :param tmp_path: directory to put the user file in
    """
    (tmp_path / "options.yaml").write_text(
        "resolver:\n    absolute_defaults: true\n"
    )
    opt = OptionsConfig()
    opt.load(tmp_path)
    assert opt["resolver"]["absolute_defaults"] is True
    assert opt["basic"]["log_level"] == "warning"


def test_missing_user_file(tmp_path: Path) -> None:
    """Test whether a directory without user file yields the defaults.

    :param tmp_path: empty directory
    """
    opt = OptionsConfig()
    opt.load(tmp_path)
    assert opt["resolver"]["absolute_defaults"] is False


def test_empty_user_file(tmp_path: Path) -> None:
    """Test whether an empty user file yields the defaults.

    :param tmp_path: directory to put the user file in
    """
    (tmp_path / "options.yaml").write_text("")
    opt = OptionsConfig()
    opt.load(tmp_path)
    assert opt["basic"]["log_level"] == "warning"


@pytest.mark.parametrize("text", ["basic: [unclosed\n", "- just\n- a list\n"])
def test_invalid_user_file(tmp_path: Path, text: str) -> None:
    """Test whether a broken user file raises ConfigError naming the file.

    :param tmp_path: directory to put the user file in
    :param text: broken file contents
    """
    (tmp_path / "options.yaml").write_text(text)
    opt = OptionsConfig()
    with pytest.raises(ConfigError, match="options.yaml"):
        opt.load(tmp_path)


def test_save_and_load(tmp_path: Path) -> None:
    """Test whether saved options are read back.

    :param tmp_path: directory to save the options to
    """
    opt = OptionsConfig()
    opt["basic"]["log_level"] = "debug"
    opt.save(tmp_path / "nested")

    loaded = OptionsConfig()
    loaded.load(tmp_path / "nested")
    assert loaded["basic"]["log_level"] == "debug"


@pytest.mark.parametrize(
    "text,message",
    [
        ("basic:\n    log_level: loud\n", "basic.log_level"),
        ("basic:\n    log_level: 10\n", "basic.log_level"),
        ("resolver:\n", "resolver: expected a mapping"),
        ("basic: quiet\n", "basic: expected a mapping"),
        ("resolver:\n    absolute_defaults: 'no'\n", "absolute_defaults"),
        ("resolver:\n    absolute_defaults: 1\n", "absolute_defaults"),
    ],
)
def test_invalid_option_values(
    tmp_path: Path, text: str, message: str
) -> None:
    """Test whether options of the wrong type raise ConfigError.

    :param tmp_path: directory to put the user file in
    :param text: file contents with a bad value
    :param message: expected part of the error message
    """
    (tmp_path / "options.yaml").write_text(text)
    opt = OptionsConfig()
    with pytest.raises(ConfigError, match=message):
        opt.load(tmp_path)
    with pytest.raises(ConfigError, match="options.yaml"):
        opt.load(tmp_path)


@pytest.mark.parametrize("level", ["DEBUG", "error", "Critical"])
def test_log_level_is_case_insensitive(tmp_path: Path, level: str) -> None:
    """Test whether known level names are accepted in any case.

    :param tmp_path: directory to put the user file in
    :param level: level name to accept
    """
    (tmp_path / "options.yaml").write_text(f"basic:\n    log_level: {level}\n")
    opt = OptionsConfig()
    opt.load(tmp_path)
    assert opt["basic"]["log_level"] == level


def test_unquoted_no_is_false(tmp_path: Path) -> None:
    """Test whether YAML booleans keep absolute defaults off.

    :param tmp_path: directory to put the user file in
    """
    (tmp_path / "options.yaml").write_text(
        "resolver:\n    absolute_defaults: no\n"
    )
    opt = OptionsConfig()
    opt.load(tmp_path)
    assert opt["resolver"]["absolute_defaults"] is False
