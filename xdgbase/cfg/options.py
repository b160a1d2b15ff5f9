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

"""Program options."""

import collections.abc
import typing as T
from pathlib import Path

import yaml

from xdgbase.cfg.base import ConfigError
from xdgbase.data import DATA_DIR

FILE_NAME = "options.yaml"
LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


class OptionsConfig:
    """Program options, layered over the factory defaults."""

    def __init__(self) -> None:
        """Initialize self."""
        self._storage: T.Dict[str, T.Any] = {}
        self.load(None)

    def load(self, root_dir: T.Optional[Path]) -> None:
        """Load options from the specified directory.

        Factory defaults are always loaded first; the user file, if any,
        only overrides the keys it mentions.

        :param root_dir: directory where to look for the options file
        """
        self._storage = {}
        self._loads((DATA_DIR / FILE_NAME).read_text())
        if root_dir:
            user_path = root_dir / FILE_NAME
            if user_path.exists():
                try:
                    self._loads(user_path.read_text())
                except ConfigError as ex:
                    raise ConfigError(f"error loading {user_path}: {ex}")

    def save(self, root_dir: Path) -> None:
        """Save options to the specified directory.

        :param root_dir: directory where to save the options file
        """
        user_path = root_dir / FILE_NAME
        user_path.parent.mkdir(parents=True, exist_ok=True)
        user_path.write_text(self._dumps())

    def _loads(self, text: str) -> None:
        try:
            source = yaml.load(text, Loader=yaml.SafeLoader)
        except yaml.YAMLError as ex:
            raise ConfigError(str(ex))
        if source is None:
            return
        if not isinstance(source, collections.abc.Mapping):
            raise ConfigError("expected a mapping at the top level")
        self._validate(source)
        self._merge(self._storage, source)

    def _validate(self, source: T.Mapping[str, T.Any]) -> None:
        for section in ("basic", "resolver"):
            if section in source and not isinstance(
                source[section], collections.abc.Mapping
            ):
                raise ConfigError(f"{section}: expected a mapping")

        resolver = source.get("resolver", {})
        if "absolute_defaults" in resolver and not isinstance(
            resolver["absolute_defaults"], bool
        ):
            raise ConfigError("resolver.absolute_defaults: expected a boolean")

        basic = source.get("basic", {})
        if "log_level" in basic and (
            not isinstance(basic["log_level"], str)
            or basic["log_level"].lower() not in LOG_LEVELS
        ):
            raise ConfigError(
                f"basic.log_level: expected one of {', '.join(LOG_LEVELS)}"
            )

    def _merge(self, target: T.Any, source: T.Any) -> T.Any:
        for key, value in source.items():
            if isinstance(value, collections.abc.Mapping):
                target[key] = self._merge(target.get(key, {}), value)
            else:
                target[key] = value
        return target

    def _dumps(self) -> str:
        return yaml.dump(self._storage, indent=4, default_flow_style=False)

    def __getitem__(self, key: str) -> T.Any:
        """Return given configuration item.

        :param key: key to retrieve
        :return: configuration value
        """
        return self._storage[key]

    def __setitem__(self, key: str, value: T.Any) -> None:
        """Update given configuration item.

        :param key: key to update
        :param value: new configuration value
        """
        self._storage[key] = value

    def __contains__(self, key: str) -> bool:
        """Check if a given key exists.

        :param key: key to check
        :return: whether the key exists
        """
        return key in self._storage

    def get(self, key: str, default: T.Any = None) -> T.Any:
        """Return given configuration item if it exists, default value
        otherwise.

        :param key: key to retrieve
        :param default: value to return if the key does not exist
        :return: configuration value
        """
        return self._storage.get(key, default)
