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

"""XDG base directory resolution.

Every query reads one environment variable and returns it verbatim. If the
variable is unset or empty, a default is built from the home directory or
the user id of the current user. Resolved paths are never checked for
existence, created or normalized.

See https://specifications.freedesktop.org/basedir-spec/basedir-spec-0.8.html
"""

import logging
import ntpath
import os
import posixpath
import threading
import typing as T

from xdgbase.identity import (
    BaseIdentityProvider,
    UserIdentity,
    get_default_provider,
)

LOGGER = logging.getLogger(__name__)

DATA_HOME = "XDG_DATA_HOME"
CONFIG_HOME = "XDG_CONFIG_HOME"
DATA_DIRS = "XDG_DATA_DIRS"
CONFIG_DIRS = "XDG_CONFIG_DIRS"
CACHE_HOME = "XDG_CACHE_HOME"
RUNTIME_DIR = "XDG_RUNTIME_DIR"

VARIABLES = (
    DATA_HOME,
    CONFIG_HOME,
    DATA_DIRS,
    CONFIG_DIRS,
    CACHE_HOME,
    RUNTIME_DIR,
)


class BaseDirResolver:
    """Resolves XDG base directories for the current user."""

    def __init__(
        self,
        environ: T.Optional[T.Mapping[str, str]] = None,
        provider: T.Optional[BaseIdentityProvider] = None,
        os_name: T.Optional[str] = None,
        absolute_defaults: bool = False,
    ) -> None:
        """Initialize self.

        Looks the current user up immediately; IdentityError raised by the
        provider propagates to the caller.

        :param environ: environment to read, defaulting to os.environ
        :param provider: current user lookup, defaulting to the platform's
        :param os_name: value of os.name whose path rules to follow
        :param absolute_defaults: whether to root system defaults at /
        """
        self._environ = os.environ if environ is None else environ
        self._os_name = os_name or os.name
        self._path = ntpath if self._os_name == "nt" else posixpath
        self._absolute_defaults = absolute_defaults
        if provider is None:
            provider = get_default_provider(self._os_name, self._environ)
        self._identity: UserIdentity = provider.current_user()
        self._home_lock = threading.Lock()
        self._home = self._environ.get("HOME", "")

    @property
    def identity(self) -> UserIdentity:
        """Return identity of the current user.

        :return: identity looked up at construction
        """
        return self._identity

    @property
    def uid(self) -> T.Optional[str]:
        """Return user id of the current user.

        :return: user id, None if the platform has none
        """
        return self._identity.uid

    def home_dir(self) -> str:
        """Return home directory of the current user.

        The first non-empty result is cached for the lifetime of self, so
        later changes to the environment are not picked up.

        :return: home directory
        """
        home = self._home
        if home:
            return home

        with self._home_lock:
            if not self._home:
                self._home = self._compute_home()
            return self._home

    def _compute_home(self) -> str:
        if self._os_name == "nt":
            home = self._path.join(
                self._environ.get("HOMEDRIVE", ""),
                self._environ.get("HOMEPATH", ""),
            )
            if not home:
                home = self._environ.get("USERPROFILE", "")
            return home
        return self._identity.home_dir

    def data_home(self) -> str:
        """Return base directory for user specific data files.

        :return: $XDG_DATA_HOME or $HOME/.local/share
        """
        return self._lookup(
            DATA_HOME,
            lambda: self._path.join(self.home_dir(), ".local", "share"),
        )

    def config_home(self) -> str:
        """Return base directory for user specific configuration files.

        :return: $XDG_CONFIG_HOME or $HOME/.config
        """
        return self._lookup(
            CONFIG_HOME, lambda: self._path.join(self.home_dir(), ".config")
        )

    def data_dirs(self) -> str:
        """Return preference ordered base directories to search for data.

        The result is not split; entries are separated with os.pathsep of
        the resolver's platform.

        :return: $XDG_DATA_DIRS or usr/local/share:usr/share
        """
        return self._lookup(
            DATA_DIRS,
            lambda: self._path.pathsep.join(
                [
                    self._system_path("usr", "local", "share"),
                    self._system_path("usr", "share"),
                ]
            ),
        )

    def config_dirs(self) -> str:
        """Return preference ordered base directories to search for config.

        :return: $XDG_CONFIG_DIRS or etc/xdg
        """
        return self._lookup(
            CONFIG_DIRS, lambda: self._system_path("etc", "xdg")
        )

    def cache_home(self) -> str:
        """Return base directory for user specific non-essential data.

        :return: $XDG_CACHE_HOME or $HOME/.cache
        """
        return self._lookup(
            CACHE_HOME, lambda: self._path.join(self.home_dir(), ".cache")
        )

    def runtime_dir(self) -> str:
        """Return base directory for user specific runtime files.

        Ownership and the 0700 access mode the directory must have are not
        checked.

        :return: $XDG_RUNTIME_DIR or run/user/$UID
        """
        return self._lookup(
            RUNTIME_DIR,
            lambda: self._system_path("run", "user", self.uid or ""),
        )

    def get(self, name: str) -> str:
        """Resolve base directory by its variable name.

        :param name: variable name, for example XDG_CONFIG_HOME
        :return: resolved path
        """
        getters: T.Dict[str, T.Callable[[], str]] = {
            DATA_HOME: self.data_home,
            CONFIG_HOME: self.config_home,
            DATA_DIRS: self.data_dirs,
            CONFIG_DIRS: self.config_dirs,
            CACHE_HOME: self.cache_home,
            RUNTIME_DIR: self.runtime_dir,
        }
        return getters[name]()

    def as_dict(self) -> T.Dict[str, str]:
        """Resolve all base directories.

        :return: mapping of variable names to resolved paths
        """
        return {name: self.get(name) for name in VARIABLES}

    def _lookup(self, name: str, default: T.Callable[[], str]) -> str:
        value = self._environ.get(name)
        if value:
            return value
        value = default()
        LOGGER.debug("$%s not set, defaulting to %s", name, value)
        return value

    def _system_path(self, *parts: str) -> str:
        path = self._path.join(*(part for part in parts if part))
        if self._absolute_defaults:
            path = self._path.sep + path
        return path
