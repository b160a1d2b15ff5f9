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

"""freedesktop.org XDG Base Directory lookup.

The module level functions share one resolver, created on first use.
"""

import threading
import typing as T

from xdgbase.identity import IdentityError, UserIdentity
from xdgbase.resolver import BaseDirResolver

_RESOLVER: T.Optional[BaseDirResolver] = None
_RESOLVER_LOCK = threading.Lock()


def get_resolver() -> BaseDirResolver:
    """Return the shared resolver, creating it if needed.

    :return: shared resolver
    """
    global _RESOLVER  # pylint: disable=global-statement
    resolver = _RESOLVER
    if resolver is not None:
        return resolver
    with _RESOLVER_LOCK:
        if _RESOLVER is None:
            _RESOLVER = BaseDirResolver()
        return _RESOLVER


def set_resolver(resolver: T.Optional[BaseDirResolver]) -> None:
    """Replace the shared resolver.

    :param resolver: new resolver, None to create a default one on next use
    """
    global _RESOLVER  # pylint: disable=global-statement
    with _RESOLVER_LOCK:
        _RESOLVER = resolver


def data_home() -> str:
    """Return base directory for user specific data files.

    :return: resolved path
    """
    return get_resolver().data_home()


def config_home() -> str:
    """Return base directory for user specific configuration files.

    :return: resolved path
    """
    return get_resolver().config_home()


def data_dirs() -> str:
    """Return preference ordered base directories to search for data.

    :return: resolved paths, not split
    """
    return get_resolver().data_dirs()


def config_dirs() -> str:
    """Return preference ordered base directories to search for config.

    :return: resolved paths, not split
    """
    return get_resolver().config_dirs()


def cache_home() -> str:
    """Return base directory for user specific non-essential data.

    :return: resolved path
    """
    return get_resolver().cache_home()


def runtime_dir() -> str:
    """Return base directory for user specific runtime files.

    :return: resolved path
    """
    return get_resolver().runtime_dir()


__all__ = [
    "BaseDirResolver",
    "IdentityError",
    "UserIdentity",
    "cache_home",
    "config_dirs",
    "config_home",
    "data_dirs",
    "data_home",
    "get_resolver",
    "runtime_dir",
    "set_resolver",
]
