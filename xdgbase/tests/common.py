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

"""Shared utility functions for tests."""

import typing as T
from pathlib import Path

from xdgbase.identity import StaticIdentityProvider, UserIdentity
from xdgbase.resolver import BaseDirResolver

APP_ROOT_DIR = Path(__file__).parent.parent
TESTS_ROOT_DIR = APP_ROOT_DIR / "tests"

HOME = "/home/alice"
UID = "1000"


def collect_source_files(root: Path = APP_ROOT_DIR) -> T.Iterable[Path]:
    """Return source files belonging to xdgbase.

    :param root: root dir, defaulting to the whole project
    :return: generator of paths
    """
    for path in root.iterdir():
        if path.is_dir():
            yield from collect_source_files(path)
        elif path.is_file() and path.suffix == ".py":
            yield path


def make_resolver(
    environ: T.Optional[T.Dict[str, str]] = None,
    home_dir: str = HOME,
    uid: T.Optional[str] = UID,
    os_name: str = "posix",
    absolute_defaults: bool = False,
) -> BaseDirResolver:
    """Return resolver isolated from the host environment and user.

    :param environ: fake environment, empty by default
    :param home_dir: home directory reported by the fake user lookup
    :param uid: user id reported by the fake user lookup
    :param os_name: value of os.name to emulate
    :param absolute_defaults: whether to root system defaults at /
    :return: resolver
    """
    return BaseDirResolver(
        environ={} if environ is None else environ,
        provider=StaticIdentityProvider(
            UserIdentity(home_dir=home_dir, uid=uid)
        ),
        os_name=os_name,
        absolute_defaults=absolute_defaults,
    )
