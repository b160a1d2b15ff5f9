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

"""Current user identity and the providers that look it up."""

import abc
import os
import typing as T
from dataclasses import dataclass


class IdentityError(Exception):
    """Current user identity cannot be determined."""


@dataclass(frozen=True)
class UserIdentity:
    """Home directory and user id of the user running the process."""

    home_dir: str
    uid: T.Optional[str] = None


class BaseIdentityProvider(abc.ABC):
    """Base identity provider class."""

    @abc.abstractmethod
    def current_user(self) -> UserIdentity:
        """Look up the user running this process.

        :return: identity of the current user
        """
        raise NotImplementedError("not implemented")


class PosixIdentityProvider(BaseIdentityProvider):
    """Identity provider backed by the password database."""

    def current_user(self) -> UserIdentity:
        """Look up the user running this process.

        :return: identity of the current user
        """
        import pwd  # pylint: disable=import-outside-toplevel

        uid = os.getuid()
        try:
            entry = pwd.getpwuid(uid)
        except KeyError:
            raise IdentityError(f"user: unknown userid {uid}") from None
        return UserIdentity(home_dir=entry.pw_dir, uid=str(uid))


class EnvironmentIdentityProvider(BaseIdentityProvider):
    """Identity provider that only consults environment variables.

    Meant for platforms without a password database. The user id is
    never known.
    """

    def __init__(
        self, environ: T.Optional[T.Mapping[str, str]] = None
    ) -> None:
        """Initialize self.

        :param environ: environment to read, defaulting to os.environ
        """
        self._environ = os.environ if environ is None else environ

    def current_user(self) -> UserIdentity:
        """Look up the user running this process.

        :return: identity of the current user
        """
        home_dir = self._environ.get("HOME") or self._environ.get(
            "USERPROFILE"
        )
        if not home_dir:
            raise IdentityError("user: neither $HOME nor $USERPROFILE is set")
        return UserIdentity(home_dir=home_dir)


class StaticIdentityProvider(BaseIdentityProvider):
    """Identity provider returning a fixed identity."""

    def __init__(self, identity: UserIdentity) -> None:
        """Initialize self.

        :param identity: identity to report
        """
        self._identity = identity

    def current_user(self) -> UserIdentity:
        """Return the fixed identity.

        :return: identity given at construction
        """
        return self._identity


def get_default_provider(
    os_name: T.Optional[str] = None,
    environ: T.Optional[T.Mapping[str, str]] = None,
) -> BaseIdentityProvider:
    """Pick the identity provider suitable for the given platform.

    :param os_name: value of os.name to pick for, defaulting to the host's
    :param environ: environment to read, defaulting to os.environ
    :return: identity provider
    """
    if (os_name or os.name) == "nt":
        return EnvironmentIdentityProvider(environ)
    return PosixIdentityProvider()
