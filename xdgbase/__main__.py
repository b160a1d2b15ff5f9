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

"""CLI endpoint."""

import argparse
import logging
import sys
import typing as T
from pathlib import Path

from xdgbase.cfg import ConfigError, OptionsConfig
from xdgbase.identity import IdentityError
from xdgbase.resolver import VARIABLES, BaseDirResolver

LOGGER = logging.getLogger("xdgbase")


def setup_logging(level: str) -> None:
    """Add console logging handler unless one exists; set logging level.

    :param level: name of the lowest level to print
    """
    root = logging.getLogger()
    root.setLevel(level.upper())
    if root.handlers:
        return

    handler = logging.StreamHandler(sys.stderr)
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    handler.setFormatter(formatter)
    root.addHandler(handler)


def variable_name(value: str) -> str:
    """Translate user supplied directory name to its variable name.

    Accepts both XDG_CONFIG_HOME and config_home forms.

    :param value: name given on the command line
    :return: variable name
    """
    name = value.upper()
    if not name.startswith("XDG_"):
        name = "XDG_" + name
    if name not in VARIABLES:
        raise argparse.ArgumentTypeError(f'unknown directory: "{value}"')
    return name


def parse_args(argv: T.Optional[T.List[str]] = None) -> argparse.Namespace:
    """Parse user arguments from CLI.

    :param argv: arguments to parse, defaulting to sys.argv
    :return: parsed args
    """
    parser = argparse.ArgumentParser(
        prog="xdgbase", description="Print XDG base directories."
    )
    parser.add_argument("names", nargs="*", type=variable_name)
    parser.add_argument("--config", type=Path)
    parser.add_argument("--absolute-defaults", action="store_true")
    parser.add_argument("--verbose", action="store_true")
    return parser.parse_args(argv)


def main(argv: T.Optional[T.List[str]] = None) -> None:
    """CLI endpoint.

    :param argv: arguments to parse, defaulting to sys.argv
    """
    args = parse_args(argv)

    opt = OptionsConfig()
    try:
        opt.load(args.config)
    except ConfigError as ex:
        setup_logging("error")
        LOGGER.error("%s", ex)
        sys.exit(1)

    setup_logging("debug" if args.verbose else opt["basic"]["log_level"])

    try:
        resolver = BaseDirResolver(
            absolute_defaults=(
                args.absolute_defaults
                or opt["resolver"]["absolute_defaults"]
            )
        )
    except IdentityError as ex:
        LOGGER.error("cannot determine current user: %s", ex)
        sys.exit(1)

    if args.names:
        for name in args.names:
            print(resolver.get(name))
    else:
        for name, value in resolver.as_dict().items():
            print(f"{name}={value}")


if __name__ == "__main__":
    main()
