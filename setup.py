#!/usr/bin/env python

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

from setuptools import find_packages, setup

install_packages = ["pyyaml"]

setup(
    author="Marcin Kurczewski",
    author_email="rr-@sakuya.pl",
    name="xdgbase",
    long_description="XDG base directory resolver",
    version="0.0",
    packages=find_packages(),
    entry_points={"console_scripts": ["xdgbase = xdgbase.__main__:main"]},
    package_dir={"xdgbase": "xdgbase"},
    package_data={"xdgbase": ["data/*"]},
    install_requires=install_packages,
    extras_require={
        "develop": [
            "docstring_parser",
            "mypy",
            "pytest",
        ]
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
        "Natural Language :: English",
        "Operating System :: POSIX :: Linux",
        "Programming Language :: Python :: 3 :: Only",
        "Topic :: Software Development :: Libraries",
    ],
)
