#!/usr/bin/env python3
# Copyright (C) 2019 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.
"""Read secrets from a password store file instead of the command line.

The store is a plain text file with one "<ident>:<password>" entry per line.
Passing a reference like "jenkins:/path/to/store" keeps the secret out of the
process list.
"""

from pathlib import Path

from jenkins_queue.utils.exceptions import PasswordStoreError


def load(pw_file: Path) -> dict[str, str]:
    passwords = {}
    try:
        with pw_file.open(encoding="utf-8") as f:
            for line in f:
                if not (line := line.rstrip("\n")):
                    continue
                ident, password = line.split(":", 1)
                passwords[ident] = password
    except OSError as e:
        raise PasswordStoreError(f"Cannot read password store {pw_file}: {e}") from e
    except ValueError as e:
        raise PasswordStoreError(f"Invalid entry in password store {pw_file}") from e
    return passwords


def lookup(pw_file: Path, pw_id: str) -> str:
    try:
        return load(pw_file)[pw_id]
    except KeyError as e:
        raise PasswordStoreError(f"Password '{pw_id}' does not exist") from e


def parse_reference(reference: str) -> tuple[str, Path]:
    """
    >>> parse_reference("jenkins:/omd/sites/heute/var/check_mk/stored_passwords")
    ('jenkins', PosixPath('/omd/sites/heute/var/check_mk/stored_passwords'))
    """
    pw_id, sep, file = reference.partition(":")
    if not (pw_id and sep and file):
        raise PasswordStoreError(f"Invalid password reference: {reference!r}")
    return pw_id, Path(file)
