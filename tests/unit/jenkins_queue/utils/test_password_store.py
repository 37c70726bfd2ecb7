#!/usr/bin/env python3
# Copyright (C) 2019 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

from pathlib import Path

import pytest

from jenkins_queue.utils import password_store
from jenkins_queue.utils.exceptions import PasswordStoreError


def test_load(tmp_path: Path) -> None:
    store = tmp_path / "stored_passwords"
    store.write_text("jenkins:secret\n\nempty:\nurl:http://user:pw@host\n")

    assert password_store.load(store) == {
        "jenkins": "secret",
        "empty": "",
        "url": "http://user:pw@host",
    }


def test_load_missing_file(tmp_path: Path) -> None:
    with pytest.raises(PasswordStoreError, match="Cannot read password store"):
        password_store.load(tmp_path / "missing")


def test_load_invalid_line(tmp_path: Path) -> None:
    store = tmp_path / "stored_passwords"
    store.write_text("no separator here\n")

    with pytest.raises(PasswordStoreError, match="Invalid entry"):
        password_store.load(store)


def test_lookup(tmp_path: Path) -> None:
    store = tmp_path / "stored_passwords"
    store.write_text("a:1\nb:2\n")

    assert password_store.lookup(store, "b") == "2"
    with pytest.raises(PasswordStoreError):
        password_store.lookup(store, "c")


@pytest.mark.parametrize("reference", ["", "jenkins", "jenkins:", ":/path/to/store"])
def test_parse_invalid_reference(reference: str) -> None:
    with pytest.raises(PasswordStoreError, match="Invalid password reference"):
        password_store.parse_reference(reference)


def test_parse_reference() -> None:
    assert password_store.parse_reference("id:/some/file") == ("id", Path("/some/file"))
