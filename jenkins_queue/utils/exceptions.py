#!/usr/bin/env python3
# Copyright (C) 2019 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.
"""User-defined exceptions of the Jenkins queue check.

Every one of them ends the check with the state UNKNOWN (exit code 3).
"""

__all__ = [
    "FetchError",
    "JenkinsQueueError",
    "ParseError",
    "PasswordStoreError",
    "UsageError",
]


# never used directly in the code. Just some wrapper to make all of our
# exceptions handleable with one call
class JenkinsQueueError(Exception):
    pass


class UsageError(JenkinsQueueError):
    """The command line could not be parsed"""


class FetchError(JenkinsQueueError):
    """The request to the Jenkins API failed: connection, timeout or non-success status"""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Failed retrieving {url} ({reason})")
        self.url = url
        self.reason = reason


class ParseError(JenkinsQueueError):
    """The Jenkins API answered with something we could not decode"""


class PasswordStoreError(JenkinsQueueError):
    pass
