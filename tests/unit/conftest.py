#!/usr/bin/env python3
# Copyright (C) 2019 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

from collections.abc import Callable, Iterator

import pytest
import requests
from pytest_mock import MockerFixture

from jenkins_queue.utils import log


@pytest.fixture(autouse=True)
def fixture_reset_logging() -> Iterator[None]:
    """Console logging installed by --debug must not leak into other tests"""
    try:
        yield
    finally:
        log.clear_console_logging()


@pytest.fixture(name="make_session")
def fixture_make_session(mocker: MockerFixture) -> Callable[..., requests.Session]:
    """A factory for sessions whose get() answers with the given response or raises"""

    def _make_session(response: requests.Response | Exception) -> requests.Session:
        session = mocker.MagicMock(spec=requests.Session)
        session.__enter__.return_value = session
        if isinstance(response, Exception):
            session.get.side_effect = response
        else:
            session.get.return_value = response
        return session

    return _make_session
