#!/usr/bin/env python3
# Copyright (C) 2019 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.
"""Retrieve the load statistics of a Jenkins master

Only the two values we need are requested from the API (tree parameter), the
rest of the load statistics is never transferred.
"""

from collections.abc import Callable

import requests
from pydantic import BaseModel, Field, ValidationError

from jenkins_queue.config import Configuration
from jenkins_queue.evaluator import Metrics, render_number
from jenkins_queue.utils.exceptions import FetchError, ParseError
from jenkins_queue.utils.log import logger

API_SUFFIX = "/overallLoad/api/json"
TREE_QUERY = "tree=busyExecutors[min[latest]],queueLength[min[latest]]"


class _Latest(BaseModel):
    latest: float = Field(strict=True, ge=0, allow_inf_nan=False)


class _TimeScales(BaseModel):
    min: _Latest


class OverallLoad(BaseModel):
    busyExecutors: _TimeScales
    queueLength: _TimeScales


def build_url(base_url: str) -> str:
    """
    >>> build_url("https://jenkins.example.com/ci")
    'https://jenkins.example.com/ci/overallLoad/api/json?tree=busyExecutors[min[latest]],queueLength[min[latest]]'
    """
    return f"{base_url}{API_SUFFIX}?{TREE_QUERY}"


def parse_overall_load(url: str, body: str) -> Metrics:
    try:
        load = OverallLoad.model_validate_json(body)
    except ValidationError as e:
        raise ParseError(
            f"Failed parsing response of {url}: {e.error_count()} invalid field(s): "
            + ", ".join(".".join(map(str, err["loc"])) or err["msg"] for err in e.errors())
        ) from e
    return Metrics(
        queue_length=load.queueLength.min.latest,
        busy_executors=load.busyExecutors.min.latest,
    )


class MetricFetcher:
    def __init__(self, session_factory: Callable[[], requests.Session] = requests.Session) -> None:
        self._session_factory = session_factory

    def fetch(self, base_url: str, config: Configuration) -> Metrics:
        url = build_url(base_url)
        logger.debug("GET %s ...", url)

        response = self._get(url, config)
        if not 200 <= response.status_code < 300:
            raise FetchError(url, f"{response.status_code} {response.reason}")

        metrics = parse_overall_load(url, response.text)
        logger.debug("Found %s jobs in waiting queue", render_number(metrics.queue_length))
        return metrics

    def _get(self, url: str, config: Configuration) -> requests.Response:
        with self._session_factory() as session:
            try:
                return session.get(
                    url,
                    auth=config.basic_auth(),
                    proxies=config.http_proxy_config().to_requests_proxies(),
                    timeout=config.timeout,
                )
            except requests.exceptions.Timeout as e:
                raise FetchError(url, f"timeout after {config.timeout} seconds") from e
            except requests.exceptions.RequestException as e:
                raise FetchError(url, str(e)) from e
