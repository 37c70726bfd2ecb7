#!/usr/bin/env python3
# Copyright (C) 2019 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.
"""Compare the queue length of a Jenkins master against the configured levels

The critical level is checked first. A queue length equal to a level is not a
breach. Unset levels (None or -1) never trigger and are rendered as empty
fields in the performance data:

    queue=<count>;<warn>;<crit> busy_executors=<count>
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from jenkins_queue.config import UNSET_THRESHOLD


class State(enum.IntEnum):
    OK = 0
    WARNING = 1
    CRITICAL = 2
    UNKNOWN = 3


@dataclass(frozen=True)
class Metrics:
    queue_length: float
    busy_executors: float


@dataclass(frozen=True)
class CheckResult:
    state: State
    message: str
    perfdata: str | None = None

    @property
    def exit_code(self) -> int:
        return int(self.state)

    def output(self) -> str:
        """The status line as expected by the monitoring core

        >>> CheckResult(State.OK, "OK: queue length: 0", "queue=0;; busy_executors=0").output()
        'OK: queue length: 0|queue=0;; busy_executors=0\\n'
        >>> CheckResult(State.UNKNOWN, "Failed retrieving http://jenkins (timeout)").output()
        'Failed retrieving http://jenkins (timeout)\\n'
        """
        if self.perfdata is None:
            return f"{self.message}\n"
        return f"{self.message}|{self.perfdata}\n"


def render_number(value: float) -> str:
    """
    >>> render_number(5)
    '5'
    >>> render_number(5.0)
    '5'
    >>> render_number(0.25)
    '0.25'
    """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _level(value: int | None) -> int | None:
    return None if value is None or value == UNSET_THRESHOLD else value


def _render_level(value: int | None) -> str:
    return "" if value is None else str(value)


def perfdata(metrics: Metrics, warn: int | None, crit: int | None) -> str:
    """
    >>> perfdata(Metrics(5, 2), 3, 10)
    'queue=5;3;10 busy_executors=2'
    >>> perfdata(Metrics(0, 0), None, -1)
    'queue=0;; busy_executors=0'
    """
    warn, crit = _level(warn), _level(crit)
    return (
        f"queue={render_number(metrics.queue_length)};{_render_level(warn)};{_render_level(crit)}"
        f" busy_executors={render_number(metrics.busy_executors)}"
    )


def evaluate(
    metrics: Metrics,
    warn: int | None,
    crit: int | None,
    perfdata_enabled: bool = True,
) -> CheckResult:
    warn, crit = _level(warn), _level(crit)
    queue_length = render_number(metrics.queue_length)
    perf = perfdata(metrics, warn, crit) if perfdata_enabled else None

    if crit is not None and metrics.queue_length > crit:
        return CheckResult(
            State.CRITICAL,
            f"CRITICAL: queue length {queue_length} exeeds critical threshold: {crit}",
            perf,
        )
    if warn is not None and metrics.queue_length > warn:
        return CheckResult(
            State.WARNING,
            f"WARNING: queue length {queue_length} exeeds warning threshold: {warn}",
            perf,
        )
    return CheckResult(State.OK, f"OK: queue length: {queue_length}", perf)
