#!/usr/bin/env python3
# Copyright (C) 2019 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.
"""check_jenkins_queue - Monitor the build queue of a Jenkins master"""

# This check reads the load statistics of a Jenkins master and checks that
# the number of jobs waiting for an executor does not exceed the WARNING and
# CRITICAL levels. Performance data are:
#
#   queue=<count>;<warn>;<crit> busy_executors=<count>

import argparse
import sys
import traceback
from collections.abc import Sequence
from typing import NoReturn

from jenkins_queue import __version__
from jenkins_queue.config import Configuration, UNSET_THRESHOLD
from jenkins_queue.evaluator import CheckResult, evaluate, State
from jenkins_queue.fetcher import MetricFetcher
from jenkins_queue.utils.exceptions import JenkinsQueueError, UsageError
from jenkins_queue.utils.log import setup_console_logging

MAN_PAGE = """\
NAME
    check_jenkins_queue - count the jobs in the build queue of a Jenkins master

SYNOPSIS
    check_jenkins_queue --version
    check_jenkins_queue --help
    check_jenkins_queue --man
    check_jenkins_queue [options] <jenkins-url>

DESCRIPTION
    check_jenkins_queue is a monitoring plug-in that checks the number of jobs
    in the Jenkins build queue. It can check that the queue length does not
    exceed the WARNING and CRITICAL thresholds.

    The values are read with a single request from
    <jenkins-url>/overallLoad/api/json. A failing request or an answer that
    cannot be parsed results in the state UNKNOWN.

OPTIONS
    -d, --debug
        Turns on debug traces

    -t, --timeout=<timeout>
        The timeout in seconds to wait for the request (default 10)

    --proxy=<url>
        The http proxy url (default from HTTP_PROXY env)

    --noproxy
        Do not use HTTP_PROXY env

    -u, --user=<user>
        Username for authentication

    -p, --password=<password>
        Password or API-Key for authentication

    --password-reference=<id>:<file>
        Read the password with the given id from a password store file

    --noperfdata
        Do not output perfdata

    -w, --warning=<count>
        The maximum queue length for WARNING threshold

    -c, --critical=<count>
        The maximum queue length for CRITICAL threshold

EXIT STATUS
    0 OK, 1 WARNING, 2 CRITICAL, 3 UNKNOWN. --help, --version, --man and
    invalid command lines exit with 3.
"""


class _ArgumentParser(argparse.ArgumentParser):
    # Use custom behaviour on error
    def error(self, message: str) -> NoReturn:
        raise UsageError(f"{self.format_usage()}{self.prog}: error: {message}")


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}") from e
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be greater than 0: {value!r}")
    return number


class _ManAction(argparse.Action):
    def __call__(self, parser, namespace, values, option_string=None):  # type: ignore[no-untyped-def]
        sys.stdout.write(MAN_PAGE)
        parser.exit()


def _make_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="check_jenkins_queue",
        description="Check the number of jobs in the build queue of a Jenkins master.",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--man",
        nargs=0,
        action=_ManAction,
        default=argparse.SUPPRESS,
        help="Print the manual and exit",
    )
    parser.add_argument("-d", "--debug", action="store_true", help="Turn on debug traces")
    parser.add_argument(
        "-t",
        "--timeout",
        type=_positive_int,
        default=10,
        help="The timeout in seconds to wait for the request (default: 10)",
    )
    parser.add_argument(
        "--proxy",
        metavar="URL",
        default=None,
        help="The http proxy url (default from HTTP_PROXY env)",
    )
    parser.add_argument("--noproxy", action="store_true", help="Do not use HTTP_PROXY env")
    parser.add_argument("-u", "--user", default=None, help="Username for authentication")

    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "-p",
        "--password",
        default=None,
        help="Password or API-Key for authentication",
    )
    group.add_argument(
        "--password-reference",
        metavar="ID:FILE",
        default=None,
        help="Password store reference to the password or API-Key for authentication",
    )

    parser.add_argument(
        "--noperfdata",
        dest="perfdata",
        action="store_false",
        help="Do not output perfdata",
    )
    parser.add_argument(
        "-w",
        "--warning",
        type=int,
        metavar="COUNT",
        default=UNSET_THRESHOLD,
        help="The maximum queue length for WARNING threshold",
    )
    parser.add_argument(
        "-c",
        "--critical",
        type=int,
        metavar="COUNT",
        default=UNSET_THRESHOLD,
        help="The maximum queue length for CRITICAL threshold",
    )
    parser.add_argument(
        "base_url",
        metavar="JENKINS_URL",
        help="URL of the Jenkins master, e.g. https://jenkins.example.com",
    )
    return parser


def parse_arguments(argv: Sequence[str]) -> Configuration:
    try:
        namespace = _make_parser().parse_args(argv)
    except SystemExit as e:
        # --help, --version and --man are no check results
        raise SystemExit(int(State.UNKNOWN)) from e
    return Configuration.model_validate(vars(namespace))


def check_jenkins_queue(config: Configuration, fetcher: MetricFetcher) -> CheckResult:
    try:
        metrics = fetcher.fetch(config.base_url, config)
    except JenkinsQueueError as e:
        return CheckResult(State.UNKNOWN, str(e))
    except Exception as e:
        if config.debug:
            sys.stderr.write(traceback.format_exc())
        return CheckResult(State.UNKNOWN, f"UNKNOWN - Unhandled exception: {e!r}")

    return evaluate(metrics, config.warning, config.critical, config.perfdata)


def main(argv: Sequence[str] | None = None, fetcher: MetricFetcher | None = None) -> int:
    try:
        config = parse_arguments(sys.argv[1:] if argv is None else argv)
    except UsageError as e:
        sys.stderr.write(f"{e}\n")
        sys.stdout.write("UNKNOWN - Invalid command line, see --help\n")
        return int(State.UNKNOWN)

    if config.debug:
        setup_console_logging()

    result = check_jenkins_queue(config, fetcher or MetricFetcher())
    sys.stdout.write(result.output())
    return result.exit_code


if __name__ == "__main__":
    sys.exit(main())
