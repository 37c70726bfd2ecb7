#!/usr/bin/env python3
# Copyright (C) 2019 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

from setuptools import find_packages, setup

setup(
    name="check-jenkins-queue",
    version="1.7",
    description="Monitoring plug-in for the build queue of a Jenkins master",
    license="GPL-2.0-only",
    python_requires=">=3.10",
    packages=find_packages(include=["jenkins_queue", "jenkins_queue.*"]),
    include_package_data=True,
    install_requires=["requests>=2.28", "pydantic>=2.0"],
    extras_require={"test": ["pytest", "pytest-mock"]},
    entry_points={
        "console_scripts": [
            "check_jenkins_queue=jenkins_queue.active_checks.check_jenkins_queue:main",
        ],
    },
)
