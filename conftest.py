#!/usr/bin/env python3
# Copyright (C) 2019 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

# The location of this file puts the repository root on sys.path, so the tests
# import the jenkins_queue package from the working tree.

# Do not execute the packaging script when collecting with --doctest-modules
collect_ignore = ["setup.py"]
