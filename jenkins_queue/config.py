#!/usr/bin/env python3
# Copyright (C) 2019 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

from pydantic import BaseModel, ConfigDict, Field, field_validator

from jenkins_queue.utils import password_store
from jenkins_queue.utils.http_proxy_config import http_proxy_config_from_options, HTTPProxyConfig

# Threshold value meaning "not configured" on the command line
UNSET_THRESHOLD = -1


class Configuration(BaseModel):
    """The resolved command line of one check run"""

    model_config = ConfigDict(frozen=True)

    base_url: str
    timeout: int = Field(default=10, gt=0)
    proxy: None | str = None
    noproxy: bool = False
    user: None | str = None
    password: None | str = None
    password_reference: None | str = None
    warning: None | int = None
    critical: None | int = None
    perfdata: bool = True
    debug: bool = False

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.removesuffix("/")

    @field_validator("warning", "critical")
    @classmethod
    def _unset_sentinel(cls, value: None | int) -> None | int:
        return None if value == UNSET_THRESHOLD else value

    def http_proxy_config(self) -> HTTPProxyConfig:
        return http_proxy_config_from_options(self.proxy, self.noproxy)

    def resolve_secret(self) -> None | str:
        if self.password is not None:
            return self.password
        if self.password_reference is not None:
            pw_id, pw_file = password_store.parse_reference(self.password_reference)
            return password_store.lookup(pw_file, pw_id)
        return None

    def basic_auth(self) -> None | tuple[str, str]:
        """Credentials are only sent if both user name and password are given"""
        if self.user and (secret := self.resolve_secret()):
            return self.user, secret
        return None
