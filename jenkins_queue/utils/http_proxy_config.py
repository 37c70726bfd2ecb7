#!/usr/bin/env python3
# Copyright (C) 2019 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.


class EnvironmentProxyConfig:
    def to_requests_proxies(self) -> None:
        return None

    def __eq__(self, o: object) -> bool:
        return isinstance(o, EnvironmentProxyConfig)

    def __repr__(self) -> str:
        return "EnvironmentProxyConfig()"


class NoProxyConfig:
    def to_requests_proxies(self) -> dict[str, str]:
        # Empty entries win over the proxies requests collects from the environment
        return {
            "http": "",
            "https": "",
        }

    def __eq__(self, o: object) -> bool:
        return isinstance(o, NoProxyConfig)

    def __repr__(self) -> str:
        return "NoProxyConfig()"


class ExplicitProxyConfig:
    def __init__(self, url: str) -> None:
        self._url = url

    def to_requests_proxies(self) -> dict[str, str]:
        return {
            "http": self._url,
            "https": self._url,
        }

    def __eq__(self, o: object) -> bool:
        return isinstance(o, ExplicitProxyConfig) and self._url == o._url

    def __repr__(self) -> str:
        return f"ExplicitProxyConfig({self._url!r})"


HTTPProxyConfig = EnvironmentProxyConfig | NoProxyConfig | ExplicitProxyConfig


def http_proxy_config_from_options(proxy: str | None, noproxy: bool) -> HTTPProxyConfig:
    """Returns a proxy config object to be used for HTTP requests

    An explicitly configured proxy always wins. Without one, the proxy from the
    environment (HTTP_PROXY, HTTPS_PROXY, ...) is used unless it is disabled.

    >>> http_proxy_config_from_options("http://proxy:3128", noproxy=True)
    ExplicitProxyConfig('http://proxy:3128')
    >>> http_proxy_config_from_options(None, noproxy=True)
    NoProxyConfig()
    >>> http_proxy_config_from_options(None, noproxy=False)
    EnvironmentProxyConfig()
    """
    if proxy:
        return ExplicitProxyConfig(proxy)
    if noproxy:
        return NoProxyConfig()
    return EnvironmentProxyConfig()
