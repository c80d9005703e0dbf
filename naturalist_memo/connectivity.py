# -*- coding: utf-8 -*-
"""Online/offline gate for address lookups.

The gate only decides whether a lookup is attempted. A True answer may be
stale by the time the HTTP request runs; the geocoder degrades to the
failure placeholder in that case.
"""
from __future__ import annotations
from typing import Protocol

from PyQt5.QtNetwork import QNetworkConfigurationManager


class IConnectivityGate(Protocol):
    def is_online(self) -> bool: ...


class QtConnectivityGate(IConnectivityGate):
    """Asks Qt for the current reachability on every call (no caching)."""

    def __init__(self):
        self._manager = QNetworkConfigurationManager()

    def is_online(self) -> bool:
        return bool(self._manager.isOnline())


class StaticConnectivityGate(IConnectivityGate):
    def __init__(self, online: bool = True):
        self.online = online

    def is_online(self) -> bool:
        return self.online
