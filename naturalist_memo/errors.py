# -*- coding: utf-8 -*-
"""Exceptions surfaced to callers.

Sensor faults and resolution faults are not raised; they degrade to
placeholder addresses (see ``location.SensorFailed`` and
``geocoding_base.ReverseGeocodeResult``).
"""
from __future__ import annotations


class MemoError(Exception):
    """Base class for errors raised by naturalist_memo."""


class CorruptDataError(MemoError):
    """Stored history payload cannot be parsed as a list of records."""


class OfflineError(MemoError):
    """Connectivity gate reported offline for an explicit refresh."""

    def __init__(self, message: str = 'オフラインです。更新できません。'):
        super().__init__(message)


NetworkUnreachable = OfflineError


class EmptyCollectionError(MemoError):
    """Export requested while there are no records."""

    def __init__(self, message: str = 'データがありません。'):
        super().__init__(message)
