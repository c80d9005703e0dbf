# -*- coding: utf-8 -*-
"""Default wiring: QSettings storage, Qt connectivity and positioning, Nominatim."""
from __future__ import annotations
from typing import Optional

from .connectivity import QtConnectivityGate
from .location import QtPositionSensor
from .log_utils import get_logger
from .nominatim_geocoder import NominatimReverseGeocoder
from .record_lifecycle import RecordLifecycle
from .record_store import RecordStore
from .settings_store import SettingsStore


def build_default_lifecycle(settings: Optional[SettingsStore] = None,
                            log_dir: Optional[str] = None) -> RecordLifecycle:
    if log_dir:
        get_logger(log_dir=log_dir)
    settings = settings or SettingsStore()
    return RecordLifecycle(
        store=RecordStore(settings, key=settings.get_history_key()),
        gate=QtConnectivityGate(),
        geocoder=NominatimReverseGeocoder(store=settings),
        sensor=QtPositionSensor(),
    )
