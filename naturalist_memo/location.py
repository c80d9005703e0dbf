# -*- coding: utf-8 -*-
"""Location sensor boundary.

Sensors raise on failure; ``acquire_location`` turns that into a tagged
value so record creation can carry on with sentinel coordinates.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Protocol, Tuple, Union

from .log_utils import get_logger

logger = get_logger(__name__)


class ILocationSensor(Protocol):
    def current_position(self) -> Tuple[float, float]: ...


@dataclass(frozen=True)
class Located:
    lat: float
    lng: float


@dataclass(frozen=True)
class SensorFailed:
    error: str


LocationResult = Union[Located, SensorFailed]


def acquire_location(sensor: ILocationSensor) -> LocationResult:
    try:
        lat, lng = sensor.current_position()
        return Located(float(lat), float(lng))
    except Exception as e:
        logger.warning('Location sensor failed: %s', e)
        return SensorFailed(str(e) or type(e).__name__)


class FixedPositionSensor(ILocationSensor):
    def __init__(self, lat: float, lng: float):
        self.lat = lat
        self.lng = lng

    def current_position(self) -> Tuple[float, float]:
        return self.lat, self.lng


class QtPositionSensor(ILocationSensor):
    """One-shot high accuracy fix from the platform's default position source."""

    def __init__(self, timeout_ms: int = 30000):
        self.timeout_ms = timeout_ms

    def current_position(self) -> Tuple[float, float]:
        from PyQt5.QtCore import QCoreApplication, QEventLoop
        from PyQt5.QtPositioning import QGeoPositionInfoSource
        # イベントループ用に QCoreApplication が必要
        app = QCoreApplication.instance() or QCoreApplication([])
        source = QGeoPositionInfoSource.createDefaultSource(app)
        if source is None:
            raise RuntimeError('No position source available')
        source.setPreferredPositioningMethods(QGeoPositionInfoSource.SatellitePositioningMethods)
        loop = QEventLoop()
        outcome = {}

        def on_update(info):
            coord = info.coordinate()
            outcome['pos'] = (coord.latitude(), coord.longitude())
            loop.quit()

        def on_timeout():
            outcome['error'] = 'Position request timed out'
            loop.quit()

        def on_error(err):
            outcome['error'] = f'Position source error {int(err)}'
            loop.quit()

        source.positionUpdated.connect(on_update)
        source.updateTimeout.connect(on_timeout)
        source.error.connect(on_error)
        source.requestUpdate(self.timeout_ms)
        if not outcome:
            loop.exec_()
        source.deleteLater()
        if 'pos' not in outcome:
            raise RuntimeError(outcome.get('error', 'No position'))
        return outcome['pos']
