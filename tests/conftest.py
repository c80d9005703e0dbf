"""Shared fixtures: in-memory storage slot, fake sensor and geocoder."""
from datetime import datetime, timedelta

import pytest

from naturalist_memo.connectivity import StaticConnectivityGate
from naturalist_memo.memo_record import ADDRESS_FAILED
from naturalist_memo.record_lifecycle import RecordLifecycle
from naturalist_memo.record_store import RecordStore


class MemorySlot:
    def __init__(self, data=None):
        self.data = dict(data or {})
        self.writes = 0

    def get_value(self, key):
        return self.data.get(key)

    def set_value(self, key, text):
        self.writes += 1
        self.data[key] = text

    def remove(self, key):
        self.data.pop(key, None)


class FakeSensor:
    def __init__(self, pos=(35.681, 139.767)):
        self.pos = pos
        self.calls = 0

    def current_position(self):
        self.calls += 1
        if isinstance(self.pos, Exception):
            raise self.pos
        return self.pos


class StubGeocoder:
    def __init__(self, address='東京都千代田区丸の内一丁目'):
        self.address = address
        self.calls = []

    def reverse(self, lat, lng):
        raise NotImplementedError

    def resolve(self, lat, lng):
        self.calls.append((lat, lng))
        return self.address


class StepClock:
    def __init__(self, start=datetime(2024, 3, 5, 9, 7)):
        self.now = start

    def __call__(self):
        cur = self.now
        self.now = self.now + timedelta(minutes=1)
        return cur


@pytest.fixture
def slot():
    return MemorySlot()


@pytest.fixture
def store(slot):
    return RecordStore(slot)


@pytest.fixture
def gate():
    return StaticConnectivityGate(online=True)


@pytest.fixture
def sensor():
    return FakeSensor()


@pytest.fixture
def geocoder():
    return StubGeocoder()


@pytest.fixture
def lifecycle(store, gate, geocoder, sensor):
    return RecordLifecycle(store, gate, geocoder, sensor, clock=StepClock())


@pytest.fixture
def failing_geocoder():
    return StubGeocoder(address=ADDRESS_FAILED)


@pytest.fixture
def qsettings(tmp_path):
    from PyQt5.QtCore import QSettings
    return QSettings(str(tmp_path / 'settings.ini'), QSettings.IniFormat)
