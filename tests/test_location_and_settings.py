from conftest import FakeSensor
from naturalist_memo.connectivity import StaticConnectivityGate
from naturalist_memo.location import FixedPositionSensor, Located, SensorFailed, acquire_location
from naturalist_memo.settings_store import SettingsStore


def test_acquire_location_located():
    assert acquire_location(FixedPositionSensor(43.06, 141.35)) == Located(43.06, 141.35)


def test_acquire_location_tags_failure():
    res = acquire_location(FakeSensor(pos=RuntimeError('denied')))
    assert isinstance(res, SensorFailed)
    assert res.error == 'denied'


def test_acquire_location_failure_without_message():
    res = acquire_location(FakeSensor(pos=TimeoutError()))
    assert res == SensorFailed('TimeoutError')


def test_static_gate():
    gate = StaticConnectivityGate()
    assert gate.is_online()
    gate.online = False
    assert not gate.is_online()


def test_settings_defaults(qsettings):
    s = SettingsStore(qsettings)
    assert s.export_all() == {
        'history_key': 'historyData',
        'endpoint': 'https://nominatim.openstreetmap.org/reverse',
        'accept_language': 'ja',
        'user_agent': 'NaturalistMemo/0.1 (set your email)',
        'timeout': 15.0,
    }


def test_settings_empty_value_restores_default(qsettings):
    s = SettingsStore(qsettings)
    s.set_accept_language('en')
    assert s.get_accept_language() == 'en'
    s.set_accept_language('')
    assert s.get_accept_language() == 'ja'


def test_settings_raw_slot(qsettings):
    s = SettingsStore(qsettings)
    assert s.get_value('historyData') is None
    s.set_value('historyData', '[{"a": "b, c"}]')
    assert s.get_value('historyData') == '[{"a": "b, c"}]'
    s.remove('historyData')
    assert s.get_value('historyData') is None


def test_settings_timeout_bad_value_falls_back(qsettings):
    qsettings.setValue(SettingsStore.KEY_TIMEOUT, 'soon')
    assert SettingsStore(qsettings).get_timeout() == 15.0


def test_build_default_lifecycle_wires_settings(monkeypatch, qsettings):
    from naturalist_memo import app
    monkeypatch.setattr(app, 'QtConnectivityGate', StaticConnectivityGate)
    settings = SettingsStore(qsettings)
    settings.set_history_key('memoHistory')
    lc = app.build_default_lifecycle(settings)
    assert lc.store.key == 'memoHistory'
    assert lc.records == ()
    assert lc.geocoder.endpoint == 'https://nominatim.openstreetmap.org/reverse'
