import pytest

pytest.importorskip("tkinter")

from wearface.core.config_service import config
from wearface.core.engine import WatchFaceEngine
from wearface.main import Application


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    path = tmp_path / 'face.yaml'
    path.write_text("timezone: UTC\n")
    monkeypatch.setenv('WEARFACE_CONFIG', str(path))
    monkeypatch.delenv('TIMEZONE', raising=False)
    yield path
    config.reload()


@pytest.fixture
def app(config_file, host, renderer, clock):
    application = Application()
    application._engine = WatchFaceEngine(host, renderer, clock)
    return application


def test_reload_delivers_timezone_change(app, config_file, host):
    assert app._engine.on_draw().time_text == '22:13'

    config_file.write_text("timezone: Asia/Tokyo\n")
    app.reload_config()

    assert host.invalidations == 1
    assert app._engine.on_draw().time_text == '7:13'


def test_reload_with_unknown_timezone_keeps_current(app, config_file, host):
    config_file.write_text("timezone: Not/AZone\n")
    app.reload_config()

    assert host.invalidations == 0
    assert app._engine.on_draw().time_text == '22:13'


def test_reload_before_initialize(config_file):
    application = Application()
    config_file.write_text("timezone: Asia/Tokyo\n")
    application.reload_config()

    assert config.get('timezone') == 'Asia/Tokyo'
