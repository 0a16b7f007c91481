import pytest

from wearface.core.config_service import ConfigService, config


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    path = tmp_path / 'face.yaml'
    monkeypatch.setenv('WEARFACE_CONFIG', str(path))
    for name in ('TIMEZONE', 'DISPLAY_WIDTH', 'DISPLAY_HEIGHT', 'DISPLAY_SHAPE',
                 'DISPLAY_FULLSCREEN', 'FACE_SHOW_SECONDS', 'FACE_AMBIENT_TIMEOUT', 'LOG_LEVEL'):
        monkeypatch.delenv(name, raising=False)
    return path


def test_singleton():
    assert ConfigService() is config


def test_file_values_merge_over_defaults(config_file):
    config_file.write_text("display:\n  shape: square\nface:\n  show_seconds: true\n")
    config.reload()

    assert config.get('display.shape') == 'square'
    assert config.get('display.width') == 320
    assert config.get('face.show_seconds') is True
    assert config.get('face.interactive_update_rate_ms') == 1000


def test_env_overrides_file(config_file, monkeypatch):
    config_file.write_text("timezone: Europe/Paris\ndisplay:\n  width: 400\n")
    monkeypatch.setenv('TIMEZONE', 'Asia/Tokyo')
    monkeypatch.setenv('DISPLAY_WIDTH', '280')
    monkeypatch.setenv('DISPLAY_SHAPE', 'Square')
    monkeypatch.setenv('FACE_SHOW_SECONDS', 'yes')
    monkeypatch.setenv('LOG_LEVEL', 'debug')
    config.reload()

    assert config.get('timezone') == 'Asia/Tokyo'
    assert config.get('display.width') == 280
    assert config.get('display.shape') == 'square'
    assert config.get('face.show_seconds') is True
    assert config.get('logging.level') == 'DEBUG'


def test_bad_env_integer_is_ignored(config_file, monkeypatch):
    config_file.write_text("display:\n  height: 300\n")
    monkeypatch.setenv('DISPLAY_HEIGHT', 'tall')
    config.reload()

    assert config.get('display.height') == 300


def test_malformed_file_falls_through(config_file):
    config_file.write_text("display: [unclosed\n")
    config.reload()

    # Packaged defaults are used instead
    assert config.get('display.shape') == 'round'


def test_get_defaults(config_file):
    config_file.write_text("")
    config.reload()

    assert config.get('missing.key', 'fallback') == 'fallback'
    assert config.get('weather.seed') is None
