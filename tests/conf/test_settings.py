from pathlib import Path

import pytest
from pydantic import ValidationError

from bytepack.conf import DEFAULT_SETTINGS_FILEPATH, UNITTESTS_SETTINGS_FILEPATH, get_settings
from bytepack.conf.get_settings import get_global_settings
from bytepack.conf.settings import PackSettings


def test_default_yaml() -> None:
    settings = PackSettings.from_yaml(filepath=DEFAULT_SETTINGS_FILEPATH)
    assert settings == PackSettings()
    assert settings.MAX_BUFFER_SIZE is None
    assert settings.ALLOW_TRAILING_DATA is True
    assert settings.BENCH_DURATION_SECONDS == 1.0


def test_unittests_yaml() -> None:
    settings = PackSettings.from_yaml(filepath=UNITTESTS_SETTINGS_FILEPATH)
    assert settings.MAX_BUFFER_SIZE == 65536
    assert settings.BENCH_DURATION_SECONDS == 0.01


def test_empty_yaml(tmp_path: Path) -> None:
    filepath = tmp_path / 'empty.yml'
    filepath.write_text('')
    assert PackSettings.from_yaml(filepath=filepath) == PackSettings()


def test_partial_yaml(tmp_path: Path) -> None:
    filepath = tmp_path / 'partial.yml'
    filepath.write_text('MAX_BUFFER_SIZE: 1024\n')
    settings = PackSettings.from_yaml(filepath=filepath)
    assert settings.MAX_BUFFER_SIZE == 1024
    assert settings.ALLOW_TRAILING_DATA is True


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        PackSettings.from_yaml(filepath=tmp_path / 'missing.yml')


def test_not_a_mapping(tmp_path: Path) -> None:
    filepath = tmp_path / 'list.yml'
    filepath.write_text('- 1\n- 2\n')
    with pytest.raises(ValueError):
        PackSettings.from_yaml(filepath=filepath)


@pytest.mark.parametrize('content', [
    'MAX_BUFFER_SIZE: 0\n',
    'MAX_BUFFER_SIZE: -10\n',
    'BENCH_DURATION_SECONDS: 0\n',
    'ALLOW_TRAILING_DATA: maybe\n',
    'UNKNOWN_SETTING: 1\n',
])
def test_invalid_yaml(tmp_path: Path, content: str) -> None:
    filepath = tmp_path / 'invalid.yml'
    filepath.write_text(content)
    with pytest.raises(ValidationError):
        PackSettings.from_yaml(filepath=filepath)


def test_settings_are_frozen() -> None:
    settings = PackSettings()
    with pytest.raises(ValidationError):
        settings.MAX_BUFFER_SIZE = 10  # type: ignore[misc]


def test_global_settings_from_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    filepath = tmp_path / 'custom.yml'
    filepath.write_text('MAX_BUFFER_SIZE: 100\n')
    monkeypatch.setattr(get_settings, '_settings_singleton', None)
    monkeypatch.setenv('BYTEPACK_CONFIG_YAML', str(filepath))

    settings = get_global_settings()
    assert settings.MAX_BUFFER_SIZE == 100
    assert get_global_settings() is settings


def test_global_settings_default_file(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(get_settings, '_settings_singleton', None)
    monkeypatch.delenv('BYTEPACK_CONFIG_YAML', raising=False)
    assert get_global_settings() == PackSettings()


def test_global_settings_cannot_change_source(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setattr(get_settings, '_settings_singleton', None)
    monkeypatch.setenv('BYTEPACK_CONFIG_YAML', UNITTESTS_SETTINGS_FILEPATH)
    get_global_settings()

    filepath = tmp_path / 'other.yml'
    filepath.write_text('')
    monkeypatch.setenv('BYTEPACK_CONFIG_YAML', str(filepath))
    with pytest.raises(Exception, match='different file'):
        get_global_settings()
