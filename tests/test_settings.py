"""
设置与持久化测试
Settings and Persistence Tests
"""
import pytest
import yaml

from guess_phrase.device.implementations import YamlSettingsStore
from guess_phrase.game import GameSettings
from guess_phrase.game.game_logic import clamp_timer_seconds
from guess_phrase.utils.config_loader import ConfigLoader
from guess_phrase.utils.exceptions import SettingsException


@pytest.mark.parametrize("raw, expected", [
    (60, 60),
    (5, 10),
    (601, 600),
    ("90", 90),
    ("abc", 60),
    (None, 60),
    (True, 60),
    (45.7, 45),
])
def test_clamp_timer_seconds(raw, expected):
    assert clamp_timer_seconds(raw) == expected


def test_defaults():
    settings = GameSettings()
    assert settings.to_dict() == {
        'timer_seconds': 60,
        'shuffle_on_start': True,
        'loop_when_finished': False,
        'tilt_enabled': False,
        'feedback_delay': 0.42,
    }


def test_constructor_clamps_timer():
    assert GameSettings(timer_seconds=3).timer_seconds == 10


def test_from_dict_ignores_wrong_types():
    settings = GameSettings.from_dict({
        'timer_seconds': 1000,
        'shuffle_on_start': 'yes',
        'loop_when_finished': True,
        'feedback_delay': 'soon',
        'unknown': 1,
    })
    assert settings.timer_seconds == 600
    assert settings.shuffle_on_start is True
    assert settings.loop_when_finished is True
    assert settings.feedback_delay == 0.42


def test_from_dict_layers_on_base():
    base = GameSettings(timer_seconds=90, tilt_enabled=True)
    settings = GameSettings.from_dict({'loop_when_finished': True}, base=base)
    assert settings.timer_seconds == 90
    assert settings.tilt_enabled is True
    assert settings.loop_when_finished is True


def test_yaml_store_merges_partial_saves(tmp_path):
    path = tmp_path / "nested" / "settings.yaml"
    store = YamlSettingsStore(path=str(path))
    assert store.load() == {}

    assert store.save(GameSettings(timer_seconds=120).to_dict())
    assert store.save({'tilt_enabled': True})

    loaded = store.load()
    assert loaded['timer_seconds'] == 120
    assert loaded['tilt_enabled'] is True
    assert GameSettings.from_dict(loaded).timer_seconds == 120


def test_yaml_store_broken_file_reads_empty(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")
    assert YamlSettingsStore(path=str(path)).load() == {}


def test_yaml_store_write_failure_raises(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    store = YamlSettingsStore(path=str(blocker / "settings.yaml"))
    with pytest.raises(SettingsException):
        store.save({'tilt_enabled': True})


def test_config_loader_round_trip(tmp_path):
    path = tmp_path / "config.yaml"
    config = {'game': {'timer_seconds': 30}, 'logging': {'level': 'DEBUG'}}
    assert ConfigLoader.save_config(config, str(path))
    loaded = ConfigLoader.load_config(str(path))
    assert ConfigLoader.get_game_config(loaded) == {'timer_seconds': 30}
    assert ConfigLoader.get_logging_config(loaded) == {'level': 'DEBUG'}
    assert ConfigLoader.get_device_config(loaded, 'presenter') is None


def test_config_loader_errors(tmp_path):
    with pytest.raises(FileNotFoundError):
        ConfigLoader.load_config(str(tmp_path / "missing.yaml"))

    bad = tmp_path / "bad.yaml"
    bad.write_text("a: [unclosed\n", encoding="utf-8")
    with pytest.raises(yaml.YAMLError):
        ConfigLoader.load_config(str(bad))

    empty = tmp_path / "empty.yaml"
    empty.write_text("", encoding="utf-8")
    assert ConfigLoader.load_config(str(empty)) == {}
