"""
应用程序集成测试
Application Integration Tests
"""
import io
import logging

import yaml

from guess_phrase.app import Application, LaunchOptions
from guess_phrase.device.implementations import TraceOrientationSensor, parse_command
from guess_phrase.game import DeckEntry, EndReason, RoundMode
from guess_phrase.main import build_parser, options_from_args
from guess_phrase.utils.logger import set_global_level


def write_config(tmp_path, **overrides):
    config = {
        'game': {'timer_seconds': 30, 'shuffle_on_start': False},
        'presenter': {'type': 'console'},
        'motion_permission': {'type': 'static'},
        'settings_store': {'type': 'yaml', 'path': str(tmp_path / 'settings.yaml')},
    }
    config.update(overrides)
    path = tmp_path / 'config.yaml'
    path.write_text(yaml.safe_dump(config), encoding='utf-8')
    return str(path)


def make_app(tmp_path, stream="", options=None, **overrides):
    return Application(config_path=write_config(tmp_path, **overrides),
                       options=options or LaunchOptions(),
                       input_stream=io.StringIO(stream),
                       install_signal_handlers=False)


def test_initialize_uses_sample_phrases(tmp_path):
    app = make_app(tmp_path)
    assert app.initialize()
    assert len(app.entries) == 16
    assert app.settings.timer_seconds == 30
    assert app.orientation_sensor is None


def test_settings_precedence(tmp_path):
    (tmp_path / 'settings.yaml').write_text("timer_seconds: 120\nloop_when_finished: true\n",
                                            encoding='utf-8')
    app = make_app(tmp_path)
    app.initialize()
    assert app.settings.timer_seconds == 120
    assert app.settings.loop_when_finished is True

    app = make_app(tmp_path, options=LaunchOptions(timer_seconds=45, loop_when_finished=False))
    app.initialize()
    assert app.settings.timer_seconds == 45
    assert app.settings.loop_when_finished is False


def test_phrases_file_option(tmp_path):
    phrases = tmp_path / 'phrases.txt'
    phrases.write_text("One\nTwo :: second\n", encoding='utf-8')
    app = make_app(tmp_path, options=LaunchOptions(phrases_file=str(phrases)))
    assert app.initialize()
    assert [e.phrase for e in app.entries] == ["One", "Two"]


def test_missing_phrases_file_fails_initialize(tmp_path):
    app = make_app(tmp_path, options=LaunchOptions(phrases_file=str(tmp_path / 'nope.txt')))
    assert not app.initialize()


def test_missing_config_falls_back_to_console(tmp_path):
    app = Application(config_path=str(tmp_path / 'missing.yaml'),
                      input_stream=io.StringIO(""), install_signal_handlers=False)
    assert app.initialize()
    assert app.presenter is not None
    assert app.settings_store is None


def test_trace_option_replaces_sensor(tmp_path):
    trace = tmp_path / 'trace.csv'
    trace.write_text("time,beta\n0,0\n1,25\n", encoding='utf-8')
    app = make_app(tmp_path, options=LaunchOptions(trace_path=str(trace), tilt_enabled=True))
    assert app.initialize()
    assert isinstance(app.orientation_sensor, TraceOrientationSensor)
    assert app.orientation_sensor.is_connected()


def test_broken_trace_disables_sensor(tmp_path):
    app = make_app(tmp_path, options=LaunchOptions(trace_path=str(tmp_path / 'none.csv')))
    assert app.initialize()
    assert app.orientation_sensor is None


def test_full_session_from_keyboard(tmp_path):
    app = make_app(tmp_path, stream="g\np\ns 80 0 200\ne\nq\n")
    assert app.start()

    controller = app.round_controller
    assert controller.mode is RoundMode.FINISHED
    results = controller.results
    assert results.reason is EndReason.MANUAL
    assert (results.got, results.passed, results.shown) == (2, 1, 3)
    saved = yaml.safe_load((tmp_path / 'settings.yaml').read_text(encoding='utf-8'))
    assert saved['timer_seconds'] == 30


def test_dispatch_play_again_and_tilt(tmp_path):
    app = make_app(tmp_path)
    app.initialize()
    app.start_round()
    app.round_controller.end_round()

    app.dispatch(parse_command("a"))
    assert app.round_controller.mode is RoundMode.RUNNING
    app.dispatch(parse_command("t on"))
    assert app.round_controller.settings.tilt_enabled is True
    app.dispatch(parse_command("q"))
    assert app.should_exit


def test_command_line_options():
    args = build_parser().parse_args(
        ['--timer', '90', '--loop', '--no-shuffle', '--tilt', '--sample', '--trace', 't.csv',
         '--log-level', 'DEBUG'])
    options = options_from_args(args)
    assert options == LaunchOptions(phrases_file=None, use_sample=True, timer_seconds=90,
                                    loop_when_finished=True, shuffle_on_start=False,
                                    tilt_enabled=True, trace_path='t.csv',
                                    log_level='DEBUG')

    defaults = options_from_args(build_parser().parse_args([]))
    assert defaults.loop_when_finished is None
    assert defaults.shuffle_on_start is None


def test_command_line_log_level_wins_over_config(tmp_path):
    app = make_app(tmp_path, options=LaunchOptions(log_level='DEBUG'), logging={'level': 'INFO'})
    try:
        assert app.initialize()
        assert logging.getLogger("GTP.RoundController").level == logging.DEBUG
        assert logging.getLogger("GTP").level == logging.DEBUG
    finally:
        set_global_level('INFO')


def test_config_log_level_applies_without_flag(tmp_path):
    app = make_app(tmp_path, logging={'level': 'WARNING'})
    try:
        assert app.initialize()
        assert logging.getLogger("GTP.RoundController").level == logging.WARNING
    finally:
        set_global_level('INFO')


def test_phrase_list_restored_on_next_launch(tmp_path):
    phrases = tmp_path / 'phrases.txt'
    phrases.write_text("One\nTwo :: second\n", encoding='utf-8')
    first = make_app(tmp_path, options=LaunchOptions(phrases_file=str(phrases)))
    assert first.initialize()
    assert first.start_round()
    first.round_controller.end_round()
    phrases.unlink()

    second = make_app(tmp_path)
    assert second.initialize()
    assert second.entries == [DeckEntry("One"), DeckEntry("Two", "second")]

    sample = make_app(tmp_path, options=LaunchOptions(use_sample=True))
    assert sample.initialize()
    assert len(sample.entries) == 16


def test_saved_phrases_override_config_file(tmp_path):
    listed = tmp_path / 'listed.txt'
    listed.write_text("From config\n", encoding='utf-8')
    (tmp_path / 'settings.yaml').write_text("phrases: |-\n  Saved one\n  Saved two :: hint\n",
                                            encoding='utf-8')
    game = {'timer_seconds': 30, 'shuffle_on_start': False, 'phrases_file': str(listed)}
    app = make_app(tmp_path, game=game)
    assert app.initialize()
    assert [e.phrase for e in app.entries] == ["Saved one", "Saved two"]

    (tmp_path / 'settings.yaml').write_text("phrases: ''\n", encoding='utf-8')
    app = make_app(tmp_path, game=game)
    assert app.initialize()
    assert [e.phrase for e in app.entries] == ["From config"]
