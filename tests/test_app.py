"""
Application, display and entry point tests.

Run against SDL's dummy video driver (see conftest).
"""
import pygame
import pytest

from rotating_square import __main__ as entry
from rotating_square.config import Config
from rotating_square.core.animation import AnimationDriver
from rotating_square.core.app import Application
from rotating_square.core.display import DisplayError


@pytest.fixture
def app():
    application = Application(Config(native_width=200, native_height=100))
    yield application
    application.cleanup()


def post_key(char):
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=ord(char), unicode=char, mod=0))


class TestApplication:
    def test_viewport_read_from_surface(self, app):
        assert app.session.viewport.size == (200, 100)
        assert app.session.world_window == 5.0

    def test_key_press_reaches_next_frame(self, app):
        app.running = True
        app.animation.start(app.display.get_surface())
        post_key("w")
        app.run_frame()
        assert app.session.pivot_index == 3
        assert app.animation.tick_count == 2

    def test_quit_stops_loop_without_ticking(self, app):
        app.running = True
        app.animation.start(app.display.get_surface())
        pygame.event.post(pygame.event.Event(pygame.QUIT))
        app.run_frame()
        assert app.running is False
        assert app.animation.tick_count == 1

    def test_run_until_quit(self, app):
        pygame.event.post(pygame.event.Event(pygame.QUIT))
        app.run()
        assert not app.animation.running
        assert app.frame_count >= 1

    def test_fps_overlay(self):
        application = Application(Config(native_width=120, native_height=120, show_fps=True))
        try:
            application.running = True
            application.animation.start(application.display.get_surface())
            application.run_frame()
            assert application.frame_count == 1
        finally:
            application.cleanup()

    def test_scaled_display(self):
        application = Application(Config(native_width=100, native_height=50, scale_factor=2))
        try:
            assert application.display.get_surface().get_size() == (100, 50)
            assert application.display.window.get_size() == (200, 100)
            assert application.session.viewport.size == (100, 50)
            application.animation.start(application.display.get_surface())
            application.display.present()
        finally:
            application.cleanup()


class TestDisplayFailure:
    def test_display_error_prevents_animation(self, monkeypatch):
        def fail(*args, **kwargs):
            raise pygame.error("no video device")

        started = []
        monkeypatch.setattr(pygame.display, "set_mode", fail)
        monkeypatch.setattr(AnimationDriver, "start", lambda self, surface: started.append(surface))

        with pytest.raises(DisplayError):
            Application(Config())
        assert started == []

    def test_main_returns_error_status(self, monkeypatch):
        def fail(config):
            raise DisplayError("no display")

        monkeypatch.setattr(entry, "setup_logging", lambda verbose=False: None)
        monkeypatch.setattr(entry, "Application", fail)
        assert entry.main([]) == 1


class TestEntryPoint:
    def test_defaults(self):
        args = entry.parse_args([])
        config = entry.build_config(args)
        assert config.native_size == (400, 400)
        assert config.scale_factor == 1
        assert config.target_fps == 60
        assert not config.fullscreen
        assert not config.show_fps

    def test_options(self):
        args = entry.parse_args(["--width", "320", "--height", "200", "--scale", "2", "--fps", "30", "--show-fps"])
        config = entry.build_config(args)
        assert config.native_size == (320, 200)
        assert config.window_size == (640, 400)
        assert config.target_fps == 30
        assert config.show_fps

    def test_dev_flag_enables_dev_mode(self):
        config = entry.build_config(entry.parse_args(["--dev"]))
        assert config.dev_mode
        assert config.show_fps
        assert not entry.build_config(entry.parse_args([])).dev_mode

    @pytest.mark.parametrize("argv,verbose", [
        ([], False),
        (["--dev"], True),
        (["-v"], True),
    ])
    def test_dev_flag_selects_debug_logging(self, monkeypatch, argv, verbose):
        levels = []

        def fail(config):
            raise DisplayError("no display")

        monkeypatch.setattr(entry, "setup_logging", lambda verbose=False: levels.append(verbose))
        monkeypatch.setattr(entry, "Application", fail)
        entry.main(argv)
        assert levels == [verbose]

    def test_invalid_size_exit_status(self, monkeypatch):
        monkeypatch.setattr(entry, "setup_logging", lambda verbose=False: None)
        assert entry.main(["--width", "0"]) == 2

    def test_rejects_unknown_scale(self):
        with pytest.raises(SystemExit):
            entry.parse_args(["--scale", "5"])
