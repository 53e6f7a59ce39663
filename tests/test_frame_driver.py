"""Tests for the frame driver and application entry."""
import pygame
import pytest

from skidmark.assets import build_default_sprite
from skidmark.data_models import VehicleConfig
from skidmark.physics import MotionModel
from skidmark_sim import FrameDriver, main, parse_args, resolve_config


@pytest.fixture
def driver(body):
    screen = pygame.Surface((800, 600))
    return FrameDriver(screen, body, build_default_sprite(), MotionModel(VehicleConfig()))


class TestTick:
    """Tests for FrameDriver.tick."""

    def test_tick_swaps_in_new_body(self, driver):
        """Test a throttle tick moves the owned body."""
        driver.inputs.set_held("w")
        driver.tick()

        assert driver.body.position.y == pytest.approx(399.856)
        assert driver.ticks == 1

    def test_bounds_follow_screen(self, driver):
        """Test the world is the size of the screen."""
        assert driver.bounds == (800, 600)

    def test_trail_marks_stamped(self, driver):
        """Test turning at speed leaves marks on the trail layer."""
        driver.inputs.set_held("w")
        for _ in range(20):
            driver.tick()
        driver.inputs.set_held("d")
        result = driver.tick()

        assert len(result.trail_points) == 2
        p = result.trail_points[0]
        assert driver.renderer.trail_layer.get_at((int(p.x) + 1, int(p.y) + 1)).a > 0

    def test_idle_tick_draws_body(self, driver):
        """Test the car is drawn even when nothing moves."""
        result = driver.tick()

        assert result.trail_points == ()
        assert driver.renderer.body_layer.get_at((400, 400)).a > 0


class TestEvents:
    """Tests for FrameDriver.handle_events against the dummy display."""

    def test_quit(self, display, body):
        """Test closing the window stops the loop."""
        driver = FrameDriver(display, body, build_default_sprite(), MotionModel())
        pygame.event.post(pygame.event.Event(pygame.QUIT))
        driver.handle_events()

        assert not driver.running

    def test_keys_feed_input_state(self, display, body):
        """Test key presses reach the InputState."""
        driver = FrameDriver(display, body, build_default_sprite(), MotionModel())
        pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_w, mod=0, unicode="w", scancode=0))
        driver.handle_events()

        assert driver.inputs.is_any_held("w")

    def test_clear_key_wipes_trails(self, display, body):
        """Test C clears the tire marks."""
        driver = FrameDriver(display, body, build_default_sprite(), MotionModel())
        driver.renderer.stamp_trail(body.position)
        pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_c, mod=0, unicode="c", scancode=0))
        driver.handle_events()

        assert driver.renderer.trail_layer.get_at((400, 400)).a == 0

    def test_escape_quits(self, display, body):
        """Test Esc stops the loop."""
        driver = FrameDriver(display, body, build_default_sprite(), MotionModel())
        pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE, mod=0, unicode="\x1b", scancode=0))
        driver.handle_events()

        assert not driver.running

    def test_focus_loss_releases_keys(self, display, body):
        """Test losing window focus releases every held key."""
        driver = FrameDriver(display, body, build_default_sprite(), MotionModel())
        driver.inputs.set_held("w")
        driver.inputs.set_held("arrowleft")
        pygame.event.post(pygame.event.Event(pygame.WINDOWFOCUSLOST))
        driver.handle_events()

        assert not driver.inputs.is_any_held("w", "arrowleft")
        assert driver.running


class TestMain:
    """Tests for the command line entry."""

    def test_parse_defaults(self):
        """Test default arguments."""
        args = parse_args([])

        assert args.preset == "default"
        assert args.image is None
        assert args.fps == 60

    def test_unknown_preset_falls_back(self):
        """Test an unknown preset uses built-in tuning."""
        assert resolve_config("no-such-preset") == VehicleConfig()

    def test_list_presets(self, capsys):
        """Test listing presets exits cleanly."""
        assert main(["--list-presets"]) == 0
        assert "default.json" in capsys.readouterr().out

    def test_missing_image_never_starts(self, tmp_path):
        """Test a missing sprite exits with an error before ticking."""
        assert main(["--image", str(tmp_path / "missing.png")]) == 1
