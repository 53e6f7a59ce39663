#!/usr/bin/env python3
"""
Skidmark application entry point and frame loop.

What this module does
- Parses the command line, loads a vehicle preset and the car sprite.
- Runs one single-threaded Pygame loop: input events feed the InputState,
  then each frame runs one Motion Model tick and redraws.
- The car layer is cleared every frame; tire marks accumulate on a layer that
  is never cleared (press C to wipe it).

Controls
- W / Up: accelerate, S / Down: reverse, A / Left and D / Right: steer.
- C: clear tire marks, Esc: quit.

Running
1) Install dependencies: `pip install pygame`
2) Run this module: `python skidmark_sim.py [--preset drift] [--image car.png]`
"""

import argparse
import logging
import sys
from typing import Optional, Tuple

import pygame

from skidmark.assets import AssetLoadError, load_sprite
from skidmark.constants import (
    BACKGROUND_COLOR,
    FPS,
    START_POSITION,
    VIEW_HEIGHT,
    VIEW_WIDTH,
    WINDOW_TITLE,
)
from skidmark.data_models import Body, ConfigurationError, StepResult, VehicleConfig
from skidmark.input_state import InputState
from skidmark.physics import MotionModel
from skidmark.presets_loader import list_presets, load_preset
from skidmark.render import TrailRenderer
from skidmark.vector_utils import Vec2

log = logging.getLogger("skidmark")


# ============================================================
# Frame Driver
# ============================================================

class FrameDriver:
    """
    Pygame loop: one Motion Model tick per frame at a fixed rate.
    Owns the controlled body between ticks and swaps in each new state.
    """
    def __init__(self, screen: pygame.Surface, body: Body, sprite: pygame.Surface,
                 model: MotionModel, inputs: Optional[InputState] = None, fps: int = FPS):
        self.screen = screen
        self.body = body
        self.sprite = sprite
        self.model = model
        self.inputs = inputs or InputState()
        self.fps = fps
        self.renderer = TrailRenderer(screen.get_size())
        self.clock = None
        self.running = True
        self.ticks = 0

    @property
    def bounds(self) -> Tuple[int, int]:
        return self.screen.get_size()

    def tick(self) -> StepResult:
        """Advance the body one tick and redraw both layers onto the screen."""
        self.renderer.clear_body_layer()
        result = self.model.step(self.body, self.inputs, self.bounds)
        self.body = result.body
        self.renderer.draw_body(self.body, self.sprite)
        for point in result.trail_points:
            self.renderer.stamp_trail(point)
        self.renderer.compose(self.screen, BACKGROUND_COLOR)
        self.ticks += 1
        return result

    def handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.running = False

            elif event.type == pygame.KEYDOWN and event.key == pygame.K_c:
                self.renderer.clear_trails()

            elif event.type == pygame.WINDOWFOCUSLOST:
                # key-up events are lost while unfocused
                self.inputs.clear()

            else:
                self.inputs.handle_event(event)

    def run(self):
        self.clock = pygame.time.Clock()
        log.info("frame loop started at %d fps", self.fps)
        while self.running:
            self.handle_events()
            if not self.running:
                break
            self.tick()
            pygame.display.flip()
            self.clock.tick(self.fps)
        log.info("frame loop stopped after %d ticks", self.ticks)


# ============================================================
# Application Entry
# ============================================================

def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Drive a car around and leave tire marks")
    parser.add_argument("--preset", type=str, default="default",
                        help="vehicle preset name from skidmark/presets")
    parser.add_argument("--image", type=str, default=None,
                        help="car sprite image, front facing up (built-in sprite if omitted)")
    parser.add_argument("--width", type=int, default=VIEW_WIDTH)
    parser.add_argument("--height", type=int, default=VIEW_HEIGHT)
    parser.add_argument("--fps", type=int, default=FPS)
    parser.add_argument("--list-presets", action="store_true",
                        help="print available presets and exit")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


def resolve_config(preset: str) -> VehicleConfig:
    loaded = load_preset(preset)
    if loaded is None:
        log.warning("preset %r not found, using built-in defaults", preset)
        return VehicleConfig()
    config, display_name = loaded
    log.info("using preset %s (max speed %.2f px/tick)", display_name, config.max_speed)
    return config


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.list_presets:
        for file_name, display in list_presets():
            print(f"{file_name}\t{display}")
        return 0

    try:
        config = resolve_config(args.preset)
    except ConfigurationError as exc:
        log.error("invalid preset %s: %s", args.preset, exc)
        return 2

    pygame.init()
    try:
        pygame.display.set_caption(WINDOW_TITLE)
        screen = pygame.display.set_mode((args.width, args.height))

        # No ticking until the sprite is ready
        try:
            sprite = load_sprite(args.image)
        except AssetLoadError as exc:
            log.error("%s", exc)
            return 1

        body = Body.from_image_size(Vec2(*START_POSITION), sprite.get_size(), config)
        log.debug("body %.1fx%.1f at %s", body.width, body.height, START_POSITION)

        driver = FrameDriver(screen, body, sprite, MotionModel(config), fps=args.fps)
        driver.run()
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
