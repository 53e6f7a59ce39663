#!/usr/bin/env python3
"""
Shared constants for Skidmark (pixels and ticks unless stated otherwise).

Keeping constants in one place helps ensure values are consistent across the
codebase and makes tuning easier. Presets in skidmark/presets override the
vehicle tuning values.
"""

# Vehicle tuning
ACCELERATION = 0.15  # px/tick^2 added while a throttle key is held
FRICTION = 0.96  # fraction of velocity kept each tick
AGILITY = 0.06  # rad/tick at full speed
BODY_WIDTH = 25  # px; height follows the sprite's aspect ratio
STOP_SPEED = 0.1  # px/tick; slower than this snaps to rest
TRAIL_SPEED_THRESHOLD = 0.0  # px/tick; marks need speed strictly above this
TRAIL_CORNER_INSET = 0.0  # px; pulls the rear-left mark inwards

START_POSITION = (400.0, 400.0)

# Frame driver
FPS = 60

# Rendering (viewport)
VIEW_WIDTH = 1100
VIEW_HEIGHT = 800
WINDOW_TITLE = "Skidmark"
BACKGROUND_COLOR = (214, 214, 206)
CAR_BODY_COLOR = (200, 30, 40)
CAR_GLASS_COLOR = (40, 50, 70)
CAR_WHEEL_COLOR = (20, 20, 20)

# Trail marks
TRAIL_MARK_SIZE = 3  # px square
TRAIL_MARK_COLOR = (0, 0, 0)
TRAIL_MARK_ALPHA = 26  # ~10% opacity

# Safety: avoid drawing outside reasonable integer pixel ranges
SAFE_COORD_LIMIT = 30000
