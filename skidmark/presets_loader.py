#!/usr/bin/env python3
"""
Vehicle preset JSON loading utilities.

Presets live in skidmark/presets/*.json and tune the Motion Model without
touching code.

Schema
======
{
  "name": "Human-friendly preset name",
  "description": "Optional description",
  "vehicle": {
    "acceleration": 0.15,
    "friction": 0.96,
    "agility": 0.06,
    "width": 25,
    "stop_speed": 0.1,
    "trail_speed_threshold": 0.0,
    "trail_corner_inset": 0.0
  }
}

Every "vehicle" key is optional; missing or non-numeric values fall back to
the defaults in constants.py. Users can drop their own JSON files into the
folder and they'll be picked up by the loader.
"""
import json
import logging
import os
from dataclasses import fields
from typing import List, Optional, Tuple

from .data_models import VehicleConfig
from .utils import try_float

PRESETS_DIR = os.path.join(os.path.dirname(__file__), "presets")

log = logging.getLogger(__name__)


def _read_json(path: str) -> Optional[dict]:
  try:
    with open(path, "r", encoding="utf-8") as f:
      return json.load(f)
  except (OSError, ValueError) as exc:
    log.warning("could not read preset %s: %s", path, exc)
    return None


def _preset_path(name: str, presets_dir: str) -> str:
  file_name = name if name.lower().endswith(".json") else name + ".json"
  return os.path.join(presets_dir, file_name)


def vehicle_config_from_dict(data: dict) -> VehicleConfig:
  """
  Build a VehicleConfig from the "vehicle" mapping of a preset.

  Unknown keys are ignored. Values outside their valid range still raise
  ConfigurationError.
  """
  known = {f.name for f in fields(VehicleConfig)}
  kwargs = {}
  for key, raw in (data or {}).items():
    if key not in known:
      log.debug("ignoring unknown vehicle setting %r", key)
      continue
    value = try_float(raw)
    if value is None:
      log.warning("ignoring non-numeric vehicle setting %s=%r", key, raw)
      continue
    kwargs[key] = value
  return VehicleConfig(**kwargs)


def list_presets(presets_dir: str = PRESETS_DIR) -> List[Tuple[str, str]]:
  """Return list of (file_name, display_name) for available presets."""
  items: List[Tuple[str, str]] = []
  if not os.path.isdir(presets_dir):
    return items
  for fn in sorted(os.listdir(presets_dir)):
    if not fn.lower().endswith(".json"):
      continue
    data = _read_json(os.path.join(presets_dir, fn))
    if not isinstance(data, dict):
      data = {}
    display = data.get("name") or os.path.splitext(fn)[0]
    items.append((fn, display))
  return items


def load_preset(name: str, presets_dir: str = PRESETS_DIR) -> Optional[Tuple[VehicleConfig, str]]:
  """
  Load a preset by name (with or without the .json suffix).
  Returns (config, display_name), or None when the file is missing or unreadable.
  """
  path = _preset_path(name, presets_dir)
  if not os.path.isfile(path):
    return None
  data = _read_json(path)
  if not isinstance(data, dict):
    log.warning("preset %s is not a JSON object", path)
    return None
  vehicle = data.get("vehicle", {})
  if not isinstance(vehicle, dict):
    log.warning("preset %s has a non-object \"vehicle\" entry", path)
    return None
  display_name = data.get("name") or os.path.splitext(os.path.basename(path))[0]
  return vehicle_config_from_dict(vehicle), display_name
