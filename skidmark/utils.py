#!/usr/bin/env python3
"""
General utilities for Skidmark.
"""
from typing import Optional


def try_float(val) -> Optional[float]:
    if isinstance(val, bool):
        return None
    try:
        return float(val)
    except (TypeError, ValueError):
        return None
