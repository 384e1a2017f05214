"""Obsolete client target platform detection."""

from .target import TargetPlatform, detect_target_platform

__all__ = ["TargetPlatform", "detect_target_platform"]
