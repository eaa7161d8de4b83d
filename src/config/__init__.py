"""Configuration package.

Note: Do not import settings at package import time; import from
``src.config.settings`` directly where needed so environment overrides made by
tests apply on reload.
"""

__all__: list[str] = []
