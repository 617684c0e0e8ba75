"""
Configuration package.
"""

from .app_config import APP_CONFIG, AppConfig, load_app_config

__all__ = ["APP_CONFIG", "AppConfig", "load_app_config"]
