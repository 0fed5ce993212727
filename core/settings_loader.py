"""
Settings loader module for LPYS Shell.
Provides centralized access to the configuration settings in settings.yaml.
"""

import yaml
from pathlib import Path
import logging

logger = logging.getLogger(__name__)

# Always resolve relative to the project root (parent of core/)
_CORE_DIR = Path(__file__).resolve().parent
_PROJECT_ROOT = _CORE_DIR.parent
SETTINGS_FILE = _PROJECT_ROOT / 'settings.yaml'

# Cache for loaded settings to avoid repeated file reads
_settings_cache = None
_cache_mtime = None

def load_settings():
    """
    Load settings from the YAML file with caching.
    Returns the full settings dictionary.
    """
    global _settings_cache, _cache_mtime

    try:
        settings_path = Path(SETTINGS_FILE)

        # Reload when the file changed or nothing is cached yet
        if settings_path.exists():
            current_mtime = settings_path.stat().st_mtime
            if _settings_cache is None or _cache_mtime != current_mtime:
                with open(settings_path, 'r') as f:
                    _settings_cache = yaml.safe_load(f) or {}
                _cache_mtime = current_mtime
                logger.info("Loaded settings from settings.yaml")
            return _settings_cache
        else:
            logger.warning(f"Settings file {SETTINGS_FILE} not found, using defaults")
            return {}
    except Exception as e:
        logger.error(f"Error loading settings: {e}")
        return {}

def get_app_config():
    """Get application configuration settings."""
    settings = load_settings()
    app_config = settings.get('app_config') if isinstance(settings, dict) else None
    return app_config if isinstance(app_config, dict) else {}

def get_menu_settings():
    """Get the extra sidebar entries declared under menu_entries."""
    settings = load_settings()
    entries = settings.get('menu_entries') if isinstance(settings, dict) else None
    if entries is None:
        return []
    if not isinstance(entries, list):
        logger.warning("'menu_entries' in settings must be a list, ignoring it")
        return []
    return entries

def reload_settings():
    """Force reload of settings from disk."""
    global _settings_cache, _cache_mtime
    _settings_cache = None
    _cache_mtime = None
    logger.info("Settings cache cleared, will reload on next access")
