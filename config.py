# Purpose: This file defines configuration variables for the LPYS Shell application.
# It centralizes the shell labels and sidebar styling so they can be adjusted
# without modifying the application code. Loaded via app.config.from_object("config").

"""
Configuration settings for the Flask application.
"""

from typing import List

# Name shown in the drawer header (settings.yaml app_config.app_name overrides it)
APP_NAME = "LPYS"

# Accessible label for the drawer toggle button in the navbar
MENU_TOGGLE_LABEL = "Menu toggle"

# Icon used by the template when a node has none
DEFAULT_MENU_ICON = None

# CSS classes applied to the side navigation container
SIDENAV_CLASSES: List[str] = ["side-nav", "mx-m"]
