"""
Boss Overlay: boss progress tracker for game saves

Watches a save file, reconciles the enemies it records against a curated
boss catalog and manual corrections, and reports newly defeated bosses.
"""

__version__ = "0.1.0"
__author__ = "Boss Overlay Contributors"

# Core service imports
from .catalog import CatalogService
from .tracking import SaveWatcher, TrackerSession
from .utils.logging_config import setup_logging

# Main data models
from .catalog.models import CatalogEntry
from .save.models import Boss

__all__ = [
    # Services
    'CatalogService',
    'SaveWatcher',
    'TrackerSession',

    # Logging
    'setup_logging',

    # Data models
    'CatalogEntry',
    'Boss',
]
