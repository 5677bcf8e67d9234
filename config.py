#!/usr/bin/env python3
"""
🎨 ASCII Art Color - Configuration Module
=========================================
Copyright (c) 2025 PNGN-Tec LLC

Centralized Configuration System
=================================
Complete configuration for banner rendering including:
- Glyph height and printable character range
- Bundled banner directory and default banner
- Named color palette (name to RGB)
- Width cache sizing
- Logging level and debug switch

Configuration Overview
======================
This module provides all constants and utilities needed by the renderer,
the colorizer, the banner loader and the command-line front end, plus a
singleton manager that applies environment overrides.

Environment Overrides
=====================
- ASCII_ART_BANNER_DIR: Directory searched for bundled banner files
- ASCII_ART_DEFAULT_BANNER: Banner used when none is given
- ASCII_ART_CACHE_SIZE: Entries kept by the width cache
- ASCII_ART_LOG_LEVEL: Logging level name (DEBUG, INFO, WARNING, ...)
- ASCII_ART_DEBUG: Enables debug mode (true/1/yes)
"""

import logging
import os
from pathlib import Path
from typing import Tuple, Dict, Optional
from dataclasses import dataclass, field

# Configure logging
logger = logging.getLogger('ascii_config')

# Type alias for RGB colors
RGBColor = Tuple[int, int, int]

# ============================================================================
# GLYPH GEOMETRY
# ============================================================================

BANNER_HEIGHT = 8        # Rows per glyph

# Printable ASCII range, inclusive bounds
PRINTABLE_MIN = 32       # ' '
PRINTABLE_MAX = 126      # '~'

LINE_BREAK = "\n"

# ============================================================================
# BANNERS
# ============================================================================

BANNER_DIR = Path(__file__).parent / 'banners'
DEFAULT_BANNER = "standard"
BANNER_SUFFIX = ".txt"

# ============================================================================
# ANSI CODES
# ============================================================================

class ANSI:
    RESET = "\033[0m"


def rgb_to_ansi(rgb: RGBColor) -> str:
    """Convert RGB tuple to a 24-bit foreground ANSI color code"""
    r, g, b = rgb
    return f"\033[38;2;{r};{g};{b}m"


# ============================================================================
# NAMED COLOR PALETTE
# ============================================================================

NAMED_COLORS: Dict[str, RGBColor] = {
    'red': (255, 0, 0),
    'green': (0, 255, 0),
    'yellow': (255, 255, 0),
    'orange': (255, 165, 0),
    'blue': (0, 0, 255),
    'magenta': (255, 0, 255),
    'cyan': (0, 255, 255),
    'white': (255, 255, 255),
    'black': (0, 0, 0),
    'purple': (128, 0, 128),
    'pink': (255, 192, 203),
    'gray': (128, 128, 128),
}

# ============================================================================
# CACHE CONFIGURATION
# ============================================================================

@dataclass
class CacheConfig:
    """
    Cache configuration parameters.

    Attributes:
        default_size: Number of strings kept by the width cache
        enable_caching: Master switch for caching
    """

    default_size: int = 256
    enable_caching: bool = True

    def validate(self) -> bool:
        """Validate cache configuration"""
        if self.default_size <= 0:
            raise ValueError("Cache size must be positive")
        return True


# ============================================================================
# RENDERING CONFIGURATION
# ============================================================================

@dataclass
class RenderingConfig:
    """Rendering and banner configuration"""

    banner_height: int = BANNER_HEIGHT
    default_banner: str = DEFAULT_BANNER
    banner_dir: Path = BANNER_DIR

    def validate(self) -> bool:
        """Validate rendering configuration"""
        if self.banner_height <= 0:
            raise ValueError("Banner height must be positive")
        if not self.default_banner:
            raise ValueError("Default banner name must not be empty")
        return True


# ============================================================================
# MAIN CONFIGURATION CLASS
# ============================================================================

@dataclass
class AsciiArtConfig:
    """Complete system configuration"""

    # Sub-configurations
    cache: CacheConfig = field(default_factory=CacheConfig)
    rendering: RenderingConfig = field(default_factory=RenderingConfig)

    # System-wide settings
    debug_mode: bool = False
    log_level: str = "WARNING"

    def validate(self) -> bool:
        """Validate entire configuration"""
        self.cache.validate()
        self.rendering.validate()
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"Unknown log level: {self.log_level}")
        return True

    @property
    def effective_log_level(self) -> int:
        if self.debug_mode:
            return logging.DEBUG
        level = logging.getLevelName(self.log_level.upper())
        return level if isinstance(level, int) else logging.WARNING


# ============================================================================
# CONFIGURATION MANAGER (SINGLETON)
# ============================================================================

class ConfigurationManager:
    """
    Singleton configuration manager with runtime reloading.
    Environment variables are applied on creation and on reload().
    """

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        self._config = AsciiArtConfig()
        self._load_environment_overrides(self._config)

        self._initialized = True
        logger.debug("Configuration manager initialized")

    @staticmethod
    def _load_environment_overrides(config: AsciiArtConfig):
        """Load configuration overrides from environment variables"""

        # Banner settings
        if 'ASCII_ART_BANNER_DIR' in os.environ:
            config.rendering.banner_dir = Path(os.environ['ASCII_ART_BANNER_DIR'])
        if 'ASCII_ART_DEFAULT_BANNER' in os.environ:
            config.rendering.default_banner = os.environ['ASCII_ART_DEFAULT_BANNER']

        # Cache settings
        if 'ASCII_ART_CACHE_SIZE' in os.environ:
            config.cache.default_size = int(os.environ['ASCII_ART_CACHE_SIZE'])

        # Logging
        if 'ASCII_ART_LOG_LEVEL' in os.environ:
            config.log_level = os.environ['ASCII_ART_LOG_LEVEL']
        if 'ASCII_ART_DEBUG' in os.environ:
            config.debug_mode = os.environ['ASCII_ART_DEBUG'].lower() in ('true', '1', 'yes')

    @property
    def config(self) -> AsciiArtConfig:
        """Get current configuration"""
        return self._config

    def reload(self, new_config: Optional[AsciiArtConfig] = None) -> AsciiArtConfig:
        """
        Replace the active configuration.

        Args:
            new_config: Configuration to apply (fresh defaults plus
                environment overrides if None)

        Returns:
            The configuration now in effect

        Raises:
            ValueError: If the new configuration fails validation; the
                previous configuration stays active
        """
        if new_config is None:
            new_config = AsciiArtConfig()
            self._load_environment_overrides(new_config)

        new_config.validate()
        self._config = new_config
        logger.info("Configuration reloaded")
        return self._config


# ============================================================================
# PUBLIC API FUNCTIONS
# ============================================================================

_manager = ConfigurationManager()

def get_config() -> AsciiArtConfig:
    """Get current system configuration"""
    return _manager.config

def reload_config(new_config: Optional[AsciiArtConfig] = None) -> AsciiArtConfig:
    """Reload system configuration"""
    return _manager.reload(new_config)

def get_cache_config() -> CacheConfig:
    """Get cache configuration"""
    return _manager.config.cache

def get_rendering_config() -> RenderingConfig:
    """Get rendering configuration"""
    return _manager.config.rendering
