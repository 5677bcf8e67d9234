#!/usr/bin/env python3
"""
🎨 ASCII Art Color - Visible Width Module
=========================================
Copyright (c) 2025 PNGN-Tec LLC

Visible Width Calculation
=========================
Measures how many terminal columns a rendered row occupies once its ANSI
color sequences are interpreted by the terminal. Colored rows are longer
as strings than they look on screen; this module reports what the user
actually sees.

Technical Implementation
========================
- ANSI escape sequences are stripped before measuring
- wcwidth provides per-character column widths
- Control characters count as zero columns
- LRU cache sized from the cache configuration

Module Interface
================
- strip_ansi(): Remove ANSI escape sequences
- WidthCalculator: Cached width measurement
- get_width(): Visible width of one string
- get_widths(): Visible widths of several strings
- clear_default_cache(): Clear the default calculator cache

Example Usage
=============
```python
from ascii_width import get_width

get_width("\\033[38;2;255;0;0mHi\\033[0m")  # Returns 2
```
"""

import logging
import re
from collections import OrderedDict
from typing import Optional, List, Dict, Union

from wcwidth import wcwidth, wcswidth

from config import get_cache_config

# Configure logging
logger = logging.getLogger('ascii_width')

ANSI_ESCAPE = re.compile(r'\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])')


def strip_ansi(text: str) -> str:
    """Remove ANSI escape sequences from text."""
    return ANSI_ESCAPE.sub('', text)


class WidthCalculator:
    """
    Text width calculator with caching.

    Attributes:
        stats: Dictionary containing calculation statistics

    Cache Behavior:
    - LRU eviction when size limit reached
    - Keyed by the raw (possibly colored) string
    """

    def __init__(self,
                 cache_size: Optional[int] = None,
                 enable_cache: Optional[bool] = None):
        """
        Initialize width calculator.

        Args:
            cache_size: Maximum number of cached strings (uses config if None)
            enable_cache: Whether to enable string caching (uses config if None)
        """
        cache_config = get_cache_config()
        if cache_size is None:
            cache_size = cache_config.default_size
        if enable_cache is None:
            enable_cache = cache_config.enable_caching

        self._cache: "OrderedDict[str, int]" = OrderedDict()
        self._cache_size = cache_size
        self._cache_enabled = enable_cache

        self.stats = {
            'cache_hits': 0,
            'cache_misses': 0,
            'calculations': 0,
            'control_chars_handled': 0,
            'cache_evictions': 0,
        }

        logger.debug(f"WidthCalculator initialized with cache_size={cache_size}, "
                     f"cache_enabled={enable_cache}")

    def get_width(self, text: str) -> int:
        """
        Get visible width of text in terminal columns.

        Args:
            text: Text to measure, may contain ANSI sequences

        Returns:
            Visible width in columns (0 for empty/control-only text)
        """
        if not text:
            return 0

        if self._cache_enabled and text in self._cache:
            self._cache.move_to_end(text)
            self.stats['cache_hits'] += 1
            return self._cache[text]
        self.stats['cache_misses'] += 1

        width = self._calculate_width(strip_ansi(text))
        self.stats['calculations'] += 1

        if self._cache_enabled:
            self._cache[text] = width
            while len(self._cache) > self._cache_size:
                self._cache.popitem(last=False)
                self.stats['cache_evictions'] += 1

        return width

    def get_widths(self, texts: List[str]) -> List[int]:
        """Get visible widths for multiple strings."""
        return [self.get_width(text) for text in texts]

    def _calculate_width(self, text: str) -> int:
        width = wcswidth(text)
        if width >= 0:
            return width

        # Contains control characters - measure char by char
        self.stats['control_chars_handled'] += 1
        return sum(max(wcwidth(char), 0) for char in text)

    def clear_cache(self):
        """Clear all cached widths."""
        self._cache.clear()

    def get_stats(self) -> Dict[str, Union[int, float, bool]]:
        """
        Get calculator statistics.

        Returns:
            Counters plus cache_hit_rate, cache_entries and cache_enabled
        """
        stats: Dict[str, Union[int, float, bool]] = dict(self.stats)

        total_requests = self.stats['cache_hits'] + self.stats['cache_misses']
        stats['cache_hit_rate'] = (
            self.stats['cache_hits'] / total_requests if total_requests else 0.0
        )
        stats['cache_entries'] = len(self._cache)
        stats['cache_enabled'] = self._cache_enabled
        return stats


# ============================================================================
# CONVENIENCE FUNCTIONS
# ============================================================================

_default_calculator = None

def _get_default() -> WidthCalculator:
    global _default_calculator

    if _default_calculator is None:
        _default_calculator = WidthCalculator()
    return _default_calculator


def get_width(text: str) -> int:
    """
    Get visible width of text using the default calculator.

    Example:
        >>> get_width("Hello")
        5
    """
    return _get_default().get_width(text)


def get_widths(texts: List[str]) -> List[int]:
    """Get visible widths for multiple strings using the default calculator."""
    return _get_default().get_widths(texts)


def clear_default_cache():
    """Clear the default calculator's cache."""
    if _default_calculator is not None:
        _default_calculator.clear_cache()
