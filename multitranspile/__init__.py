"""multitranspile - extract browser-global code and re-emit it for several frameworks"""

__version__ = "0.1.0"
