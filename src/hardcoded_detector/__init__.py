"""hardcoded-detector: find hardcoded API keys and credentials in source trees."""

__version__ = "1.0.0"
