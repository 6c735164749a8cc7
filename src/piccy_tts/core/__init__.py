"""
Core Infrastructure for piccy-tts.

    - config.py: Settings loading, defaults and validation
    - logging/: Structured logging with numeric levels
"""
