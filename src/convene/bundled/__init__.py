# src/convene/bundled/__init__.py
"""Default configuration files shipped with convene."""
