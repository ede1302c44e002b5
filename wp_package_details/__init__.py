"""Generate package-details JSON from WordPress plugin and theme files."""

__version__ = "1.0.0"

SCRIPT_NAME = "WP Package Details Generator"
