"""Auto-translate module - message translation pipeline."""
