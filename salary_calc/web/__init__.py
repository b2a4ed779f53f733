"""Request parsing helpers for the web layer."""
