"""Customer Location API package."""
