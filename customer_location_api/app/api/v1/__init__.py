"""Version 1 of the Customer Location API."""
