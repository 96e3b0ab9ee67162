"""Target registration, discovery, and the function catalog."""
