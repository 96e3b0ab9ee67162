"""Demo targets exposing device-management functions."""
