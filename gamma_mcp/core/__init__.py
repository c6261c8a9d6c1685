"""Core retry, classification and polling logic."""
