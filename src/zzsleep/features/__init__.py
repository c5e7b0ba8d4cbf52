"""Feature packages: time expression parsing and waiting."""
