"""University application intake API."""
