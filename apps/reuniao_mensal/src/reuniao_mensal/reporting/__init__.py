"""Plain-text rendering of occurrences."""
