"""Terminal frontend for the sliding puzzle."""
