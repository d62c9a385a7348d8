"""JSON preview service for the videoembed library."""
