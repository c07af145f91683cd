"""Feature packages built on top of the HTTP engine."""
