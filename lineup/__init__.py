"""Player lookup, vehicle normalization and export helpers for Thunder Lineup."""
