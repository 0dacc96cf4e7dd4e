"""Application layer - stop matching, geodesy and trip planning."""
