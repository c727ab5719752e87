"""Internal helpers shared by the matcher backends."""
