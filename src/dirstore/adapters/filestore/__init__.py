"""File store backends."""
