"""Core types shared by the riffwave decoder."""
