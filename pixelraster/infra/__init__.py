"""Configuration and logging plumbing for pixelraster entry points."""
