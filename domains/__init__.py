"""Domain modules for the GMV campaign bot."""
