"""Image processing helpers used when garments are added."""
