"""FastAPI adapter around the variantgate core."""
