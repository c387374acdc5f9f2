"""Core domain models and codecs for histogram samples."""
