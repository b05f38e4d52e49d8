"""Doxygen filter for DreamMaker environments."""
