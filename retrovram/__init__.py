"""Lay out MSX SCREEN 5 images for the video memory of other retro computers, with related tools."""

__version__ = "0.1.0"