"""Prompt construction package for recipe and image generation."""
