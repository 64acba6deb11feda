"""Image generation adapter package.

Scope:
    Provides the text-to-image HTTP client and a small service that derives the
    image prompt from a displayed recipe.

Non-goals:
    - No image download, caching or re-encoding.
    - No retry on failure; every failure is terminal for the display cycle.
"""
