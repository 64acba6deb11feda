"""Recipe Chef: ingredients in, illustrated recipe out.

Package layout:
    - `llm`: provider configuration, text-generation transport, recipe parsing.
    - `image`: image-generation transport.
    - `prompting`: prompt assembly for both generation stages.
    - `core`: domain types, error taxonomy, state container, orchestration.
    - `api`: CLI and HTTP adapters.
"""
