"""Core orchestration package.

Architectural role:
    Sits between the CLI/HTTP adapters and the generation clients.

Composition:
    - `errors`: exception taxonomy shared across layers.
    - `recipe`: `Recipe`/`ImageResult` value types and recipe validation.
    - `state`: immutable session state and its pure reducer.
    - `engine`: `OrchestrationController`, the submission flow.
"""
