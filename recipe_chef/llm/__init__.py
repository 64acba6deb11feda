"""Text-generation access package.

Module split:
    - `provider_config`: environment-driven endpoint and runtime configuration.
    - `client`: HTTP transport for the text-generation endpoint.
    - `parsing`: completion cleanup and JSON recovery.
    - `service`: canonical ingredients-to-recipe-payload entrypoint.
"""
