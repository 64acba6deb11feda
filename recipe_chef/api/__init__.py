"""Recipe Chef adapter package.

Architectural role:
- Defines the external interaction boundary for HTTP and CLI interfaces.
- Performs transport-level validation and response shaping.
- Delegates the generation flow to `recipe_chef.core.engine`.
"""
