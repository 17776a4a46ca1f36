"""Unit tests for individual components in isolation.

Coverage:
    - proxy/: Configuration, prompt building and answer extraction
    - sessions/: Session store operations and persistence
    - models/: Pydantic validation and serialization
"""
