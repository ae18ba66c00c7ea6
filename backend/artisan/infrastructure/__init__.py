"""Infrastructure Layer: database session management and logging setup.

Invariants:
    - Only this layer creates engines or configures logging handlers
"""
