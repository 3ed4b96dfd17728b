"""Infrastructure Layer — concrete collaborators behind the core protocols.

Invariants:
    - Implements core/repository_protocols.py; may import core types and errors
    - Every IO failure is mapped to a MarketplaceError subclass before leaving this layer
"""
