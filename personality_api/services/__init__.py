"""Services Layer — business rules over the repository contracts.

Invariants:
    - Services depend on core/ Protocols, never on a concrete store
    - Services translate gateway outcomes into domain errors
"""
