"""Services Layer: record stores and the orchestration that ties them together.

Invariants:
    - One store per record type (ItemStore, FairStore, SaleLedger)
    - Stores flush; InventoryOperations or the calling route commits

Design Decisions:
    - Stores constructed per request around the request's AsyncSession
      (no module-level singletons)
"""
