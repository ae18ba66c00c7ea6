"""Artisan Inventory Package: stock, fairs and the sales ledger.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
