"""Ledger store, validation, and the balance and settlement engines."""
