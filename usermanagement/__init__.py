"""User catalogue with a generic entity store and an append-only audit trail."""

__version__ = "0.1.0"
