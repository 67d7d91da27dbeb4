"""Serialization layer — the shared JSON encode/decode contract."""
