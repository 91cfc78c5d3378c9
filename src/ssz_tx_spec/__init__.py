"""Signature scheme for SSZ-encoded execution-layer transactions."""
