"""Subspecifications of the SSZ transaction signature scheme."""
