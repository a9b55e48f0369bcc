"""Catalog of AnkiConnect actions, one module per area."""
