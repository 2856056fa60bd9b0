"""Repository layer: one module per table (SQLite).

Functions take an open connection and return entities; services own connections.
"""
from __future__ import annotations
