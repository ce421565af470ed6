"""Repository layer: DB access for the races and sports catalogs (SQLite).

SQL text is built here only; services and routes never see SQL strings.
"""
from __future__ import annotations
