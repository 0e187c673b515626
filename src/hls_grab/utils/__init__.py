"""Shared utilities — settings and cross-cutting helpers.

Rules
-----
* No business logic.
* No I/O.
* Importable by any layer.
"""
