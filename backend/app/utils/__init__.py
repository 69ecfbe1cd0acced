# Utilities package init
"""
Anythink Market Backend — Utilities
====================================

Stateless helpers with no dependency on routes, services or the database.

    - text_case.py: camelCase / kebab-case / dot.case conversion
"""
