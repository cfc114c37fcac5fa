"""Routing: fixed route table with exact path matching.

Routes are registered during setup and compiled into an immutable
lookup structure when the app freezes.
"""
