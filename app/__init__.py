"""Bloglist Application Package — blog posts, users, comments.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
