"""
Notebook integration subpackage (requires marimo).
"""
