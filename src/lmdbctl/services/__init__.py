"""Service contract — the result type every command handler returns.

This package must never import from shell, commands, or output.
"""
