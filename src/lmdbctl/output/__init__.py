"""Output layer — byte sink, Rich console factory, and renderers.

Output may import from services (for ServiceResult) but never from shell
or commands.
"""
