"""Application layer - services coordinating domain contracts."""
