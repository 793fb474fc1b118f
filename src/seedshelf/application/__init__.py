"""Application layer: editor sessions and category workflows."""
