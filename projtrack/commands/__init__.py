"""Command modules for the projtrack CLI."""
