"""Command-line demo of the termkit primitives."""
