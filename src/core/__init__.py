"""
Core matrix type, error taxonomy, and numerical safeguards.

This package is independent of the console layer: it only ever sees
already validated dimensions and values.
"""
