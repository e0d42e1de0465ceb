"""
Menu normalization service.

Responsibilities:
- Turn a flat, per-dish menu export into a hierarchical bilingual menu document.
- Serve the normalized menu and its summary over HTTP.
"""
