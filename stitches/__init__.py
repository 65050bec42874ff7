"""Stitches cart: session cart state and its page projections."""
