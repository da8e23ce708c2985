"""
API layer for the Findit backend.

Exposes HTTP endpoints under /api/v1 (media upload, analysis state, answers,
task selection, image type catalogue) plus a root health probe.
"""
