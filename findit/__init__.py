"""
Findit backend root package.

This package contains the FastAPI app entry point (main.py), API routes,
domain constants and models, infrastructure (Google Vision, chat completion,
image and video handling), and the media analysis use cases.
"""
