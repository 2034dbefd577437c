"""Building blocks for a live video compositor: OS utilities, 16-bit lane vectors, meshes, frame pacing and layout."""

__version__ = "0.1.0"