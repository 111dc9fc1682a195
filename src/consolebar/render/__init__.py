"""Rendering pipeline — progress state, line diffing, tick scheduling."""
