"""Connector Discord (borda HTTP de interações)."""
