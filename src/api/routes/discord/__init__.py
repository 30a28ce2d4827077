"""Rotas HTTP do Discord."""
