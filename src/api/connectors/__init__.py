"""Connectors — adapters de borda para as requisições recebidas.

Estrutura:
- discord/: interações Discord (assinatura Ed25519 + parsing)
"""

__all__: list[str] = []
