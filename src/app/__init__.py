"""App — orquestração, casos de uso e infraestrutura.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- domain/: contratos de interação, tasks e resultados
- use_cases/: dispatcher de interações e worker de conclusão
- infra/: implementações concretas de IO (crypto, fila, Discord, HTTP)
- protocols/: contratos/interfaces
- observability/: correlation_id para logs estruturados

Padrão: app executa; api adapta.
"""
