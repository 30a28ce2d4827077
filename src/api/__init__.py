"""API — camada de borda HTTP.

Responsabilidades:
- Receber interações do Discord e deliveries da fila
- Validar assinaturas e payloads
- Converter payloads externos em modelos de domínio

Subpastas:
- connectors/: validação de assinatura e parsing por canal
- routes/: endpoints HTTP (interações, worker, health)

NÃO PODE conter: regras de roteamento de comandos ou chamadas de saída.
"""
