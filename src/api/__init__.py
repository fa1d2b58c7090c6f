"""API — camada de borda com a plataforma de mensageria.

Responsabilidades:
- Receber webhooks da plataforma
- Construir payloads UMS
- Chamar as APIs HTTP da plataforma (domínios, tokens, Send API, histórico)

Subpastas:
- connectors/: adapters HTTP por serviço
- payload_builders/: construção de requisições UMS
- routes/: endpoints HTTP do listener (webhook, health)

NÃO PODE conter: estado de conversa, ciclo de vida do conector.
"""
