"""Payload builders por canal — construção de payloads para APIs externas.

Estrutura:
- liveperson/: requisições UMS (conversa, publicação, upload, perfil)
"""

__all__: list[str] = []
