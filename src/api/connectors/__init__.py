"""Connectors — adapters de borda para APIs externas.

Estrutura:
- liveperson/: LivePerson Messaging (CSDS, Sentinel, IDP, UMS, History)
"""

__all__: list[str] = []
