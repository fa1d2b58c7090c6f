"""Settings específicas da plataforma LivePerson.

Cada subconjunto de campos habilita uma capacidade do conector:
- account_id + csds_domain: resolução de domínios (SendAPI, histórico, nickname)
- installation_id + secret: SendAPI (token da aplicação)
- port: listener de webhooks
- credenciais OAuth1: busca de conversas abertas no Messaging History

A ausência de um subconjunto degrada a capacidade correspondente; nunca
impede o startup.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_CSDS_DOMAIN: str = "api.liveperson.net"


@dataclass(frozen=True)
class LivePersonSettings:
    """Configurações do conector LivePerson.

    Attributes:
        account_id: ID da conta (brand)
        csds_domain: Domínio do CSDS para descoberta de serviços
        installation_id: client_id da instalação no Sentinel
        secret: client_secret da instalação
        app_id: appId enviado no header Client-Properties
        port: Porta HTTP do listener de webhooks (0 = desabilitado)
        public_url: URL pública (túnel externo) reportada no ready do listener
        oauth_consumer_key: OAuth1 consumer key (Messaging History)
        oauth_consumer_secret: OAuth1 consumer secret
        oauth_token: OAuth1 access token
        oauth_token_secret: OAuth1 access token secret
        request_timeout_seconds: Timeout das requisições HTTP
    """

    account_id: str = ""
    csds_domain: str = DEFAULT_CSDS_DOMAIN
    installation_id: str = ""
    secret: str = ""
    app_id: str = "unspecified"
    port: int = 0
    public_url: str = ""

    oauth_consumer_key: str = ""
    oauth_consumer_secret: str = ""
    oauth_token: str = ""
    oauth_token_secret: str = ""

    request_timeout_seconds: float = 30.0

    @property
    def oauth_params(self) -> dict[str, str] | None:
        """Tupla OAuth1 completa ou None se algum campo faltar."""
        params = {
            "consumer_key": self.oauth_consumer_key,
            "consumer_secret": self.oauth_consumer_secret,
            "token": self.oauth_token,
            "token_secret": self.oauth_token_secret,
        }
        if not all(params.values()):
            return None
        return params

    @property
    def can_resolve_domains(self) -> bool:
        return bool(self.account_id and self.csds_domain)

    @property
    def can_send(self) -> bool:
        return bool(self.installation_id and self.secret)

    @property
    def can_listen(self) -> bool:
        return self.port > 0

    def validate(self) -> list[str]:
        """Lista capacidades degradadas por configuração ausente.

        Returns:
            Lista de avisos (vazia = todas as capacidades disponíveis).
        """
        warnings: list[str] = []

        if not self.can_resolve_domains:
            warnings.append(
                "LP_ACCOUNT_ID e/ou LP_CSDS_DOMAIN não configurados: "
                "SendAPI, get_open_conversation e get_agent_nickname indisponíveis"
            )

        if not self.can_send:
            warnings.append(
                "LP_INSTALLATION_ID e/ou LP_SECRET não configurados: SendAPI indisponível"
            )

        if not self.can_listen:
            warnings.append("LP_PORT não configurado: listener não será iniciado")

        if self.oauth_params is None:
            warnings.append(
                "credenciais OAuth1 incompletas: get_open_conversation indisponível"
            )

        if self.request_timeout_seconds <= 0:
            warnings.append("LP_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return warnings


def _load_from_env() -> LivePersonSettings:
    """Carrega LivePersonSettings a partir de variáveis de ambiente."""
    return LivePersonSettings(
        account_id=os.getenv("LP_ACCOUNT_ID", ""),
        csds_domain=os.getenv("LP_CSDS_DOMAIN", DEFAULT_CSDS_DOMAIN),
        installation_id=os.getenv("LP_INSTALLATION_ID", ""),
        secret=os.getenv("LP_SECRET", ""),
        app_id=os.getenv("LP_APP_ID", "unspecified"),
        port=int(os.getenv("LP_PORT", "0") or 0),
        public_url=os.getenv("LP_PUBLIC_URL", ""),
        oauth_consumer_key=os.getenv("LP_OAUTH_CONSUMER_KEY", ""),
        oauth_consumer_secret=os.getenv("LP_OAUTH_CONSUMER_SECRET", ""),
        oauth_token=os.getenv("LP_OAUTH_TOKEN", ""),
        oauth_token_secret=os.getenv("LP_OAUTH_TOKEN_SECRET", ""),
        request_timeout_seconds=float(os.getenv("LP_REQUEST_TIMEOUT_SECONDS", "30")),
    )


@lru_cache(maxsize=1)
def get_liveperson_settings() -> LivePersonSettings:
    """Retorna instância cacheada de LivePersonSettings.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()
