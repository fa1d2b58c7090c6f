"""Conector de consumidor para a plataforma LivePerson Messaging.

Fluxo de inicialização (Connector.start):
1. Resolve o diretório de domínios (uma vez; falha desabilita o que depende dele)
2. Inicia o listener de webhooks, se houver porta
3. Inicia a Send API e o ciclo de renovação do JWT da aplicação
4. Publica CONNECTOR_READY

Cada capacidade sem configuração fica desabilitada e a chamada
correspondente levanta ConfigurationMissingError.
"""

from __future__ import annotations

import asyncio
import logging
import time
from functools import partial
from pathlib import Path
from typing import TYPE_CHECKING, Any

from api.connectors.liveperson import (
    SendApiClient,
    extract_existing_user_id,
    find_response_for,
    get_agent_nickname,
    get_app_jwt,
    get_consumer_jws,
    resolve_domains,
    search_consumer_conversations,
)
from api.payload_builders.liveperson import (
    build_end_conversation_event,
    build_publish_accept_status_event,
    build_publish_chat_state_event,
    build_publish_image_thumbnail_event,
    build_publish_text_event,
    build_request_conversation_event,
    build_request_upload_url_event,
    build_set_user_profile_event,
)
from app.constants.liveperson import (
    BAD_REQUEST_CODE,
    SERVICE_ACCOUNT_CONFIG_CDN,
    SERVICE_IDP,
    SERVICE_MESSAGING_HISTORY,
    SERVICE_SENTINEL,
    AcceptStatus,
    ChatState,
    ConversationStatus,
)
from app.events import ConnectorEvent, EventBus, EventKind
from app.infra.auth import TokenManager
from app.infra.http import HttpClient, HttpClientConfig
from app.sessions import Conversation, ConversationRegistry, ConversationState
from config.settings import get_liveperson_settings
from utils.errors import (
    AuthExpiredError,
    ConfigurationMissingError,
    ConversationFailedError,
    ConversationNotFoundError,
    DuplicateConversationError,
    ListenerBindError,
    ResolutionError,
)

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Mapping

    import httpx

    from api.payload_builders.liveperson import UmsRequest, UserProfile
    from app.coordinators.liveperson.listener import WebhookListener
    from app.protocols import SchedulerProtocol, SendApiProtocol
    from config.settings import LivePersonSettings

    EventCallback = Callable[[ConnectorEvent], Awaitable[None] | None]

logger = logging.getLogger(__name__)


class Connector:
    """Ponte entre a aplicação local e as APIs de mensageria.

    Args:
        settings: Configuração da conta; carregada do ambiente se None
        events: Barramento de eventos; um novo é criado se None
        http_config: Configuração HTTP compartilhada pelas chamadas
        scheduler: Agendador da renovação de token (injetável em testes)
        clock: Relógio epoch em segundos (injetável em testes)
    """

    def __init__(
        self,
        settings: LivePersonSettings | None = None,
        *,
        events: EventBus | None = None,
        http_config: HttpClientConfig | None = None,
        scheduler: SchedulerProtocol | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._settings = settings or get_liveperson_settings()
        self.events = events or EventBus()
        self.registry = ConversationRegistry()
        self._http_config = http_config or HttpClientConfig(
            timeout_seconds=self._settings.request_timeout_seconds
        )
        self._http = HttpClient(self._http_config)
        self._scheduler = scheduler
        self._clock = clock

        self._domains: Mapping[str, str] | None = None
        self._token_manager: TokenManager | None = None
        self._send_api: SendApiProtocol | None = None
        self._listener: WebhookListener | None = None

    # ── assinaturas ──────────────────────────────────────────────────────

    def on(self, kind: EventKind, callback: EventCallback) -> None:
        self.events.subscribe(kind, callback)

    def on_webhook(self, event_type: str, callback: EventCallback) -> None:
        self.events.subscribe_webhook(event_type, callback)

    def on_any(self, callback: EventCallback) -> None:
        self.events.subscribe_all(callback)

    # ── ciclo de vida ────────────────────────────────────────────────────

    @property
    def domains(self) -> Mapping[str, str] | None:
        return self._domains

    @property
    def app_token(self) -> str | None:
        return self._token_manager.token if self._token_manager else None

    def capabilities(self) -> dict[str, bool]:
        """Capacidades habilitadas após o start()."""
        return {
            "domains": self._domains is not None,
            "sender": self._send_api is not None,
            "listener": self._listener is not None and self._listener.is_running,
            "conversation_history": (
                self._domains is not None and self._settings.oauth_params is not None
            ),
        }

    async def start(self) -> None:
        """Resolve domínios, inicia listener e sender; nunca falha por configuração."""
        await self._init_domains()
        await self._init_listener()
        await self._init_sender()
        await self.events.publish(ConnectorEvent.of(EventKind.CONNECTOR_READY))

    async def stop(self) -> None:
        if self._token_manager is not None:
            self._token_manager.stop()
        if self._listener is not None:
            await self._listener.stop()
        logger.info("connector_stopped")

    async def __aenter__(self) -> Connector:
        await self.start()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.stop()

    async def _init_domains(self) -> None:
        settings = self._settings
        if not settings.can_resolve_domains:
            logger.warning(
                "domains_unavailable",
                extra={
                    "reason": "account_id and/or csds_domain not supplied: "
                    "SendAPI, get_open_conversation and get_agent_nickname unavailable"
                },
            )
            return
        try:
            self._domains = await resolve_domains(
                self._http, settings.account_id, settings.csds_domain
            )
        except ResolutionError as exc:
            logger.warning("domains_resolution_failed", extra={"error": str(exc)})
            return
        await self.events.publish(
            ConnectorEvent.of(EventKind.DOMAINS_RETRIEVED, "domains retrieved")
        )

    async def _init_listener(self) -> None:
        if not self._settings.can_listen:
            logger.warning("listener_not_started", extra={"reason": "port not supplied"})
            return
        from app.app import create_app
        from app.coordinators.liveperson.listener import WebhookListener

        self._listener = WebhookListener(
            create_app(self.events, connector=self),
            self.events,
            port=self._settings.port,
            public_url=self._settings.public_url,
        )
        try:
            await self._listener.start()
        except ListenerBindError as exc:
            logger.warning("listener_unavailable", extra={"error": str(exc)})
            self._listener = None

    async def _init_sender(self) -> None:
        settings = self._settings
        if self._domains is None or not settings.can_send:
            logger.warning(
                "sender_not_started",
                extra={
                    "reason": "installation_id and/or secret not supplied, "
                    "and/or domains not retrieved"
                },
            )
            return
        sentinel = self._domains.get(SERVICE_SENTINEL)
        if not sentinel:
            logger.warning("sender_not_started", extra={"reason": "sentinel domain missing"})
            return

        self._token_manager = TokenManager(
            partial(
                get_app_jwt,
                self._http,
                settings.account_id,
                sentinel,
                settings.installation_id,
                settings.secret,
            ),
            self.events,
            scheduler=self._scheduler,
            clock=self._clock,
        )
        self._send_api = SendApiClient(
            account_id=settings.account_id,
            domains=self._domains,
            token_provider=lambda: self.app_token,
            app_id=settings.app_id,
            config=self._http_config,
        )
        try:
            await self._token_manager.start()
        except AuthExpiredError:
            # Publicado como SENDER_ERROR; a Send API fica sem token até nova renovação.
            logger.warning("sender_started_without_token")

    # ── conversas ────────────────────────────────────────────────────────

    async def start_conversation(
        self,
        external_consumer_id: str,
        user_profile: UserProfile | None = None,
        *,
        skill_id: str | None = None,
        campaign_info: dict[str, str] | None = None,
    ) -> Conversation:
        """Inicia uma nova conversa para o consumidor.

        A Conversation é registrada antes da resposta da plataforma.

        Raises:
            DuplicateConversationError: O consumidor já tem conversa aberta;
                carrega a Conversation com o user_id extraído.
            ConversationFailedError: Resposta sem conversationId.
            ConfigurationMissingError: Send API não iniciada.
        """
        send_api = self._require_sender("start_conversation")

        conversation = Conversation(
            external_consumer_id=external_consumer_id,
            user_profile=user_profile,
        )
        self.registry.append(conversation)
        conversation.jws = await self._get_jws(conversation)

        request_event = build_request_conversation_event(
            self._settings.account_id, skill_id, campaign_info
        )
        conversation.transition_to(ConversationState.AWAITING_CREATION_RESPONSE)
        responses = await send_api.create_conversation(
            conversation.session_token or "",
            [build_set_user_profile_event(user_profile), request_event],
        )

        result = find_response_for(responses, request_event.id, fallback_index=1) or {}
        body = result.get("body") if isinstance(result.get("body"), dict) else {}

        conversation_id = body.get("conversationId")
        if conversation_id:
            conversation.mark_open(conversation_id)
            logger.info(
                "conversation_opened",
                extra={"conversation_id": conversation_id, "external_consumer_id": external_consumer_id},
            )
            await self.events.publish(ConnectorEvent.of(EventKind.CONVERSATION_OPENED, conversation))
            return conversation

        if result.get("code") == BAD_REQUEST_CODE:
            message = body.get("msg")
            logger.info("conversation_create_rejected", extra={"platform_message": message})
            user_id = extract_existing_user_id(message)
            if user_id:
                conversation.user_id = user_id
                conversation.transition_to(ConversationState.DUPLICATE_DETECTED)
                logger.info("conversation_duplicate_detected", extra={"user_id": user_id})
                await self.events.publish(
                    ConnectorEvent.of(EventKind.DUPLICATE_DETECTED, conversation)
                )
                raise DuplicateConversationError(conversation)

        raise ConversationFailedError("[start_conversation] no conversationId extracted")

    async def open_conversation(
        self,
        external_consumer_id: str,
        user_profile: UserProfile | None = None,
        *,
        skill_id: str | None = None,
        campaign_info: dict[str, str] | None = None,
    ) -> Conversation:
        """Inicia uma conversa ou retoma a conversa aberta do consumidor."""
        try:
            return await self.start_conversation(
                external_consumer_id,
                user_profile,
                skill_id=skill_id,
                campaign_info=campaign_info,
            )
        except DuplicateConversationError as exc:
            conversation = exc.conversation
            conversation_id = await self.get_open_conversation(conversation.user_id or "")
            conversation.mark_open(conversation_id)
            logger.info(
                "conversation_resumed",
                extra={"conversation_id": conversation_id, "user_id": conversation.user_id},
            )
            await self.events.publish(ConnectorEvent.of(EventKind.CONVERSATION_OPENED, conversation))
            return conversation

    async def get_open_conversation(self, user_id: str) -> str:
        """Retorna o conversationId da conversa OPEN mais recente do usuário.

        Raises:
            ConversationFailedError: Nenhuma conversa aberta encontrada.
            ResolutionError: Registro de histórico sem info.conversationId.
            ConfigurationMissingError: Domínios ou credenciais OAuth1 ausentes.
        """
        operation = "get_open_conversation"
        host = self._require_domain(operation, SERVICE_MESSAGING_HISTORY)
        oauth_params = self._settings.oauth_params
        if oauth_params is None:
            raise ConfigurationMissingError(f"[{operation}] failed: oauth parameters unavailable")

        result = await search_consumer_conversations(
            self._http,
            self._settings.account_id,
            host,
            user_id,
            ConversationStatus.OPEN,
            oauth_params,
        )
        records = result.get("conversationHistoryRecords") or []
        count = (result.get("_metadata") or {}).get("count", len(records))
        if count < 1 or not records:
            raise ConversationFailedError(f"[{operation}] no conversations found for {user_id}")
        latest = records[-1]
        info = latest.get("info") if isinstance(latest, dict) else None
        conversation_id = info.get("conversationId") if isinstance(info, dict) else None
        if not conversation_id:
            raise ResolutionError(f"[{operation}] history record without info.conversationId")
        return conversation_id

    async def get_agent_nickname(self, pid: str) -> str | None:
        host = self._require_domain("get_agent_nickname", SERVICE_ACCOUNT_CONFIG_CDN)
        return await get_agent_nickname(self._http, self._settings.account_id, host, pid)

    # ── eventos do consumidor ────────────────────────────────────────────

    async def send_text(self, conversation_id: str, text: str) -> Any:
        return await self._send_event(
            "send_text", conversation_id, build_publish_text_event(conversation_id, text)
        )

    async def set_typing(self, conversation_id: str, typing: bool) -> Any:
        """Notifica se o consumidor está digitando (COMPOSING) ou não (ACTIVE)."""
        state = ChatState.COMPOSING if typing else ChatState.ACTIVE
        return await self._send_event(
            "set_typing", conversation_id, build_publish_chat_state_event(conversation_id, state)
        )

    async def set_msg_accept_status(
        self,
        conversation_id: str,
        sequence_list: list[int],
        status: AcceptStatus | str = AcceptStatus.ACCEPT,
    ) -> Any:
        """Marca mensagens do agente como recebidas/lidas."""
        return await self._send_event(
            "set_msg_accept_status",
            conversation_id,
            build_publish_accept_status_event(conversation_id, sequence_list, status),
        )

    async def close_conversation(self, conversation_id: str) -> Any:
        response = await self._send_event(
            "close_conversation", conversation_id, build_end_conversation_event(conversation_id)
        )
        conversation = self.registry.find_by_conversation_id(conversation_id)
        if conversation is not None and conversation.state is ConversationState.OPEN:
            conversation.transition_to(ConversationState.CLOSED)
        return response

    async def request_upload_url(
        self,
        conversation_id: str,
        file_size: int,
        file_type: str,
    ) -> dict[str, Any]:
        """Solicita URL pré-assinada de upload.

        Returns:
            `relativePath` e `queryParams` para upload_file.

        Raises:
            ResolutionError: Resposta sem parâmetros de upload.
        """
        response = await self._send_event(
            "request_upload_url",
            conversation_id,
            build_request_upload_url_event(file_size, file_type),
        )
        body = response.get("body") if isinstance(response, dict) else None
        if not isinstance(body, dict) or "relativePath" not in body:
            raise ResolutionError("[request_upload_url] upload parameters missing from response")
        return body

    async def upload_file(
        self,
        conversation_id: str,
        path: str | Path,
        upload_params: Mapping[str, Any],
    ) -> httpx.Response:
        self._require_conversation("upload_file", conversation_id)
        send_api = self._require_sender("upload_file")
        return await send_api.upload_file(path, upload_params)

    async def send_image(
        self,
        conversation_id: str,
        path: str | Path,
        file_type: str,
        encoded_preview: str,
        caption: str | None = None,
    ) -> Any:
        """Envia imagem hospedada: solicita URL, faz upload e publica o thumbnail.

        Args:
            encoded_preview: Thumbnail já codificado em base64
        """
        file_size = (await asyncio.to_thread(Path(path).stat)).st_size
        upload_params = await self.request_upload_url(conversation_id, file_size, file_type)
        await self.upload_file(conversation_id, path, upload_params)
        return await self._send_event(
            "send_image",
            conversation_id,
            build_publish_image_thumbnail_event(
                conversation_id, upload_params, file_type, encoded_preview, caption
            ),
        )

    # ── helpers ──────────────────────────────────────────────────────────

    async def _send_event(self, operation: str, conversation_id: str, event: UmsRequest) -> Any:
        send_api = self._require_sender(operation)
        conversation = self._require_conversation(operation, conversation_id)
        return await send_api.send(conversation.session_token or "", event)

    async def _get_jws(self, conversation: Conversation) -> dict[str, Any]:
        operation = "get_jws"
        host = self._require_domain(operation, SERVICE_IDP)
        app_jwt = self.app_token
        if not app_jwt:
            raise AuthExpiredError(f"[{operation}] failed: app token not available")
        return await get_consumer_jws(
            self._http,
            self._settings.account_id,
            host,
            app_jwt,
            conversation.external_consumer_id,
        )

    def _require_sender(self, operation: str) -> SendApiProtocol:
        if self._send_api is None:
            raise ConfigurationMissingError(f"[{operation}] failed: Sender not started")
        return self._send_api

    def _require_domain(self, operation: str, service: str) -> str:
        if self._domains is None:
            raise ConfigurationMissingError(f"[{operation}] failed: domains unavailable")
        host = self._domains.get(service)
        if not host:
            raise ConfigurationMissingError(f"[{operation}] failed: domain {service} unavailable")
        return host

    def _require_conversation(self, operation: str, conversation_id: str) -> Conversation:
        conversation = self.registry.find_by_conversation_id(conversation_id)
        if conversation is None:
            raise ConversationNotFoundError(
                f"[{operation}] conversation {conversation_id} not registered"
            )
        return conversation
