"""App — orquestração do conector e infraestrutura.

Subpastas:
- bootstrap/: inicialização de logging e validação de settings
- coordinators/: Connector (ciclo de vida, conversas) e listener de webhooks
- events/: categorias de evento e barramento de assinaturas
- infra/: cliente HTTP e renovação do JWT da aplicação
- protocols/: contratos (scheduler, Send API)
- sessions/: modelo de conversa e registro em memória
- observability/: correlation_id dos logs estruturados
- constants/: constantes do protocolo de mensageria

Padrão: app executa; api adapta; config configura; utils apoia.
"""
