# checklist_esp/api/parse_document.py
"""
Handler para análise de edital.

Recebe o texto plano do edital (e opcionalmente a estrutura já indexada),
roda o pipeline completo e devolve:
- extractedData: campos do formulário
- sources: origem de cada campo (trecho, contexto, seção)
- documentStructure: seções numeradas
- rules: resultado do checklist legal
"""
import json
import logging

import azure.functions as func

from checklist_esp import config
from checklist_esp.observability import LoggingEventSink, NULL_SINK
from checklist_esp.pipeline import analisar_edital
from checklist_esp.security import safe_handler, validate_estrutura, validate_json_body, validate_texto

logger = logging.getLogger(__name__)


@safe_handler
def handle_parse_document(req: func.HttpRequest) -> func.HttpResponse:
    body, err = validate_json_body(req)
    if err:
        return err

    texto, err = validate_texto(body)
    if err:
        return err

    secoes, err = validate_estrutura(body)
    if err:
        return err

    eventos = LoggingEventSink() if config.EMIT_EVENTS else NULL_SINK
    logger.info(f"parse_document: {len(texto)} caracteres, estrutura={'sim' if secoes else 'nao'}")

    report = analisar_edital(texto, secoes=secoes, eventos=eventos)

    return func.HttpResponse(
        json.dumps(report.to_dict(), ensure_ascii=False),
        status_code=200,
        mimetype="application/json",
    )
