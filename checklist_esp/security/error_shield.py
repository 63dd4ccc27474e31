# checklist_esp/security/error_shield.py
"""
Error shield dos endpoints do checklist.

Exceção não tratada em handle_* vira 500 no mesmo formato de json_error,
com request_id para correlação. O traceback vai só para o log, marcado com
o nome da função registrada no blueprint (parse_document, validate_rules,
export_fields).
"""
from __future__ import annotations

import functools
import logging
import uuid

import azure.functions as func

from checklist_esp.security.validation import json_error

logger = logging.getLogger("checklist_esp.security")

HEADER_REQUEST_ID = "X-Request-ID"
PREFIXO_HANDLER = "handle_"
DICA_ERRO_INTERNO = "Erro interno ao processar o edital. Use o request_id para suporte."


def nome_endpoint(fn) -> str:
    """handle_parse_document -> parse_document"""
    nome = fn.__name__
    return nome[len(PREFIXO_HANDLER):] if nome.startswith(PREFIXO_HANDLER) else nome


def safe_handler(fn):
    endpoint = nome_endpoint(fn)

    @functools.wraps(fn)
    def wrapper(req: func.HttpRequest, *args, **kwargs) -> func.HttpResponse:
        request_id = req.headers.get(HEADER_REQUEST_ID) or str(uuid.uuid4())
        try:
            return fn(req, *args, **kwargs)
        except Exception:
            logger.exception(
                "[UNHANDLED] endpoint=%s request_id=%s body_bytes=%d",
                endpoint,
                request_id,
                len(req.get_body() or b""),
            )
            return json_error(
                "Internal server error",
                500,
                headers={HEADER_REQUEST_ID: request_id},
                request_id=request_id,
                hint=DICA_ERRO_INTERNO,
            )

    return wrapper
