# checklist_esp/security/validation.py
"""
Validação de inputs HTTP.
Previne: payloads oversized, JSON inválido, texto/campos com tipo errado.
"""
from __future__ import annotations

import json
from typing import Any

import azure.functions as func

from checklist_esp import config
from checklist_esp.models import Section


def json_error(
    message: str,
    status_code: int = 400,
    headers: dict[str, str] | None = None,
    **extra: Any,
) -> func.HttpResponse:
    """Resposta de erro JSON: {"error": message, **extra}."""
    return func.HttpResponse(
        json.dumps({"error": message, **extra}, ensure_ascii=False),
        status_code=status_code,
        mimetype="application/json",
        headers=headers,
    )


def validate_json_body(
    req: func.HttpRequest, max_bytes: int | None = None
) -> tuple[dict[str, Any] | None, func.HttpResponse | None]:
    """
    Extrai e valida JSON body de uma request.
    Retorna (parsed_body, None) em sucesso, ou (None, error_response) em falha.
    """
    max_bytes = config.MAX_BODY_BYTES if max_bytes is None else max_bytes
    body = req.get_body()
    if len(body) > max_bytes:
        return None, json_error(f"Body too large (max {max_bytes // (1024*1024)} MB)", 413)
    if not body:
        return None, json_error("Request body is empty")
    try:
        parsed = req.get_json()
    except ValueError:
        return None, json_error("Invalid JSON in request body")
    if not isinstance(parsed, dict):
        return None, json_error("JSON body must be an object")
    return parsed, None


def validate_texto(
    body: dict[str, Any], min_length: int | None = None
) -> tuple[str | None, func.HttpResponse | None]:
    """Campo 'texto' obrigatório, string, com tamanho mínimo."""
    min_length = config.MIN_TEXT_LENGTH if min_length is None else min_length
    texto = body.get("texto")
    if texto is None:
        return None, json_error("texto is required")
    if not isinstance(texto, str):
        return None, json_error("texto must be a string")
    if len(texto.strip()) < min_length:
        return None, json_error(
            f"Documento vazio ou muito curto (mínimo {min_length} caracteres)"
        )
    return texto, None


def validate_estrutura(
    body: dict[str, Any],
) -> tuple[list[Section] | None, func.HttpResponse | None]:
    """Campo opcional 'estrutura': lista de {number, title, content, level}."""
    estrutura = body.get("estrutura")
    if estrutura is None:
        return None, None
    if not isinstance(estrutura, list) or not all(isinstance(s, dict) for s in estrutura):
        return None, json_error("estrutura must be a list of objects")
    secoes = [Section.from_dict(s) for s in estrutura]
    return [s for s in secoes if s.number], None


def validate_campos(
    body: dict[str, Any],
) -> tuple[dict[str, Any] | None, func.HttpResponse | None]:
    """Campo 'campos' obrigatório: objeto {campo: valor}."""
    campos = body.get("campos")
    if campos is None:
        return None, json_error("campos is required")
    if not isinstance(campos, dict):
        return None, json_error("campos must be an object")
    return campos, None
