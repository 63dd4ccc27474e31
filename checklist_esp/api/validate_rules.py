# checklist_esp/api/validate_rules.py
"""
Handlers que operam sobre um mapa de campos já preenchido (formulário).

validate_rules: roda o checklist legal sobre os campos.
export_fields: devolve o documento JSON canônico dos campos.
"""
import json
import logging

import azure.functions as func

from checklist_esp.rules import evaluate_rules, summarize
from checklist_esp.security import safe_handler, validate_campos, validate_json_body
from checklist_esp.serialization import export_fields_json, import_fields_json

logger = logging.getLogger(__name__)


def _normalizar(campos: dict) -> dict:
    # mesma normalização do import: chaves desconhecidas e vazios saem
    return import_fields_json(json.dumps(campos, ensure_ascii=False))


@safe_handler
def handle_validate_rules(req: func.HttpRequest) -> func.HttpResponse:
    body, err = validate_json_body(req)
    if err:
        return err

    campos, err = validate_campos(body)
    if err:
        return err

    resultados = evaluate_rules(_normalizar(campos))
    resumo = summarize(resultados)
    logger.info(f"validate_rules: {resumo}")

    return func.HttpResponse(
        json.dumps(
            {"rules": [r.to_dict() for r in resultados], "resumo": resumo},
            ensure_ascii=False,
        ),
        status_code=200,
        mimetype="application/json",
    )


@safe_handler
def handle_export_fields(req: func.HttpRequest) -> func.HttpResponse:
    body, err = validate_json_body(req)
    if err:
        return err

    campos, err = validate_campos(body)
    if err:
        return err

    return func.HttpResponse(
        export_fields_json(_normalizar(campos)),
        status_code=200,
        mimetype="application/json",
    )
