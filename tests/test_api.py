"""
Tests for checklist_esp.api - handlers HTTP (Azure Functions)
=============================================================
Requests montadas diretamente com func.HttpRequest (sem host/rede).
"""
import json
import logging
import os
import sys
from unittest.mock import patch

import azure.functions as func

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from checklist_esp.api.parse_document import handle_parse_document
from checklist_esp.api.validate_rules import handle_export_fields, handle_validate_rules
from checklist_esp.security.error_shield import nome_endpoint


EDITAL = (
    "1. DO OBJETO\n"
    "1.1 Registro de preços para aquisição de material de expediente para as escolas.\n"
    "2. DO JULGAMENTO\n"
    "2.1 CRITÉRIO DE JULGAMENTO: menor preço por item.\n"
    "3. DA PUBLICIDADE\n"
    "3.1 O aviso será objeto de divulgação no PNCP com antecedência mínima de 8 (oito) dias úteis.\n"
)


def _req(route, body=None, raw=None, headers=None):
    if raw is None:
        raw = json.dumps(body).encode("utf-8") if body is not None else b""
    return func.HttpRequest(
        method="POST",
        url=f"/api/{route}",
        body=raw,
        headers=headers or {},
    )


def _json(resp):
    return json.loads(resp.get_body().decode("utf-8"))


# ─── Validação de entrada ─────────────────────────────────────────────────────

class TestValidacao:
    def test_body_vazio(self):
        resp = handle_parse_document(_req("parse_document"))
        assert resp.status_code == 400
        assert "empty" in _json(resp)["error"]

    def test_json_invalido(self):
        resp = handle_parse_document(_req("parse_document", raw=b"{texto:"))
        assert resp.status_code == 400

    def test_json_nao_objeto(self):
        resp = handle_validate_rules(_req("validate_rules", body=[1, 2]))
        assert resp.status_code == 400

    def test_body_grande_demais(self):
        with patch("checklist_esp.config.MAX_BODY_BYTES", 10):
            resp = handle_parse_document(_req("parse_document", body={"texto": EDITAL}))
        assert resp.status_code == 413

    def test_texto_ausente(self):
        resp = handle_parse_document(_req("parse_document", body={"outro": 1}))
        assert resp.status_code == 400
        assert "texto" in _json(resp)["error"]

    def test_texto_curto(self):
        resp = handle_parse_document(_req("parse_document", body={"texto": "curto"}))
        assert resp.status_code == 400
        assert "curto" in _json(resp)["error"]

    def test_campos_tipo_errado(self):
        resp = handle_validate_rules(_req("validate_rules", body={"campos": "sim"}))
        assert resp.status_code == 400


# ─── parse_document ───────────────────────────────────────────────────────────

class TestParseDocument:
    def test_relatorio(self):
        resp = handle_parse_document(_req("parse_document", body={"texto": EDITAL}))
        assert resp.status_code == 200
        data = _json(resp)
        assert data["extractionMethod"] == "regex"
        assert data["extractedData"]["criterioJulgamento"] == "menor-preco"
        assert "llmEnabled" not in data
        numeros = [s["number"] for s in data["documentStructure"]]
        assert numeros[:2] == ["1", "1.1"]

    def test_estrutura_informada(self):
        estrutura = [{"number": "9", "title": "DO JULGAMENTO", "content": "CRITÉRIO DE JULGAMENTO: menor preço por item."}]
        resp = handle_parse_document(_req("parse_document", body={"texto": EDITAL, "estrutura": estrutura}))
        data = _json(resp)
        assert [s["number"] for s in data["documentStructure"]] == ["9"]
        fonte = next(f for f in data["sources"] if f["field"] == "criterioJulgamento")
        assert fonte["editalItem"] == "9"

    def test_estrutura_invalida(self):
        resp = handle_parse_document(_req("parse_document", body={"texto": EDITAL, "estrutura": "x"}))
        assert resp.status_code == 400

    def test_erro_interno_vira_500_com_request_id(self):
        with patch("checklist_esp.api.parse_document.analisar_edital", side_effect=RuntimeError("boom")):
            resp = handle_parse_document(
                _req("parse_document", body={"texto": EDITAL}, headers={"X-Request-ID": "abc-123"})
            )
        assert resp.status_code == 500
        data = _json(resp)
        assert data["request_id"] == "abc-123"
        assert "boom" not in json.dumps(data)
        assert resp.headers["X-Request-ID"] == "abc-123"

    def test_erro_interno_loga_endpoint_do_blueprint(self, caplog):
        """Traceback vai para o log com o nome da rota, nunca para a resposta."""
        with patch("checklist_esp.api.validate_rules.evaluate_rules", side_effect=RuntimeError("boom")), \
                caplog.at_level(logging.ERROR, logger="checklist_esp.security"):
            resp = handle_validate_rules(_req("validate_rules", body={"campos": {"registroPreco": "sim"}}))
        assert resp.status_code == 500
        data = _json(resp)
        assert data["error"] == "Internal server error"
        assert data["hint"]
        assert resp.headers["X-Request-ID"] == data["request_id"]
        linhas = [r for r in caplog.records if "[UNHANDLED]" in r.getMessage()]
        assert len(linhas) == 1
        assert "endpoint=validate_rules" in linhas[0].getMessage()
        assert "RuntimeError: boom" in caplog.text

    def test_nome_endpoint(self):
        assert nome_endpoint(handle_parse_document) == "parse_document"
        assert nome_endpoint(handle_export_fields) == "export_fields"


# ─── validate_rules / export_fields ───────────────────────────────────────────

class TestValidateRules:
    def test_regras_e_resumo(self):
        body = {"campos": {"pncpPublicacao": "sim", "pncpPrazo": "2", "campoLegado": "x"}}
        resp = handle_validate_rules(_req("validate_rules", body=body))
        assert resp.status_code == 200
        data = _json(resp)
        rule_26 = next(r for r in data["rules"] if r["id"] == "rule-26")
        assert rule_26["status"] == "warning"
        assert data["resumo"]["total"] == len(data["rules"])

    def test_campos_ausente(self):
        resp = handle_validate_rules(_req("validate_rules", body={}))
        assert resp.status_code == 400


class TestExportFields:
    def test_export(self):
        body = {"campos": {"pncpPrazo": 8, "registroPreco": "sim", "foo": "bar"}}
        resp = handle_export_fields(_req("export_fields", body=body))
        assert resp.status_code == 200
        assert _json(resp) == {"registroPreco": "sim", "pncpPrazo": "8"}
