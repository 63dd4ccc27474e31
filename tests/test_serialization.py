"""Tests for checklist_esp.serialization - exportação/importação JSON do formulário."""

import json
import logging
import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from checklist_esp.models import FIELD_NAMES
from checklist_esp.rules import evaluate_rules
from checklist_esp.serialization import export_fields_json, import_fields_json


CAMPOS = {
    "registroPreco": "sim",
    "criterioJulgamento": "menor-preco",
    "pncpPublicacao": "sim",
    "pncpPrazo": "2",
    "garantiaContratual": "5",
    "objetoDescricao": "Aquisição de material de expediente",
}


# ── export ───────────────────────────────────────────────────────────────────


def test_export_ordem_do_formulario():
    doc = json.loads(export_fields_json(CAMPOS))
    ordem = [n for n in FIELD_NAMES if n in CAMPOS]
    assert list(doc) == ordem


def test_export_preserva_acentos():
    texto = export_fields_json(CAMPOS)
    assert "Aquisição" in texto


def test_export_descarta_desconhecidos_e_vazios():
    doc = json.loads(export_fields_json({"registroPreco": "sim", "pncpPrazo": "  ", "foo": "bar"}))
    assert doc == {"registroPreco": "sim"}


def test_export_numeros_viram_texto():
    doc = json.loads(export_fields_json({"pncpPrazo": 8, "garantiaContratual": 5.0}))
    assert doc == {"pncpPrazo": "8", "garantiaContratual": "5"}


# ── import ───────────────────────────────────────────────────────────────────


class TestImport:
    def test_json_invalido(self):
        with pytest.raises(ValueError):
            import_fields_json("{nao e json")

    def test_raiz_nao_objeto(self):
        with pytest.raises(ValueError):
            import_fields_json("[1, 2, 3]")

    def test_none(self):
        with pytest.raises(ValueError):
            import_fields_json(None)

    def test_chaves_desconhecidas_ignoradas(self, caplog):
        with caplog.at_level(logging.INFO, logger="checklist_esp.serialization"):
            campos = import_fields_json('{"registroPreco": "sim", "campoLegado": "x"}')
        assert campos == {"registroPreco": "sim"}
        assert "campoLegado" in caplog.text

    def test_valores_nao_textuais_sao_ausentes(self):
        campos = import_fields_json('{"registroPreco": true, "pncpPrazo": null, "visita": ["sim"], "amostras": ""}')
        assert campos == {}

    def test_numero_vira_texto(self):
        assert import_fields_json('{"pncpPrazo": 8}') == {"pncpPrazo": "8"}


def test_round_trip_preserva_avaliacao():
    """evaluate(import(export(m))) == evaluate(m)"""
    restaurado = import_fields_json(export_fields_json(CAMPOS))
    assert evaluate_rules(restaurado) == evaluate_rules(CAMPOS)
