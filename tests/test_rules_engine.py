"""
Tests for checklist_esp.rules - catálogo de regras e motor de avaliação
========================================================================
Unit tests (no network).
"""
import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from checklist_esp.models import STATUS_OK, STATUS_WARNING, STATUSES_VALIDOS, RuleOutcome
from checklist_esp.rules import (
    FASES,
    RULE_CATALOG,
    RuleEvaluator,
    evaluate_rules,
    parse_int_lenient,
    parse_percent,
    summarize,
)


def _por_id(campos):
    return {r.id: r for r in evaluate_rules(campos)}


# ─── Parsing leniente ─────────────────────────────────────────────────────────

class TestParsing:
    def test_parse_int_lenient(self):
        assert parse_int_lenient("8") == 8
        assert parse_int_lenient("08 dias") == 8
        assert parse_int_lenient("oito") == 0
        assert parse_int_lenient("") == 0
        assert parse_int_lenient(None) == 0

    def test_parse_percent(self):
        assert parse_percent("5") == 5.0
        assert parse_percent("0,5 %") == 0.5
        assert parse_percent("1.5%") == 1.5
        assert parse_percent("sim") == 0.0


# ─── Catálogo ─────────────────────────────────────────────────────────────────

class TestCatalogo:
    def test_ids_unicos(self):
        ids = [r.rule_id for r in RULE_CATALOG]
        assert len(ids) == len(set(ids)) == 32

    def test_fases_validas(self):
        for r in RULE_CATALOG:
            assert r.fase in FASES, r.rule_id

    def test_catalogo_agrupado_por_fase(self):
        """Fases aparecem em blocos contíguos, na ordem de FASES."""
        ordem = []
        for r in RULE_CATALOG:
            if not ordem or ordem[-1] != r.fase:
                ordem.append(r.fase)
        assert ordem == list(FASES)

    def test_mapa_vazio_so_lembretes_e_ausencias(self):
        ids = [r.id for r in evaluate_rules({})]
        assert ids == [
            "rule-1", "rule-2", "rule-11", "rule-13", "rule-15",
            "rule-16", "rule-17", "rule-24", "rule-25",
        ]

    def test_saida_na_ordem_do_catalogo(self):
        campos = {
            "criterioJulgamento": "menor-preco",
            "registroPreco": "sim",
            "subcontratacaoMe": "20%",
            "pncpPublicacao": "sim",
            "pncpPrazo": "10",
            "prazoImpugnacao": "3",
        }
        ids = [r.id for r in evaluate_rules(campos)]
        posicao = {r.rule_id: i for i, r in enumerate(RULE_CATALOG)}
        assert ids == sorted(ids, key=posicao.get)
        assert ids.index("rule-31") < ids.index("rule-11")

    def test_status_sempre_valido(self):
        for r in evaluate_rules({"registroPreco": "sim", "preferenciaMe": "nao"}):
            assert r.status in STATUSES_VALIDOS


# ─── Regras individuais ───────────────────────────────────────────────────────

class TestRegras:
    def test_criterio_ausente_warning(self):
        assert _por_id({})["rule-1"].status == STATUS_WARNING

    def test_criterio_definido_ok(self):
        r = _por_id({"criterioJulgamento": "menor-preco"})["rule-1"]
        assert r.status == STATUS_OK
        assert "menor-preco" in r.message

    def test_preferencia_me(self):
        assert _por_id({"preferenciaMe": "sim"})["rule-3"].status == STATUS_OK
        assert _por_id({"preferenciaMe": "nao"})["rule-3"].status == STATUS_WARNING
        assert "rule-3" not in _por_id({})

    def test_registro_precos_ok_nos_dois_casos(self):
        assert _por_id({"registroPreco": "sim"})["rule-4"].status == STATUS_OK
        assert _por_id({"registroPreco": "nao"})["rule-4"].status == STATUS_OK

    def test_intencao_so_com_srp(self):
        assert "rule-5" not in _por_id({"pncpIntencao": "sim"})
        assert _por_id({"registroPreco": "sim"})["rule-5"].status == STATUS_WARNING

    def test_cooperativas_vedado(self):
        assert _por_id({"cooperativas": "vedado"})["rule-7"].status == STATUS_WARNING
        assert _por_id({"cooperativas": "permitido"})["rule-7"].status == STATUS_OK

    def test_cota_25_nao_com_preferencia(self):
        r = _por_id({"cota25Me": "nao", "preferenciaMe": "sim"})["rule-10"]
        assert r.status == STATUS_WARNING

    def test_subcontratacao(self):
        assert _por_id({"subcontratacaoMe": "0%"})["rule-31"].status == STATUS_OK
        assert _por_id({"subcontratacaoMe": "30%"})["rule-31"].status == STATUS_OK
        assert _por_id({"subcontratacaoMe": "40%"})["rule-31"].status == STATUS_WARNING
        assert "rule-31" not in _por_id({"subcontratacaoMe": "a definir"})

    def test_garantia_participacao(self):
        r = _por_id({"garantiaParticipacao": "0,5"})["rule-22"]
        assert r.status == STATUS_OK
        assert "0,5%" in r.message
        assert _por_id({"garantiaParticipacao": "2"})["rule-22"].status == STATUS_WARNING
        assert "rule-22" not in _por_id({"garantiaParticipacao": "0"})

    def test_garantia_contratual(self):
        assert _por_id({"garantiaContratual": "5"})["rule-23"].status == STATUS_OK
        r = _por_id({"garantiaContratual": "10"})["rule-23"]
        assert r.status == STATUS_WARNING
        assert "10%" in r.guidance
        assert _por_id({"garantiaContratual": "sim"})["rule-23"].status == STATUS_OK

    def test_vistoria(self):
        assert _por_id({"visitaObrigatoria": "sim"})["rule-20"].status == STATUS_OK
        assert "rule-20" in _por_id({"visita": "sim", "visitaObrigatoria": "nao"})
        assert "rule-20" not in _por_id({"visita": "nao"})

    def test_orcamento_sigiloso_criterio(self):
        assert _por_id({"orcamentoSigiloso": "sim", "criterioJulgamento": "menor-preco"})["rule-28"].status == STATUS_OK
        r = _por_id({"orcamentoSigiloso": "sim", "criterioJulgamento": "tecnica-preco"})["rule-28"]
        assert r.status == STATUS_WARNING

    def test_orcamento_publico_exclusivo(self):
        assert "rule-30" in _por_id({"orcamentoPublico": "sim"})
        assert "rule-30" not in _por_id({"orcamentoPublico": "sim", "orcamentoSigiloso": "sim"})


# ─── Prazos ───────────────────────────────────────────────────────────────────

class TestPrazos:
    def test_pncp_sem_prazo_nao_gera_rule_26(self):
        resultados = _por_id({"pncpPublicacao": "sim"})
        assert "rule-26" not in resultados
        assert resultados["rule-25"].status == STATUS_OK

    def test_pncp_prazo_abaixo_do_minimo(self):
        r = _por_id({"pncpPublicacao": "sim", "pncpPrazo": "2"})["rule-26"]
        assert r.status == STATUS_WARNING
        assert "8" in r.message

    def test_pncp_prazo_adequado(self):
        assert _por_id({"pncpPublicacao": "sim", "pncpPrazo": "8"})["rule-26"].status == STATUS_OK

    def test_prazo_nao_numerico_eh_ausente(self):
        assert "rule-26" not in _por_id({"pncpPublicacao": "sim", "pncpPrazo": "oito"})

    def test_recursal(self):
        assert _por_id({"prazoRecursal": "3"})["rule-27"].status == STATUS_OK
        assert _por_id({"prazoRecursal": "2"})["rule-27"].status == STATUS_WARNING
        assert "rule-27" not in _por_id({})

    def test_impugnacao(self):
        assert _por_id({"prazoImpugnacao": "3"})["rule-32"].status == STATUS_OK
        assert _por_id({"prazoImpugnacao": "1"})["rule-32"].status == STATUS_WARNING


# ─── Motor ────────────────────────────────────────────────────────────────────

class TestEngine:
    def test_none_raises(self):
        with pytest.raises(TypeError):
            evaluate_rules(None)

    def test_filtro_por_fase(self):
        resultados = evaluate_rules({"pncpPublicacao": "sim", "pncpPrazo": "8"}, fases=["publicacao"])
        assert [r.id for r in resultados] == ["rule-25", "rule-26"]

    def test_status_invalido(self):
        def quebrada(campos):
            return RuleOutcome(id="rule-x", title="x", status="erro", message="", legal="")

        with pytest.raises(ValueError):
            evaluate_rules({}, catalogo=[RuleEvaluator("rule-x", "criterios", quebrada)])

    def test_deterministico(self):
        campos = {"registroPreco": "sim", "pncpIntencao": "sim", "pncpPrazoIntencao": "5"}
        assert evaluate_rules(campos) == evaluate_rules(dict(campos))

    def test_summarize(self):
        resultados = evaluate_rules({})
        resumo = summarize(resultados)
        assert resumo["total"] == len(resultados)
        assert resumo[STATUS_OK] + resumo[STATUS_WARNING] == resumo["total"]

    def test_to_dict_campos_opcionais(self):
        r = _por_id({"pncpPublicacao": "sim", "pncpPrazo": "2"})["rule-26"]
        d = r.to_dict()
        assert d["id"] == "rule-26"
        assert "guidance" in d
        assert d["sourceContext"] == "PNCP - Prazo"
