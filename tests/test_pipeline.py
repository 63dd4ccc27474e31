"""
Tests for checklist_esp.pipeline - análise completa e fallback da extração por IA.
"""
import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from checklist_esp.models import Section
from checklist_esp.observability import CollectingEventSink
from checklist_esp.pipeline import CONTEXTO_IA, METODO_IA, METODO_REGEX, analisar_edital


EDITAL = (
    "1. DO OBJETO\n"
    "1.1 Registro de preços para aquisição de material de expediente.\n"
    "2. DO JULGAMENTO\n"
    "2.1 CRITÉRIO DE JULGAMENTO: menor preço por item.\n"
    "3. DA PUBLICIDADE\n"
    "3.1 O aviso será objeto de divulgação no PNCP com antecedência mínima de 8 (oito) dias úteis.\n"
)


class TestRegex:
    def test_relatorio_completo(self):
        report = analisar_edital(EDITAL)
        assert report.metodo == METODO_REGEX
        assert report.aviso_ia is None
        assert [s.number for s in report.secoes][:2] == ["1", "1.1"]
        assert report.campos["criterioJulgamento"] == "menor-preco"
        assert any(r.id == "rule-26" and r.status == "ok" for r in report.regras)

    def test_fonte_aponta_secao(self):
        report = analisar_edital(EDITAL)
        fonte = next(f for f in report.fontes if f.field == "criterioJulgamento")
        # contenção exata, primeira seção na ordem pontuada
        assert fonte.section_number == "2"

    def test_secoes_injetadas_nao_reindexa(self):
        sink = CollectingEventSink()
        report = analisar_edital(EDITAL, secoes=[], eventos=sink)
        assert report.secoes == []
        assert "estrutura.concluida" not in sink.nomes()

    def test_to_dict(self):
        d = analisar_edital(EDITAL).to_dict()
        assert set(d) == {"extractedData", "sources", "documentStructure", "rules", "extractionMethod"}
        assert d["extractionMethod"] == "regex"

    def test_none_raises(self):
        with pytest.raises(TypeError):
            analisar_edital(None)


class TestExtratorIA:
    def test_ia_ok(self):
        def extrator(texto):
            return {"criterioJulgamento": "menor-preco", "registroPreco": "sim", "inventado": "x", "visita": ""}

        report = analisar_edital(EDITAL, extrator_ia=extrator)
        assert report.metodo == METODO_IA
        assert report.campos == {"registroPreco": "sim", "criterioJulgamento": "menor-preco"}
        assert all(f.context == CONTEXTO_IA for f in report.fontes)
        assert any(r.id == "rule-4" for r in report.regras)

    def test_ia_falha_cai_no_regex(self):
        def extrator(texto):
            raise RuntimeError("timeout")

        sink = CollectingEventSink()
        report = analisar_edital(EDITAL, extrator_ia=extrator, eventos=sink)
        assert report.metodo == METODO_REGEX
        assert "RuntimeError" in report.aviso_ia
        assert report.campos["criterioJulgamento"] == "menor-preco"
        assert "pipeline.ia_falhou" in sink.nomes()
        assert report.to_dict()["aiWarning"] == report.aviso_ia

    def test_ia_retorno_invalido_cai_no_regex(self):
        report = analisar_edital(EDITAL, extrator_ia=lambda texto: ["nao", "e", "dict"])
        assert report.metodo == METODO_REGEX
        assert "ValueError" in report.aviso_ia

    def test_ia_traz_estrutura(self):
        """Com {"campos", "estrutura"} a IA substitui também as seções."""
        def extrator(texto):
            return {
                "campos": {"registroPreco": "sim"},
                "estrutura": [
                    {"number": "2", "title": "DO JULGAMENTO", "content": "menor preço"},
                    {"number": "1", "title": "DO OBJETO", "content": "registro de preços"},
                    {"title": "sem número"},
                ],
            }

        sink = CollectingEventSink()
        report = analisar_edital(EDITAL, extrator_ia=extrator, eventos=sink)
        assert report.metodo == METODO_IA
        assert report.campos == {"registroPreco": "sim"}
        assert [s.number for s in report.secoes] == ["1", "2"]
        assert [s["number"] for s in report.to_dict()["documentStructure"]] == ["1", "2"]
        # indexador não roda quando a IA traz a estrutura
        assert not any(n.startswith("estrutura.") for n in sink.nomes())

    def test_ia_sem_estrutura_usa_indexador(self):
        report = analisar_edital(EDITAL, extrator_ia=lambda texto: {"campos": {"registroPreco": "sim"}})
        assert report.metodo == METODO_IA
        assert [s.number for s in report.secoes][:2] == ["1", "1.1"]

    def test_estrutura_informada_vence_a_da_ia(self):
        secoes = [Section("9", "DO JULGAMENTO", "menor preço por item", 1)]

        def extrator(texto):
            return {"campos": {}, "estrutura": [{"number": "1", "title": "DO OBJETO"}]}

        report = analisar_edital(EDITAL, secoes=secoes, extrator_ia=extrator)
        assert report.metodo == METODO_IA
        assert [s.number for s in report.secoes] == ["9"]

    def test_ia_estrutura_invalida_cai_no_regex(self):
        report = analisar_edital(EDITAL, extrator_ia=lambda texto: {"campos": {}, "estrutura": "1. DO OBJETO"})
        assert report.metodo == METODO_REGEX
        assert "ValueError" in report.aviso_ia
        assert [s.number for s in report.secoes][:2] == ["1", "1.1"]
