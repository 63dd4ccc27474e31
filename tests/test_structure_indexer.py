"""Tests for checklist_esp.structure.indexer - recuperação do sumário do edital."""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from checklist_esp.models import Section
from checklist_esp.observability import CollectingEventSink
from checklist_esp.structure import (
    compare_dotted_path,
    dotted_path_key,
    index_sections,
    sort_sections,
)


EDITAL = (
    "1. DO OBJETO\n"
    "Contratação de serviços de limpeza predial.\n"
    "1.1 O objeto será executado conforme termo de referência.\n"
    "2. DA PARTICIPAÇÃO\n"
    "Poderão participar empresas do ramo.\n"
    "2.10 Texto do subitem dez do capítulo.\n"
    "2.9 Texto do subitem nove do capítulo.\n"
)


# ── Ordenação por caminho pontuado ───────────────────────────────────────────


def test_dotted_path_key():
    assert dotted_path_key("3.5.2") == (3, 5, 2)
    assert dotted_path_key("") == (0,)


def test_compare_numeric_not_lexical():
    assert compare_dotted_path("2.10", "2.9") == 1
    assert compare_dotted_path("2.9", "2.10") == -1


def test_compare_missing_component_is_zero():
    assert compare_dotted_path("3", "3.0") == 0
    assert compare_dotted_path("3", "3.1") == -1


def test_sort_sections():
    secoes = [
        Section("10", "DEZ", "", 1),
        Section("2.1", "DOIS UM", "", 2),
        Section("2", "DOIS", "", 1),
    ]
    assert [s.number for s in sort_sections(secoes)] == ["2", "2.1", "10"]


# ── index_sections ───────────────────────────────────────────────────────────


class TestIndexSections:
    def test_sorted_output(self):
        """Saída sempre ordenada por caminho pontuado, não pela posição."""
        numeros = [s.number for s in index_sections(EDITAL)]
        assert numeros == ["1", "1.1", "2", "2.9", "2.10"]

    def test_main_section_title_and_level(self):
        secoes = {s.number: s for s in index_sections(EDITAL)}
        assert secoes["1"].title == "DO OBJETO"
        assert secoes["1"].level == 1
        assert secoes["2"].title == "DA PARTICIPAÇÃO"
        assert secoes["2.10"].level == 2

    def test_main_section_content_stops_at_next_section(self):
        secoes = {s.number: s for s in index_sections(EDITAL)}
        assert "limpeza predial" in secoes["1"].content
        assert "Poderão participar" not in secoes["1"].content

    def test_subitem_title_strips_trailing_punctuation(self):
        secoes = {s.number: s for s in index_sections(EDITAL)}
        assert secoes["1.1"].title == "O objeto será executado conforme termo de referência"

    def test_no_headers_returns_empty(self):
        assert index_sections("texto corrido sem nenhum cabeçalho numerado") == []

    def test_empty_text(self):
        assert index_sections("") == []

    def test_none_raises(self):
        with pytest.raises(TypeError):
            index_sections(None)

    def test_duplicate_numbers_keep_first(self):
        texto = EDITAL + "1. DO OBJETO REPETIDO NO ANEXO\nOutro conteúdo.\n"
        secoes = [s for s in index_sections(texto) if s.number == "1"]
        assert len(secoes) == 1
        assert secoes[0].title == "DO OBJETO"

    def test_fallback_when_few_sections(self):
        """Com menos de 5 seções, linhas capitalizadas também viram seção."""
        texto = "1. Objeto da contratação de serviços\nConteúdo qualquer do item.\n"
        secoes = index_sections(texto)
        assert [s.number for s in secoes] == ["1"]
        assert secoes[0].title.startswith("Objeto da contratação")

    def test_toc_subitems_ignored(self):
        texto = "3.1 Da vigência ........ 12\n3.2 Da execução PAGEREF _Toc123\n"
        assert index_sections(texto) == []

    def test_emits_events(self):
        sink = CollectingEventSink()
        index_sections(EDITAL, eventos=sink)
        nomes = sink.nomes()
        assert nomes.count("estrutura.secao") == 5
        assert nomes[-1] == "estrutura.concluida"
        assert "estrutura.fallback" not in nomes
