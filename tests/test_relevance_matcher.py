"""Tests for checklist_esp.structure.matcher - seção de origem de um trecho."""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from checklist_esp.models import Section
from checklist_esp.structure import find_section


SECOES = [
    Section("3", "DA PARTICIPAÇÃO", "Poderão participar cooperativas e consórcios.", 1),
    Section("5", "DO REGISTRO DE PREÇOS", "A ata de registro de preços terá validade de um ano.", 1),
    Section("6", "DA ATA", "A ata de registro de preços será assinada em cinco dias.", 1),
]


class TestFindSection:
    def test_exact_containment_case_insensitive(self):
        secao = find_section("ATA DE REGISTRO DE PREÇOS TERÁ VALIDADE", SECOES)
        assert secao.number == "5"

    def test_containment_first_in_list_order(self):
        secao = find_section("ata de registro de preços", SECOES)
        assert secao.number == "5"

    def test_word_score_fallback(self):
        """Sem contenção exata, vence a maior contagem de palavras longas."""
        secao = find_section("cooperativas e consórcios poderão", SECOES)
        assert secao.number == "3"

    def test_short_words_do_not_count(self):
        assert find_section("a de um em", SECOES) is None

    def test_score_tie_keeps_first(self):
        secao = find_section("assinatura registro", SECOES)
        assert secao.number == "5"

    def test_no_sections(self):
        assert find_section("qualquer trecho", []) is None

    def test_empty_snippet(self):
        assert find_section("", SECOES) is None
        assert find_section("   ", SECOES) is None
