# checklist_esp/structure/matcher.py
"""
Localiza a seção do edital de onde veio um trecho extraído.
"""
from __future__ import annotations

from typing import Optional, Sequence

from checklist_esp.models import Section

# Palavras com mais de 4 letras contam como significativas
MIN_CHARS_PALAVRA = 5


def _palavras_significativas(snippet_lower: str):
    return [w for w in snippet_lower.split() if len(w) >= MIN_CHARS_PALAVRA]


def find_section(snippet: str, sections: Sequence[Section]) -> Optional[Section]:
    """
    Retorna a seção mais relevante para o trecho, ou None.

    1. Contenção exata (case-insensitive) no conteúdo, na ordem da lista.
    2. Senão, pontua cada seção pelo número de palavras significativas do
       trecho presentes em título + conteúdo. Maior pontuação estrita
       vence; empate mantém a primeira.
    """
    if not sections or not snippet or not snippet.strip():
        return None

    snippet_lower = snippet.lower()

    for secao in sections:
        if snippet_lower in secao.content.lower():
            return secao

    palavras = _palavras_significativas(snippet_lower)
    melhor: Optional[Section] = None
    melhor_score = 0

    for secao in sections:
        texto_secao = (secao.title + " " + secao.content).lower()
        score = sum(1 for w in palavras if w in texto_secao)
        if score > melhor_score:
            melhor, melhor_score = secao, score

    return melhor
