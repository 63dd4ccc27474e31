"""
Requisitos técnicos: vistoria, prova de conceito, amostras
==========================================================

- visita / visitaObrigatoria
    regra_visita: menção a visita/vistoria técnica e janela de ±200 chars
    para obrigatória / facultativa / declaração substitutiva.
    regra_visita_explicita: declarações explícitas ("Vistoria: NÃO",
    "A visita técnica é obrigatória", "é facultada") refinam o resultado
    anterior.
- demonstracao: demonstração / prova de conceito obrigatória
- amostras: menção a amostra; negação próxima inverte para "nao"
"""

import re
from typing import List

from checklist_esp.models import NAO, SIM
from checklist_esp.extractors.base import (
    Atribuicao,
    ExtractionContext,
    compilar,
    buscar,
    janela_match,
    tem_negacao,
)

JANELA_VISITA = 200
JANELA_NEGACAO = 150


# ── Visita técnica ───────────────────────────────────────────────────────────

RE_VISITA = re.compile(
    r"(?:visita|vistoria)[^\n]{0,100}?(?:t[ée]cnica|pr[ée]via|local)",
    re.IGNORECASE,
)

RE_OBRIGATORIA = re.compile(r"obrigat[óo]ria|imprescind[íi]vel", re.IGNORECASE)
RE_FACULTATIVA = re.compile(r"facultativa|opcional|n[ãa]o\s+obrigat[óo]ria", re.IGNORECASE)
RE_DECLARACAO = re.compile(r"declara[çc][ãa]o[^\n]{0,150}?conhecimento", re.IGNORECASE)

RE_VISITA_OBRIGATORIA = re.compile(r"(?:visita|vistoria)[^\n]{0,150}?obrigat[óo]ria", re.IGNORECASE)
RE_VISITA_FACULTATIVA = re.compile(r"(?:visita|vistoria)[^\n]{0,150}?(?:facultativa|opcional)", re.IGNORECASE)


def regra_visita(ctx: ExtractionContext) -> List[Atribuicao]:
    m = RE_VISITA.search(ctx.texto)
    if not m:
        return []

    atribuicoes = [Atribuicao("visita", SIM, m.group(0))]
    contexto = janela_match(ctx.texto, m, JANELA_VISITA)

    if RE_OBRIGATORIA.search(contexto) and not tem_negacao(contexto):
        ev = RE_VISITA_OBRIGATORIA.search(ctx.texto)
        atribuicoes.append(Atribuicao("visitaObrigatoria", SIM, ev.group(0) if ev else None))
    elif RE_FACULTATIVA.search(contexto):
        ev = RE_VISITA_FACULTATIVA.search(ctx.texto)
        atribuicoes.append(Atribuicao("visitaObrigatoria", NAO, ev.group(0) if ev else None))
    else:
        ev = RE_DECLARACAO.search(contexto)
        if ev:
            # vistoria substituível por declaração de conhecimento
            atribuicoes.append(Atribuicao("visitaObrigatoria", NAO, ev.group(0)))
    return atribuicoes


# ── Declarações explícitas ───────────────────────────────────────────────────

PADROES_VISITA_NAO = compilar([
    r"(?:vistoria|visita\s+t[ée]cnica)\s*\??\s*:\s*n[ãa]o\b",
    r"n[ãa]o\s+(?:ser[áa]\s+)?exigid[oa]\s+(?:a\s+)?(?:visita|vistoria)",
    r"dispensad[oa]\s+(?:a\s+)?(?:exig[êe]ncia\s+de\s+)?(?:visita|vistoria)",
    r"sem\s+(?:necessidade\s+de\s+)?(?:visita|vistoria)",
])

PADROES_VISITA_OBRIGATORIA = compilar([
    r"visita\s+t[ée]cnica\s+[ée]\s+obrigat[óo]ri[oa]",
    r"vistoria\s+(?:t[ée]cnica\s+)?[ée]\s+obrigat[óo]ri[oa]",
    r"(?<!n[ãa]o\s)(?:visita|vistoria)\s+(?:t[ée]cnica\s+)?obrigat[óo]ri[oa]",
    r"dever[ãa]o\s+efetuar\s+vistoria",
    r"obrigatoriedade\s+(?:de\s+)?(?:visita|vistoria)",
])

PADROES_VISITA_FACULTATIVA = compilar([
    r"visita\s+t[ée]cnica\s+[ée]\s+faculta",
    r"vistoria\s+(?:t[ée]cnica\s+)?[ée]\s+faculta",
    r"(?:visita|vistoria)\s+(?:t[ée]cnica\s+)?\(?facultativ",
    r"(?:visita|vistoria)[^.\n]{0,40}?n[ãa]o\s+[ée]\s+obrigat[óo]ri",
    r"(?:as\s+)?licitantes\s+poder[ãa]o\s+vistoriar",
    r"opte\s+por\s+n[ãa]o\s+realizar\s+(?:a\s+)?vistoria",
])


def regra_visita_explicita(ctx: ExtractionContext) -> List[Atribuicao]:
    m = buscar(PADROES_VISITA_NAO, ctx.texto)
    if m:
        return [
            Atribuicao("visita", NAO, m.group(0), refinar=True),
            Atribuicao("visitaObrigatoria", NAO, m.group(0), refinar=True),
        ]

    m = buscar(PADROES_VISITA_OBRIGATORIA, ctx.texto)
    if m:
        return [
            Atribuicao("visita", SIM, m.group(0), refinar=True),
            Atribuicao("visitaObrigatoria", SIM, m.group(0), refinar=True),
        ]

    m = buscar(PADROES_VISITA_FACULTATIVA, ctx.texto)
    if m:
        return [
            Atribuicao("visita", SIM, m.group(0), refinar=True),
            Atribuicao("visitaObrigatoria", NAO, m.group(0), refinar=True),
        ]
    return []


# ── Prova de conceito ────────────────────────────────────────────────────────

PADROES_DEMONSTRACAO_NAO = compilar([
    r"n[ãa]o\s+(?:haver[áa]|h[áa]|ser[áa])\s+(?:exig[êe]ncia\s+de\s+|exigida\s+)?(?:prova\s+de\s+conceito|demonstra[çc][ãa]o)",
    r"dispensad[oa]\s+(?:a\s+)?(?:prova\s+de\s+conceito|demonstra[çc][ãa]o)",
    r"sem\s+(?:exig[êe]ncia\s+de\s+)?prova\s+de\s+conceito",
])

RE_DEMONSTRACAO = re.compile(
    r"(?:demonstra[çc][ãa]o|prova\s+de\s+conceito)[^\n]{0,150}?(?:obrigat[óo]ria|exigida)",
    re.IGNORECASE,
)


def regra_demonstracao(ctx: ExtractionContext) -> List[Atribuicao]:
    m = buscar(PADROES_DEMONSTRACAO_NAO, ctx.texto)
    if m:
        return [Atribuicao("demonstracao", NAO, m.group(0))]

    m = RE_DEMONSTRACAO.search(ctx.texto)
    if m and not tem_negacao(janela_match(ctx.texto, m, JANELA_NEGACAO)):
        return [Atribuicao("demonstracao", SIM, m.group(0))]
    return []


# ── Amostras ─────────────────────────────────────────────────────────────────

PADROES_AMOSTRA_NAO = compilar([
    r"exige\s+amostras?\s*\??\s*:?\s*n[ãa]o\b",
    r"n[ãa]o\s+(?:ser[áa]\s+|ser[ãa]o\s+)?exigid[oa]s?\s+amostras?",
    r"(?:fica\s+)?dispensad[oa]s?[^.\n]{0,60}?amostras?",
    r"sem\s+(?:necessidade\s+de\s+)?amostras?",
])

RE_AMOSTRA = re.compile(r"amostras?[^.]{0,80}", re.IGNORECASE)


def regra_amostras(ctx: ExtractionContext) -> List[Atribuicao]:
    m = buscar(PADROES_AMOSTRA_NAO, ctx.texto)
    if m:
        return [Atribuicao("amostras", NAO, m.group(0))]

    m = RE_AMOSTRA.search(ctx.texto)
    if not m:
        return []
    negado = tem_negacao(janela_match(ctx.texto, m, 100))
    return [Atribuicao("amostras", NAO if negado else SIM, m.group(0))]
