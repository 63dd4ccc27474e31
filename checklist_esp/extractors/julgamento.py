"""
Julgamento e Disputa
====================

- criterioJulgamento (+ precoBase quando maior desconto)
- escopoJulgamento
- modoDisputa
- intervaloMinimo / lanceIntermediario
- criterioDesempate / criterioDesempateSorteio (Art. 60)
"""

import re
from typing import List

from checklist_esp.models import NAO, SIM
from checklist_esp.extractors.base import (
    Atribuicao,
    Categoria,
    ExtractionContext,
    compilar,
    buscar,
    eh_sigiloso,
    janela_match,
    normalizar_valor,
    primeira_correspondencia,
    regra_categoria,
    tem_negacao,
)


# ── Critério de julgamento ───────────────────────────────────────────────────

TABELA_CRITERIO = (
    Categoria(
        "menor-preco",
        (r"menor\s+pre[çc]o",),
        (r"menor\s+pre[çc]o[^.]{0,50}",),
    ),
    Categoria(
        "maior-desconto",
        (r"maior\s+desconto", r"desconto\s+sobre", r"pre[çc]o-base"),
        (r"maior\s+desconto[^.]{0,50}", r"desconto\s+sobre[^.]{0,50}"),
    ),
    Categoria(
        "melhor-tecnica",
        (r"melhor\s+t[ée]cnica",),
        (r"melhor\s+t[ée]cnica[^.]{0,50}",),
    ),
    Categoria(
        "tecnica-preco",
        (r"t[ée]cnica\s+e\s+pre[çc]o",),
        (r"t[ée]cnica\s+e\s+pre[çc]o[^.]{0,50}",),
    ),
)

RE_PRECO_BASE = re.compile(
    r"(?:pre[çc]o-base|pre[çc]o\s+base|valor\s+de\s+refer[êe]ncia)[^\n]{0,200}?r\$\s*([\d.,]+)",
    re.IGNORECASE,
)


def regra_criterio_julgamento(ctx: ExtractionContext) -> List[Atribuicao]:
    achado = primeira_correspondencia(TABELA_CRITERIO, ctx.texto)
    if not achado:
        return []
    valor, evidencia = achado
    atribuicoes = [Atribuicao("criterioJulgamento", valor, evidencia)]

    if valor == "maior-desconto":
        m = RE_PRECO_BASE.search(ctx.texto)
        if m and not eh_sigiloso(janela_match(ctx.texto, m, 200)):
            preco = normalizar_valor(m.group(1))
            if preco:
                atribuicoes.append(Atribuicao("precoBase", preco, m.group(0)))
    return atribuicoes


# ── Escopo do julgamento ─────────────────────────────────────────────────────

TABELA_ESCOPO = (
    Categoria(
        "item",
        (r"julgamento\s+por\s+item", r"escopo\s+por\s+item"),
        (r"julgamento\s+por\s+item[^.]{0,50}", r"escopo\s+por\s+item[^.]{0,50}"),
    ),
    Categoria(
        "grupo",
        (r"julgamento\s+por\s+grupo", r"julgamento\s+por\s+lote", r"escopo\s+por\s+grupo"),
        (
            r"julgamento\s+por\s+grupo[^.]{0,50}",
            r"julgamento\s+por\s+lote[^.]{0,50}",
            r"escopo\s+por\s+grupo[^.]{0,50}",
        ),
    ),
    Categoria(
        "global",
        (r"julgamento\s+global", r"escopo\s+global"),
        (r"julgamento\s+global[^.]{0,50}", r"escopo\s+global[^.]{0,50}"),
    ),
)

regra_escopo_julgamento = regra_categoria("escopoJulgamento", TABELA_ESCOPO)


# ── Modo de disputa ──────────────────────────────────────────────────────────
# Modos combinados primeiro: "modo aberto" também casaria em "modo aberto e fechado".

TABELA_MODO_DISPUTA = (
    Categoria(
        "aberto-fechado",
        (r"aberto\s*(?:-|e)\s*fechado",),
        (r"aberto\s*(?:-|e)\s*fechado[^.]{0,50}",),
    ),
    Categoria(
        "fechado-aberto",
        (r"fechado\s*(?:-|e)\s*aberto",),
        (r"fechado\s*(?:-|e)\s*aberto[^.]{0,50}",),
    ),
    Categoria(
        "aberto",
        (r"modo\s+(?:de\s+disputa\s+)?aberto", r"disputa\s+aberta"),
        (r"modo\s+(?:de\s+disputa\s+)?aberto[^.]{0,50}", r"disputa\s+aberta[^.]{0,50}"),
    ),
    Categoria(
        "fechado",
        (r"modo\s+(?:de\s+disputa\s+)?fechado", r"disputa\s+fechada"),
        (r"modo\s+(?:de\s+disputa\s+)?fechado[^.]{0,50}", r"disputa\s+fechada[^.]{0,50}"),
    ),
)

regra_modo_disputa = regra_categoria("modoDisputa", TABELA_MODO_DISPUTA)


# ── Lances ───────────────────────────────────────────────────────────────────

RE_INTERVALO_MINIMO = re.compile(
    r"intervalo\s+m[íi]nimo[^\n]{0,150}?(r\$\s*\d[\d.]*(?:,\d+)?|\d+(?:[.,]\d+)?\s*%)",
    re.IGNORECASE,
)

RE_LANCE_INTERMEDIARIO = re.compile(r"lances?\s+intermedi[áa]ri[oa]s?[^.]{0,80}", re.IGNORECASE)


def regra_intervalo_lances(ctx: ExtractionContext) -> List[Atribuicao]:
    atribuicoes = []

    m = RE_INTERVALO_MINIMO.search(ctx.texto)
    if m:
        valor = re.sub(r"\s+", " ", m.group(1)).strip().rstrip(".,")
        if valor.lower().startswith("r$"):
            valor = "R$" + valor[2:]
        atribuicoes.append(Atribuicao("intervaloMinimo", valor, m.group(0)))

    m = RE_LANCE_INTERMEDIARIO.search(ctx.texto)
    if m:
        negado = tem_negacao(janela_match(ctx.texto, m, 150))
        atribuicoes.append(Atribuicao("lanceIntermediario", NAO if negado else SIM, m.group(0)))

    return atribuicoes


# ── Desempate ────────────────────────────────────────────────────────────────

PADROES_DESEMPATE = compilar([
    r"crit[ée]rios?\s+de\s+desempate[^.]{0,80}",
    r"desempate[^\n]{0,120}?art(?:igo|\.)?\s*60[^.]{0,40}",
    r"empate\s+entre\s+(?:duas|dois|as)\s+ou\s+mais\s+propostas[^.]{0,80}",
])

PADROES_SORTEIO = compilar([
    r"desempate[^\n]{0,300}?sorteio",
    r"sorteio[^\n]{0,200}?(?:desempate|empate)",
])


def regra_desempate(ctx: ExtractionContext) -> List[Atribuicao]:
    atribuicoes = []

    m = buscar(PADROES_DESEMPATE, ctx.texto)
    if m:
        atribuicoes.append(Atribuicao("criterioDesempate", SIM, m.group(0)))

    m = buscar(PADROES_SORTEIO, ctx.texto)
    if m:
        negado = tem_negacao(janela_match(ctx.texto, m, 100))
        atribuicoes.append(Atribuicao("criterioDesempateSorteio", NAO if negado else SIM, m.group(0)))

    return atribuicoes
