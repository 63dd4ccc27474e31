"""
Garantias (Art. 96 e seguintes, Lei 14.133/2021)
================================================

- garantiaContratual: percentual sobre o valor do contrato
- garantiaParticipacao: percentual sobre o valor estimado (garantia de proposta)

"0" = edital declara expressamente que a garantia não será exigida.
Ausência do campo = não identificado.

Padrões comuns:
- "Não haverá exigência da garantia da contratação dos artigos 96 e seguintes"
- "prestará garantia contratual no valor correspondente a 5% do valor do Contrato"
- "garantia de proposta de 1% (um por cento) do valor estimado"
"""

from typing import List

from checklist_esp.extractors.base import (
    PERCENTUAL,
    Atribuicao,
    ExtractionContext,
    compilar,
    buscar,
    janela_match,
    normalizar_percentual,
    tem_negacao,
)

JANELA_NEGACAO = 150

_CONTRATUAL = r"(?:contratual|(?:da\s+)?contrata[çc][ãa]o|de\s+execu[çc][ãa]o|do\s+contrato)"
_PARTICIPACAO = r"(?:de\s+)?(?:participa[çc][ãa]o|proposta)"


# ── Garantia contratual ──────────────────────────────────────────────────────

PADROES_CONTRATUAL_NAO = compilar([
    rf"n[ãa]o\s+haver[áa]\s+exig[êe]ncia\s+(?:da\s+|de\s+)?garantia\s+{_CONTRATUAL}",
    rf"n[ãa]o\s+(?:ser[áa]\s+)?exigid[oa]\s+(?:a\s+)?garantia\s+{_CONTRATUAL}",
    rf"garantia\s+{_CONTRATUAL}[^.\n]{{0,60}}?n[ãa]o\s+(?:ser[áa]\s+)?exigid[oa]",
    rf"dispensad[oa]\s+(?:a\s+)?(?:exig[êe]ncia\s+de\s+)?garantia\s+{_CONTRATUAL}",
])

PADROES_CONTRATUAL = compilar([
    rf"garantia\s+{_CONTRATUAL}[^\n]{{0,150}}?{PERCENTUAL}",
    rf"prestar[áa]\s+garantia[^\n]{{0,150}}?{PERCENTUAL}",
])


def _garantia_contratual(ctx: ExtractionContext) -> List[Atribuicao]:
    m = buscar(PADROES_CONTRATUAL_NAO, ctx.texto)
    if m:
        return [Atribuicao("garantiaContratual", "0", m.group(0))]

    m = buscar(PADROES_CONTRATUAL, ctx.texto)
    if m and not tem_negacao(janela_match(ctx.texto, m, JANELA_NEGACAO)):
        return [Atribuicao("garantiaContratual", normalizar_percentual(m.group(1)), m.group(0))]
    return []


# ── Garantia de participação ─────────────────────────────────────────────────

PADROES_PARTICIPACAO_NAO = compilar([
    rf"n[ãa]o\s+haver[áa]\s+exig[êe]ncia\s+(?:da\s+|de\s+)?garantia\s+{_PARTICIPACAO}",
    rf"n[ãa]o\s+(?:ser[áa]\s+)?exigid[oa]\s+(?:a\s+)?garantia\s+{_PARTICIPACAO}",
    rf"garantia\s+{_PARTICIPACAO}[^.\n]{{0,60}}?n[ãa]o\s+(?:ser[áa]\s+)?exigid[oa]",
    rf"dispensad[oa]\s+(?:a\s+)?(?:exig[êe]ncia\s+de\s+)?garantia\s+{_PARTICIPACAO}",
])

PADROES_PARTICIPACAO = compilar([
    rf"garantia[^\n]{{0,40}}?{_PARTICIPACAO}[^\n]{{0,150}}?{PERCENTUAL}",
])


def _garantia_participacao(ctx: ExtractionContext) -> List[Atribuicao]:
    m = buscar(PADROES_PARTICIPACAO_NAO, ctx.texto)
    if m:
        return [Atribuicao("garantiaParticipacao", "0", m.group(0))]

    m = buscar(PADROES_PARTICIPACAO, ctx.texto)
    if m and not tem_negacao(janela_match(ctx.texto, m, JANELA_NEGACAO)):
        return [Atribuicao("garantiaParticipacao", normalizar_percentual(m.group(1)), m.group(0))]
    return []


def regra_garantias(ctx: ExtractionContext) -> List[Atribuicao]:
    return _garantia_contratual(ctx) + _garantia_participacao(ctx)
