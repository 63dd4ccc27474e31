"""
Orçamento e classe do objeto
============================

- valorLicitacao: valor estimado/total (omitido quando sigiloso)
- orcamentoSigiloso / orcamentoPublico: sempre definidos em par
- classePrazo: bens / servicos / sce (define os prazos mínimos de proposta)
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
    janela,
    janela_match,
    normalizar_valor,
    regra_categoria,
    tem_negacao,
)

JANELA_SIGILO = 200


# ── Valor ────────────────────────────────────────────────────────────────────

RE_VALOR = re.compile(
    r"valor\s+(?:total|estimado|global|da\s+contrata[çc][ãa]o|da\s+licita[çc][ãa]o)"
    r"[^\n]{0,200}?r\$\s*([\d.,]+)",
    re.IGNORECASE,
)


def regra_valor_licitacao(ctx: ExtractionContext) -> List[Atribuicao]:
    m = RE_VALOR.search(ctx.texto)
    if not m:
        return []
    if eh_sigiloso(janela_match(ctx.texto, m, JANELA_SIGILO)):
        return []
    valor = normalizar_valor(m.group(1))
    if not valor:
        return []
    return [Atribuicao("valorLicitacao", valor, m.group(0))]


# ── Orçamento sigiloso x público ─────────────────────────────────────────────

PADROES_SIGILOSO = compilar([
    r"or[çc]amento\s+sigiloso[^.]{0,80}",
    r"or[çc]amento\s+estimado[^.\n]{0,40}?(?:ter[áa]\s+)?car[áa]ter\s+sigiloso[^.]{0,80}",
    r"or[çc]amento[^.\n]{0,40}?ser[áa]\s+sigiloso[^.]{0,80}",
])

PADROES_PUBLICO = compilar([
    r"or[çc]amento\s+p[úu]blico[^.]{0,80}",
    r"divulga[çc][ãa]o\s+do\s+or[çc]amento[^.]{0,80}",
])


def regra_orcamento(ctx: ExtractionContext) -> List[Atribuicao]:
    m = buscar(PADROES_SIGILOSO, ctx.texto)
    if m:
        # "o orçamento não será sigiloso"
        if tem_negacao(janela(ctx.texto, m.start(), m.start() + 40, 30)):
            sigiloso, publico = NAO, SIM
        else:
            sigiloso, publico = SIM, NAO
        return [
            Atribuicao("orcamentoSigiloso", sigiloso, m.group(0)),
            Atribuicao("orcamentoPublico", publico, m.group(0)),
        ]

    m = buscar(PADROES_PUBLICO, ctx.texto)
    if m:
        return [
            Atribuicao("orcamentoPublico", SIM, m.group(0)),
            Atribuicao("orcamentoSigiloso", NAO, m.group(0)),
        ]
    return []


# ── Classe do objeto ─────────────────────────────────────────────────────────

TABELA_CLASSE = (
    Categoria(
        "sce",
        (r"servi[çc]os\s+comuns\s+de\s+engenharia", r"\bsce\b"),
        (r"servi[çc]os\s+comuns\s+de\s+engenharia[^.]{0,80}", r"\bsce\b[^.]{0,50}"),
    ),
    Categoria(
        "bens",
        (r"fornecimento\s+de\s+bens", r"aquisi[çc][ãa]o\s+de\s+bens", r"compra\s+de"),
        (
            r"fornecimento\s+de\s+bens[^.]{0,80}",
            r"aquisi[çc][ãa]o\s+de\s+bens[^.]{0,80}",
            r"compra\s+de[^.]{0,80}",
        ),
    ),
    Categoria(
        "servicos",
        (r"presta[çc][ãa]o\s+de\s+servi[çc]os", r"contrata[çc][ãa]o\s+de\s+servi[çc]os"),
        (
            r"presta[çc][ãa]o\s+de\s+servi[çc]os[^.]{0,80}",
            r"contrata[çc][ãa]o\s+de\s+servi[çc]os[^.]{0,80}",
        ),
    ),
)

regra_classe_objeto = regra_categoria("classePrazo", TABELA_CLASSE)
