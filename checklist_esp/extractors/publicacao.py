"""
Publicidade (PNCP) e prazos
===========================

PNCP:
- pncpPublicacao: edital menciona o PNCP
- pncpPrazo: "N dias úteis" entre a divulgação no PNCP e a sessão
- pncpIntencao / pncpPrazoIntencao: intenção de registro de preços (IRP)

Prazos (dias úteis):
- prazoRecursal / prazoImpugnacao / prazoEsclarecimento

Formatos reconhecidos: "3 (três) dias úteis", "03 dias úteis", "8 dias uteis".
Valores fora de 1..30 são descartados (normalmente são prazos de outra coisa
capturados pela janela).
"""

import re
from typing import List

from checklist_esp.models import SIM
from checklist_esp.extractors.base import (
    DIAS_UTEIS,
    Atribuicao,
    ExtractionContext,
    compilar,
    buscar,
    eh_ruido_sumario,
    janela_match,
)

PRAZO_MIN = 1
PRAZO_MAX = 30

ANCORAS_PRAZO = (
    ("prazoRecursal", r"(?:recurs[oa]s?|recorrer)"),
    ("prazoImpugnacao", r"(?:impugna[çc][ãa]o|impugna[çc][õo]es|impugnar)"),
    ("prazoEsclarecimento", r"(?:esclarecimentos?|pedidos?\s+de\s+esclarecimento)"),
)

# recurso/impugnação/esclarecimento entre o PNCP e o número: o prazo é de outra coisa
RE_OUTRO_PRAZO = re.compile("|".join(ancora for _, ancora in ANCORAS_PRAZO), re.IGNORECASE)


def _primeiro_prazo_valido(padroes, texto: str, minimo: int = PRAZO_MIN, maximo: int = PRAZO_MAX, rejeitar=None):
    """
    Primeiro match fora de sumário com número de dias em [minimo, maximo].

    rejeitar: regex que, achada dentro do match, indica prazo de outra coisa.
    """
    for p in padroes:
        for m in p.finditer(texto):
            dias = int(m.group(1))
            if not minimo <= dias <= maximo:
                continue
            if rejeitar is not None and rejeitar.search(m.group(0)):
                continue
            if eh_ruido_sumario(janela_match(texto, m, 100)):
                continue
            return m, dias
    return None


# ── PNCP ─────────────────────────────────────────────────────────────────────

_PNCP = r"(?:\bpncp\b|portal\s+nacional\s+de\s+contrata[çc][õo]es\s+p[úu]blicas)"

PADROES_PNCP = compilar([
    rf"{_PNCP}[^.]{{0,80}}",
])

PADROES_PRAZO_PNCP = compilar([
    rf"(?:divulga[çc][ãa]o|publica[çc][ãa]o)\s+no\s+{_PNCP}[^.\n]{{0,200}}?{DIAS_UTEIS}",
    rf"{_PNCP}[^.\n]{{0,200}}?{DIAS_UTEIS}",
])

PADROES_INTENCAO = compilar([
    rf"inten[çc][ãa]o\s+de\s+registro\s+de\s+pre[çc]os?[^\n]{{0,150}}?{_PNCP}[^.]{{0,40}}",
    rf"\birp\b[^\n]{{0,150}}?{_PNCP}[^.]{{0,40}}",
    rf"inteiro\s+teor\s+no\s+{_PNCP}[^.]{{0,80}}",
    r"publica[çc][ãa]o\s+integral[^.]{0,80}",
])

PADROES_PRAZO_INTENCAO = compilar([
    rf"inten[çc][ãa]o\s+de\s+registro\s+de\s+pre[çc]os?[^\n]{{0,250}}?{DIAS_UTEIS}",
    rf"\birp\b[^\n]{{0,250}}?{DIAS_UTEIS}",
])


def regra_pncp(ctx: ExtractionContext) -> List[Atribuicao]:
    atribuicoes = []

    m = buscar(PADROES_PNCP, ctx.texto)
    if m:
        atribuicoes.append(Atribuicao("pncpPublicacao", SIM, m.group(0)))

    achado = _primeiro_prazo_valido(PADROES_PRAZO_PNCP, ctx.texto, maximo=365, rejeitar=RE_OUTRO_PRAZO)
    if achado:
        m, dias = achado
        atribuicoes.append(Atribuicao("pncpPrazo", str(dias), m.group(0)))

    m = buscar(PADROES_INTENCAO, ctx.texto)
    if m:
        atribuicoes.append(Atribuicao("pncpIntencao", SIM, m.group(0)))

    achado = _primeiro_prazo_valido(PADROES_PRAZO_INTENCAO, ctx.texto, maximo=365)
    if achado:
        m, dias = achado
        atribuicoes.append(Atribuicao("pncpPrazoIntencao", str(dias), m.group(0)))

    return atribuicoes


# ── Prazos de recurso / impugnação / esclarecimento ──────────────────────────

def _padroes_prazo(ancora: str):
    return compilar([
        rf"{ancora}[^\n]{{0,150}}?{DIAS_UTEIS}",
        rf"{DIAS_UTEIS}[^\n]{{0,60}}?{ancora}",
    ])


PADROES_PRAZOS = tuple((campo, _padroes_prazo(ancora)) for campo, ancora in ANCORAS_PRAZO)


def regra_prazos(ctx: ExtractionContext) -> List[Atribuicao]:
    atribuicoes = []
    for campo, padroes in PADROES_PRAZOS:
        achado = _primeiro_prazo_valido(padroes, ctx.texto)
        if achado:
            m, dias = achado
            atribuicoes.append(Atribuicao(campo, str(dias), m.group(0)))
    return atribuicoes
