"""
Objeto e Registro de Preços
===========================

- objetoDescricao: descrição do objeto na capa ("OBJETO: ...")
- registroPreco: licitação para registro de preços? (SRP)
- formaObjeto: parcelamento (por item / por grupo / global)

registroPreco usa desambiguação em estágios, porque editais-modelo trazem
o capítulo "DO REGISTRO DE PREÇOS" mesmo quando ele não se aplica:

1. Negação explícita fora de sumário -> "nao" (encerra)
2. Objeto menciona registro de preços de forma substantiva -> "sim"
3. Indicadores positivos fortes fora de sumário -> "sim"
4. Nada encontrado -> "nao"
"""

import re
from typing import List

from checklist_esp.models import NAO, SIM
from checklist_esp.extractors.base import (
    Atribuicao,
    Categoria,
    ExtractionContext,
    compilar,
    eh_ruido_sumario,
    janela_match,
    regra_categoria,
)


# ── Objeto ───────────────────────────────────────────────────────────────────

RE_OBJETO = re.compile(
    r"OBJETO[:\s]+([^.]{20,300})"
    r"(?=\s*(?:VALOR|DATA|CRIT[ÉE]RIO|MODO|PREFER[ÊE]NCIA|EDITAL|Sum[áa]rio|DO\s+REGISTRO))",
    re.IGNORECASE,
)

RE_OBJETO_ALT = re.compile(
    r"(?:1\.|1\.1\.?)\s*(?:DO\s+)?OBJETO[:\s]+([^\n]{20,300})",
    re.IGNORECASE,
)

# Cortes de rabo no padrão principal
CORTES_OBJETO = compilar([
    r"\s*VALOR\s+TOTAL.*$",
    r"\s*DATA\s+DA.*$",
    r"\s*CRIT[ÉE]RIO.*$",
    r"\s*Sum[áa]rio.*$",
], re.IGNORECASE | re.DOTALL)

# Palavras que encerram a descrição no padrão alternativo
PARADAS_OBJETO = ["VALOR", "EDITAL", "Sumário", "DO REGISTRO", "DA PARTICIPAÇÃO", "CRITÉRIO", "DATA"]


def regra_objeto(ctx: ExtractionContext) -> List[Atribuicao]:
    m = RE_OBJETO.search(ctx.texto)
    if m:
        desc = m.group(1).strip()
        for corte in CORTES_OBJETO:
            desc = corte.sub("", desc)
        desc = desc.strip()
        if desc:
            return [Atribuicao("objetoDescricao", desc, m.group(0), contexto_chars=50)]

    m = RE_OBJETO_ALT.search(ctx.texto)
    if not m:
        return []
    desc = m.group(1).strip()
    for palavra in PARADAS_OBJETO:
        idx = desc.find(palavra)
        if idx > 20:
            desc = desc[:idx].strip()
            break
    desc = re.sub(r"[.,;:]+$", "", desc).strip()
    if not desc:
        return []
    return [Atribuicao("objetoDescricao", desc, m.group(0), contexto_chars=50)]


# ── Registro de Preços ───────────────────────────────────────────────────────

_RP = r"registro\s+de\s+pre[çc]os?"

PADROES_NEGACAO_SRP = compilar([
    rf"n[ãa]o\s+se\s+trata\s+de\s+(?:uma\s+)?licita[çc][ãa]o\s+para\s+{_RP}",
    rf"n[ãa]o\s+se\s+aplica\s+(?:no\s+presente\s+procedimento|neste\s+procedimento)[^\n]{{0,200}}?{_RP}",
    rf"{_RP}[^\n]{{0,200}}?n[ãa]o\s+se\s+aplica",
    rf"(?:item|subitem|disciplina)[^\n]{{0,200}}?n[ãa]o\s+se\s+aplica[^\n]{{0,200}}?{_RP}",
    r"disciplina\s+deste\s+item[^\n]{0,200}?n[ãa]o\s+se\s+aplica[^\n]{0,200}?por\s+n[ãa]o\s+se\s+tratar",
    rf"n[ãa]o\s+(?:ser[áa]|[ée])\s+(?:adotad[oa]|utilizad[oa])\s+o\s+sistema\s+de\s+{_RP}",
])

PADROES_POSITIVOS_SRP = compilar([
    rf"ata\s+de\s+{_RP}",
    rf"validade\s+(?:do|da)\s+{_RP}",
    rf"vig[êe]ncia\s+(?:do|da)\s+{_RP}",
    rf"inten[çc][ãa]o\s+de\s+{_RP}",
    rf"sistema\s+de\s+{_RP}",
    r"srp\s*[-–]\s+sistema\s+de\s+registro",
    rf"{_RP}\s+para\s+(?:contrata[çc][õo]es|aquisi[çc][õo]es|contrata[çc][ãa]o|aquisi[çc][ãa]o)\s+futuras?",
])

RE_SRP_NO_OBJETO = re.compile(r"registro\s+de\s+pre[çc]o|\bsrp\b", re.IGNORECASE)
RE_SRP_SUMARIO = re.compile(rf"do\s+{_RP}\s+\d+", re.IGNORECASE)


def _primeiro_fora_do_sumario(padroes, texto: str):
    for p in padroes:
        for m in p.finditer(texto):
            if not eh_ruido_sumario(janela_match(texto, m, 100)):
                return m
    return None


def _objeto_menciona_srp(objeto: str) -> bool:
    objeto_lower = objeto.lower()
    if not RE_SRP_NO_OBJETO.search(objeto_lower):
        return False
    resumo = (
        "sumário" in objeto_lower
        or "pageref" in objeto_lower
        or RE_SRP_SUMARIO.search(objeto_lower)
    )
    return not resumo


def regra_registro_preco(ctx: ExtractionContext) -> List[Atribuicao]:
    """Estágios: negação > objeto > positivos fortes > padrão 'nao'."""
    m = _primeiro_fora_do_sumario(PADROES_NEGACAO_SRP, ctx.texto)
    if m:
        return [Atribuicao("registroPreco", NAO, m.group(0), contexto_chars=200)]

    objeto = ctx.get("objetoDescricao")
    if objeto and _objeto_menciona_srp(objeto):
        return [Atribuicao("registroPreco", SIM, objeto, contexto_chars=100)]

    m = _primeiro_fora_do_sumario(PADROES_POSITIVOS_SRP, ctx.texto)
    if m:
        return [Atribuicao("registroPreco", SIM, m.group(0), contexto_chars=150)]

    return [Atribuicao("registroPreco", NAO)]


# ── Forma do objeto ──────────────────────────────────────────────────────────

TABELA_FORMA_OBJETO = (
    Categoria(
        "por-item",
        (r"por\s+item",),
        (r"por\s+item[^.]{0,50}",),
    ),
    Categoria(
        "por-grupo",
        (r"por\s+grupo", r"por\s+lote"),
        (r"por\s+grupo[^.]{0,50}", r"por\s+lote[^.]{0,50}"),
    ),
    Categoria(
        "global",
        (r"global", r"adjudica[çc][ãa]o\s+global"),
        (r"global[^.]{0,50}", r"adjudica[çc][ãa]o\s+global[^.]{0,80}"),
    ),
)

regra_forma_objeto = regra_categoria("formaObjeto", TABELA_FORMA_OBJETO)
