"""
Tratamento favorecido ME/EPP (LC 123/2006)
==========================================

preferenciaMe usa desambiguação em estágios, como registroPreco:

1. Negação explícita do tratamento (fora de sumário) -> preferenciaMe,
   exclusivaMe, cota25Me e criterioDesempateMe = "nao" (encerra)
2. Objeto menciona ME/EPP -> "sim"
3. Rótulo de capa "Preferência ME/EPP: Sim/Não" ou indicador positivo forte
   sem negação na janela -> "sim"
4. Nada encontrado -> "nao"

Os subcampos (exclusiva, cota 25%, desempate) são avaliados com janela de
negação de ±150 caracteres. Subcontratação fica aqui porque no edital-modelo
ela é a subcontratação compulsória de ME/EPP.
"""

import re
from typing import List

from checklist_esp.models import NAO, SIM
from checklist_esp.extractors.base import (
    Atribuicao,
    ExtractionContext,
    compilar,
    buscar,
    eh_ruido_sumario,
    janela_match,
    tem_negacao,
)

JANELA_SUBCAMPO = 150

CAMPOS_ME_EPP = ("preferenciaMe", "exclusivaMe", "criterioDesempateMe", "cota25Me")

_ME = r"(?:me/epp|me\s+e\s+epp|microempresas?|lc\s*(?:n[º°o.]\s*)?123)"


# ── Estágio 1: negação ───────────────────────────────────────────────────────

PADROES_NEGACAO_ME = compilar([
    r"prefer[êe]ncia\s*(?:me/epp|microempresa)?\s*:?\s*n[ãa]o\b",
    rf"n[ãa]o\s+se\s+aplica[^\n]{{0,200}}?(?:tratamento\s+(?:favorecido|diferenciado)|{_ME})",
    r"(?:tratamento\s+favorecido|lc\s*123)[^\n]{0,200}?n[ãa]o\s+se\s+aplica",
    r"n[ãa]o\s+haver[áa][^\n]{0,200}?(?:tratamento\s+diferenciado|prefer[êe]ncia[^\n]{0,100}?\bme\b)",
])


def _negacao_me(texto: str):
    for p in PADROES_NEGACAO_ME:
        for m in p.finditer(texto):
            if not eh_ruido_sumario(janela_match(texto, m, 100)):
                return m
    return None


# ── Estágios 2 e 3 ───────────────────────────────────────────────────────────

RE_ME_NO_OBJETO = re.compile(
    rf"{_ME}|empresas?\s+de\s+pequeno\s+porte|\bepp\b",
    re.IGNORECASE,
)

RE_PREFERENCIA_CAPA = re.compile(
    r"prefer[êe]ncia\s*(?:me/epp)?\s*:?\s*(sim|n[ãa]o)\b",
    re.IGNORECASE,
)

RE_ME_POSITIVO = re.compile(
    r"(?:aplicar|aplicar[áa]|aplica-se|aplicam-se|ser[áa]\s+concedido)[^\n]{0,200}?"
    r"(?:tratamento\s+(?:diferenciado|favorecido)|lc\s*(?:n[º°o.]\s*)?123)",
    re.IGNORECASE,
)


def _preferencia(ctx: ExtractionContext) -> Atribuicao:
    objeto = ctx.get("objetoDescricao")
    if objeto and RE_ME_NO_OBJETO.search(objeto):
        return Atribuicao("preferenciaMe", SIM, objeto)

    m = RE_PREFERENCIA_CAPA.search(ctx.texto)
    if m:
        valor = SIM if m.group(1).lower() == "sim" else NAO
        return Atribuicao("preferenciaMe", valor, m.group(0))

    m = RE_ME_POSITIVO.search(ctx.texto)
    if m and not tem_negacao(janela_match(ctx.texto, m, 100)):
        return Atribuicao("preferenciaMe", SIM, m.group(0))

    return Atribuicao("preferenciaMe", NAO)


# ── Subcampos ────────────────────────────────────────────────────────────────

RE_EXCLUSIVA = re.compile(
    rf"(?:exclusiv[oa]s?|cota\s+reservada)[^\n]{{0,150}}?{_ME}",
    re.IGNORECASE,
)

RE_COTA_25 = re.compile(
    r"cota[^\n]{0,150}?(?:25|vinte\s+e\s+cinco)\s*(?:\([^)]{0,40}\)\s*)?(?:%|por\s+cento)",
    re.IGNORECASE,
)

MARCADORES_NAO_DIVISIVEL = ("não divisível", "nao divisivel", "único item", "item único", "item unico")

PADROES_DESEMPATE_ME = compilar([
    rf"desempate[^\n]{{0,150}}?{_ME}",
    r"empate\s+ficto[^.]{0,80}",
])


def _subcampos(ctx: ExtractionContext) -> List[Atribuicao]:
    atribuicoes = []

    m = RE_EXCLUSIVA.search(ctx.texto)
    if m and not tem_negacao(janela_match(ctx.texto, m, JANELA_SUBCAMPO)):
        atribuicoes.append(Atribuicao("exclusivaMe", SIM, m.group(0)))

    m = RE_COTA_25.search(ctx.texto)
    if m:
        contexto = janela_match(ctx.texto, m, JANELA_SUBCAMPO)
        contexto_lower = contexto.lower()
        if any(marcador in contexto_lower for marcador in MARCADORES_NAO_DIVISIVEL):
            atribuicoes.append(Atribuicao("cota25Me", NAO, m.group(0)))
        elif not tem_negacao(contexto):
            atribuicoes.append(Atribuicao("cota25Me", SIM, m.group(0)))

    m = buscar(PADROES_DESEMPATE_ME, ctx.texto)
    if m and not tem_negacao(janela_match(ctx.texto, m, JANELA_SUBCAMPO)):
        atribuicoes.append(Atribuicao("criterioDesempateMe", SIM, m.group(0)))

    return atribuicoes


def regra_me_epp(ctx: ExtractionContext) -> List[Atribuicao]:
    m = _negacao_me(ctx.texto)
    if m:
        # evidência só na preferência; os demais campos seguem a mesma negação
        return [Atribuicao("preferenciaMe", NAO, m.group(0), contexto_chars=150)] + [
            Atribuicao(campo, NAO) for campo in CAMPOS_ME_EPP[1:]
        ]
    return [_preferencia(ctx)] + _subcampos(ctx)


# ── Subcontratação ───────────────────────────────────────────────────────────

PADROES_SUBCONTRATACAO_VEDADA = compilar([
    r"(?:contratad[oa]|licitante)[^\n]{0,150}?n[ãa]o\s+poder[áa]\s+subcontratar",
    r"subcontrata[çc][ãa]o[^\n]{0,100}?(?:vedada|n[ãa]o\s+(?:ser[áa]\s+)?(?:permitida|admitida))",
    r"(?:vedada|n[ãa]o\s+ser[áa]\s+(?:permitida|admitida))\s+a\s+subcontrata[çc][ãa]o",
])

RE_SUBCONTRATACAO_PERCENTUAL = re.compile(
    r"subcontrata[çc][ãa]o[^\n]{0,150}?(\d{1,3})\s*(?:\([^)]{0,40}\)\s*)?(?:%|por\s+cento)",
    re.IGNORECASE,
)


def regra_subcontratacao(ctx: ExtractionContext) -> List[Atribuicao]:
    m = buscar(PADROES_SUBCONTRATACAO_VEDADA, ctx.texto)
    if m:
        return [Atribuicao("subcontratacaoMe", "0%", m.group(0))]

    m = RE_SUBCONTRATACAO_PERCENTUAL.search(ctx.texto)
    if m and not tem_negacao(janela_match(ctx.texto, m, JANELA_SUBCAMPO)):
        return [Atribuicao("subcontratacaoMe", f"{int(m.group(1))}%", m.group(0))]
    return []
