"""
Participação: cooperativas, consórcios, margens e benefício local
=================================================================

cooperativas / consorcio ("permitido" | "vedado"):
  1. Rótulos de tabela/preâmbulo ("Consórcio: Não") têm prioridade máxima
  2. Senão, cada frase que menciona o termo é avaliada isoladamente:
     vedação vence permissão dentro da frase; frases condicionais
     ("quando permitido consórcio") são ignoradas.

margem10 / margem25: margem de preferência (Art. 26, Lei 14.133/2021).
Percentual até 10% -> margem10; acima de 10% -> margem25 (margem adicional).

beneficioLocal: prioridade para ME/EPP sediadas local ou regionalmente
(LC 123/2006, Art. 48, §3º). Critério de desempate por Estado/Município
não é benefício local.
"""

import re
from typing import Iterator, List, Optional, Sequence

from checklist_esp.models import NAO, SIM
from checklist_esp.extractors.base import (
    Atribuicao,
    ExtractionContext,
    compilar,
    buscar,
    janela_match,
    tem_negacao,
)

PERMITIDO = "permitido"
VEDADO = "vedado"

RE_FRASE = re.compile(r"[^.;\n]+")

MAX_EVIDENCIA = 200


def _frases_com(texto: str, termo: re.Pattern) -> Iterator[re.Match]:
    for frase in RE_FRASE.finditer(texto):
        if termo.search(frase.group(0)):
            yield frase


def _evidencia(frase: str) -> str:
    return frase.strip()[:MAX_EVIDENCIA]


def _avaliar_participacao(
    texto: str,
    termo: re.Pattern,
    tabela_nao: Sequence[re.Pattern],
    tabela_sim: Sequence[re.Pattern],
    vedado: Sequence[re.Pattern],
    permitido: Sequence[re.Pattern],
    condicional: Sequence[re.Pattern],
) -> Optional[tuple]:
    m = buscar(tabela_nao, texto)
    if m:
        return VEDADO, m.group(0)
    m = buscar(tabela_sim, texto)
    if m:
        return PERMITIDO, m.group(0)

    for frase in _frases_com(texto, termo):
        conteudo = frase.group(0)
        if buscar(condicional, conteudo):
            continue
        if buscar(vedado, conteudo):
            return VEDADO, _evidencia(conteudo)
        if buscar(permitido, conteudo):
            return PERMITIDO, _evidencia(conteudo)
    return None


# ── Cooperativas ─────────────────────────────────────────────────────────────

RE_COOPERATIVA = re.compile(r"cooperativas?", re.IGNORECASE)

PADROES_COOPERATIVA_TABELA_NAO = compilar([
    r"participa[çc][ãa]o\s+(?:de\s+)?cooperativas?\s*\??\s*:\s*n[ãa]o\b",
    r"cooperativas?\s*\??\s*:\s*n[ãa]o\b",
])

PADROES_COOPERATIVA_TABELA_SIM = compilar([
    r"participa[çc][ãa]o\s+(?:de\s+)?cooperativas?\s*\??\s*:\s*sim\b",
    r"cooperativas?\s*\??\s*:\s*sim\b",
])

PADROES_COOPERATIVA_VEDADO = compilar([
    r"\bvedad[oa]s?\b",
    r"n[ãa]o\s+(?:ser[áa]\s+|ser[ãa]o\s+)?(?:admitid|permitid)[oa]s?",
    r"n[ãa]o\s+poder[ãa]o\s+participar",
])

PADROES_COOPERATIVA_PERMITIDO = compilar([
    r"admitid[oa]s?",
    r"permitid[oa]s?",
    r"poder[ãa]o\s+participar",
])

PADROES_CONDICIONAL = compilar([
    r"quando\s+(?:permitid|admitid)[oa]",
    r"caso\s+(?:seja\s+)?(?:permitid|admitid)[oa]",
    r"\bse\s+(?:for\s+)?(?:permitid|admitid)[oa]",
])


def regra_cooperativas(ctx: ExtractionContext) -> List[Atribuicao]:
    achado = _avaliar_participacao(
        ctx.texto,
        RE_COOPERATIVA,
        PADROES_COOPERATIVA_TABELA_NAO,
        PADROES_COOPERATIVA_TABELA_SIM,
        PADROES_COOPERATIVA_VEDADO,
        PADROES_COOPERATIVA_PERMITIDO,
        PADROES_CONDICIONAL,
    )
    if not achado:
        return []
    valor, evidencia = achado
    return [Atribuicao("cooperativas", valor, evidencia)]


# ── Consórcio ────────────────────────────────────────────────────────────────

RE_CONSORCIO = re.compile(r"cons[óo]rcios?", re.IGNORECASE)

PADROES_CONSORCIO_TABELA_NAO = compilar([
    r"permite\s+(?:a\s+)?participa[çc][ãa]o\s+(?:de\s+)?cons[óo]rcio\s*\??\s*:?\s*n[ãa]o\b",
    r"participa[çc][ãa]o\s+(?:de\s+)?cons[óo]rcio\s*\??\s*:\s*n[ãa]o\b",
    r"cons[óo]rcio\s*\??\s*:\s*n[ãa]o\b",
])

PADROES_CONSORCIO_TABELA_SIM = compilar([
    r"permite\s+(?:a\s+)?participa[çc][ãa]o\s+(?:de\s+)?cons[óo]rcio\s*\??\s*:?\s*sim\b",
    r"participa[çc][ãa]o\s+(?:de\s+)?cons[óo]rcio\s*\??\s*:\s*sim\b",
    r"cons[óo]rcio\s*\??\s*:\s*sim\b",
])

PADROES_CONSORCIO_VEDADO = compilar([
    r"\bvedad[oa]s?\b",
    r"n[ãa]o\s+(?:ser[áa]\s+|ser[ãa]o\s+)?(?:admitid|permitid)[oa]s?",
    r"n[ãa]o\s+poder[ãa]o\s+participar",
])

PADROES_CONSORCIO_PERMITIDO = compilar([
    r"(?<!n[ãa]o\s)ser[áa]\s+(?:admitid|permitid)[oa]",
    r"[ée]\s+(?:admitid|permitid)[oa]",
    r"admite-se",
    r"cons[óo]rcio\s+(?:de\s+empresas\s+)?(?:admitid|permitid)[oa]",
    r"poder[ãa]o\s+participar",
])


def regra_consorcio(ctx: ExtractionContext) -> List[Atribuicao]:
    achado = _avaliar_participacao(
        ctx.texto,
        RE_CONSORCIO,
        PADROES_CONSORCIO_TABELA_NAO,
        PADROES_CONSORCIO_TABELA_SIM,
        PADROES_CONSORCIO_VEDADO,
        PADROES_CONSORCIO_PERMITIDO,
        PADROES_CONDICIONAL,
    )
    if not achado:
        return []
    valor, evidencia = achado
    return [Atribuicao("consorcio", valor, evidencia)]


# ── Margem de preferência ────────────────────────────────────────────────────

PADROES_MARGEM_NAO = compilar([
    r"n[ãa]o\s+(?:haver[áa]|ser[áa]|h[áa])\s+(?:aplica[çc][ãa]o\s+de\s+|aplicad[oa]\s+)?margem\s+de\s+prefer[êe]ncia",
    r"sem\s+margem\s+de\s+prefer[êe]ncia",
    r"n[ãa]o\s+se\s+aplica[^.\n]{0,100}?margem\s+de\s+prefer[êe]ncia",
    r"margem\s+de\s+prefer[êe]ncia\s*:\s*n[ãa]o\b",
])

RE_MARGEM_PERCENTUAL = re.compile(
    r"margem\s+de\s+prefer[êe]ncia[^\n]{0,150}?(\d{1,2})\s*(?:\([^)]{0,40}\)\s*)?(?:%|por\s+cento)",
    re.IGNORECASE,
)

LIMITE_MARGEM_NORMAL = 10


def _margens(ctx: ExtractionContext) -> List[Atribuicao]:
    m = buscar(PADROES_MARGEM_NAO, ctx.texto)
    if m:
        return [
            Atribuicao("margem10", NAO, m.group(0)),
            Atribuicao("margem25", NAO, m.group(0)),
        ]

    atribuicoes = []
    for m in RE_MARGEM_PERCENTUAL.finditer(ctx.texto):
        if tem_negacao(janela_match(ctx.texto, m, 100)):
            continue
        percentual = int(m.group(1))
        if percentual <= 0:
            continue
        campo = "margem10" if percentual <= LIMITE_MARGEM_NORMAL else "margem25"
        if any(a.field == campo for a in atribuicoes):
            continue
        atribuicoes.append(Atribuicao(campo, SIM, m.group(0)))
    return atribuicoes


# ── Benefício local ──────────────────────────────────────────────────────────

PADROES_LOCAL_TABELA_NAO = compilar([
    r"prioridade\s+de\s+contrata[çc][ãa]o[^.]{0,100}sediadas?\s+local[^.]{0,50}n[ãa]o\b",
    r"(?:prefer[êe]ncia|benef[íi]cio)\s+(?:por\s+)?local\s*:?\s*n[ãa]o\b",
])

PADROES_LOCAL_TABELA_SIM = compilar([
    r"prioridade\s+de\s+contrata[çc][ãa]o[^.]{0,100}sediadas?\s+local[^.]{0,50}sim\b",
    r"(?:prefer[êe]ncia|benef[íi]cio)\s+(?:por\s+)?local\s*:?\s*sim\b",
])

PADROES_LOCAL_SIM = compilar([
    r"prioridade\s+de\s+contrata[çc][ãa]o[^.\n]{0,150}?sediad[oa]s?\s+local\s+ou\s+regionalmente",
    r"sediad[oa]s?\s+local\s+ou\s+regionalmente[^.]{0,80}",
    r"\b(?:mei|me|epp)\s+sediadas?\s+local(?:mente)?",
    r"prefer[êe]ncia\s+para\s+empresas\s+(?:estabelecidas|sediadas)\s+no\s+munic[íi]pio",
])

PADROES_LOCAL_IGNORAR = compilar([
    r"crit[ée]rio\s+de\s+desempate",
    r"(?:persistindo|permanecendo)\s+(?:o\s+)?empate",
    r"desempate",
])


def _beneficio_local(ctx: ExtractionContext) -> List[Atribuicao]:
    m = buscar(PADROES_LOCAL_TABELA_NAO, ctx.texto)
    if m:
        return [Atribuicao("beneficioLocal", NAO, m.group(0))]
    m = buscar(PADROES_LOCAL_TABELA_SIM, ctx.texto)
    if m:
        return [Atribuicao("beneficioLocal", SIM, m.group(0))]

    for p in PADROES_LOCAL_SIM:
        for m in p.finditer(ctx.texto):
            contexto = janela_match(ctx.texto, m, 100)
            if buscar(PADROES_LOCAL_IGNORAR, contexto):
                continue
            valor = NAO if tem_negacao(contexto) else SIM
            return [Atribuicao("beneficioLocal", valor, m.group(0))]
    return []


def regra_margem_preferencia(ctx: ExtractionContext) -> List[Atribuicao]:
    return _margens(ctx) + _beneficio_local(ctx)
