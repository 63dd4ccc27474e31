# checklist_esp/structure/indexer.py
"""
Indexador estrutural de editais.

Recupera o sumário hierárquico (1., 1.1, 1.1.1 ...) a partir de texto
corrido, sem gramática. Três estratégias, da mais específica para a mais
frouxa:

1. Seção principal: "3. DO REGISTRO DE PREÇOS" (DO/DA/DOS/DAS + maiúsculas)
2. Subitens: "3.5.2 Texto do subitem"
3. Fallback (só se 1+2 < 5 seções): "3. Qualquer linha capitalizada"

Conteúdo de cada seção vai do fim do cabeçalho até a próxima fronteira de
mesmo nível ou superior, limitado por uma janela máxima de varredura.
"""
from __future__ import annotations

import re
from functools import cmp_to_key
from typing import List, Optional, Set, Tuple

from checklist_esp.models import Section
from checklist_esp.observability import EventSink, NULL_SINK

# ── Constantes ───────────────────────────────────────────────────────────────

JANELA_PRINCIPAL = 5000
JANELA_SUBITEM = 2000
JANELA_FALLBACK = 3000

MIN_TITULO_PRINCIPAL = 5
MIN_TITULO_SUBITEM = 5
MIN_TITULO_FALLBACK = 10
MAX_TITULO = 300

MIN_SECOES_SEM_FALLBACK = 5

_MAIUSC = "A-ZÀ-ÖØ-Ý"

# ── Regex patterns ───────────────────────────────────────────────────────────

# 1. DO OBJETO / 12. DAS SANÇÕES ADMINISTRATIVAS
RE_SECAO_PRINCIPAL = re.compile(
    rf"^[ \t]*(\d+)\.[ \t]+(D[AO]S?[ \t]+[{_MAIUSC}][{_MAIUSC} \t,/\-]{{3,80}}?)[ \t\r]*$",
    re.MULTILINE,
)

# 3.5 / 3.5. / 3.5.2 seguido do texto até o fim da linha
RE_SUBITEM = re.compile(
    r"^[ \t]*(\d+(?:\.\d+)+)(?!\d)(?:\.(?!\d)[ \t]*|[ \t]+)([^\n]{5,}?)[ \t\r]*$",
    re.MULTILINE,
)

# 3. Qualquer linha iniciada por maiúscula (fallback)
RE_SECAO_FALLBACK = re.compile(
    rf"^[ \t]*(\d+)\.[ \t]+([{_MAIUSC}][^\n]{{9,99}}?)[ \t\r]*$",
    re.MULTILINE,
)

# Títulos que são só números/pontuação
RE_SO_NUMEROS = re.compile(r"^[\d\s.,]+$")

# Artefatos de sumário (campos do Word, líderes de pontilhado)
MARCADORES_SUMARIO = ("PAGEREF", "_Toc", "<", ".....", "…")


# ── Ordenação por caminho pontuado ───────────────────────────────────────────

def dotted_path_key(number: str) -> Tuple[int, ...]:
    """'3.5.2' -> (3, 5, 2). Componentes não numéricos valem 0."""
    partes = []
    for p in (number or "").split("."):
        p = p.strip()
        partes.append(int(p) if p.isdigit() else 0)
    return tuple(partes)


def compare_dotted_path(a: str, b: str) -> int:
    """
    Compara caminhos pontuados componente a componente (inteiros).
    Componentes ausentes valem 0, então '3' == '3.0' e '2.10' > '2.9'.
    """
    pa, pb = dotted_path_key(a), dotted_path_key(b)
    for i in range(max(len(pa), len(pb))):
        x = pa[i] if i < len(pa) else 0
        y = pb[i] if i < len(pb) else 0
        if x != y:
            return -1 if x < y else 1
    return 0


def sort_sections(secoes: List[Section]) -> List[Section]:
    return sorted(secoes, key=cmp_to_key(lambda a, b: compare_dotted_path(a.number, b.number)))


# ── Helpers ──────────────────────────────────────────────────────────────────

def _tem_marcador_sumario(titulo: str) -> bool:
    return any(m in titulo for m in MARCADORES_SUMARIO)


def _eh_ruido(titulo: str, minimo: int) -> bool:
    if len(titulo) < minimo:
        return True
    if RE_SO_NUMEROS.match(titulo):
        return True
    return _tem_marcador_sumario(titulo)


def _fronteira_principal(numero: str) -> re.Pattern:
    proximo = int(numero) + 1
    return re.compile(rf"^[ \t]*{proximo}\.[ \t]+", re.MULTILINE)


def _fronteira_subitem(nivel: int) -> re.Pattern:
    # irmão ou ancestral (profundidade 2..nivel) ou seção principal
    return re.compile(
        rf"^[ \t]*(?:\d+(?:\.\d+){{1,{nivel - 1}}}(?!\.?\d)(?:\.|[ \t])|\d+\.[ \t]+[{_MAIUSC}])",
        re.MULTILINE,
    )


def _conteudo(texto: str, inicio: int, fronteira: re.Pattern, janela: int) -> str:
    limite = min(len(texto), inicio + janela)
    m = fronteira.search(texto, inicio, limite)
    fim = m.start() if m else limite
    return texto[inicio:fim].strip()


# ── Estratégias ──────────────────────────────────────────────────────────────

def _secoes_principais(texto: str, vistos: Set[str], eventos: EventSink) -> List[Section]:
    secoes = []
    for m in RE_SECAO_PRINCIPAL.finditer(texto):
        numero = m.group(1)
        titulo = re.sub(r"\s+", " ", m.group(2)).strip()
        if numero in vistos or len(titulo) < MIN_TITULO_PRINCIPAL:
            continue
        vistos.add(numero)
        conteudo = _conteudo(texto, m.end(), _fronteira_principal(numero), JANELA_PRINCIPAL)
        secoes.append(Section(number=numero, title=titulo, content=conteudo, level=1))
        eventos.emit("estrutura.secao", estrategia="principal", numero=numero, titulo=titulo[:60])
    return secoes


def _subitens(texto: str, vistos: Set[str], eventos: EventSink) -> List[Section]:
    secoes = []
    for m in RE_SUBITEM.finditer(texto):
        numero = m.group(1)
        titulo = re.sub(r"[.,;:]+$", "", m.group(2).strip()).strip()
        if numero in vistos or _eh_ruido(titulo, MIN_TITULO_SUBITEM):
            continue
        vistos.add(numero)
        nivel = numero.count(".") + 1
        conteudo = _conteudo(texto, m.end(), _fronteira_subitem(nivel), JANELA_SUBITEM)
        secoes.append(Section(number=numero, title=titulo[:MAX_TITULO], content=conteudo, level=nivel))
        eventos.emit("estrutura.secao", estrategia="subitem", numero=numero, titulo=titulo[:60])
    return secoes


def _secoes_fallback(texto: str, vistos: Set[str], eventos: EventSink) -> List[Section]:
    secoes = []
    for m in RE_SECAO_FALLBACK.finditer(texto):
        numero = m.group(1)
        titulo = m.group(2).strip()
        if numero in vistos or _eh_ruido(titulo, MIN_TITULO_FALLBACK):
            continue
        vistos.add(numero)
        conteudo = _conteudo(texto, m.end(), _fronteira_principal(numero), JANELA_FALLBACK)
        secoes.append(Section(number=numero, title=titulo, content=conteudo, level=1))
        eventos.emit("estrutura.secao", estrategia="fallback", numero=numero, titulo=titulo[:60])
    return secoes


def index_sections(texto: str, eventos: Optional[EventSink] = None) -> List[Section]:
    """
    Indexa o texto do edital em uma lista de seções ordenada por caminho
    pontuado.

    Nunca falha por conteúdo: texto sem cabeçalhos retorna []. Apenas
    None é rejeitado (TypeError).
    """
    if texto is None:
        raise TypeError("texto do edital não pode ser None")
    eventos = eventos or NULL_SINK

    vistos: Set[str] = set()
    secoes = _secoes_principais(texto, vistos, eventos)
    secoes.extend(_subitens(texto, vistos, eventos))

    if len(secoes) < MIN_SECOES_SEM_FALLBACK:
        eventos.emit("estrutura.fallback", encontradas=len(secoes))
        secoes.extend(_secoes_fallback(texto, vistos, eventos))

    secoes = sort_sections(secoes)
    eventos.emit("estrutura.concluida", total=len(secoes), chars=len(texto))
    return secoes
