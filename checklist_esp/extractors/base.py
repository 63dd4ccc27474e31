"""
Checklist ESP - Base para regras de extração
=============================================

Cada regra de campo é uma função pura:

    def regra(ctx: ExtractionContext) -> List[Atribuicao]

Ela lê o texto (e os campos já extraídos por regras anteriores) e devolve
as atribuições que deseja fazer. Quem aplica escrita única, refinamento e
atribuição de origem é o driver em checklist_esp.extractors.

Heurísticas compartilhadas:
- janela de contexto com marcadores de negação ("não se aplica", "vedado")
- supressão de sumário/índice (PAGEREF, _Toc, "Sumário", título + página)
- checagem de sigilo para valores monetários
- tabela de categorias "primeira correspondência vence"
"""

import re
from dataclasses import dataclass, field
from typing import List, Mapping, Optional, Sequence, Tuple

from checklist_esp.models import Section


@dataclass(frozen=True)
class Atribuicao:
    """Pedido de atribuição de um campo feito por uma regra."""
    field: str
    value: str
    evidencia: Optional[str] = None     # texto casado (para a origem)
    contexto_chars: int = 100
    refinar: bool = False               # pode sobrescrever campo já definido


@dataclass(frozen=True)
class ExtractionContext:
    """Visão somente-leitura compartilhada pelas regras."""
    texto: str
    texto_lower: str
    secoes: Tuple[Section, ...] = ()
    campos: Mapping[str, str] = field(default_factory=dict)

    def get(self, campo: str) -> Optional[str]:
        return self.campos.get(campo)


# ── Janelas de contexto ──────────────────────────────────────────────────────

def janela(texto: str, inicio: int, fim: int, chars: int) -> str:
    """Recorte simétrico [inicio - chars, fim + chars] limitado ao documento."""
    return texto[max(0, inicio - chars):min(len(texto), fim + chars)]


def janela_match(texto: str, match: re.Match, chars: int = 100) -> str:
    return janela(texto, match.start(), match.end(), chars)


# ── Negação ──────────────────────────────────────────────────────────────────

PADROES_NEGACAO = [
    re.compile(p, re.IGNORECASE)
    for p in (
        r"n[ãa]o\s+(?:se\s+)?aplica",
        r"n[ãa]o\s+haver[áa]",
        r"n[ãa]o\s+h[áa]\b",
        r"n[ãa]o\s+ser[áa]",
        r"n[ãa]o\s+ser[ãa]o\b",
        r"n[ãa]o\s+se\s+trata",
        r"\bvedad[oa]s?\b",
        r"n[ãa]o\s+admitid[oa]s?",
        r"n[ãa]o\s+permitid[oa]s?",
        r"n[ãa]o\s+exigid[oa]s?",
        r"n[ãa]o\s+obrigat[óo]ri[oa]s?",
        r"n[ãa]o\s+poder[áa]",
        r"n[ãa]o\s+pode\b",
    )
]


def tem_negacao(contexto: str) -> bool:
    """True se o contexto contém algum marcador de negação."""
    return any(p.search(contexto) for p in PADROES_NEGACAO)


# ── Sumário / índice ─────────────────────────────────────────────────────────

MARCADORES_SUMARIO = ("PAGEREF", "_Toc")

RE_SUMARIO = re.compile(r"\bsum[áa]rio\b", re.IGNORECASE)

# "DO REGISTRO DE PREÇOS 3" -> título seguido de número de página
RE_TITULO_COM_PAGINA = re.compile(
    r"\bD[AO]S?\s+[A-ZÀ-ÖØ-Ý][A-ZÀ-ÖØ-Ý \t]{3,80}?[ \t]+\d{1,3}[ \t]*(?:\r?\n|$)"
)

RE_PONTILHADO = re.compile(r"\.{4,}|…{2,}")


def eh_ruido_sumario(contexto: str) -> bool:
    """Contexto parece sumário/índice (e não texto substantivo)."""
    if any(m in contexto for m in MARCADORES_SUMARIO):
        return True
    if RE_SUMARIO.search(contexto):
        return True
    if RE_PONTILHADO.search(contexto):
        return True
    return bool(RE_TITULO_COM_PAGINA.search(contexto))


# ── Sigilo ───────────────────────────────────────────────────────────────────

TERMOS_SIGILO = ("sigiloso", "sigilosa", "confidencial", "não divulgado", "nao divulgado")


def eh_sigiloso(contexto: str) -> bool:
    contexto_lower = contexto.lower()
    return any(t in contexto_lower for t in TERMOS_SIGILO)


# ── Números ──────────────────────────────────────────────────────────────────

def normalizar_valor(valor: str) -> str:
    """
    Normaliza valor monetário brasileiro.

    "1.234.567,89" -> "1234567.89"
    "500,00."      -> "500.00"
    """
    valor = (valor or "").strip().rstrip(".,")
    return valor.replace(".", "").replace(",", ".")


# "8 (oito) dias úteis" / "03 dias úteis": grupo 1 = número
DIAS_UTEIS = r"(\d{1,3})\s*(?:\([^)]{0,30}\)\s*)?dias?\s+[úu]teis"

# "5%" / "0,5 %" / "1 (um) por cento": grupo 1 = número
PERCENTUAL = r"(\d{1,3}(?:[.,]\d+)?)\s*(?:\([^)]{0,40}\)\s*)?(?:%|por\s*cento)"


def normalizar_percentual(valor: str) -> str:
    """'0,5' -> '0.5'; '05' -> '5'."""
    valor = valor.strip().replace(",", ".")
    if "." in valor:
        inteiro, _, decimal = valor.partition(".")
        decimal = decimal.rstrip("0")
        inteiro = str(int(inteiro or "0"))
        return f"{inteiro}.{decimal}" if decimal else inteiro
    return str(int(valor))


# ── Busca ────────────────────────────────────────────────────────────────────

def compilar(padroes: Sequence[str], flags: int = re.IGNORECASE) -> List[re.Pattern]:
    return [re.compile(p, flags) for p in padroes]


def buscar(padroes: Sequence[re.Pattern], texto: str) -> Optional[re.Match]:
    """Primeiro match entre os padrões, na ordem dada."""
    for p in padroes:
        m = p.search(texto)
        if m:
            return m
    return None


@dataclass(frozen=True)
class Categoria:
    """Linha de uma tabela de categorias mutuamente exclusivas."""
    valor: str
    termos: Tuple[str, ...]                 # regex; presença de qualquer um
    evidencias: Tuple[str, ...] = ()        # regex para recortar a evidência
    padroes: Tuple[re.Pattern, ...] = field(init=False, repr=False, compare=False)
    padroes_evidencia: Tuple[re.Pattern, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        # compilados uma vez, quando o módulo declara a tabela
        object.__setattr__(self, "padroes", tuple(compilar(self.termos)))
        object.__setattr__(self, "padroes_evidencia", tuple(compilar(self.evidencias)))


def primeira_correspondencia(
    tabela: Sequence[Categoria], texto: str
) -> Optional[Tuple[str, Optional[str]]]:
    """
    Avalia a tabela em ordem; a primeira categoria com algum termo presente
    vence e as seguintes não são checadas.

    Retorna (valor, evidencia) ou None. A evidência pode ser None quando
    nenhum padrão de recorte casa.
    """
    for categoria in tabela:
        if buscar(categoria.padroes, texto):
            m = buscar(categoria.padroes_evidencia, texto)
            return categoria.valor, (m.group(0) if m else None)
    return None


def regra_categoria(campo: str, tabela: Sequence[Categoria]):
    """Fábrica de regra de campo a partir de uma tabela de categorias."""

    def regra(ctx: ExtractionContext) -> List[Atribuicao]:
        achado = primeira_correspondencia(tabela, ctx.texto)
        if not achado:
            return []
        valor, evidencia = achado
        return [Atribuicao(campo, valor, evidencia)]

    regra.__name__ = f"regra_{campo}"
    return regra
