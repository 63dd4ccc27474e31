"""
Checklist ESP - Extrator de campos (regex)
==========================================

Regras de campo executadas em ordem fixa sobre o texto do edital.

Uso:
    from checklist_esp.extractors import extract_fields

    resultado = extract_fields(texto, secoes)
    for fonte in resultado.sources:
        print(f"{fonte.field}: {fonte.snippet} (item {fonte.section_number})")

Semântica do driver:
- escrita única: a primeira regra que define um campo vence
- exceção: atribuições com refinar=True sobrescrevem (e trocam a origem)
- cada atribuição com evidência gera uma SourceAttribution, resolvendo a
  seção de origem pelo localizador de trechos
"""

import re
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from checklist_esp.models import FIELD_NAMES_SET, ExtractionResult, Section, SourceAttribution
from checklist_esp.observability import EventSink, NULL_SINK
from checklist_esp.structure.matcher import find_section
from checklist_esp.extractors.base import Atribuicao, ExtractionContext, janela

from checklist_esp.extractors.objeto import regra_objeto, regra_registro_preco, regra_forma_objeto
from checklist_esp.extractors.julgamento import (
    regra_criterio_julgamento,
    regra_escopo_julgamento,
    regra_modo_disputa,
    regra_intervalo_lances,
    regra_desempate,
)
from checklist_esp.extractors.orcamento import regra_valor_licitacao, regra_orcamento, regra_classe_objeto
from checklist_esp.extractors.publicacao import regra_pncp, regra_prazos
from checklist_esp.extractors.me_epp import regra_me_epp, regra_subcontratacao
from checklist_esp.extractors.garantias import regra_garantias
from checklist_esp.extractors.requisitos import (
    regra_visita,
    regra_visita_explicita,
    regra_demonstracao,
    regra_amostras,
)
from checklist_esp.extractors.participacao import (
    regra_cooperativas,
    regra_consorcio,
    regra_margem_preferencia,
)

Regra = Callable[[ExtractionContext], List[Atribuicao]]

# Ordem importa: registro_preco lê objetoDescricao, me_epp também;
# visita_explicita refina visita.
FIELD_RULES: Tuple[Tuple[str, Regra], ...] = (
    ("objeto", regra_objeto),
    ("registro_preco", regra_registro_preco),
    ("forma_objeto", regra_forma_objeto),
    ("criterio_julgamento", regra_criterio_julgamento),
    ("escopo_julgamento", regra_escopo_julgamento),
    ("modo_disputa", regra_modo_disputa),
    ("intervalo_lances", regra_intervalo_lances),
    ("valor_licitacao", regra_valor_licitacao),
    ("orcamento", regra_orcamento),
    ("classe_objeto", regra_classe_objeto),
    ("pncp", regra_pncp),
    ("prazos", regra_prazos),
    ("me_epp", regra_me_epp),
    ("subcontratacao", regra_subcontratacao),
    ("garantias", regra_garantias),
    ("visita", regra_visita),
    ("visita_explicita", regra_visita_explicita),
    ("demonstracao", regra_demonstracao),
    ("amostras", regra_amostras),
    ("cooperativas", regra_cooperativas),
    ("consorcio", regra_consorcio),
    ("desempate", regra_desempate),
    ("margem_preferencia", regra_margem_preferencia),
)


def build_source(
    texto: str,
    campo: str,
    evidencia: str,
    secoes: Sequence[Section],
    contexto_chars: int = 100,
) -> Optional[SourceAttribution]:
    """
    Localiza a primeira ocorrência (case-insensitive) da evidência e monta a
    origem com janela de ±contexto_chars. None se a evidência não está no texto.
    """
    m = re.search(re.escape(evidencia), texto, re.IGNORECASE)
    if not m:
        return None

    snippet = texto[m.start():m.end()].strip()
    contexto = janela(texto, m.start(), m.end(), contexto_chars).strip()
    if len(contexto) <= len(snippet):
        contexto = snippet

    secao = find_section(snippet, secoes)
    return SourceAttribution(
        field=campo,
        snippet=snippet,
        context=contexto,
        section_number=secao.number if secao else None,
        section_title=secao.title if secao else None,
    )


def extract_fields(
    texto: str,
    secoes: Optional[Sequence[Section]] = None,
    eventos: Optional[EventSink] = None,
    regras: Sequence[Tuple[str, Regra]] = FIELD_RULES,
) -> ExtractionResult:
    """
    Extrai os campos do checklist a partir do texto do edital.

    Texto vazio retorna resultado vazio. None é erro de chamada (TypeError).
    """
    if texto is None:
        raise TypeError("texto do edital não pode ser None")
    eventos = eventos or NULL_SINK

    campos: Dict[str, str] = {}
    fontes: List[SourceAttribution] = []

    if not texto.strip():
        eventos.emit("extracao.vazia")
        return ExtractionResult(fields=campos, sources=fontes)

    secoes = tuple(secoes or ())
    texto_lower = texto.lower()

    for nome, regra in regras:
        ctx = ExtractionContext(texto=texto, texto_lower=texto_lower, secoes=secoes, campos=dict(campos))

        for atrib in regra(ctx):
            if atrib.field not in FIELD_NAMES_SET:
                raise ValueError(f"Regra '{nome}' atribuiu campo desconhecido: {atrib.field}")

            if atrib.field in campos and not atrib.refinar:
                continue

            if atrib.refinar and atrib.field in campos:
                fontes = [f for f in fontes if f.field != atrib.field]

            campos[atrib.field] = atrib.value
            eventos.emit("extracao.campo", regra=nome, campo=atrib.field, valor=atrib.value)

            if atrib.evidencia:
                fonte = build_source(texto, atrib.field, atrib.evidencia, secoes, atrib.contexto_chars)
                if fonte:
                    fontes.append(fonte)

    eventos.emit("extracao.concluida", campos=len(campos), fontes=len(fontes))
    return ExtractionResult(fields=campos, sources=fontes)


__all__ = [
    "FIELD_RULES",
    "Atribuicao",
    "ExtractionContext",
    "build_source",
    "extract_fields",
]
