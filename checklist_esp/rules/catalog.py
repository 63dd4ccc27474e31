"""
Catálogo de regras do checklist ESP (Lei 14.133/2021, LC 123/2006)
=================================================================

Ordem do catálogo = ordem de saída. Agrupado pelas fases do procedimento:

criterios -> registro-precos -> participacao -> proposta -> lances ->
julgamento -> habilitacao -> publicacao -> orcamento

Alguns itens disparam sempre (status ok + orientação): são lembretes do
checklist manual, não validações.

Regras de prazo distinguem ausência de valor abaixo do mínimo: campo ausente
(ou não numérico) não gera resultado; valor presente abaixo do mínimo gera
warning.
"""

import re
from typing import Optional

from checklist_esp.models import NAO, SIM, RuleOutcome
from checklist_esp.rules.base import (
    Campos,
    RuleEvaluator,
    fmt_numero,
    ok,
    parse_int_lenient,
    parse_percent,
    valor,
    warning,
)

LEI = "Lei 14.133/2021"

PRAZO_MIN_PNCP = 8
PRAZO_MIN_INTENCAO = 8
PRAZO_MIN_RECURSAL = 3
PRAZO_MIN_IMPUGNACAO = 3

GARANTIA_PARTICIPACAO_MAX = 1.0
GARANTIA_CONTRATUAL_MAX = 5.0
SUBCONTRATACAO_ME_MAX = 30.0

CRITERIOS_COM_SIGILO = ("menor-preco", "maior-desconto")


# ════════════════════════════════════════════════════════════════════════════
# 1. Dados iniciais e critérios fundamentais
# ════════════════════════════════════════════════════════════════════════════

def criterio_julgamento(campos: Campos) -> Optional[RuleOutcome]:
    criterio = valor(campos, "criterioJulgamento")
    base = dict(
        rule_id="rule-1",
        title="Critério de Julgamento",
        legal=f"Art. 33, {LEI}",
        source_context="Critério de Julgamento",
        edital_reference="Item do cabeçalho do edital",
    )
    if criterio:
        return ok(message=f"Critério definido: {criterio}", **base)
    return warning(
        message="Critério de julgamento não identificado",
        guidance="Deve ser selecionado: menor preço ou maior desconto",
        **base,
    )


def modo_disputa(campos: Campos) -> Optional[RuleOutcome]:
    modo = valor(campos, "modoDisputa")
    base = dict(
        rule_id="rule-2",
        title="Modo de Disputa",
        legal=f"Art. 56, {LEI}",
        source_context="Modo de Disputa",
        edital_reference="Item do cabeçalho do edital",
    )
    if modo:
        return ok(message=f"Modo definido: {modo}", **base)
    return warning(
        message="Modo de disputa não identificado",
        guidance="Deve ser selecionado: aberto, aberto e fechado, ou fechado e aberto",
        **base,
    )


def preferencia_me(campos: Campos) -> Optional[RuleOutcome]:
    preferencia = valor(campos, "preferenciaMe")
    base = dict(
        rule_id="rule-3",
        title="Preferência ME/EPP",
        legal="LC 123/2006, Art. 44",
        source_context="Preferência ME/EPP",
        edital_reference="Item do cabeçalho do edital",
    )
    if preferencia == SIM:
        return ok(message="Tratamento diferenciado para ME/EPP previsto", **base)
    if preferencia == NAO:
        return warning(
            message="Ausência de tratamento diferenciado para ME/EPP",
            guidance="Verifique se há justificativa legal para não aplicação",
            **base,
        )
    return None


# ════════════════════════════════════════════════════════════════════════════
# 2. Registro de preços
# ════════════════════════════════════════════════════════════════════════════

def registro_precos(campos: Campos) -> Optional[RuleOutcome]:
    srp = valor(campos, "registroPreco")
    base = dict(
        rule_id="rule-4",
        title="Registro de Preços",
        legal=f"Art. 82, {LEI}",
        source_context="Registro de Preço",
    )
    if srp == SIM:
        return ok(
            message="Licitação para registro de preços",
            edital_reference="Item 2 do edital - DO REGISTRO DE PREÇOS",
            **base,
        )
    if srp == NAO:
        return ok(
            message="Licitação NÃO é para registro de preços",
            edital_reference="Item 2.1 do edital - disciplina não se aplica",
            **base,
        )
    return None


def intencao_pncp(campos: Campos) -> Optional[RuleOutcome]:
    if valor(campos, "registroPreco") != SIM:
        return None
    base = dict(
        rule_id="rule-5",
        title="Intenção de Registro no PNCP",
        legal=f"Art. 82, {LEI}",
        source_context="PNCP - Intenção",
        edital_reference="Item 2.2 do edital - Registro de Preços",
    )
    if valor(campos, "pncpIntencao") == SIM:
        return ok(message="Intenção de registro publicada no PNCP", **base)
    return warning(
        message="Registro de preços sem intenção publicada no PNCP",
        guidance="Deve haver publicação da intenção no PNCP com antecedência mínima de 8 dias",
        **base,
    )


def prazo_intencao_pncp(campos: Campos) -> Optional[RuleOutcome]:
    if valor(campos, "registroPreco") != SIM or valor(campos, "pncpIntencao") != SIM:
        return None
    prazo = parse_int_lenient(valor(campos, "pncpPrazoIntencao"))
    base = dict(
        rule_id="rule-6",
        title="Prazo Intenção PNCP",
        legal=f"Art. 82, §1º, {LEI}",
        source_context="PNCP - Prazo Intenção",
        edital_reference="Item 2.2 do edital - prazos",
    )
    if prazo >= PRAZO_MIN_INTENCAO:
        return ok(message=f"Prazo de {prazo} dias adequado", **base)
    if prazo > 0:
        return warning(
            message=f"Prazo de {prazo} dias inferior ao mínimo de {PRAZO_MIN_INTENCAO} dias",
            guidance=f"O prazo deve ser de no mínimo {PRAZO_MIN_INTENCAO} dias úteis",
            **base,
        )
    return None


# ════════════════════════════════════════════════════════════════════════════
# 3. Participação e tratamento favorecido
# ════════════════════════════════════════════════════════════════════════════

def cooperativas(campos: Campos) -> Optional[RuleOutcome]:
    situacao = valor(campos, "cooperativas")
    base = dict(
        rule_id="rule-7",
        title="Participação de Cooperativas",
        legal=f"Art. 48, §3º, {LEI}",
        source_context="Cooperativas",
    )
    if situacao == "vedado":
        return warning(
            message="Vedação à participação de cooperativas",
            guidance="Verifique se há justificativa técnica para vedação",
            edital_reference="Item 3.10 do edital - DA PARTICIPAÇÃO",
            **base,
        )
    if situacao == "permitido":
        return ok(
            message="Participação de cooperativas permitida",
            edital_reference="Item 3.11 do edital - DA PARTICIPAÇÃO",
            **base,
        )
    return None


def consorcios(campos: Campos) -> Optional[RuleOutcome]:
    situacao = valor(campos, "consorcio")
    base = dict(
        rule_id="rule-8",
        title="Participação de Consórcios",
        legal=f"Art. 15, {LEI}",
        source_context="Consórcio",
    )
    if situacao == "vedado":
        return warning(
            message="Vedação à participação de consórcios",
            guidance="Verifique se há justificativa para vedação",
            edital_reference="Item 3.12 do edital - DA PARTICIPAÇÃO",
            **base,
        )
    if situacao == "permitido":
        return ok(
            message="Participação de consórcios permitida",
            guidance=(
                "Verifique se há exigência de acréscimo de 10% a 30% na habilitação "
                "econômico-financeira (item 8.1.4.1)"
            ),
            edital_reference="Item 3.13 do edital - DA PARTICIPAÇÃO",
            **base,
        )
    return None


def exclusiva_me(campos: Campos) -> Optional[RuleOutcome]:
    if valor(campos, "exclusivaMe") != SIM:
        return None
    return ok(
        rule_id="rule-9",
        title="Participação Exclusiva ME/EPP",
        message="Itens com participação exclusiva de ME/EPP",
        legal="LC 123/2006, Art. 48, I",
        source_context="Exclusiva ME/EPP",
        edital_reference="Item 3.5.1 do edital - Tratamento Favorecido",
    )


def cota_25_me(campos: Campos) -> Optional[RuleOutcome]:
    cota = valor(campos, "cota25Me")
    base = dict(
        rule_id="rule-10",
        title="Cota 25% ME/EPP",
        legal="LC 123/2006, Art. 48, III",
        source_context="Cota 25% ME/EPP",
    )
    if cota == SIM:
        return ok(
            message="Cota de até 25% reservada para ME/EPP",
            edital_reference="Item 3.5.2 do edital - Tratamento Favorecido",
            **base,
        )
    if cota == NAO and valor(campos, "preferenciaMe") == SIM:
        return warning(
            message="Preferência ME/EPP sem cota de 25%",
            guidance="Verifique a possibilidade de reserva de cota",
            edital_reference="Item 3.5 do edital - Tratamento Favorecido",
            **base,
        )
    return None


_RE_ZERO = re.compile(r"^\s*0+(?:[.,]0+)?\s*%?\s*$")


def subcontratacao_me(campos: Campos) -> Optional[RuleOutcome]:
    bruto = valor(campos, "subcontratacaoMe")
    if not bruto:
        return None
    percentual = parse_percent(bruto)
    base = dict(
        rule_id="rule-31",
        title="Subcontratação de ME/EPP",
        legal="Decreto 8.538/2015, Art. 7º",
        source_context="Subcontratação ME/EPP",
        edital_reference="Item sobre subcontratação",
    )
    if percentual == 0:
        if not _RE_ZERO.match(bruto):
            return None
        return ok(message="Subcontratação vedada pelo edital", **base)
    if percentual <= SUBCONTRATACAO_ME_MAX:
        return ok(message=f"Subcontratação de ME/EPP de até {fmt_numero(percentual)}%", **base)
    return warning(
        message=f"Subcontratação de {fmt_numero(percentual)}% acima do limite de 30%",
        guidance="A subcontratação compulsória de ME/EPP não pode exceder 30% do valor licitado",
        **base,
    )


# ════════════════════════════════════════════════════════════════════════════
# 4. Preenchimento da proposta
# ════════════════════════════════════════════════════════════════════════════

def vinculacao_especificacoes(campos: Campos) -> Optional[RuleOutcome]:
    return ok(
        rule_id="rule-11",
        title="Vinculação das Especificações",
        message="Todas as especificações da proposta vinculam o licitante",
        legal=f"Art. 63, {LEI}",
        source_context="Proposta",
        edital_reference="Item 5.2 do edital - DA PROPOSTA",
    )


def quantitativo_inferior(campos: Campos) -> Optional[RuleOutcome]:
    if valor(campos, "registroPreco") != SIM:
        return None
    return ok(
        rule_id="rule-12",
        title="Quantitativo Inferior (Registro de Preços)",
        message="Verifique se o licitante pode oferecer quantitativo inferior ao máximo previsto",
        legal=f"Art. 82, {LEI}",
        guidance=(
            "Deve estar definido no item 5.2.1 se o licitante NÃO ou PODERÁ oferecer "
            "proposta em quantitativo inferior"
        ),
        source_context="Registro de Preço",
        edital_reference="Item 5.2.1 do edital - DA PROPOSTA",
    )


# ════════════════════════════════════════════════════════════════════════════
# 5. Etapa de lances
# ════════════════════════════════════════════════════════════════════════════

def intervalo_minimo(campos: Campos) -> Optional[RuleOutcome]:
    intervalo = valor(campos, "intervaloMinimo")
    base = dict(
        rule_id="rule-13",
        title="Intervalo Mínimo entre Lances",
        legal=f"Art. 56, {LEI}",
        source_context="Intervalo Mínimo",
        edital_reference="Item 6.8 do edital - DA ETAPA DE LANCES",
    )
    if intervalo:
        return ok(message=f"Intervalo mínimo definido: {intervalo}", **base)
    return warning(
        message="Intervalo mínimo entre lances não identificado",
        guidance="Deve ser definido o intervalo mínimo de diferença entre lances",
        **base,
    )


_MODOS = {
    "aberto": ("Modo de Disputa Aberto", "Modo aberto - verifique redação do item 6.11",
               "Item 6.11 do edital - Modo Aberto", None),
    "aberto-fechado": ("Modo de Disputa Aberto e Fechado", "Modo aberto e fechado - verifique redação do item 6.12",
                       "Item 6.12 do edital - Modo Aberto e Fechado", None),
    "fechado-aberto": ("Modo de Disputa Fechado e Aberto", "Modo fechado e aberto - verifique redação do item 6.13",
                       "Item 6.13 do edital - Modo Fechado e Aberto",
                       "Verifique se a descrição está coerente com o critério de julgamento"),
}


def modo_disputa_itens(campos: Campos) -> Optional[RuleOutcome]:
    modo = _MODOS.get(valor(campos, "modoDisputa"))
    if not modo:
        return None
    title, message, referencia, guidance = modo
    return ok(
        rule_id="rule-14",
        title=title,
        message=message,
        legal=f"Art. 56, {LEI}",
        guidance=guidance,
        source_context="Modo de Disputa",
        edital_reference=referencia,
    )


def negociacao(campos: Campos) -> Optional[RuleOutcome]:
    return ok(
        rule_id="rule-15",
        title="Negociação de Preços",
        message="Verifique condição para negociação no item 6.22",
        legal=f"Art. 59, {LEI}",
        guidance=(
            "A condição deve ser ajustada ao critério: proposta acima do preço máximo "
            "ou inferior ao desconto mínimo"
        ),
        source_context="Critério de Julgamento",
        edital_reference="Item 6.22 do edital - DA ETAPA DE LANCES",
    )


# ════════════════════════════════════════════════════════════════════════════
# 6. Julgamento da proposta
# ════════════════════════════════════════════════════════════════════════════

def inexequibilidade(campos: Campos) -> Optional[RuleOutcome]:
    return ok(
        rule_id="rule-16",
        title="Inexequibilidade e Sobrepreço",
        message="Verifique regra aplicável: geral (item 7.8) ou serviços de engenharia (item 7.9)",
        legal=f"Art. 59, §2º, {LEI}",
        guidance="Regra geral: inexequível se inferior a 50% do valor orçado. Engenharia: inferior a 75%",
        source_context="Critério de Julgamento",
        edital_reference="Itens 7.8 ou 7.9 do edital - DO JULGAMENTO",
    )


def servicos_continuos(campos: Campos) -> Optional[RuleOutcome]:
    return ok(
        rule_id="rule-17",
        title="Serviços Contínuos",
        message="Se aplicável, verifique item 7.10 sobre serviços contínuos",
        legal=f"Art. 59, {LEI}",
        guidance="Deve indicar acordo/dissídio/convenção coletiva utilizada no cálculo (item 7.10.3)",
        source_context="Tipo de Licitação",
        edital_reference="Item 7.10 do edital - DO JULGAMENTO",
    )


def amostras(campos: Campos) -> Optional[RuleOutcome]:
    if valor(campos, "amostras") != SIM:
        return None
    return ok(
        rule_id="rule-18",
        title="Exigência de Amostras",
        message="Amostras exigidas conforme Anexos",
        legal=f"Art. 63, {LEI}",
        source_context="Amostras",
        edital_reference="Item 7.15 do edital - DO JULGAMENTO",
    )


def prova_conceito(campos: Campos) -> Optional[RuleOutcome]:
    if valor(campos, "demonstracao") != SIM:
        return None
    return ok(
        rule_id="rule-19",
        title="Prova de Conceito",
        message="Prova de conceito exigida conforme Anexos",
        legal=f"Art. 63, {LEI}",
        source_context="Demonstração",
        edital_reference="Item 7.16 do edital - DO JULGAMENTO",
    )


# ════════════════════════════════════════════════════════════════════════════
# 7. Habilitação e formalização
# ════════════════════════════════════════════════════════════════════════════

def vistoria(campos: Campos) -> Optional[RuleOutcome]:
    obrigatoria = valor(campos, "visitaObrigatoria")
    if obrigatoria == SIM:
        return ok(
            rule_id="rule-20",
            title="Vistoria Prévia Obrigatória",
            message="Vistoria prévia obrigatória - exige atestado",
            legal=f"Art. 63, {LEI}",
            source_context="Visita Obrigatória",
            edital_reference="Item 8.1.3 do edital - DA HABILITAÇÃO",
        )
    if valor(campos, "visita") == SIM and obrigatoria == NAO:
        return ok(
            rule_id="rule-20",
            title="Vistoria Prévia Facultativa",
            message="Vistoria prévia facultativa - não exige atestado",
            legal=f"Art. 63, {LEI}",
            source_context="Visita",
            edital_reference="Item 8.1.2 do edital - DA HABILITAÇÃO",
        )
    return None


def habilitacao_me(campos: Campos) -> Optional[RuleOutcome]:
    if valor(campos, "preferenciaMe") != SIM:
        return None
    return ok(
        rule_id="rule-21",
        title="Habilitação ME/EPP",
        message="ME/EPP comprovam regularidade fiscal apenas para contratação",
        legal="LC 123/2006, Art. 43",
        guidance="Prazo de 5 dias úteis para regularização, prorrogável por igual período",
        source_context="Preferência ME/EPP",
        edital_reference="Item 8.15 do edital - DA HABILITAÇÃO",
    )


def garantia_participacao(campos: Campos) -> Optional[RuleOutcome]:
    bruto = valor(campos, "garantiaParticipacao")
    base = dict(
        rule_id="rule-22",
        title="Garantia de Participação",
        legal=f"Art. 58, §1º, {LEI}",
        source_context="Garantia de Participação",
        edital_reference="Item da habilitação sobre garantias",
    )
    if bruto.lower() == SIM:
        return ok(message="Garantia de participação exigida", **base)
    percentual = parse_percent(bruto)
    if percentual <= 0:
        return None
    if percentual <= GARANTIA_PARTICIPACAO_MAX:
        return ok(message=f"Garantia de participação de {fmt_numero(percentual)}% exigida", **base)
    return warning(
        message=f"Garantia de participação de {fmt_numero(percentual)}% acima do limite de 1%",
        guidance="A garantia de proposta não pode exceder 1% do valor estimado da contratação",
        **base,
    )


def garantia_contratual(campos: Campos) -> Optional[RuleOutcome]:
    bruto = valor(campos, "garantiaContratual")
    base = dict(
        rule_id="rule-23",
        title="Garantia Contratual",
        legal=f"Art. 98, {LEI}",
        source_context="Garantia Contratual",
        edital_reference="Item do contrato sobre garantias",
    )
    if bruto.lower() == SIM:
        return ok(message="Garantia contratual exigida", **base)
    percentual = parse_percent(bruto)
    if percentual <= 0:
        return None
    if percentual <= GARANTIA_CONTRATUAL_MAX:
        return ok(message=f"Garantia contratual de {fmt_numero(percentual)}% exigida", **base)
    return warning(
        message=f"Garantia contratual de {fmt_numero(percentual)}% acima do limite geral de 5%",
        guidance=(
            "O limite pode chegar a 10% apenas com justificativa de complexidade técnica "
            "e riscos envolvidos (Art. 98, parágrafo único)"
        ),
        **base,
    )


def formalizacao(campos: Campos) -> Optional[RuleOutcome]:
    return ok(
        rule_id="rule-24",
        title="Formalização da Contratação",
        message="Verifique instrumento de formalização no item 14.2.1",
        legal=f"Art. 95, {LEI}",
        guidance="Deve ser escolhido: assinatura de Termo de Contrato ou emissão de nota de empenho",
        source_context="Tipo de Licitação",
        edital_reference="Item 14.2.1 do edital - DA FORMALIZAÇÃO",
    )


# ════════════════════════════════════════════════════════════════════════════
# 8. Publicação e prazos
# ════════════════════════════════════════════════════════════════════════════

def publicacao_pncp(campos: Campos) -> Optional[RuleOutcome]:
    base = dict(
        rule_id="rule-25",
        title="Publicação no PNCP",
        legal=f"Art. 54, {LEI}",
        source_context="PNCP - Publicação",
        edital_reference="Requisito de publicação",
    )
    if valor(campos, "pncpPublicacao") == SIM:
        return ok(message="Edital será publicado no PNCP", **base)
    return warning(
        message="Publicação no PNCP não identificada",
        guidance="A publicação no PNCP é obrigatória",
        **base,
    )


def prazo_pncp(campos: Campos) -> Optional[RuleOutcome]:
    if valor(campos, "pncpPublicacao") != SIM:
        return None
    prazo = parse_int_lenient(valor(campos, "pncpPrazo"))
    base = dict(
        rule_id="rule-26",
        title="Prazo de Publicação PNCP",
        legal=f"Art. 54, §1º, {LEI}",
        source_context="PNCP - Prazo",
        edital_reference="Requisito de prazo",
    )
    if prazo >= PRAZO_MIN_PNCP:
        return ok(message=f"Prazo de {prazo} dias adequado", **base)
    if prazo > 0:
        return warning(
            message=f"Prazo de {prazo} dias inferior ao mínimo de {PRAZO_MIN_PNCP} dias úteis",
            guidance=f"O prazo mínimo é de {PRAZO_MIN_PNCP} dias úteis",
            **base,
        )
    return None


def prazo_recursal(campos: Campos) -> Optional[RuleOutcome]:
    prazo = parse_int_lenient(valor(campos, "prazoRecursal"))
    base = dict(
        rule_id="rule-27",
        title="Prazo Recursal",
        legal=f"Art. 165, {LEI}",
        source_context="Prazo Recursal",
        edital_reference="Item sobre recursos",
    )
    if prazo >= PRAZO_MIN_RECURSAL:
        return ok(message=f"Prazo de {prazo} dias adequado", **base)
    if prazo > 0:
        return warning(
            message=f"Prazo de {prazo} dias inferior ao mínimo de {PRAZO_MIN_RECURSAL} dias úteis",
            guidance=f"O prazo mínimo é de {PRAZO_MIN_RECURSAL} dias úteis",
            **base,
        )
    return None


def prazo_impugnacao(campos: Campos) -> Optional[RuleOutcome]:
    prazo = parse_int_lenient(valor(campos, "prazoImpugnacao"))
    base = dict(
        rule_id="rule-32",
        title="Prazo de Impugnação",
        legal=f"Art. 164, {LEI}",
        source_context="Prazo de Impugnação",
        edital_reference="Item sobre impugnações",
    )
    if prazo >= PRAZO_MIN_IMPUGNACAO:
        return ok(message=f"Prazo de {prazo} dias adequado", **base)
    if prazo > 0:
        return warning(
            message=f"Prazo de {prazo} dias inferior ao mínimo de {PRAZO_MIN_IMPUGNACAO} dias úteis",
            guidance=(
                f"Impugnações e pedidos de esclarecimento podem ser apresentados até "
                f"{PRAZO_MIN_IMPUGNACAO} dias úteis antes da abertura do certame"
            ),
            **base,
        )
    return None


# ════════════════════════════════════════════════════════════════════════════
# 9. Orçamento e valor
# ════════════════════════════════════════════════════════════════════════════

def orcamento_sigiloso(campos: Campos) -> Optional[RuleOutcome]:
    if valor(campos, "orcamentoSigiloso") != SIM:
        return None
    base = dict(
        rule_id="rule-28",
        title="Orçamento Sigiloso",
        legal=f"Art. 24, §1º, {LEI}",
        source_context="Orçamento Sigiloso",
        edital_reference="Item sobre orçamento",
    )
    if valor(campos, "criterioJulgamento") in CRITERIOS_COM_SIGILO:
        return ok(message="Orçamento sigiloso permitido para o critério escolhido", **base)
    return warning(
        message="Orçamento sigiloso em critério inadequado",
        guidance="Orçamento sigiloso só é permitido em menor preço ou maior desconto",
        **base,
    )


def valor_licitacao(campos: Campos) -> Optional[RuleOutcome]:
    valor_estimado = valor(campos, "valorLicitacao")
    if not valor_estimado:
        return None
    return ok(
        rule_id="rule-29",
        title="Valor da Licitação",
        message=f"Valor estimado: R$ {valor_estimado}",
        legal=f"Art. 24, {LEI}",
        source_context="Valor da Licitação",
        edital_reference="Capa do edital",
    )


def orcamento_publico(campos: Campos) -> Optional[RuleOutcome]:
    if valor(campos, "orcamentoPublico") != SIM or valor(campos, "orcamentoSigiloso") == SIM:
        return None
    return ok(
        rule_id="rule-30",
        title="Orçamento Público",
        message="Orçamento estimado divulgado publicamente",
        legal=f"Art. 24, {LEI}",
        source_context="Orçamento Público",
        edital_reference="Item sobre orçamento",
    )


# ════════════════════════════════════════════════════════════════════════════
# Catálogo
# ════════════════════════════════════════════════════════════════════════════

RULE_CATALOG = (
    RuleEvaluator("rule-1", "criterios", criterio_julgamento),
    RuleEvaluator("rule-2", "criterios", modo_disputa),
    RuleEvaluator("rule-3", "criterios", preferencia_me),
    RuleEvaluator("rule-4", "registro-precos", registro_precos),
    RuleEvaluator("rule-5", "registro-precos", intencao_pncp),
    RuleEvaluator("rule-6", "registro-precos", prazo_intencao_pncp),
    RuleEvaluator("rule-7", "participacao", cooperativas),
    RuleEvaluator("rule-8", "participacao", consorcios),
    RuleEvaluator("rule-9", "participacao", exclusiva_me),
    RuleEvaluator("rule-10", "participacao", cota_25_me),
    RuleEvaluator("rule-31", "participacao", subcontratacao_me),
    RuleEvaluator("rule-11", "proposta", vinculacao_especificacoes),
    RuleEvaluator("rule-12", "proposta", quantitativo_inferior),
    RuleEvaluator("rule-13", "lances", intervalo_minimo),
    RuleEvaluator("rule-14", "lances", modo_disputa_itens),
    RuleEvaluator("rule-15", "lances", negociacao),
    RuleEvaluator("rule-16", "julgamento", inexequibilidade),
    RuleEvaluator("rule-17", "julgamento", servicos_continuos),
    RuleEvaluator("rule-18", "julgamento", amostras),
    RuleEvaluator("rule-19", "julgamento", prova_conceito),
    RuleEvaluator("rule-20", "habilitacao", vistoria),
    RuleEvaluator("rule-21", "habilitacao", habilitacao_me),
    RuleEvaluator("rule-22", "habilitacao", garantia_participacao),
    RuleEvaluator("rule-23", "habilitacao", garantia_contratual),
    RuleEvaluator("rule-24", "habilitacao", formalizacao),
    RuleEvaluator("rule-25", "publicacao", publicacao_pncp),
    RuleEvaluator("rule-26", "publicacao", prazo_pncp),
    RuleEvaluator("rule-27", "publicacao", prazo_recursal),
    RuleEvaluator("rule-32", "publicacao", prazo_impugnacao),
    RuleEvaluator("rule-28", "orcamento", orcamento_sigiloso),
    RuleEvaluator("rule-29", "orcamento", valor_licitacao),
    RuleEvaluator("rule-30", "orcamento", orcamento_publico),
)

FASES = (
    "criterios",
    "registro-precos",
    "participacao",
    "proposta",
    "lances",
    "julgamento",
    "habilitacao",
    "publicacao",
    "orcamento",
)
