"""
Exportação/importação do mapa de campos em JSON.

Formato: objeto JSON plano {campo: valor}, chaves na ordem do formulário.
Na importação, chaves desconhecidas são descartadas e valores vazios
contam como "não definido".
"""
import json
import logging
from typing import Any, Dict, Mapping

from checklist_esp.models import FIELD_NAMES, FIELD_NAMES_SET

logger = logging.getLogger(__name__)


def _como_texto(valor: Any):
    """str -> aparado; número -> str; demais tipos -> None (não definido)."""
    if isinstance(valor, bool):
        return None
    if isinstance(valor, str):
        valor = valor.strip()
        return valor or None
    if isinstance(valor, int):
        return str(valor)
    if isinstance(valor, float):
        return str(int(valor)) if valor.is_integer() else str(valor)
    return None


def export_fields_json(campos: Mapping[str, Any]) -> str:
    """Serializa apenas campos conhecidos e definidos, na ordem de FIELD_NAMES."""
    saida: Dict[str, str] = {}
    for nome in FIELD_NAMES:
        valor = _como_texto(campos.get(nome))
        if valor is not None:
            saida[nome] = valor
    return json.dumps(saida, ensure_ascii=False, indent=2)


def import_fields_json(texto: str) -> Dict[str, str]:
    """
    Lê o JSON exportado.

    Raises:
        ValueError: JSON malformado ou raiz que não é objeto
    """
    try:
        dados = json.loads(texto)
    except (TypeError, json.JSONDecodeError) as e:
        raise ValueError(f"JSON inválido: {e}") from e

    if not isinstance(dados, dict):
        raise ValueError("JSON deve ser um objeto {campo: valor}")

    campos: Dict[str, str] = {}
    ignorados = []
    for nome, bruto in dados.items():
        if nome not in FIELD_NAMES_SET:
            ignorados.append(nome)
            continue
        valor = _como_texto(bruto)
        if valor is not None:
            campos[nome] = valor

    if ignorados:
        logger.info("import_fields_json: %d chave(s) desconhecida(s) ignorada(s): %s", len(ignorados), ignorados[:10])

    return {nome: campos[nome] for nome in FIELD_NAMES if nome in campos}
