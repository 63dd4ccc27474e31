# checklist_esp/config.py
"""
Configuração centralizada do Checklist ESP (variáveis de ambiente).

Só a camada HTTP lê estes valores; indexador, extrator e motor de regras
não dependem de ambiente. O endpoint parse_document usa sempre o caminho
regex; o extrator por IA só entra por injeção em analisar_edital.
"""
import os
import logging

logger = logging.getLogger(__name__)

_VERDADEIRO = ("true", "1", "yes")

# ─── Logging ───────────────────────────────────────────────────────
LOG_LEVEL = os.environ.get("CHECKLIST_LOG_LEVEL", "INFO").upper()

# ─── Limites de entrada ────────────────────────────────────────────
MIN_TEXT_LENGTH = int(os.environ.get("CHECKLIST_MIN_TEXT_LENGTH", "100"))
MAX_BODY_BYTES = int(os.environ.get("CHECKLIST_MAX_BODY_BYTES", str(20 * 1024 * 1024)))

# ─── Diagnóstico ───────────────────────────────────────────────────
EMIT_EVENTS = os.environ.get("CHECKLIST_EMIT_EVENTS", "false").lower() in _VERDADEIRO

NIVEIS_VALIDOS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def validate_config() -> tuple:
    """
    Valida a configuração carregada.
    Returns: (ok: bool, error_message: str)
    """
    if LOG_LEVEL not in NIVEIS_VALIDOS:
        msg = f"CHECKLIST_LOG_LEVEL inválido: '{LOG_LEVEL}' (aceitos: {', '.join(NIVEIS_VALIDOS)})"
        logger.error(msg)
        return False, msg

    if MIN_TEXT_LENGTH < 0:
        msg = f"CHECKLIST_MIN_TEXT_LENGTH não pode ser negativo: {MIN_TEXT_LENGTH}"
        logger.error(msg)
        return False, msg

    if MAX_BODY_BYTES <= 0:
        msg = f"CHECKLIST_MAX_BODY_BYTES deve ser positivo: {MAX_BODY_BYTES}"
        logger.error(msg)
        return False, msg

    logger.info(
        f"checklist config: min_text={MIN_TEXT_LENGTH} max_body={MAX_BODY_BYTES} "
        f"events={EMIT_EVENTS}"
    )
    return True, ""


def get_log_level() -> int:
    """Nível numérico para logging.basicConfig (INFO se inválido)."""
    return getattr(logging, LOG_LEVEL, logging.INFO) if LOG_LEVEL in NIVEIS_VALIDOS else logging.INFO
