"""
Emissão de eventos de diagnóstico.

O núcleo (indexador, extrator) não loga diretamente: recebe um sink
injetado. Padrão é NullEventSink, então chamadas diretas ficam puras.
"""
from __future__ import annotations

import logging
from typing import Any, Optional


class EventSink:
    """Interface mínima: emit(evento, **atributos)."""

    def emit(self, evento: str, **atributos: Any) -> None:
        raise NotImplementedError


class NullEventSink(EventSink):
    def emit(self, evento: str, **atributos: Any) -> None:
        return None


class LoggingEventSink(EventSink):
    """Encaminha eventos para o logging padrão (chave=valor)."""

    def __init__(self, logger: Optional[logging.Logger] = None, level: int = logging.DEBUG):
        self.logger = logger or logging.getLogger("checklist_esp.eventos")
        self.level = level

    def emit(self, evento: str, **atributos: Any) -> None:
        if not self.logger.isEnabledFor(self.level):
            return
        pares = " ".join(f"{k}={_fmt(v)}" for k, v in sorted(atributos.items()))
        self.logger.log(self.level, "[%s] %s", evento, pares)


class CollectingEventSink(EventSink):
    """Guarda eventos em memória (útil em testes e diagnósticos)."""

    def __init__(self):
        self.eventos = []

    def emit(self, evento: str, **atributos: Any) -> None:
        self.eventos.append((evento, dict(atributos)))

    def nomes(self):
        return [e for e, _ in self.eventos]


def _fmt(valor: Any) -> str:
    texto = str(valor)
    if len(texto) > 80:
        texto = texto[:77] + "..."
    if " " in texto:
        return repr(texto)
    return texto


NULL_SINK = NullEventSink()
