"""
Servicio de Observabilidad: Logs estructurados, Latency & Saturation (RAM).
Soporta modo "Pretty Print" para depuración visual.

Un códec se invoca en ciclos cerrados: los eventos de éxito se emiten en
DEBUG y solo se arman (incluida la muestra de RAM) si ese nivel está activo.
Los fallos siempre se emiten en ERROR.
"""

import functools
import json
import logging
import os
import sys
import time
import uuid
from typing import Any, Callable

import psutil

from bigendian.modules.marshaling.domain.value_objects import describe

logger = logging.getLogger("bigendian")

_BUFFER_TYPES = (bytes, bytearray, memoryview)


def configure_logging(level=logging.INFO):
    """
    Configura un handler de consola para el logger de la librería.
    La librería nunca configura logging al importarse.
    """
    console_formatter = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s", datefmt="%H:%M:%S"
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(console_formatter)
    console_handler.setLevel(level)

    # Limpiar handlers previos para evitar duplicados
    if logger.hasHandlers():
        logger.handlers.clear()

    logger.addHandler(console_handler)
    logger.setLevel(level)


class ObservabilityService:

    # 🌍 CONFIGURACIÓN GLOBAL
    # Si esta variable de entorno existe, activamos la vista vertical
    PRETTY_PRINT = os.getenv("LOG_FORMAT") == "PRETTY"

    @staticmethod
    def get_correlation_id() -> str:
        return str(uuid.uuid4())[:8]

    @staticmethod
    def _get_ram_usage_mb() -> float:
        try:
            process = psutil.Process(os.getpid())
            return round(process.memory_info().rss / 1024 / 1024, 2)
        except psutil.Error:
            return 0.0

    @staticmethod
    def log_event(
        event_name: str,
        correlation_id: str,
        payload: dict[str, Any],
        level: str = "INFO",
    ):
        """Emite un log estructurado en JSON (Horizontal o Vertical)."""

        log_entry = {
            "timestamp": time.time(),
            "level": level,
            "event": event_name,
            "correlation_id": correlation_id,
            "data": payload,
        }

        if ObservabilityService.PRETTY_PRINT:
            msg = json.dumps(log_entry, indent=4)
        else:
            msg = json.dumps(log_entry)

        if level == "ERROR":
            logger.error(msg)
        elif level == "DEBUG":
            logger.debug(msg)
        else:
            logger.info(msg)

    @staticmethod
    def _extract_context(args: tuple, kwargs: dict[str, Any]) -> dict[str, Any]:
        """
        Tipo objetivo (primer argumento tras self, o `spec=`) y tamaño del
        buffer (primer argumento binario, o `buffer=`), si hay.
        """
        context: dict[str, Any] = {"target": "unknown"}
        if len(args) > 1:
            context["target"] = describe(args[1])
        elif "spec" in kwargs:
            context["target"] = describe(kwargs["spec"])

        candidates = [*args[2:], kwargs.get("buffer")]
        for arg in candidates:
            if isinstance(arg, _BUFFER_TYPES):
                context["buffer_bytes"] = len(arg)
                break
        return context

    @staticmethod
    def measure_latency(operation_name: str):
        def decorator(func: Callable):
            @functools.wraps(func)
            def wrapper(*args, **kwargs):
                verbose = logger.isEnabledFor(logging.DEBUG)
                start_time = time.perf_counter()
                correlation_id = ObservabilityService.get_correlation_id()
                context = ObservabilityService._extract_context(args, kwargs)

                if verbose:
                    start_ram = ObservabilityService._get_ram_usage_mb()
                    ObservabilityService.log_event(
                        event_name=f"{operation_name}.started",
                        correlation_id=correlation_id,
                        payload={**context, "start_ram_mb": start_ram},
                        level="DEBUG",
                    )

                try:
                    result = func(*args, **kwargs)

                except Exception as e:
                    duration = time.perf_counter() - start_time
                    crash_ram = ObservabilityService._get_ram_usage_mb()

                    ObservabilityService.log_event(
                        event_name=f"{operation_name}.failed",
                        correlation_id=correlation_id,
                        payload={
                            **context,
                            "duration_sec": round(duration, 6),
                            "crash_ram_mb": crash_ram,
                            "error_type": type(e).__name__,
                            "error_msg": str(e),
                        },
                        level="ERROR",
                    )
                    raise e

                if verbose:
                    duration = time.perf_counter() - start_time
                    end_ram = ObservabilityService._get_ram_usage_mb()
                    ObservabilityService.log_event(
                        event_name=f"{operation_name}.completed",
                        correlation_id=correlation_id,
                        payload={
                            **context,
                            "duration_sec": round(duration, 6),
                            "end_ram_mb": end_ram,
                            "ram_delta_mb": round(end_ram - start_ram, 2),
                            "status": "success",
                        },
                        level="DEBUG",
                    )
                return result

            return wrapper

        return decorator
