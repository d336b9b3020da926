"""
Diagnostics — адаптер DiagnosticReporter поверх стандартного logging

Ядро не конфигурирует handlers: оно только пишет записи в именованный
logger. Приложение само решает, куда они попадут.
"""

import logging
from dataclasses import dataclass
from typing import Any, Final

from .protocols import DiagnosticReporter, Severity

# =============================================================================
# CONSTANTS
# =============================================================================

DEFAULT_LOGGER_NAME: Final[str] = "affine2d.geometry"

_SEVERITY_TO_LEVEL: Final[dict[Severity, int]] = {
    Severity.DEBUG: logging.DEBUG,
    Severity.INFO: logging.INFO,
    Severity.WARNING: logging.WARNING,
    Severity.ERROR: logging.ERROR,
}


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class DiagnosticsConfig:
    """Конфигурация LoggingReporter."""

    # Имя logger, в который пишутся сообщения
    logger_name: str = DEFAULT_LOGGER_NAME

    # False → все сообщения отбрасываются
    enabled: bool = True


# =============================================================================
# REPORTER
# =============================================================================


class LoggingReporter:
    """
    DiagnosticReporter, пишущий в logging.Logger.

    Severity отображается на стандартные уровни logging.
    """

    def __init__(self, config: DiagnosticsConfig | None = None):
        """
        Args:
            config: конфигурация (опционально, используется default)
        """
        self.config = config or DiagnosticsConfig()
        self._logger = logging.getLogger(self.config.logger_name)

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def report(self, message: str, severity: Severity = Severity.WARNING) -> None:
        """
        Пишет сообщение в logger.

        Неизвестная severity пишется как WARNING, report не бросает.
        """
        if not self.config.enabled:
            return
        self._logger.log(_level_for(severity), message)


def _level_for(severity: Any) -> int:
    try:
        return _SEVERITY_TO_LEVEL[Severity(severity)]
    except (TypeError, ValueError):
        return logging.WARNING


def resolve_reporter(reporter: DiagnosticReporter | None) -> DiagnosticReporter:
    """
    Вернуть переданный reporter или LoggingReporter с default конфигурацией.

    Глобального reporter нет: default создаётся на каждый вызов.
    """
    if reporter is not None:
        return reporter
    return LoggingReporter()
