"""
Общие fixtures: фейковые коллабораторы ядра.
"""

import pytest

from affine2d.core.geometry import Severity


class RecordingReporter:
    """DiagnosticReporter, запоминающий все сообщения."""

    def __init__(self):
        self.messages: list[tuple[str, Severity]] = []

    def report(self, message: str, severity: Severity = Severity.WARNING) -> None:
        self.messages.append((message, severity))

    @property
    def severities(self) -> list[Severity]:
        return [severity for _, severity in self.messages]


class RecordingSurface:
    """TransformSurface, запоминающий все вызовы."""

    def __init__(self):
        self.calls: list[tuple[str, tuple[float, ...]]] = []

    def transform(self, a, b, c, d, tx, ty) -> None:
        self.calls.append(("transform", (a, b, c, d, tx, ty)))

    def set_transform(self, a, b, c, d, tx, ty) -> None:
        self.calls.append(("set_transform", (a, b, c, d, tx, ty)))


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()
