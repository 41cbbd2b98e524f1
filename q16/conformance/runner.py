"""
Conformance Runner — Проверка побитового совпадения с эталонными векторами

Прогоняет набор эталонных векторов через ядро (multiply / divide / fixed_sqrt)
и фиксирует каждое расхождение. Используется для проверки того, что ядро
(или его порт на другой язык, выгрузивший свои результаты в тот же формат)
даёт битово-идентичные результаты.

Порядок загрузки набора:
1. JSON Schema (jsonschema): структура документа
2. Pydantic модель: типы и арность операций
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Final

from q16.core.contracts import validate_conformance_suite
from q16.core.domain.vectors import ConformanceSuite, ConformanceVector, FixedOp
from q16.core.math.fixed_point import divide, fixed_sqrt, multiply

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

# Эталонный набор, поставляемый с пакетом
GOLDEN_SUITE_PATH: Final[Path] = Path(__file__).parent / "golden" / "q16_golden.json"

OPERATIONS: Final[dict[FixedOp, Callable[..., int]]] = {
    FixedOp.MUL: multiply,
    FixedOp.DIV: divide,
    FixedOp.SQRT: fixed_sqrt,
}


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class VectorResult:
    """Результат проверки одного вектора."""

    vector: ConformanceVector
    actual: int
    passed: bool


@dataclass(frozen=True)
class SuiteReport:
    """Отчёт по набору векторов."""

    schema_version: str
    results: tuple[VectorResult, ...]

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def failures(self) -> list[VectorResult]:
        return [result for result in self.results if not result.passed]

    @property
    def passed_count(self) -> int:
        return self.total - len(self.failures)

    @property
    def all_passed(self) -> bool:
        return all(result.passed for result in self.results)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ConformanceConfig:
    """Конфигурация прогона.

    fail_fast: остановиться на первом расхождении (отчёт содержит
    только проверенные векторы).
    """

    fail_fast: bool = False


# =============================================================================
# RUNNER
# =============================================================================


class ConformanceRunner:
    """Прогон эталонных векторов через ядро Q16.16."""

    def __init__(self, config: ConformanceConfig | None = None):
        self.config = config or ConformanceConfig()

    def evaluate(self, vector: ConformanceVector) -> VectorResult:
        """
        Проверка одного вектора.

        Args:
            vector: Эталонный вектор

        Returns:
            VectorResult с фактическим результатом ядра
        """
        actual = OPERATIONS[vector.op](*vector.args)
        passed = actual == vector.expected

        if not passed:
            logger.warning(
                "Conformance mismatch: %s%s expected=%d actual=%d (%s)",
                vector.op.value,
                tuple(vector.args),
                vector.expected,
                actual,
                vector.note or "-",
            )

        return VectorResult(vector=vector, actual=actual, passed=passed)

    def run(self, suite: ConformanceSuite) -> SuiteReport:
        """
        Прогон набора векторов.

        Args:
            suite: Набор эталонных векторов

        Returns:
            SuiteReport со всеми проверенными векторами
        """
        results: list[VectorResult] = []

        for vector in suite.vectors:
            result = self.evaluate(vector)
            results.append(result)
            if self.config.fail_fast and not result.passed:
                break

        report = SuiteReport(schema_version=suite.schema_version, results=tuple(results))
        logger.info(
            "Conformance suite v%s: %d/%d passed",
            report.schema_version,
            report.passed_count,
            report.total,
        )
        return report


# =============================================================================
# LOADING
# =============================================================================


def load_suite(path: Path | str) -> ConformanceSuite:
    """
    Загрузка набора векторов из JSON файла.

    Args:
        path: Путь к JSON файлу

    Returns:
        Провалидированный ConformanceSuite

    Raises:
        FileNotFoundError: Если файл не найден
        json.JSONDecodeError: Если файл не является валидным JSON
        jsonschema.ValidationError: Если документ не соответствует схеме
        pydantic.ValidationError: Если документ не проходит валидацию модели
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    validate_conformance_suite(data)
    return ConformanceSuite.model_validate(data)


def load_golden_suite() -> ConformanceSuite:
    """Загрузка эталонного набора, поставляемого с пакетом."""
    return load_suite(GOLDEN_SUITE_PATH)
