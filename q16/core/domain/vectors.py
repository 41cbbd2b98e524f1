"""
Conformance Vectors — Модели эталонных векторов Q16.16

Immutable Pydantic модели для наборов (операция, аргументы, ожидаемый результат),
по которым другая реализация (другой язык, другой бэкенд) проверяет
побитовое совпадение с ядром.
Полная совместимость с JSON Schema (q16/core/contracts/schema/conformance_suite.json).
"""

from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field, StrictInt, field_validator, model_validator

from q16.core.math.fixed_point import FP_MAX, FP_MIN


# =============================================================================
# ENUMS
# =============================================================================


class FixedOp(str, Enum):
    """Операция ядра"""

    MUL = "mul"
    DIV = "div"
    SQRT = "sqrt"

    @property
    def arity(self) -> int:
        """Количество аргументов операции"""
        return 1 if self is FixedOp.SQRT else 2


# =============================================================================
# VECTOR
# =============================================================================


class ConformanceVector(BaseModel):
    """
    Один эталонный вектор.

    Аргументы и ожидаемый результат: сырые i32 (не вещественные значения).
    """

    op: FixedOp = Field(..., description="Операция ядра")
    args: list[StrictInt] = Field(..., min_length=1, max_length=2, description="Сырые i32 аргументы")
    expected: StrictInt = Field(..., ge=FP_MIN, le=FP_MAX, description="Ожидаемый сырой i32 результат")
    note: str | None = Field(None, description="Пояснение к вектору")

    model_config = {"frozen": True}

    @field_validator("args")
    @classmethod
    def validate_args_in_i32(cls, v: list[int]) -> list[int]:
        """Проверка, что каждый аргумент в диапазоне i32"""
        for index, arg in enumerate(v):
            if not FP_MIN <= arg <= FP_MAX:
                raise ValueError(f"args[{index}]={arg} is outside i32 range")
        return v

    @model_validator(mode="after")
    def validate_arity(self) -> "ConformanceVector":
        """Проверка количества аргументов для операции"""
        if len(self.args) != self.op.arity:
            raise ValueError(
                f"op '{self.op.value}' takes {self.op.arity} argument(s), got {len(self.args)}"
            )
        return self


# =============================================================================
# SUITE
# =============================================================================


class ConformanceSuite(BaseModel):
    """
    Набор эталонных векторов.

    schema_version увеличивается при любом изменении ожидаемых результатов.
    """

    schema_version: str = Field(..., min_length=1, description="Версия набора")
    format: Literal["Q16.16"] = Field("Q16.16", description="Формат чисел")
    vectors: list[ConformanceVector] = Field(..., min_length=1, description="Векторы")

    model_config = {"frozen": True}

    def by_op(self, op: FixedOp) -> list[ConformanceVector]:
        """Векторы для одной операции (в исходном порядке)"""
        return [vector for vector in self.vectors if vector.op is op]
