"""
PMML4Result — Результат оценки модели

Immutable Pydantic модель. Содержит выходные переменные (output name → value)
и список полей, подставленных через missingValueReplacement.

Пустой результат (без выходных переменных) означает, что executor для
семейства модели не найден.
"""

from enum import Enum
from typing import TYPE_CHECKING, Any, Optional

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from src.core.domain.context import PMMLContext


# =============================================================================
# ENUMS
# =============================================================================


class ResultCode(str, Enum):
    """Код результата оценки."""

    OK = "OK"
    FAIL = "FAIL"


# =============================================================================
# RESULT
# =============================================================================


class PMML4Result(BaseModel):
    """
    Результат оценки модели.

    Immutable модель (frozen=True):
    - correlation_id запроса
    - result_code (OK/FAIL)
    - result_objective_name — целевое поле модели
    - result_variables — выходные переменные
    - missing_value_replaced — поля, подставленные по missingValueReplacement
    """

    correlation_id: Optional[str] = Field(None, description="Correlation id запроса")
    result_code: ResultCode = Field(ResultCode.OK, description="Код результата")
    result_objective_name: Optional[str] = Field(None, description="Целевое поле")
    result_variables: dict[str, Any] = Field(
        default_factory=dict, description="Выходные переменные: name → value"
    )
    missing_value_replaced: tuple[str, ...] = Field(
        default_factory=tuple, description="Поля, подставленные по missingValueReplacement"
    )

    model_config = {"frozen": True}

    @classmethod
    def empty(cls, context: Optional["PMMLContext"] = None) -> "PMML4Result":
        """
        Пустой результат (нет выходных переменных).

        Если передан context, переносит correlation_id и подставленные поля.
        """
        if context is None:
            return cls()
        return cls(
            correlation_id=context.request_data.correlation_id,
            missing_value_replaced=context.missing_value_replaced_fields,
        )

    def is_empty(self) -> bool:
        """True если результат не содержит выходных переменных."""
        return not self.result_variables

    def get_result_variable(self, name: str, default: Any = None) -> Any:
        return self.result_variables.get(name, default)
