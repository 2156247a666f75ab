"""
PMMLContext — Контекст одной оценки модели

Оборачивает PMMLRequestData и накапливает поля, значения которых были
подставлены через missingValueReplacement (audit trail).
"""

from typing import Any

from src.core.domain.request import PMMLRequestData


class PMMLContext:
    """Mutable контекст одного вызова evaluate.

    Создаётся на каждый вызов, после получения результата не используется.
    Не разделяется между конкурентными вызовами.
    """

    def __init__(self, request_data: PMMLRequestData):
        self.request_data = request_data
        self._missing_value_replaced: dict[str, Any] = {}

    def add_missing_value_replaced(self, field_name: str, value: Any) -> None:
        self._missing_value_replaced[field_name] = value

    @property
    def missing_value_replaced(self) -> dict[str, Any]:
        """Подставленные поля: field → значение (в порядке подстановки)."""
        return dict(self._missing_value_replaced)

    @property
    def missing_value_replaced_fields(self) -> tuple[str, ...]:
        return tuple(self._missing_value_replaced)

    def __repr__(self) -> str:
        return (
            f"PMMLContext(request_data={self.request_data!r}, "
            f"missing_value_replaced={list(self._missing_value_replaced)})"
        )
