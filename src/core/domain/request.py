"""
PMMLRequestData — Входные данные запроса на оценку модели

Запрос — набор именованных параметров (ParameterInfo) с уникальными именами.
Порядок добавления сохраняется, но поиск выполняется по имени.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field


class DuplicateRequestParamError(ValueError):
    """Параметр с таким именем уже присутствует в запросе."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Request parameter already present: {name!r}")


# =============================================================================
# PARAMETER
# =============================================================================


class ParameterInfo(BaseModel):
    """
    Один именованный входной параметр.

    type — имя Python-типа значения (если не задан явно).
    """

    name: str = Field(..., min_length=1, description="Имя input field")
    value: Any = Field(None, description="Значение параметра")
    type: str = Field(..., min_length=1, description="Имя типа значения")

    model_config = {"frozen": True}

    @classmethod
    def of(cls, name: str, value: Any, type_name: Optional[str] = None) -> "ParameterInfo":
        """Создание параметра с выводом типа из значения."""
        return cls(name=name, value=value, type=type_name or type(value).__name__)


# =============================================================================
# REQUEST
# =============================================================================


class PMMLRequestData:
    """
    Данные запроса: correlation_id, имя модели и параметры.

    Mutable: MissingValueNormalizer добавляет параметры на месте. Принадлежит
    одному вызову evaluate и не разделяется между потоками.
    """

    def __init__(self, correlation_id: str, model_name: str):
        self.correlation_id = correlation_id
        self.model_name = model_name
        self._params: dict[str, ParameterInfo] = {}

    @classmethod
    def from_values(
        cls, correlation_id: str, model_name: str, values: dict[str, Any]
    ) -> "PMMLRequestData":
        """Создание запроса из словаря name → value."""
        request = cls(correlation_id, model_name)
        for name, value in values.items():
            request.add_request_param(name, value)
        return request

    def add_request_param(self, name: str, value: Any, type_name: Optional[str] = None) -> None:
        """
        Добавление параметра.

        Raises:
            DuplicateRequestParamError: если параметр с таким именем уже есть
        """
        if name in self._params:
            raise DuplicateRequestParamError(name)
        self._params[name] = ParameterInfo.of(name, value, type_name)

    def has_param(self, name: str) -> bool:
        return name in self._params

    @property
    def mapped_request_params(self) -> dict[str, ParameterInfo]:
        """Копия параметров: name → ParameterInfo (в порядке добавления)."""
        return dict(self._params)

    @property
    def request_params(self) -> tuple[ParameterInfo, ...]:
        return tuple(self._params.values())

    def values(self) -> dict[str, Any]:
        """Значения параметров: name → value."""
        return {name: param.value for name, param in self._params.items()}

    def to_dict(self) -> dict[str, Any]:
        """JSON-представление запроса (src/core/contracts/schema/pmml_request.json).

        Raises:
            pydantic_core.PydanticSerializationError: если значение параметра
                не сериализуется в JSON
        """
        return {
            "correlation_id": self.correlation_id,
            "model_name": self.model_name,
            "request_params": [param.model_dump(mode="json") for param in self._params.values()],
        }

    def __repr__(self) -> str:
        return (
            f"PMMLRequestData(correlation_id={self.correlation_id!r}, "
            f"model_name={self.model_name!r}, params={list(self._params)})"
        )
