"""
PMMLModel — Загруженная модель PMML

PMML 4.4: Header / MiningSchema (missingValueReplacement)

Immutable Pydantic модель, представляющая уже разобранную модель PMML.
Разбор документа PMML выполняется внешним загрузчиком; runtime только читает
имя, семейство и карту замены пропущенных значений.
"""

from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional

from pydantic import BaseModel, Field, field_serializer, field_validator


# =============================================================================
# ENUMS
# =============================================================================


class ModelFamily(str, Enum):
    """
    Семейство модели PMML (закрытый набор).

    Значения совпадают с именами элементов PMML 4.4. По этому ключу
    ExecutorRegistry выбирает executor.
    """

    ASSOCIATION_RULES = "AssociationModel"
    BASELINE = "BaselineModel"
    BAYESIAN_NETWORK = "BayesianNetworkModel"
    CLUSTERING = "ClusteringModel"
    GAUSSIAN_PROCESS = "GaussianProcessModel"
    GENERAL_REGRESSION = "GeneralRegressionModel"
    MINING = "MiningModel"
    NAIVE_BAYES = "NaiveBayesModel"
    NEAREST_NEIGHBOR = "NearestNeighborModel"
    NEURAL_NETWORK = "NeuralNetwork"
    REGRESSION = "RegressionModel"
    RULE_SET = "RuleSetModel"
    SCORECARD = "Scorecard"
    SEQUENCE = "SequenceModel"
    SUPPORT_VECTOR_MACHINE = "SupportVectorMachineModel"
    TEXT = "TextModel"
    TIME_SERIES = "TimeSeriesModel"
    TREE = "TreeModel"


# =============================================================================
# MODEL
# =============================================================================


class PMMLModel(BaseModel):
    """
    Загруженная модель PMML.

    Immutable модель (frozen=True). Содержит:
    - Идентификацию (name — уникальное имя модели)
    - Семейство (family — ключ выбора executor)
    - Карту missingValueReplacement (input field → значение по умолчанию)
    - Целевое поле и выходные поля (используются только executor'ами)
    """

    name: str = Field(..., min_length=1, description="Уникальное имя модели")
    family: ModelFamily = Field(..., description="Семейство модели PMML")
    missing_value_replacement_map: Mapping[str, Any] = Field(
        default_factory=dict,
        validate_default=True,
        description="missingValueReplacement: input field → значение по умолчанию",
    )
    target_field: Optional[str] = Field(None, description="Целевое поле модели")
    output_field_names: tuple[str, ...] = Field(
        default_factory=tuple, description="Имена выходных полей (OutputField)"
    )

    model_config = {"frozen": True}

    @field_validator("missing_value_replacement_map")
    @classmethod
    def validate_replacement_fields(cls, v: Mapping[str, Any]) -> Mapping[str, Any]:
        """Проверка имён полей; карта хранится read-only (копия входного словаря)"""
        for field_name in v:
            if not field_name:
                raise ValueError("missing_value_replacement_map keys must be non-empty")
        return MappingProxyType(dict(v))

    @field_serializer("missing_value_replacement_map")
    def serialize_replacement_map(self, v: Mapping[str, Any]) -> dict[str, Any]:
        return dict(v)

    def has_missing_value_replacements(self) -> bool:
        """True если модель объявляет хотя бы одно missingValueReplacement."""
        return bool(self.missing_value_replacement_map)
