"""
Contract Validation Module

Модуль для валидации JSON контрактов PMML runtime (запрос и результат оценки).
"""

from .validators import (
    ContractValidator,
    PMMLRequestValidator,
    PMMLResultValidator,
    SchemaLoader,
    get_schema_loader,
    validate_pmml_request,
    validate_pmml_result,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "PMMLRequestValidator",
    "PMMLResultValidator",
    # Functions
    "get_schema_loader",
    "validate_pmml_request",
    "validate_pmml_result",
]
