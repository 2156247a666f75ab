"""Конфигурация PMML runtime."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RuntimeConfig:
    """Конфигурация PMMLRuntime.

    - validate_request_contract: проверять запрос по pmml_request.json до нормализации
    - validate_result_contract: проверять результат executor по pmml_result.json
    """

    validate_request_contract: bool = False
    validate_result_contract: bool = False
