"""PMML Runtime — диспетчер оценки моделей.

Порядок evaluate(model, context):
1. (опционально) валидация запроса по pmml_request.json
2. Нормализация missingValueReplacement (MissingValueNormalizer)
3. Выбор executor по model.family (ExecutorRegistry)
4. Executor найден → его результат возвращается без изменений
5. Executor не найден → пустой PMML4Result (не ошибка)

Исключения executor'а не перехватываются и не повторяются.
"""

import logging
from typing import Optional

from src.core.contracts import PMMLRequestValidator, PMMLResultValidator
from src.core.domain.context import PMMLContext
from src.core.domain.model import PMMLModel
from src.core.domain.result import PMML4Result
from src.runtime.config import RuntimeConfig
from src.runtime.executor_registry import ExecutorRegistry
from src.runtime.missing_values import MissingValueNormalizer
from src.runtime.model_registry import ModelRegistryView

logger = logging.getLogger(__name__)


class PMMLRuntime:
    """Диспетчер оценки: модели из ModelRegistryView, executor'ы из ExecutorRegistry.

    Безопасен для конкурентных вызовов evaluate, если реестры не изменяются
    во время оценок и каждый вызов использует собственный PMMLContext.
    """

    def __init__(
        self,
        model_registry: ModelRegistryView,
        executor_registry: ExecutorRegistry,
        config: Optional[RuntimeConfig] = None,
    ):
        self.model_registry = model_registry
        self.executor_registry = executor_registry
        self.config = config or RuntimeConfig()
        self._normalizer = MissingValueNormalizer()
        self._request_validator = (
            PMMLRequestValidator() if self.config.validate_request_contract else None
        )
        self._result_validator = (
            PMMLResultValidator() if self.config.validate_result_contract else None
        )

    def get_models(self) -> list[PMMLModel]:
        """Все загруженные модели (плоский список)."""
        logger.debug("get_models")
        return self.model_registry.list_models()

    def get_model(self, model_name: str) -> Optional[PMMLModel]:
        """Первая модель с данным именем в порядке реестра, иначе None."""
        logger.debug("get_model %s", model_name)
        return self.model_registry.find_model(model_name)

    def evaluate(
        self, model: PMMLModel, context: PMMLContext, release_id: Optional[str] = None
    ) -> PMML4Result:
        """Оценка модели.

        Args:
            model: загруженная модель
            context: контекст этого вызова (мутируется нормализацией)
            release_id: идентификатор релиза, передаётся executor'у без изменений

        Returns:
            Результат executor'а или пустой PMML4Result, если executor не найден

        Raises:
            jsonschema.ValidationError: при включённой проверке контрактов
            pydantic_core.PydanticSerializationError: при validate_request_contract,
                если значение параметра запроса не сериализуется в JSON
        """
        logger.debug("evaluate %s %s", model.name, context)
        if self._request_validator is not None:
            self._request_validator.validate(context.request_data.to_dict())

        self._normalizer.normalize(model, context)

        executor = self.executor_registry.find_executor(model.family)
        if executor is None:
            logger.warning("no executor registered for %s (model %s)", model.family.value, model.name)
            return PMML4Result.empty(context)

        result = executor.evaluate(model, context, release_id)
        if self._result_validator is not None:
            self._result_validator.validate(result.model_dump(mode="json"))
        return result
