"""Executor Registry — набор executor'ов по семействам моделей.

Каждый executor объявляет одно семейство (ModelFamily) и реализует
evaluate(model, context, release_id) -> PMML4Result.

Политика выбора:
- Линейный проход по executor'ам в порядке регистрации
- Первый executor с совпадающим семейством побеждает
- Нет совпадений → None (не ошибка)

Регистрация завершается до начала оценок (precondition, в runtime не
проверяется). Реестр append-only.
"""

import logging
from abc import ABC, abstractmethod
from importlib.metadata import entry_points
from typing import Iterable, Optional

from src.core.domain.context import PMMLContext
from src.core.domain.model import ModelFamily, PMMLModel
from src.core.domain.result import PMML4Result

logger = logging.getLogger(__name__)

# Группа entry points для discovery executor'ов
EXECUTOR_ENTRY_POINT_GROUP = "pmml.executors"


# =============================================================================
# EXECUTOR
# =============================================================================


class PMMLModelExecutor(ABC):
    """Stateless executor одного семейства моделей."""

    model_family: ModelFamily

    @abstractmethod
    def evaluate(
        self, model: PMMLModel, context: PMMLContext, release_id: Optional[str] = None
    ) -> PMML4Result:
        """Оценка модели на нормализованном запросе из context."""


# =============================================================================
# REGISTRY
# =============================================================================


class ExecutorRegistry:
    """Реестр executor'ов, создаётся вызывающей стороной и передаётся в PMMLRuntime."""

    def __init__(
        self,
        executors: Iterable[PMMLModelExecutor] = (),
        warn_on_duplicate_family: bool = True,
    ):
        self._executors: list[PMMLModelExecutor] = []
        self._warn_on_duplicate_family = warn_on_duplicate_family
        for executor in executors:
            self.register(executor)

    @classmethod
    def discover(
        cls, group: str = EXECUTOR_ENTRY_POINT_GROUP, warn_on_duplicate_family: bool = True
    ) -> "ExecutorRegistry":
        """Сборка реестра из установленных entry points.

        Entry point может указывать на класс executor (создаётся без
        аргументов) или на готовый экземпляр. Порядок регистрации — порядок
        имён entry points.
        """
        registry = cls(warn_on_duplicate_family=warn_on_duplicate_family)
        for entry_point in sorted(entry_points(group=group), key=lambda ep: ep.name):
            loaded = entry_point.load()
            executor = loaded() if isinstance(loaded, type) else loaded
            logger.debug("discovered executor %s from %s", executor, entry_point.value)
            registry.register(executor)
        return registry

    def register(self, executor: PMMLModelExecutor) -> "ExecutorRegistry":
        """Добавление executor в конец реестра.

        Raises:
            TypeError: если объект не объявляет model_family или evaluate
        """
        family = getattr(executor, "model_family", None)
        if not isinstance(family, ModelFamily) or not callable(getattr(executor, "evaluate", None)):
            raise TypeError(
                f"{executor!r} is not a PMML model executor "
                "(model_family: ModelFamily and evaluate() required)"
            )
        if self._warn_on_duplicate_family and self.find_executor(family) is not None:
            logger.warning(
                "executor %r registered for %s which is already handled; "
                "the first registered executor wins",
                executor,
                family.value,
            )
        self._executors.append(executor)
        return self

    def find_executor(self, family: ModelFamily) -> Optional[PMMLModelExecutor]:
        """Первый executor в порядке регистрации для семейства, иначе None."""
        logger.debug("find_executor %s", family)
        for executor in self._executors:
            if executor.model_family == family:
                return executor
        return None

    @property
    def executors(self) -> tuple[PMMLModelExecutor, ...]:
        return tuple(self._executors)

    def __len__(self) -> int:
        return len(self._executors)
