"""Model Registry View — read-only доступ к загруженным моделям.

Модели хранятся во внешнем хранилище (knowledge base), сгруппированные по
пакетам. Runtime только читает их: list_models() и find_model(name).

Порядок итерации детерминирован: пакеты в порядке передачи, модели внутри
пакета в порядке добавления. При совпадении имён find_model возвращает
первую найденную модель.
"""

import logging
from typing import Iterable, Optional, Protocol, Sequence, runtime_checkable

from src.core.domain.model import PMMLModel

logger = logging.getLogger(__name__)


@runtime_checkable
class ModelRegistryView(Protocol):
    """Контракт read-only представления загруженных моделей."""

    def list_models(self) -> list[PMMLModel]:
        ...

    def find_model(self, name: str) -> Optional[PMMLModel]:
        ...


# =============================================================================
# PACKAGE
# =============================================================================


class PMMLPackage:
    """Именованный контейнер моделей PMML одного пакета knowledge base."""

    def __init__(self, name: str, models: Iterable[PMMLModel] = ()):
        self.name = name
        self._models: dict[str, PMMLModel] = {}
        for model in models:
            self.add_model(model)

    def add_model(self, model: PMMLModel) -> None:
        # Внутри пакета имя уникально: повторная загрузка заменяет модель
        self._models[model.name] = model

    def get_all_models(self) -> dict[str, PMMLModel]:
        return dict(self._models)

    def __len__(self) -> int:
        return len(self._models)

    def __repr__(self) -> str:
        return f"PMMLPackage(name={self.name!r}, models={list(self._models)})"


# =============================================================================
# REGISTRY VIEW
# =============================================================================


class KnowledgeBaseModelRegistry:
    """Read-only проекция пакетов knowledge base на плоский список моделей.

    Пакеты без PMML ресурсов передаются как None и пропускаются.
    """

    def __init__(self, packages: Sequence[Optional[PMMLPackage]]):
        self._packages = packages

    def list_models(self) -> list[PMMLModel]:
        logger.debug("list_models")
        models: list[PMMLModel] = []
        for package in self._packages:
            if package is None:
                continue
            models.extend(package.get_all_models().values())
        return models

    def find_model(self, name: str) -> Optional[PMMLModel]:
        logger.debug("find_model %s", name)
        for model in self.list_models():
            if model.name == name:
                return model
        return None
