"""PMML Runtime — выбор executor по семейству модели и оценка.

- ModelRegistryView: read-only доступ к загруженным моделям
- ExecutorRegistry: executor'ы по семействам моделей
- MissingValueNormalizer: подстановка missingValueReplacement
- PMMLRuntime: диспетчер evaluate
"""

from .config import RuntimeConfig
from .executor_registry import EXECUTOR_ENTRY_POINT_GROUP, ExecutorRegistry, PMMLModelExecutor
from .missing_values import MissingValueNormalizer
from .model_registry import KnowledgeBaseModelRegistry, ModelRegistryView, PMMLPackage
from .pmml_runtime import PMMLRuntime

__all__ = [
    "RuntimeConfig",
    "EXECUTOR_ENTRY_POINT_GROUP",
    "ExecutorRegistry",
    "PMMLModelExecutor",
    "MissingValueNormalizer",
    "ModelRegistryView",
    "KnowledgeBaseModelRegistry",
    "PMMLPackage",
    "PMMLRuntime",
]
