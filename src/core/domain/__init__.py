"""
Domain models and value objects.

Contains PMML runtime entities: PMMLModel, PMMLRequestData, PMMLContext, PMML4Result.
"""

from src.core.domain.context import PMMLContext
from src.core.domain.model import ModelFamily, PMMLModel
from src.core.domain.request import (
    DuplicateRequestParamError,
    ParameterInfo,
    PMMLRequestData,
)
from src.core.domain.result import PMML4Result, ResultCode

__all__ = [
    # Model
    "ModelFamily",
    "PMMLModel",
    # Request
    "ParameterInfo",
    "PMMLRequestData",
    "DuplicateRequestParamError",
    # Context
    "PMMLContext",
    # Result
    "PMML4Result",
    "ResultCode",
]
