"""
Tests for PMML Domain Models

Покрывает:
- PMMLModel (валидация, immutability, ModelFamily)
- PMMLRequestData / ParameterInfo (уникальность имён, вывод типа)
- PMMLContext (audit trail missingValueReplacement)
- PMML4Result (пустой результат, сериализация)
"""

import pytest
from pydantic import ValidationError

from src.core.domain import (
    DuplicateRequestParamError,
    ModelFamily,
    ParameterInfo,
    PMML4Result,
    PMMLContext,
    PMMLModel,
    PMMLRequestData,
    ResultCode,
)


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def regression_model():
    """Регрессионная модель с missingValueReplacement для x и y."""
    return PMMLModel(
        name="missingValues_Model",
        family=ModelFamily.REGRESSION,
        missing_value_replacement_map={"x": 0.0, "y": "classA"},
        target_field="result",
    )


@pytest.fixture
def request_data():
    return PMMLRequestData.from_values("corr-1", "missingValues_Model", {"x": 25.0, "y": "classB"})


# =============================================================================
# ТЕСТЫ: PMMLModel
# =============================================================================


def test_model_valid(regression_model):
    assert regression_model.name == "missingValues_Model"
    assert regression_model.family == ModelFamily.REGRESSION
    assert regression_model.missing_value_replacement_map == {"x": 0.0, "y": "classA"}
    assert regression_model.target_field == "result"
    assert regression_model.has_missing_value_replacements() is True


def test_model_defaults():
    model = PMMLModel(name="tree", family=ModelFamily.TREE)

    assert model.missing_value_replacement_map == {}
    assert model.output_field_names == ()
    assert model.target_field is None
    assert model.has_missing_value_replacements() is False


def test_model_empty_name_rejected():
    with pytest.raises(ValidationError):
        PMMLModel(name="", family=ModelFamily.TREE)


def test_model_unknown_family_rejected():
    with pytest.raises(ValidationError):
        PMMLModel(name="m", family="NotAModel")


def test_model_family_from_pmml_element_name():
    """Семейство можно задать именем элемента PMML."""
    model = PMMLModel(name="m", family="Scorecard")

    assert model.family is ModelFamily.SCORECARD


def test_model_empty_replacement_field_rejected():
    with pytest.raises(ValidationError):
        PMMLModel(name="m", family=ModelFamily.TREE, missing_value_replacement_map={"": 1})


def test_model_is_frozen(regression_model):
    with pytest.raises(ValidationError):
        regression_model.name = "other"


def test_model_replacement_map_read_only(regression_model):
    with pytest.raises(TypeError):
        regression_model.missing_value_replacement_map["z"] = 1

    assert dict(regression_model.missing_value_replacement_map) == {"x": 0.0, "y": "classA"}


def test_model_default_replacement_map_read_only():
    model = PMMLModel(name="tree", family=ModelFamily.TREE)

    with pytest.raises(TypeError):
        model.missing_value_replacement_map["z"] = 1


def test_model_replacement_map_copied_from_source():
    """Изменение исходного словаря не влияет на модель."""
    source = {"x": 0}
    model = PMMLModel(name="m", family=ModelFamily.REGRESSION, missing_value_replacement_map=source)

    source["y"] = "classA"

    assert dict(model.missing_value_replacement_map) == {"x": 0}


def test_model_dump_replacement_map_as_dict(regression_model):
    data = regression_model.model_dump(mode="json")

    assert data["missing_value_replacement_map"] == {"x": 0.0, "y": "classA"}
    assert type(data["missing_value_replacement_map"]) is dict


# =============================================================================
# ТЕСТЫ: PMMLRequestData
# =============================================================================


def test_request_from_values(request_data):
    assert request_data.correlation_id == "corr-1"
    assert request_data.model_name == "missingValues_Model"
    assert request_data.values() == {"x": 25.0, "y": "classB"}
    assert request_data.has_param("x")
    assert not request_data.has_param("z")


def test_request_param_type_inferred(request_data):
    params = request_data.mapped_request_params

    assert params["x"] == ParameterInfo(name="x", value=25.0, type="float")
    assert params["y"].type == "str"


def test_request_param_explicit_type():
    request = PMMLRequestData("c", "m")
    request.add_request_param("age", 42, "double")

    assert request.mapped_request_params["age"].type == "double"


def test_request_duplicate_param_rejected(request_data):
    with pytest.raises(DuplicateRequestParamError) as exc_info:
        request_data.add_request_param("x", 1.0)

    assert exc_info.value.name == "x"
    assert isinstance(exc_info.value, ValueError)
    assert request_data.values()["x"] == 25.0


def test_request_mapped_params_is_copy(request_data):
    """Изменение копии не влияет на запрос."""
    params = request_data.mapped_request_params
    params.pop("x")

    assert request_data.has_param("x")


def test_request_to_dict(request_data):
    data = request_data.to_dict()

    assert data == {
        "correlation_id": "corr-1",
        "model_name": "missingValues_Model",
        "request_params": [
            {"name": "x", "value": 25.0, "type": "float"},
            {"name": "y", "value": "classB", "type": "str"},
        ],
    }


def test_request_none_value_is_present():
    request = PMMLRequestData.from_values("c", "m", {"x": None})

    assert request.has_param("x")
    assert request.mapped_request_params["x"].type == "NoneType"


# =============================================================================
# ТЕСТЫ: PMMLContext
# =============================================================================


def test_context_audit_trail(request_data):
    context = PMMLContext(request_data)
    context.add_missing_value_replaced("z", 1.5)
    context.add_missing_value_replaced("w", "a")

    assert context.missing_value_replaced == {"z": 1.5, "w": "a"}
    assert context.missing_value_replaced_fields == ("z", "w")


def test_context_starts_without_replacements(request_data):
    context = PMMLContext(request_data)

    assert context.missing_value_replaced == {}
    assert context.missing_value_replaced_fields == ()


# =============================================================================
# ТЕСТЫ: PMML4Result
# =============================================================================


def test_result_empty_without_context():
    result = PMML4Result.empty()

    assert result.is_empty()
    assert result.result_variables == {}
    assert result.correlation_id is None
    assert result.result_code == ResultCode.OK


def test_result_empty_carries_context_audit(request_data):
    context = PMMLContext(request_data)
    context.add_missing_value_replaced("z", 0)

    result = PMML4Result.empty(context)

    assert result.is_empty()
    assert result.correlation_id == "corr-1"
    assert result.missing_value_replaced == ("z",)


def test_result_with_variables():
    result = PMML4Result(
        correlation_id="c",
        result_objective_name="result",
        result_variables={"result": 92.0},
    )

    assert not result.is_empty()
    assert result.get_result_variable("result") == 92.0
    assert result.get_result_variable("missing", -1) == -1


def test_result_json_dump():
    result = PMML4Result(
        correlation_id="c",
        result_code=ResultCode.FAIL,
        missing_value_replaced=("x",),
    )

    assert result.model_dump(mode="json") == {
        "correlation_id": "c",
        "result_code": "FAIL",
        "result_objective_name": None,
        "result_variables": {},
        "missing_value_replaced": ["x"],
    }


def test_result_is_frozen():
    result = PMML4Result()

    with pytest.raises(ValidationError):
        result.result_code = ResultCode.FAIL
