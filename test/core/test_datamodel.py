import pytest
import numpy as np
from numpydantic import NDArray, Shape

from pyMultObj.core import PyMultObjBaseModel


class DummyModel(PyMultObjBaseModel):
    value: int
    array: NDArray[Shape["*"], np.int64]
    nested: dict


@pytest.fixture
def dummy_instance():
    data = {
        "value": 10,
        "array": np.array([1, 2, 3], dtype=np.int64),
        "nested": {"a": {"a_1": np.array([1, 2, 3])}, "b": 2},
    }
    return DummyModel.model_validate(data)


@pytest.fixture
def another_dummy_instance():
    data = {
        "value": 10,
        "array": np.array([1, 2, 3], dtype=np.int64),
        "nested": {"a": {"a_1": np.array([1, 2, 3])}, "b": 2},
    }
    return DummyModel.model_validate(data)


@pytest.fixture
def different_dummy_instance():
    data = {
        "value": 10,
        "array": np.array([1, 2, 3], dtype=np.int64),
        "nested": {"a": {"a_1": np.array([1, 3, 2])}, "b": 2},
    }
    return DummyModel.model_validate(data)


def test_operator_equality(dummy_instance, another_dummy_instance):
    assert dummy_instance == another_dummy_instance


def test_operator_inequality(dummy_instance, different_dummy_instance):
    assert dummy_instance != different_dummy_instance


def test_inequality_other_type(dummy_instance):
    assert dummy_instance != {"value": 10}


def test_to_dict(dummy_instance):
    data = dummy_instance.to_dict()
    assert data["value"] == 10
    assert "nested" in data
