import pytest
import numpy as np
from pydantic import ValidationError

from pyMultObj.solvers import ExecutionStats, STATUSES


def test_status_messages():
    stats = ExecutionStats(
        status="max_iter",
        solution=np.zeros(2),
        averaged_solution=np.ones(2),
        elapsed_time=0.5,
        iter=3,
    )
    assert stats.status_message == STATUSES["max_iter"]
    text = str(stats)
    assert "maximum iteration" in text
    assert "iterations: 3" in text


def test_invalid_status():
    with pytest.raises(ValidationError):
        ExecutionStats(status="done", solution=np.zeros(2), averaged_solution=np.zeros(2))


def test_negative_iterations():
    with pytest.raises(ValidationError):
        ExecutionStats(
            status="unknown", solution=np.zeros(2), averaged_solution=np.zeros(2), iter=-1
        )


def test_camel_case_alias():
    stats = ExecutionStats.model_validate(
        {
            "status": "small_step",
            "solution": np.zeros(1),
            "averagedSolution": np.zeros(1),
            "elapsedTime": 1.0,
        }
    )
    assert stats.elapsed_time == 1.0
