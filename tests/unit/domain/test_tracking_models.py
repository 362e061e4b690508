from __future__ import annotations

"""
Unit tests for Tracking Result Models.

Verifies:
1. Data integrity of the success and error factories.
2. Immutability of the frozen result dataclass.
"""

import dataclasses
from typing import Any, Dict

import pytest

from wordtracker.domain.tracking_models import (
    TrackingResult,
    create_error_result,
    create_success_result,
)


def test_create_success_result_populates_fields(mock_config_dict: Dict[str, Any]) -> None:
    mock_config_dict["input_paths"] = ["a.txt"]

    result = create_success_result(
        mock_config_dict,
        tokens_indexed=12,
        distinct_words=7,
        tree_height=4,
        report_lines=["Displaying -pf format"],
        persisted=True,
        summary_extra={"new_words": 7},
    )

    assert isinstance(result, TrackingResult)
    assert result.ok is True
    assert result.error == ""
    assert result.input_paths == ["a.txt"]
    assert result.tokens_indexed == 12
    assert result.tree_height == 4
    assert result.persisted is True
    assert result.summary == {"new_words": 7}


def test_create_error_result_handles_defaults() -> None:
    result = create_error_result("Disk full", {})

    assert result.ok is False
    assert result.error == "Disk full"
    assert result.input_paths == []
    assert result.report_lines == []
    assert result.persisted is False
    assert result.summary == {}


def test_result_is_immutable(mock_config_dict: Dict[str, Any]) -> None:
    result = create_error_result("x", mock_config_dict)

    with pytest.raises(dataclasses.FrozenInstanceError):
        result.ok = True  # type: ignore[misc]
