from __future__ import annotations

import dataclasses

import pytest

from getxgen.config import FeatureConfig
from getxgen.errors import EmptyNameError


def test_from_name_generates_expected_identifiers():
    config = FeatureConfig.from_name("  My   HTTP page ")
    assert config.name == "My HTTP page"
    assert config.snake == "my_http_page"
    assert config.pascal == "MyHTTPPage"
    assert config.route == "/my_http_page"


def test_from_name_rejects_empty_input():
    with pytest.raises(EmptyNameError):
        FeatureConfig.from_name("   ")
    with pytest.raises(ValueError):
        FeatureConfig.from_name("--")


def test_context_exposes_template_values(reset_password: FeatureConfig):
    assert dict(reset_password.context()) == {
        "name": "reset password",
        "snake": "reset_password",
        "pascal": "ResetPassword",
        "route": "/reset_password",
    }


def test_config_is_immutable(reset_password: FeatureConfig):
    with pytest.raises(dataclasses.FrozenInstanceError):
        reset_password.snake = "other"  # type: ignore[misc]
