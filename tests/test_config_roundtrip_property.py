# topmark:header:start
#
#   project      : Barline
#   file         : test_config_roundtrip_property.py
#   file_relpath : tests/test_config_roundtrip_property.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Property tests: rendered configurations decode back to themselves."""

from __future__ import annotations

import pytest
from hypothesis import HealthCheck, given, settings

from barline.config.decoder import DecodedConfig, parse_config, render_config
from barline.config.model import Config
from tests.strategies_barline import s_config

# Mark the entire test module
pytestmark: pytest.MarkDecorator = pytest.mark.hypothesis_slow


@settings(
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
    max_examples=200,
)
@given(config=s_config())
def test_render_then_decode_is_identity(config: Config) -> None:
    """Any configuration with non-empty string attributes survives a round trip."""
    assert parse_config(render_config(config)) == DecodedConfig(config, ())
