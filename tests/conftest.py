import sys
sys.path.insert(0, ".")

from dataclasses import replace

import pytest

from honeycase.design import parse_case_config


@pytest.fixture
def bottom_config():
    """The packaged defaults: a bottom half."""
    return parse_case_config({})


@pytest.fixture
def top_config(bottom_config):
    return replace(bottom_config, is_top=True, is_bottom=False)
