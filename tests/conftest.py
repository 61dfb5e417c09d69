import os
import sys
from typing import Tuple

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from tests.test_util import equations  # isort:skip


@pytest.fixture(scope="session", params=equations("valid.txt"), ids=lambda case: case[0])
def valid_equation(request) -> Tuple[str, str]:
    return request.param


@pytest.fixture(
    scope="session",
    params=[
        "(1 + 2",
        "foo(1)",
        "1 + @",
        "1 +",
        "* 2",
        "sqrt 16",
        "1 2",
        "1.2.3",
        "()",
        "",
    ],
)
def invalid_equation(request) -> str:
    return request.param
