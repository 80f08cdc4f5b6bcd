# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Every source module in src/sun_events starts with the MIT header."""
from pathlib import Path

import pytest

SRC = Path(__file__).resolve().parent.parent / "src" / "sun_events"

HEADER = (
    "# Copyright (c) 2026 Jeroen Visser. All rights reserved.\n"
    "# Licensed under the MIT License — see LICENSE.\n"
)

MODULES = sorted(SRC.rglob("*.py"))


def test_package_has_modules():
    assert MODULES


@pytest.mark.parametrize("module", MODULES, ids=lambda p: str(p.relative_to(SRC)))
def test_module_header(module):
    assert module.read_text(encoding="utf-8").startswith(HEADER)
