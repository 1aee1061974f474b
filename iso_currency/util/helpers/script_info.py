# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 iso_currency Rui Pinheiro

import os


_IS_UNIT_TEST = None

SCRIPT_NAME = "iso_currency"


def is_unit_test() -> bool:
    """Test whether running in a unit test environment.

    Returns:
        bool: True if running in a unit test environment, False otherwise.

    """
    global _IS_UNIT_TEST  # noqa: PLW0603

    if _IS_UNIT_TEST is None:
        _IS_UNIT_TEST = _is_unit_test()
    return _IS_UNIT_TEST


def _is_unit_test() -> bool:
    # Detect pytest
    if os.environ.get("PYTEST_VERSION", None) is not None:
        return True

    # Check UNIT_TEST environment variable
    env = os.environ.get("UNIT_TEST", "").strip()
    if not env:
        return False

    return env.lower() not in ("false", "0", "no")


def get_script_name() -> str:
    return SCRIPT_NAME
