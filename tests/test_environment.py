import os

import pytest

from kbase.environment import Environment

VAR = "KBASE_TEST_ENVIRONMENT_VAR"


@pytest.fixture
def var_name():
    os.environ.pop(VAR, None)
    yield VAR
    os.environ.pop(VAR, None)


def test_set_then_get(var_name):
    Environment.set_var(var_name, "hello")
    assert Environment.get_var(var_name) == "hello"
    assert Environment.has_var(var_name) is True


def test_missing_var_reads_as_empty(var_name):
    assert Environment.get_var(var_name) == ""
    assert Environment.has_var(var_name) is False


def test_empty_value_still_exists(var_name):
    Environment.set_var(var_name, "")
    assert Environment.has_var(var_name) is True
    assert Environment.get_var(var_name) == ""


def test_remove_var(var_name):
    Environment.set_var(var_name, "value")
    Environment.remove_var(var_name)
    assert Environment.has_var(var_name) is False


def test_remove_missing_var_is_harmless(var_name):
    Environment.remove_var(var_name)
    assert Environment.has_var(var_name) is False


def test_block_holds_vars_in_name_order(var_name):
    Environment.set_var(var_name, "in-block")
    block = Environment.current_environment_block()
    assert block[var_name] == "in-block"
    assert list(block) == sorted(block)
    assert block == dict(os.environ)