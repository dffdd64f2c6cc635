import errno

import pytest

from kbase.eintr import handle_eintr, ignore_eintr


def make_flaky(failures, result):
    calls = []

    def fn(*args, **kwargs):
        calls.append((args, kwargs))
        if len(calls) <= failures:
            raise InterruptedError(errno.EINTR, "interrupted")
        return result

    return fn, calls


def test_handle_eintr_retries_until_success():
    fn, calls = make_flaky(2, "done")
    assert handle_eintr(fn) == "done"
    assert len(calls) == 3


def test_handle_eintr_passes_arguments():
    fn, calls = make_flaky(1, "ok")
    assert handle_eintr(fn, 1, 2, key="value") == "ok"
    assert calls[-1] == ((1, 2), {"key": "value"})


def test_handle_eintr_propagates_other_errors():
    def fn():
        raise PermissionError(errno.EACCES, "denied")

    with pytest.raises(PermissionError):
        handle_eintr(fn)


def test_ignore_eintr_returns_zero_when_interrupted():
    fn, calls = make_flaky(5, "never")
    assert ignore_eintr(fn) == 0
    assert len(calls) == 1


def test_ignore_eintr_returns_result():
    fn, calls = make_flaky(0, "value")
    assert ignore_eintr(fn, "a") == "value"
    assert calls == [(("a",), {})]


def test_ignore_eintr_propagates_other_errors():
    def fn():
        raise FileNotFoundError(errno.ENOENT, "missing")

    with pytest.raises(FileNotFoundError):
        ignore_eintr(fn)