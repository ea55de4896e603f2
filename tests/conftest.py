"""Shared pytest fixtures for passutils tests."""

import itertools

import pytest

from passutils import random_source


@pytest.fixture
def stub_random(monkeypatch):
    """Replace the entropy source with a scripted stream of values.

    Returns an installer taking an iterable of ints; the installer returns
    the list of counts requested from the source.
    """
    def install(values):
        feed = iter(values)
        calls = []

        def fake(count):
            calls.append(count)
            return list(itertools.islice(feed, count))

        monkeypatch.setattr(random_source, "random_uint32s", fake)
        return calls

    return install


@pytest.fixture
def no_entropy(monkeypatch):
    """Fail the test if anything draws from the random source."""
    def fake(count):
        raise AssertionError("random source must not be used")

    monkeypatch.setattr(random_source, "random_uint32s", fake)


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Point the config lookup at a file that does not exist yet."""
    path = tmp_path / "config.json"
    monkeypatch.setenv("PASSUTILS_CONFIG", str(path))
    return path
