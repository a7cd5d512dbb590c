from types import SimpleNamespace

import pytest

from addonmeta.runner import Dependencies
from addonmeta.validators.am0017 import PullSecretName, new_pull_secret_name


def _bundle(pull_name, cfg_names=...):
    cfg = None
    if cfg_names is not ...:
        entries = None if cfg_names is None else [SimpleNamespace(name=n) for n in cfg_names]
        cfg = SimpleNamespace(secrets=entries)
    meta = SimpleNamespace(config=cfg)
    meta.pull_secret_name = pull_name
    return SimpleNamespace(addon_meta=meta)


VALID = {
    "pull name absent and config is nil": _bundle(""),
    "pull name absent and config entries are nil": _bundle("", cfg_names=None),
    "pull name present and addon has one entry": _bundle(
        "test-pull-ref", cfg_names=["test-pull-ref"]
    ),
    "pull name present and addon has multiple entries": _bundle(
        "test-pull-ref-2",
        cfg_names=["test-pull-ref-1", "test-pull-ref-2", "test-pull-ref-2"],
    ),
}

INVALID = {
    "pull name set but addon config is nil": _bundle("test-pull-ref"),
    "pull name set but addon config entries are nil": _bundle(
        "test-pull-ref", cfg_names=None
    ),
    "pull name set but not among config entries": _bundle(
        "test-pull-ref", cfg_names=["test-pull", "alpha", "beta"]
    ),
}


@pytest.mark.parametrize("name", sorted(VALID))
def test_valid(name):
    res = new_pull_secret_name(Dependencies()).run(VALID[name])
    assert not res.is_error()
    assert res.is_success(), res


@pytest.mark.parametrize("name", sorted(INVALID))
def test_invalid(name):
    res = new_pull_secret_name(Dependencies()).run(INVALID[name])
    assert not res.is_error()
    assert not res.is_success(), res


def test_messages():
    val = PullSecretName()
    assert val.run(INVALID["pull name set but addon config is nil"]).failure_msgs == [
        "pullSecretName test-pull-ref is present in addon.yaml whereas addon config is nil"
    ]
    assert val.run(INVALID["pull name set but addon config entries are nil"]).failure_msgs == [
        "pullSecretName test-pull-ref is present in addon.yaml whereas addon secrets are nil"
    ]
    assert val.run(INVALID["pull name set but not among config entries"]).failure_msgs == [
        "pullSecretName test-pull-ref is not present in addon secrets"
    ]


def test_identity():
    val = PullSecretName()
    assert int(val.code) == 17
    assert val.name == "pull_secret_name"