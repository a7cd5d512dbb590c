from types import SimpleNamespace

import pytest

from addonmeta.runner import Dependencies
from addonmeta.validators.am0002 import new_addon_label


def bundle(addon_id, label):
    return SimpleNamespace(addon_meta=SimpleNamespace(id=addon_id, label=label))


def test_properly_prefixed_label_valid():
    result = new_addon_label(Dependencies()).run(
        bundle("random-operator", "api.openshift.com/addon-random-operator")
    )
    assert result.is_success()
    assert not result.is_error()


@pytest.mark.parametrize(
    "label",
    ["foo-bar", "api.openshift.com/addon-random-operator-x"],
    ids=["no prefix", "non matching addon id"],
)
def test_invalid_labels(label):
    result = new_addon_label(Dependencies()).run(bundle("random-operator", label))
    assert not result.is_success()
    assert not result.is_error()
    assert result.failure_msgs == [
        f"addon label '{label}' wasn't recognized to follow the "
        "'api.openshift.com/addon-<id>' format"
    ]


def test_identity():
    validator = new_addon_label(Dependencies())
    assert str(validator.code) == "AM0002"
    assert validator.name == "label_format"