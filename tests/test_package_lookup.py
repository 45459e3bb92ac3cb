import pytest

from services.package_lookup import DEFAULT_LOOKUP_ORDER, resolve_package
from conftest import make_package

PACKAGES = [
    make_package(id="a", name="Standard", slug="standard", is_enabled=False),
    make_package(id="b", name="Weekly", slug="weekly", custom_name="Week Away"),
    make_package(id="c", name="Hosted", slug="hosted"),
]


def test_default_order():
    assert DEFAULT_LOOKUP_ORDER == ("id", "name", "first_enabled")


def test_resolves_by_id_first():
    result = resolve_package(PACKAGES, "c")
    assert result.strategy == "id"
    assert result.package.id == "c"


@pytest.mark.parametrize("ref", ["Weekly", "Week Away", "weekly"])
def test_resolves_by_name_custom_name_or_slug(ref):
    result = resolve_package(PACKAGES, ref)
    assert result.strategy == "name"
    assert result.package.id == "b"


def test_falls_back_to_first_enabled():
    result = resolve_package(PACKAGES, "unknown")
    assert result.strategy == "first_enabled"
    assert result.package.id == "b"


def test_custom_order_without_fallback():
    result = resolve_package(PACKAGES, "unknown", order=("id", "name"))
    assert result == (None, None)


def test_empty_packages():
    assert resolve_package([], "a") == (None, None)


def test_unknown_strategy_rejected():
    with pytest.raises(ValueError):
        resolve_package(PACKAGES, "a", order=("id", "by_magic"))
