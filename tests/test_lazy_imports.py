"""Tests for intlroute.__init__ — lazy import registry covers all public names."""

import pytest

import intlroute


@pytest.mark.parametrize("name", intlroute.__all__)
def test_all_names_resolve(name: str) -> None:
    """Every name in __all__ must resolve via __getattr__ without error."""
    obj = getattr(intlroute, name)
    assert obj is not None, f"intlroute.{name} resolved to None"


def test_unknown_name_raises_attribute_error() -> None:
    """Accessing an unregistered name raises AttributeError."""
    with pytest.raises(AttributeError, match="no attribute"):
        intlroute.__getattr__("ThisDoesNotExist")
