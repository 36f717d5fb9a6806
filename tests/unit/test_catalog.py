import importlib

import pytest

from solid_examples.catalog import PRINCIPLES, get_principle


def test_five_principles_in_order():
    assert [p.acronym for p in PRINCIPLES] == ["SRP", "OCP", "LSP", "ISP", "DIP"]


@pytest.mark.parametrize("acronym", ["dip", "DIP", "Dip"])
def test_get_principle_ignores_case(acronym):
    assert get_principle(acronym).name == "Dependency Inversion Principle"


def test_get_principle_unknown():
    with pytest.raises(KeyError):
        get_principle("DRY")


@pytest.mark.parametrize("principle", PRINCIPLES, ids=lambda p: p.acronym)
def test_component_modules_import(principle):
    module = importlib.import_module(principle.module)
    assert module.__doc__ is not None
    assert principle.acronym in module.__doc__
