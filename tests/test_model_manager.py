from __future__ import annotations

import pytest

from models.predicates import SHOW_ALL_COMPANIES, NameContainsKeywords
from services.model_manager import CompanyNotFoundError, DuplicateCompanyError, ModelManager


def test_add_and_has_company(make_company):
    model = ModelManager()
    acme = make_company(name="Acme")
    model.add_company(acme)
    assert model.has_company(make_company(name="acme", phone="000"))
    with pytest.raises(DuplicateCompanyError):
        model.add_company(make_company(name="ACME"))


def test_filtered_list_follows_predicate(make_company):
    a, b, c = make_company(name="Acme Corp"), make_company(name="Beta"), make_company(name="Acme Labs")
    model = ModelManager([a, b, c])
    model.update_filtered_company_list(NameContainsKeywords(("acme",)))
    assert model.get_filtered_company_list() == (a, c)
    assert model.get_company_list() == (a, b, c)
    model.update_filtered_company_list(SHOW_ALL_COMPANIES)
    assert model.get_filtered_company_list() == (a, b, c)


def test_keyword_match_is_whole_word(make_company):
    pred = NameContainsKeywords(("acme",))
    assert pred(make_company(name="The ACME Group"))
    assert not pred(make_company(name="Acmeworks"))


def test_set_company_keeps_position(make_company):
    a, b, c = make_company(name="A1"), make_company(name="B1"), make_company(name="C1")
    model = ModelManager([a, b, c])
    edited = make_company(name="B2")
    model.set_company(b, edited)
    assert model.get_company_list() == (a, edited, c)


def test_set_company_rejects_missing_and_duplicates(make_company):
    a, b = make_company(name="A1"), make_company(name="B1")
    model = ModelManager([a, b])
    with pytest.raises(CompanyNotFoundError):
        model.set_company(make_company(name="Z9"), make_company(name="Z8"))
    with pytest.raises(DuplicateCompanyError):
        model.set_company(b, make_company(name="a1"))
    assert model.get_company_list() == (a, b)


def test_viewed_company_tracks_edits_and_deletes(make_company):
    a = make_company(name="A1")
    model = ModelManager([a])
    model.set_current_viewed_company(a)
    edited = make_company(name="A1", phone="55555")
    model.set_company(a, edited)
    assert model.current_viewed_company == edited
    model.delete_company(edited)
    assert model.current_viewed_company is None
    with pytest.raises(CompanyNotFoundError):
        model.delete_company(edited)


def test_clear_empties_everything(make_company):
    a = make_company()
    model = ModelManager([a])
    model.set_current_viewed_company(a)
    model.clear()
    assert model.get_company_list() == ()
    assert model.current_viewed_company is None
