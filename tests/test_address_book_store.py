from __future__ import annotations

import sqlite3

from db import schema
from db.repos.companies_repo import CompaniesRepo
from models.predicates import SHOW_ALL_COMPANIES, NameContainsKeywords
from services.address_book_store import load_model, save_model
from services.model_manager import ModelManager


def test_companies_repo_round_trip_keeps_order(tmp_path, make_company):
    db = sqlite3.connect(str(tmp_path / "t.db"))
    try:
        schema.bootstrap(db)
        repo = CompaniesRepo(db)
        companies = [
            make_company(name="Zeta", phone=None, email=None, tags=[]),
            make_company(name="Alpha", tags=["b", "a"]),
        ]
        repo.replace_all(companies)
        assert repo.load_all() == companies
        repo.replace_all(companies[1:])
        assert repo.load_all() == companies[1:]
    finally:
        db.close()


def test_view_state_survives_reload(tmp_path, make_company):
    db = sqlite3.connect(str(tmp_path / "t.db"))
    try:
        a, b = make_company(name="Acme"), make_company(name="Beta")
        model = ModelManager([a, b])
        model.update_filtered_company_list(NameContainsKeywords(("beta",)))
        model.set_current_viewed_company(a)
        save_model(db, model)

        restored = load_model(db)
        assert restored.get_company_list() == (a, b)
        assert restored.get_filtered_company_list() == (b,)
        assert restored.current_viewed_company == a

        restored.update_filtered_company_list(SHOW_ALL_COMPANIES)
        restored.set_current_viewed_company(None)
        save_model(db, restored)
        again = load_model(db)
        assert again.current_predicate == SHOW_ALL_COMPANIES
        assert again.current_viewed_company is None
    finally:
        db.close()


def test_load_model_on_empty_db(tmp_path):
    db = sqlite3.connect(str(tmp_path / "empty.db"))
    try:
        model = load_model(db)
        assert model.get_company_list() == ()
    finally:
        db.close()
