from __future__ import annotations

import json
import logging
import sqlite3

from db import schema
from db.repos.companies_repo import CompaniesRepo
from db.repos.view_state_repo import ViewStateRepo
from models.predicates import SHOW_ALL_COMPANIES, NameContainsKeywords
from services.model_manager import ModelManager


logger = logging.getLogger(__name__)

FILTER_KEY = "filter_keywords"
VIEWED_KEY = "current_viewed"


def load_model(conn: sqlite3.Connection) -> ModelManager:
    """Build a model from the stored companies and restore the last view."""
    schema.bootstrap(conn)
    companies = CompaniesRepo(conn).load_all()
    model = ModelManager(companies)

    state = ViewStateRepo(conn)
    keywords = json.loads(state.get(FILTER_KEY) or "null")
    if keywords:
        model.update_filtered_company_list(NameContainsKeywords(tuple(keywords)))

    viewed = state.get(VIEWED_KEY)
    if viewed:
        for company in companies:
            if company.name == viewed:
                model.set_current_viewed_company(company)
                break
    logger.debug("Loaded %d companies", len(companies))
    return model


def save_model(conn: sqlite3.Connection, model: ModelManager) -> None:
    schema.bootstrap(conn)
    CompaniesRepo(conn).replace_all(list(model.get_company_list()))

    state = ViewStateRepo(conn)
    predicate = model.current_predicate
    if isinstance(predicate, NameContainsKeywords):
        state.set(FILTER_KEY, json.dumps(list(predicate.keywords)))
    else:
        if predicate != SHOW_ALL_COMPANIES:
            logger.warning("Filter %r cannot be stored; showing all companies next time", predicate)
        state.set(FILTER_KEY, None)

    viewed = model.current_viewed_company
    state.set(VIEWED_KEY, viewed.name if viewed else None)
