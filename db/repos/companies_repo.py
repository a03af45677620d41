from __future__ import annotations

import json
import sqlite3
from typing import List

from models.company_record import CompanyRecord
from models.fields import format_deadline


class CompaniesRepo:
    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    def load_all(self) -> List[CompanyRecord]:
        """Return every stored company in address book order."""
        cur = self.conn.cursor()
        cur.execute(
            "SELECT name, phone, email, role, deadline, status, recruiter_name, tags_json "
            "FROM companies ORDER BY position"
        )
        companies = []
        for name, phone, email, role, deadline, status, recruiter_name, tags_json in cur.fetchall():
            companies.append(CompanyRecord(
                name=name,
                phone=phone,
                email=email,
                role=role,
                deadline=deadline,
                status=status,
                recruiter_name=recruiter_name,
                tags=json.loads(tags_json or "[]"),
            ))
        return companies

    def replace_all(self, companies: List[CompanyRecord]) -> None:
        """Overwrite the stored address book with ``companies`` in one transaction."""
        rows = [
            (
                position,
                c.name,
                c.phone,
                c.email,
                c.role,
                format_deadline(c.deadline),
                c.status.value,
                c.recruiter_name,
                json.dumps(sorted(c.tags), ensure_ascii=False),
            )
            for position, c in enumerate(companies)
        ]
        with self.conn:
            self.conn.execute("DELETE FROM companies;")
            self.conn.executemany(
                "INSERT INTO companies (position, name, phone, email, role, deadline, status, recruiter_name, tags_json) "
                "VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)",
                rows,
            )
