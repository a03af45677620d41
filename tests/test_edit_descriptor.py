from __future__ import annotations

from datetime import date

import pytest
from pydantic import ValidationError

from models.edit_descriptor import EditCompanyDescriptor
from models.fields import ApplicationStatus


ALL_FIELDS = {
    "name": "Globex",
    "phone": "65432100",
    "email": "hr@globex.com",
    "role": "Data Scientist",
    "deadline": "15-06-2031",
    "status": "O",
    "recruiter_name": "Hank Scorpio",
    "tags": ["urgent", "onsite"],
}


def test_empty_descriptor_is_not_edited():
    assert EditCompanyDescriptor().is_any_field_edited() is False


@pytest.mark.parametrize("field", sorted(ALL_FIELDS))
def test_any_single_field_counts_as_edited(field):
    d = EditCompanyDescriptor(**{field: ALL_FIELDS[field]})
    assert d.is_any_field_edited()


def test_empty_tag_set_counts_as_edited():
    assert EditCompanyDescriptor(tags=[]).is_any_field_edited()


def test_assigning_none_clears_field():
    d = EditCompanyDescriptor(phone="91234567")
    d.phone = None
    assert d.phone is None
    assert not d.is_any_field_edited()


def test_assignment_is_validated():
    d = EditCompanyDescriptor()
    with pytest.raises(ValidationError):
        d.email = "nope"
    d.status = "po"
    assert d.status is ApplicationStatus.PENDING_OUTCOME
    d.deadline = "01-01-2032"
    assert d.deadline == date(2032, 1, 1)


def test_tags_are_copied_defensively():
    tags = {"remote"}
    d = EditCompanyDescriptor(tags=tags)
    tags.add("onsite")
    assert d.tags == frozenset({"remote"})

    later = {"a"}
    d.tags = later
    later.clear()
    assert d.tags == frozenset({"a"})


def test_tags_cannot_be_mutated_through_descriptor():
    d = EditCompanyDescriptor(tags=["remote"])
    with pytest.raises(AttributeError):
        d.tags.add("x")  # type: ignore[union-attr]


def test_copy_is_equal_and_independent():
    original = EditCompanyDescriptor(name="Globex", tags=["a"])
    copy = EditCompanyDescriptor.from_descriptor(original)
    assert copy == original
    assert copy is not original
    copy.name = "Initech"
    assert original.name == "Globex"


def test_equality_is_field_by_field():
    assert EditCompanyDescriptor(name="Globex") == EditCompanyDescriptor(name="Globex")
    assert EditCompanyDescriptor(name="Globex") != EditCompanyDescriptor(name="Globex", phone="123")
    assert EditCompanyDescriptor() != object()


def test_merge_of_empty_descriptor_keeps_record(make_company):
    base = make_company()
    merged = EditCompanyDescriptor(role="Staff Engineer").apply_to(base)
    assert EditCompanyDescriptor().apply_to(merged) == merged


def test_full_descriptor_ignores_old_values(make_company):
    from models.company_record import CompanyRecord

    merged = EditCompanyDescriptor(**ALL_FIELDS).apply_to(make_company())
    assert merged == CompanyRecord(**ALL_FIELDS)


@pytest.mark.parametrize("field", sorted(ALL_FIELDS))
def test_merge_changes_only_the_set_field(make_company, field):
    base = make_company()
    merged = EditCompanyDescriptor(**{field: ALL_FIELDS[field]}).apply_to(base)
    for name in type(base).model_fields:
        if name == field:
            assert getattr(merged, name) != getattr(base, name)
        else:
            assert getattr(merged, name) == getattr(base, name)


def test_merge_returns_new_record(make_company):
    base = make_company()
    merged = EditCompanyDescriptor(phone="99999999").apply_to(base)
    assert merged is not base
    assert base.phone == "91234567"


def test_str_lists_set_fields_only():
    text = str(EditCompanyDescriptor(name="Globex", deadline="15-06-2031", tags=["b", "a"]))
    assert text == "EditCompanyDescriptor{name=Globex, deadline=15-06-2031, tags=['a', 'b']}"
