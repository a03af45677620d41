from __future__ import annotations

from dataclasses import dataclass

from pydantic import ValidationError

from commands.base import Command, CommandError, CommandResult
from commands.messages import (
    MESSAGE_DUPLICATE_COMPANY,
    MESSAGE_INVALID_COMPANY_DISPLAYED_INDEX,
    MESSAGE_NOT_EDITED,
    company_name,
)
from models.company_record import CompanyRecord
from models.edit_descriptor import EditCompanyDescriptor
from models.index import Index
from models.predicates import SHOW_ALL_COMPANIES
from ports.model import CompanyModelPort


MESSAGE_EDIT_COMPANY_SUCCESS = "%s company edited."


def create_edited_company(company: CompanyRecord, descriptor: EditCompanyDescriptor) -> CompanyRecord:
    """Creates a company with the details of ``company`` edited with ``descriptor``."""
    return descriptor.apply_to(company)


@dataclass
class EditCommand(Command):
    """Edits the details of the company at ``index`` in the displayed list.

    Existing values are overwritten by the descriptor's set fields. On any
    failure the model is left untouched.
    """

    index: Index
    descriptor: EditCompanyDescriptor

    command_word = "edit"

    def __post_init__(self) -> None:
        self.descriptor = EditCompanyDescriptor.from_descriptor(self.descriptor)

    def execute(self, model: CompanyModelPort) -> CommandResult:
        if not self.descriptor.is_any_field_edited():
            raise CommandError(MESSAGE_NOT_EDITED)

        last_shown = model.get_filtered_company_list()
        if self.index.zero_based >= len(last_shown):
            raise CommandError(MESSAGE_INVALID_COMPANY_DISPLAYED_INDEX)

        to_edit = last_shown[self.index.zero_based]
        try:
            edited = create_edited_company(to_edit, self.descriptor)
        except ValidationError as e:
            raise CommandError(str(e)) from e

        # Only a changed identity can collide; re-saving under the same name is allowed
        if not to_edit.is_same_company(edited) and model.has_company(edited):
            raise CommandError(MESSAGE_DUPLICATE_COMPANY)

        model.set_company(to_edit, edited)
        model.update_filtered_company_list(SHOW_ALL_COMPANIES)
        model.set_current_viewed_company(edited)
        return CommandResult(MESSAGE_EDIT_COMPANY_SUCCESS % company_name(edited))

    def describe_args(self):
        return {"index": self.index.one_based, "descriptor": str(self.descriptor)}
