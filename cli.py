import argparse
import shlex
import sys

from pydantic import ValidationError

from commands import (
    AddCommand,
    ClearCommand,
    CommandError,
    DeleteCommand,
    EditCommand,
    FindCommand,
    HelpCommand,
    ListCommand,
    ViewCommand,
    run_command,
)
from commands.messages import MESSAGE_NOT_EDITED
from config.settings import get_settings
from db import schema
from db.connection import get_connection
from models import CompanyRecord, EditCompanyDescriptor, Index, NameContainsKeywords
from services.address_book_store import load_model, save_model
from services.help_display import HelpDisplay
from services.reporting import print_company_list, print_viewed_company
from utils.logging_setup import init_logging


def _positive_index(text: str) -> Index:
	try:
		value = int(text)
	except ValueError:
		raise argparse.ArgumentTypeError(f"invalid index: {text!r}") from None
	if value < 1:
		raise argparse.ArgumentTypeError("index must be a positive integer")
	return Index.from_one_based(value)


def _validation_message(exc: ValidationError) -> str:
	msg = exc.errors()[0].get("msg", str(exc))
	return msg.removeprefix("Value error, ")


def _build_add(args):
	try:
		company = CompanyRecord(
			name=args.name,
			recruiter_name=args.recruiter,
			role=args.role,
			status=args.status,
			deadline=args.deadline,
			phone=args.phone,
			email=args.email,
			tags=args.tag or [],
		)
	except ValidationError as e:
		raise CommandError(_validation_message(e)) from None
	return AddCommand(company)


def _build_edit(args):
	descriptor = EditCompanyDescriptor()
	try:
		descriptor.name = args.name
		descriptor.recruiter_name = args.recruiter
		descriptor.role = args.role
		descriptor.status = args.status
		descriptor.deadline = args.deadline
		descriptor.phone = args.phone
		descriptor.email = args.email
		if args.clear_tags or args.tag:
			# --clear-tags alone empties the set; with --tag it replaces it
			descriptor.tags = set(args.tag or [])
	except ValidationError as e:
		raise CommandError(_validation_message(e)) from None
	if not descriptor.is_any_field_edited():
		raise CommandError(MESSAGE_NOT_EDITED)
	return EditCommand(args.index, descriptor)


def _execute(args, conn, model) -> None:
	command = args.build(args)
	result = run_command(command, model)
	save_model(conn, model)
	print(result.feedback)
	if result.show_help:
		fallback = HelpDisplay().show()
		if fallback:
			print(fallback)
	if args.cmd in ("list", "find"):
		print_company_list(model.get_filtered_company_list())
	elif args.cmd in ("add", "edit", "view"):
		print_viewed_company(model.current_viewed_company)


def cmd_bootstrap(args):
	conn = get_connection(args.db)
	try:
		schema.bootstrap(conn)
	finally:
		conn.close()
	print("Schema ready")


def cmd_command(args):
	conn = get_connection(args.db)
	try:
		model = load_model(conn)
		_execute(args, conn, model)
	except CommandError as e:
		print(e.message, file=sys.stderr)
		raise SystemExit(1)
	finally:
		conn.close()


def cmd_shell(args):
	parser = build_parser()
	conn = get_connection(args.db)
	try:
		model = load_model(conn)
		print_company_list(model.get_filtered_company_list())
		for line in sys.stdin:
			line = line.strip()
			if not line:
				continue
			if line in ("exit", "quit"):
				break
			try:
				sub_args = parser.parse_args(["--db", args.db] + shlex.split(line))
			except ValueError as e:
				print(f"Could not parse command: {e}")
				continue
			except SystemExit:
				# argparse already printed the usage error
				continue
			if not hasattr(sub_args, "build"):
				print(f"'{sub_args.cmd}' is not available inside the shell")
				continue
			try:
				_execute(sub_args, conn, model)
			except CommandError as e:
				print(e.message)
	finally:
		conn.close()
	print("Goodbye!")


def _add_field_options(p, required: bool) -> None:
	p.add_argument("--name", "-c", required=required, help="Company name")
	p.add_argument("--recruiter", "-n", required=required, help="Recruiter name")
	p.add_argument("--role", "-r", required=required, help="Role applied for")
	p.add_argument("--status", "-a", required=required, help="Application status: PA, SA, PI, PO, O or R")
	p.add_argument("--deadline", "-d", required=required, help="Deadline as dd-mm-yyyy")
	p.add_argument("--phone", "-p", help="Recruiter phone number")
	p.add_argument("--email", "-e", help="Recruiter email")
	p.add_argument("--tag", "-t", action="append", help="Tag (repeatable)")


def build_parser() -> argparse.ArgumentParser:
	settings = get_settings()
	parser = argparse.ArgumentParser(prog="linkmein", description="LinkMeIn job application tracker")
	parser.add_argument("--db", default=settings.db_path, help="Path to SQLite DB (default from settings)")
	sub = parser.add_subparsers(dest="cmd", required=True)

	p_boot = sub.add_parser("bootstrap", help="Create tables and indexes")
	p_boot.set_defaults(func=cmd_bootstrap)

	p_add = sub.add_parser("add", help="Track a new company application")
	_add_field_options(p_add, required=True)
	p_add.set_defaults(func=cmd_command, build=_build_add)

	p_edit = sub.add_parser(
		"edit",
		help="Edit the company at INDEX in the displayed list",
		description="Existing values are overwritten by the given values.",
	)
	p_edit.add_argument("index", type=_positive_index, help="Index in the displayed list (positive integer)")
	_add_field_options(p_edit, required=False)
	p_edit.add_argument("--clear-tags", action="store_true", help="Remove all tags (combine with --tag to replace)")
	p_edit.set_defaults(func=cmd_command, build=_build_edit)

	p_del = sub.add_parser("delete", help="Delete the company at INDEX in the displayed list")
	p_del.add_argument("index", type=_positive_index)
	p_del.set_defaults(func=cmd_command, build=lambda a: DeleteCommand(a.index))

	p_view = sub.add_parser("view", help="Show details of the company at INDEX")
	p_view.add_argument("index", type=_positive_index)
	p_view.set_defaults(func=cmd_command, build=lambda a: ViewCommand(a.index))

	p_list = sub.add_parser("list", help="List all companies")
	p_list.set_defaults(func=cmd_command, build=lambda a: ListCommand())

	p_find = sub.add_parser("find", help="List companies whose name contains any keyword")
	p_find.add_argument("keywords", nargs="+")
	p_find.set_defaults(func=cmd_command, build=lambda a: FindCommand(NameContainsKeywords(tuple(a.keywords))))

	p_clear = sub.add_parser("clear", help="Delete all companies")
	p_clear.set_defaults(func=cmd_command, build=lambda a: ClearCommand())

	p_help = sub.add_parser("help", help="Open the user guide")
	p_help.set_defaults(func=cmd_command, build=lambda a: HelpCommand())

	p_shell = sub.add_parser("shell", help="Run commands interactively, one per line")
	p_shell.set_defaults(func=cmd_shell)

	return parser


def main():
	settings = get_settings()
	init_logging(settings.log_level)
	parser = build_parser()
	args = parser.parse_args()
	args.func(args)


if __name__ == "__main__":
	main()
