# cli/menus/assignments_menu.py

"""
Manage Assignments menu for the GPA Tracker CLI.

This module defines the full interface for working with `Assignment` records:
- Adding new assignments
- Removing assignments
- Viewing all assignments with the running GPA
- Exporting the data to a JSON file or dumping it to the console

All operations are routed through the `GpaSession` API, which validates, saves after each change, and re-renders the
GPA summary through its observers.
"""

from functools import partial
from typing import cast

import cli.formatters as formatters
import cli.menu_helpers as helpers
import core.formatters as core_formatters
from cli.menu_helpers import MenuSignal
from cli.path_utils import resolve_export_dir
from models.assignment import Assignment
from models.session import GpaSession


def run(session: GpaSession, data_dir: str) -> None:
    """
    Top-level loop with dispatch for the Manage Assignments menu.

    Args:
        session (GpaSession): The active `GpaSession`.
        data_dir (str): The default directory for export files.

    Raises:
        RuntimeError: If the menu response is unrecognized.
    """
    title = core_formatters.format_banner_text("GPA CALCULATOR")
    options = [
        ("Add Assignment", add_assignment),
        ("Remove Assignment", find_and_remove_assignment),
        ("View Assignments", view_assignments),
        ("Export Data to File", partial(export_data, data_dir=data_dir)),
        ("Dump Data to Console", dump_to_console),
    ]
    zero_option = "Exit Program"

    while True:
        menu_response = helpers.display_menu(title, options, zero_option)

        if menu_response is MenuSignal.EXIT:
            break

        elif callable(menu_response):
            menu_response(session)

        else:
            raise RuntimeError(f"Unexpected MenuResponse received: {menu_response}")


# === add assignment ===


def add_assignment(session: GpaSession) -> None:
    """
    Loops a prompt to collect a name and grade and add the assignment to the session.

    Notes:
        - The session saves automatically after each successful add.
    """
    while True:
        name = helpers.prompt_user_input_or_cancel(
            "Enter assignment name (leave blank to cancel):"
        )

        if name is MenuSignal.CANCEL:
            break
        name = cast(str, name)

        grade = helpers.prompt_grade_input_or_cancel()

        if grade is MenuSignal.CANCEL:
            break

        session_response = session.add_assignment(name, grade)

        if not session_response.success:
            helpers.display_response_failure(session_response)
            print(f"\n{name} was not added.")

        else:
            print(f"\n{session_response.detail}")

        if not helpers.confirm_action(
            "Would you like to continue adding new assignments?"
        ):
            break

    helpers.returning_to("GPA Calculator menu")


# === remove assignment ===


def find_and_remove_assignment(session: GpaSession) -> None:
    """
    Prompts the user to pick an assignment, by search or from the full list, and removes it after confirmation.
    """
    title = core_formatters.format_banner_text("Assignment Selection")
    options = [
        ("Search for an assignment", helpers.find_assignment_by_search),
        ("Select from all assignments", helpers.find_assignment_from_list),
    ]
    zero_option = "Return to GPA Calculator menu"

    menu_response = helpers.display_menu(title, options, zero_option)

    if menu_response is MenuSignal.EXIT:
        helpers.returning_to("GPA Calculator menu")
        return

    assignment = menu_response(session.tracker)

    if assignment is MenuSignal.CANCEL:
        helpers.returning_to("GPA Calculator menu")
        return
    assignment = cast(Assignment, assignment)

    remove_assignment(session, assignment)


def remove_assignment(session: GpaSession, assignment: Assignment) -> None:
    helpers.caution_banner()
    print("You are about to permanently remove the following assignment:")
    print(formatters.format_assignment_multiline(assignment))

    if not helpers.confirm_action("Are you sure you want to remove this assignment?"):
        print(f"\n{assignment.name} was not removed.")
        return

    session_response = session.remove_assignment(assignment.id)

    if not session_response.success:
        helpers.display_response_failure(session_response)
        print(f"\n{assignment.name} was not removed.")

    else:
        print(f"\n{session_response.detail}")


# === view assignments ===


def view_assignments(session: GpaSession) -> None:
    banner = core_formatters.format_banner_text("Assignments")
    print(f"\n{banner}")

    helpers.display_assignments(session.assignments)
    helpers.display_gpa_summary(session)


# === export ===


def export_data(session: GpaSession, data_dir: str) -> None:
    dir_input = helpers.prompt_user_input_or_none(
        f"Enter directory for the export file (leave blank to use {data_dir}):"
    )

    try:
        export_dir = resolve_export_dir(data_dir, dir_input)

    except OSError as e:
        print(f"\n[ERROR] Could not use that directory: {e}")
        return

    session_response = session.export_to_file(export_dir)

    if not session_response.success:
        helpers.display_response_failure(session_response)

    else:
        print(f"\n{session_response.detail}")


def dump_to_console(session: GpaSession) -> None:
    print(f"\n{session.dump_to_console()}")
