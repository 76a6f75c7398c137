# cli/menu_helpers.py

"""
Helper functions for CLI menus and user interaction in the GPA Tracker application.

This module provides utilities for:
- Displaying interactive menus, result lists, and the running GPA summary
- Prompting for and validating user input
- Handling user selections and confirmation flows
- Displaying standard system messages and error feedback

These functions are shared across all menu modules to maintain consistent behavior and reduce duplication.
"""

from enum import Enum
from typing import Any, Callable, Iterable

import cli.formatters as formatters
import core.formatters as core_formatters
from core.response import Response
from models.assignment import Assignment
from models.gpa_tracker import GpaTracker
from models.session import GpaSession


class MenuSignal(Enum):
    CANCEL = "CANCEL"
    EXIT = "EXIT"


# === display methods ===


def display_menu(
    title: str,
    options: list[tuple[str, Callable[..., Any]]],
    zero_option: str = "Return",
) -> MenuSignal | Callable[..., Any]:
    """
    Displays a numbered CLI menu and returns the selected action.

    Args:
        title (str): The heading displayed above the menu options.
        options (list[tuple[str, Callable[..., Any]]]): A list of (label, action) pairs to present.
        zero_option (str, optional): The label for the "cancel" or "exit" option. Defaults to "Return".

    Returns:
        MenuSignal.EXIT if the user selects the zero option.
        Callable[..., Any]: The function associated with the selected menu item.

    Notes:
        - Menu selection is repeated until a valid choice is made.
        - User input is matched by menu index, not by label.
    """
    while True:
        print(f"\n{title}")

        for i, (label, _) in enumerate(options, 1):
            print(f"{i}. {label}")

        print(f"0. {zero_option}")

        choice = prompt_user_input("Select an option: ")

        if choice == "0":
            return MenuSignal.EXIT

        try:
            # casts choice to int and adjusts for zero-index, retrieves action from tuple
            return options[int(choice) - 1][1]

        except (ValueError, IndexError):
            print("Invalid selection. Please try again.")


def display_results(
    results: Iterable[Any],
    show_index: bool = False,
    formatter: Callable[[Any], str] = lambda x: str(x),
) -> None:
    """
    Prints a list of results to the console, optionally numbered and formatted.

    Args:
        results (Iterable[Any]): A sequence of results to display.
        show_index (bool, optional): If True, prepends a numbered index to each result. Defaults to False.
        formatter (Callable[[Any], str], optional): A function to convert each result to a display string. Defaults to str().
    """
    for i, result in enumerate(results, 1):
        prefix = f"{i:>2}. " if show_index else ""
        print(f"{prefix}{formatter(result)}")


def display_assignments(assignments: Iterable[Assignment]) -> None:
    assignments = list(assignments)

    if not assignments:
        print(f"\n{formatters.format_empty_state()}")
        return

    print()
    display_results(assignments, True, formatters.format_assignment_oneline)


def display_gpa_summary(session: GpaSession) -> None:
    """
    Renders the running GPA and assignment count.

    Registered as a `GpaSession` observer, so it runs after every successful add or remove.
    """
    summary = formatters.format_gpa_summary(session.gpa, len(session.assignments))
    print(f"\n{core_formatters.format_banner_text(summary)}")


# === prompt user input methods ===


# Prompt Helpers
#
# These functions provide a consistent way to handle user input and confirmation prompts.
#
# Conventions:
# - `prompt_user_input()` is the base function, used by all others to standardize the UI format.
# - Empty string responses are overloaded for control signals:
#     - `prompt_user_input_or_cancel()` returns `MenuSignal.CANCEL` on blank input.
#     - `prompt_user_input_or_none()` returns `None`.
# - `confirm_action()` loops until the user enters a valid yes/no response.


def confirm_action(prompt: str) -> bool:
    while True:
        choice = prompt_user_input(f"{prompt} (y/n): ").lower()

        if choice == "y" or choice == "yes":
            return True

        elif choice == "n" or choice == "no":
            return False

        else:
            print("Invalid selection. Please try again.")


def prompt_user_input(prompt: str) -> str:
    return input(f"\n{prompt}\n  >> ").strip()


def prompt_user_input_or_cancel(prompt: str) -> str | MenuSignal:
    response = prompt_user_input(prompt)
    return MenuSignal.CANCEL if response == "" else response


def prompt_user_input_or_none(prompt: str) -> str | None:
    response = prompt_user_input(prompt)
    return None if response == "" else response


def prompt_grade_input_or_cancel() -> str | MenuSignal:
    """
    Solicits a grade, re-prompting while the text cannot be a valid grade.

    Returns:
        The raw grade text, or `MenuSignal.CANCEL` if input is "".

    Notes:
        - Final validation is left to `GpaTracker.add_assignment()`; this only gives early feedback.
    """
    while True:
        grade = prompt_user_input_or_cancel(
            "Enter the grade from 0 to 5 (leave blank to cancel):"
        )

        if grade is MenuSignal.CANCEL:
            return MenuSignal.CANCEL

        if Assignment.is_valid_grade_text(grade):
            return grade

        print("\nPlease enter a valid grade (0-5).")


# === finder, search, and select methods ===


def prompt_selection_from_list(
    list_data: list[Assignment],
    list_description: str,
    sort_key: Callable[[Assignment], Any] = lambda x: x.id,
    formatter: Callable[[Assignment], str] = formatters.format_assignment_oneline,
) -> Assignment | None:
    """
    Prompts the user to select an assignment from a list.

    Args:
        list_data (list[Assignment]): The records to choose from.
        list_description (str): A short description used in prompts and headings (e.g. "assignments").
        sort_key (Callable[[Assignment], Any], optional): Sort function for ordering the list. Defaults to id order.
        formatter (Callable[[Assignment], str], optional): Function to convert each record to a display string.

    Returns:
        Assignment: The selected record if a valid index is chosen.
        None: If the list is empty or the user cancels with "0".
    """
    if not list_data:
        print(f"\nThere are no {list_description.lower()}.")
        return

    print(f"\nThere are {len(list_data)} {list_description.lower()}.")

    sorted_list = sorted(list_data, key=sort_key)

    while True:
        print(f"\n{core_formatters.format_banner_text(list_description)}")

        display_results(sorted_list, True, formatter)

        choice = prompt_user_input("Select an option (0 to cancel):")

        if choice == "0":
            return

        try:
            index = int(choice) - 1

            if index < 0:
                raise IndexError

            return sorted_list[index]

        except (ValueError, IndexError):
            print("\nInvalid selection. Please try again.")


def search_assignments(tracker: GpaTracker) -> list[Assignment]:
    query = prompt_user_input("Search for an assignment by name:")

    tracker_response = tracker.find_assignment_by_query(query)

    return tracker_response.data["records"] if tracker_response.success else []


def find_assignment_by_search(tracker: GpaTracker) -> Assignment | MenuSignal:
    """
    Prompts the user to search for and select an `Assignment`.

    Returns:
        - The selected `Assignment` if search and selection succeed.
        - `MenuSignal.CANCEL` if no match is found or the user cancels.
    """
    search_results = search_assignments(tracker)

    if not search_results:
        print("\nYour search returned no results.")
        return MenuSignal.CANCEL

    if len(search_results) == 1:
        return search_results[0]

    assignment = prompt_selection_from_list(search_results, "Search Results")

    return MenuSignal.CANCEL if assignment is None else assignment


def find_assignment_from_list(tracker: GpaTracker) -> Assignment | MenuSignal:
    assignment = prompt_selection_from_list(list(tracker.assignments), "Assignments")

    return MenuSignal.CANCEL if assignment is None else assignment


# === system messages ===


def returning_to(destination: str) -> None:
    print(f"\nReturning to {destination}.")


def caution_banner() -> None:
    caution_banner = core_formatters.format_banner_text("CAUTION!")
    print(f"\n{caution_banner}")


def display_response_failure(response: Response) -> None:
    """
    Displays a formatted error message based on a failed `Response`.

    Notes:
        - Does nothing if the response was successful.
        - Enum error codes are printed by name; string errors are printed as-is.
    """
    if response.success:
        return

    error_label = (
        response.error.name if isinstance(response.error, Enum) else str(response.error)
    )

    print(f"\n[ERROR: {error_label}] {response.detail}")
