"""Editable static labels, messages and styles."""

from __future__ import annotations

APP_TITLE = "Christoffel's Menu"
APP_SUB_TITLE = "Starters / Mains / Desserts"

CURRENCY_PREFIX = "R"
EMPTY_DESCRIPTION_PLACEHOLDER = "No description"

# Keyed by Course value.
COURSE_PLURAL_LABELS: dict[str, str] = {
    "Starter": "Starters",
    "Main": "Mains",
    "Dessert": "Desserts",
}

COURSE_BADGE_STYLES: dict[str, str] = {
    "Starter": "bold #0b1f0f on #5fbf72",
    "Main": "bold #ffffff on #b23a48",
    "Dessert": "bold #ffffff on #2f6db5",
}

# Keyed by ValidationReason value.
VALIDATION_MESSAGES: dict[str, str] = {
    "missing_name": "Please enter a dish name.",
    "missing_price": "Please enter a price.",
    "invalid_price": "Price must be a valid non-negative number.",
    "invalid_course": "Please choose Starter, Main or Dessert.",
}
VALIDATION_TITLE = "Validation"

REMOVE_CONFIRM_TITLE = "Remove item"
REMOVE_CONFIRM_MESSAGE = "Are you sure you want to remove this item?"
REMOVE_CONFIRM_LABEL = "Remove"
CLEAR_CONFIRM_TITLE = "Clear form"
CLEAR_CONFIRM_MESSAGE = "Clear all fields?"
CLEAR_CONFIRM_LABEL = "Clear"

FLASH_MESSAGE = "Menu updated"
EMPTY_MENU_MESSAGE = "No menu items yet. Press F2 to add some."
EMPTY_FILTER_MESSAGE = "No items in this category."
