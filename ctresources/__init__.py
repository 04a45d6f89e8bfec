"""Drafts, update actions, validators and state migration for commerce platform resources."""

__version__ = "0.1.0"

__all__ = [
    "associate_role",
    "field_types",
    "plan_modifiers",
    "store",
    "tax_category",
    "tax_rate",
    "type_actions",
    "type_migrate",
    "utils",
    "validators",
]