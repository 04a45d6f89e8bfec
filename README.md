# ctresources

`ctresources` turns declarative resource configuration into the drafts and update actions that a commerce platform API expects. Configuration is given as plain Python data: dicts, lists and strings. The package covers these resources:

- custom types and their field definitions
- stores
- tax categories and tax rates
- associate roles

It also provides the validators, plan modifiers and state migration that are used while planning changes.

The package has no runtime dependencies and needs Python 3.10 or later. The optional `test` extra installs pytest, which the test suite uses.

## What the package does not do

The package only builds data. It holds no API client and makes no network requests. It reads and writes no stored state. It has no command-line program. Sending drafts and update actions to the platform, retrying failed requests, and keeping track of resource versions are left to the caller.

## Custom types

`ctresources.field_types` models field types as dataclasses:

- `BooleanType`, `StringType`, `LocalizedStringType`, `NumberType`, `MoneyType`, `DateType`, `TimeType` and `DateTimeType`
- `EnumType` with `EnumValue` items
- `LocalizedEnumType` with `LocalizedEnumValue` items
- `ReferenceType`
- `SetType`

The module also models `FieldDefinition`, `TypeDraft` and the `TextInputHint` enum.

Use these functions to convert between configuration and models:

- `expand_field_type`, `expand_field_definition` and `expand_field_definitions` build models from configuration blocks. They raise `ValueError` for missing or unknown types.
- `flatten_field_type`, `flatten_field_definitions`, `flatten_enum_values` and `flatten_localized_enum_values` render the models back into configuration blocks.
- `validate_field_type_name` checks a type name. Nested sets are rejected.
- `type_draft` builds a `TypeDraft` from a whole type configuration.

`ctresources.type_actions` computes update actions. Each action is a frozen dataclass, such as `ChangeKey`, `AddFieldDefinition`, `ChangeLabel`, `AddEnumValue` or `ChangeFieldDefinitionOrder`.

- `type_update_actions(old, new)` compares two type configurations. It returns actions for:
  - a changed key, name or description
  - field changes
- `field_change_actions(old, new)` handles field changes. It returns actions for:
  - removed and added fields
  - changed labels and input hints
  - changed enum and localized enum values, including those inside sets
  - a field order that differs from the one the platform will have after the other actions
- `enum_value_actions` and `localized_enum_value_actions` do the same for the values of a single enum field.
- `validate_field_change(old, new)` raises `ValueError` when a field changes in a way the platform cannot apply. This covers:
  - a changed field type
  - a changed set element type
  - a changed `required` flag

  To make such a change, remove the field first and then define it again.

```python
from ctresources.type_actions import field_change_actions, validate_field_change

old_fields = [{"name": "colour", "label": {"en": "Colour"},
               "required": False, "input_hint": "SingleLine",
               "type": [{"name": "String"}]}]
new_fields = old_fields + [{"name": "size", "label": {"en": "Size"},
                            "required": False, "input_hint": "SingleLine",
                            "type": [{"name": "Number"}]}]

validate_field_change(old_fields, new_fields)
actions = field_change_actions(old_fields, new_fields)   # [AddFieldDefinition(...)]
```

`ctresources.type_migrate.migrate_type_state_v0_to_v1` upgrades a raw type state from schema version 0 in place. Version 0 stored enum values as a `values` mapping; the upgrade turns them into a `value` list of key/label blocks. `migrate_field_v0_to_v1` applies the same upgrade to a single field block.

## Stores

`ctresources.store` works with store configuration:

- `store_draft(config)` builds a `StoreDraft`.
- `store_update_actions(old, new)` returns actions that replace changed values:
  - the name (`SetStoreName`)
  - the languages (`SetLanguages`)
  - the countries (`SetCountries`)
  - the distribution channels (`SetDistributionChannels`)
  - the supply channels (`SetSupplyChannels`)

  It also adds and removes product selections with `AddProductSelection` and `RemoveProductSelection`.
- These helpers convert between configuration and API shapes: `channel_identifiers`, `expand_product_selections`, `expand_store_countries`, `flatten_store_channels`, `flatten_product_selections` and `flatten_countries`.

## Tax categories and tax rates

`ctresources.tax_category` provides:

- `tax_category_draft(config)`, which builds a draft with no rates.
- `tax_category_update_actions(old, new)`, which returns `ChangeTaxCategoryName`, `SetTaxCategoryKey` and `SetTaxCategoryDescription` actions.

`ctresources.tax_rate` provides:

- the `SubRate`, `TaxRateDraft`, `TaxRate` and `TaxCategory` models
- `validate_tax_rate_amount`, which raises `ValueError` for amounts outside 0..1
- `sub_rates_from_config` and `tax_rate_draft`, which build models from configuration
- `tax_rate_state`, which renders a rate as resource state
- lookup helpers:
  - `tax_rate_ids`
  - `get_tax_rate`
  - `find_tax_rate`, which searches several categories
  - `find_new_tax_rate`, which finds the rate that was added since a list of ids was taken

## Associate roles

`ctresources.associate_role.AssociateRole` holds the data of a role. `None` in any of its fields stands for a null value. `from_native` builds one from a `RemoteAssociateRole`.

- `draft()` returns an `AssociateRoleDraft`.
- `update_actions(plan)` returns an `AssociateRoleUpdate`. Its actions are `SetAssociateRoleName`, `ChangeBuyerAssignable` and `SetPermissions`. Permissions are always replaced as a whole.

## Validators and plan modifiers

`ctresources.validators` checks one attribute against others in a nested configuration. The validators are:

- `DependencyValidator(value, *expressions)`: when a string attribute equals `value`, the attributes the expressions point to must be set.
- `RequireValueValidator(value, *expressions)`: a list attribute may be non-empty only when the attributes the expressions point to equal `value`.

Call `validate(path, value, config)` on either one. It returns a list of `Diagnostic` objects.

Expressions are tuples of steps. A step is an attribute name, a list index, `PARENT`, `WILDCARD`, or `ROOT` as the first step. An expression that does not start with `ROOT` is relative to the attribute being validated. Use the value `UNKNOWN` for a value that is not yet known.

`ctresources.plan_modifiers` provides:

- `BoolDefault(default)`, which plans the default when no value is configured.
- `EmptyList()`, which plans an empty list in place of a null plan.

## Utilities

`ctresources.utils` provides small helpers:

- `validate_currency_code` checks ISO 4217 currency codes.
- `validate_localized_string_key` checks locale keys.
- `parse_time` parses RFC 3339 timestamps.
- `compare_date_string` compares two timestamps to the second.
- `diff_maps` reports the differences between two mappings.
- `create_lookup`, `remove_value`, `nil_if_empty` and `int_nil_if_empty` are smaller conversion helpers.