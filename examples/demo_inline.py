#!/usr/bin/env python3
"""Demonstration of fragment inlining and relay source grouping.

This script shows how to:
1. Inline the fragments of a relay-style query
2. Split a document into named definitions
3. Group the definitions into per-component source files

Note: This demo doesn't run the relay compiler.
"""

from gql_inline.core import group_definitions, inline, split_definitions

OPERATIONS = """
query NavigationQuery {
  current_user {
    id
    permissions
    account {
      id
      account_type
    }
    ...PermissionsProvider_user
  }
}

fragment PermissionsProvider_user on users {
  id
  email
  account {
    id
    timesheets_protected
  }
  permissions
}
"""


def main():
    print("=== Fragment inlining demo ===\n")

    print("1. Inlined query:")
    print(inline(OPERATIONS))

    print("\n2. Definitions found:")
    definitions = split_definitions(OPERATIONS)
    for definition in definitions:
        print(f"   - {definition.kind.value} {definition.name}")

    print("\n3. Source files for the relay compiler:")
    for merged in group_definitions(definitions):
        print(f"\n--- {merged.filename} ---")
        print(merged.content)


if __name__ == "__main__":
    main()
