"""Shared fixtures for the test suite."""

import pytest


@pytest.fixture
def navigation_operations():
    """A relay-style query with a fragment spread on a nested field."""
    return """
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
