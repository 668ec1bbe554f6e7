"""BDD tests for stock level protection."""

from pytest_bdd import scenarios

scenarios("features/stock_levels.feature")
