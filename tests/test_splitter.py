"""Tests for the definition splitter."""

import pytest

from gql_inline.core.errors import MalformedDefinitionError, UnmatchedBraceError
from gql_inline.core.splitter import DefinitionKind, RawDefinition, split_definitions


class TestSplitDefinitions:
    """Tests for split_definitions."""

    def test_query_and_fragment(self):
        assert split_definitions("query A{f} fragment B_x on T{g}") == [
            RawDefinition(DefinitionKind.QUERY, "A", "query A{f}"),
            RawDefinition(DefinitionKind.FRAGMENT, "B_x", "fragment B_x on T{g}"),
        ]

    def test_empty_input(self):
        assert split_definitions("") == []
        assert split_definitions("   \n\t") == []

    def test_content_is_exact_source(self):
        text = """
      query NavigationQuery {
        current_user {
          id
        }
      }
    """
        (definition,) = split_definitions(text)
        assert definition.name == "NavigationQuery"
        assert definition.content == (
            "query NavigationQuery {\n"
            "        current_user {\n"
            "          id\n"
            "        }\n"
            "      }"
        )

    def test_multiple_definitions_in_source_order(self):
        text = """
      query FirstQuery {
        field1
      }

      fragment FirstFragment_extra on MyType {
        field2
      }

      query SecondQuery {
        field3
      }
    """
        definitions = split_definitions(text)
        assert [(d.kind, d.name) for d in definitions] == [
            (DefinitionKind.QUERY, "FirstQuery"),
            (DefinitionKind.FRAGMENT, "FirstFragment_extra"),
            (DefinitionKind.QUERY, "SecondQuery"),
        ]

    def test_variables_before_body(self):
        (definition,) = split_definitions("query UserQuery($id: ID!) { user(id: $id) { id } }")
        assert definition.name == "UserQuery"
        assert definition.content.endswith("{ user(id: $id) { id } }")

    def test_nested_braces(self):
        (definition,) = split_definitions("query A { a { b { c } } d } trailing")
        assert definition.content == "query A { a { b { c } } d }"

    def test_ignores_non_definition_text(self):
        text = """
      // Some comment or random text
      This is not a definition.
      query ValidQuery {
        field
      }
    """
        definitions = split_definitions(text)
        assert [d.name for d in definitions] == ["ValidQuery"]

    def test_keyword_inside_other_text(self):
        (definition,) = split_definitions("const x = graphql`query A { b }`")
        assert definition.content == "query A { b }"

    def test_definition_without_body_is_skipped(self):
        assert split_definitions("query A { a } query B") == [
            RawDefinition(DefinitionKind.QUERY, "A", "query A { a }"),
        ]


class TestSplitErrors:
    """Tests for splitter failures."""

    def test_unterminated_body(self):
        with pytest.raises(UnmatchedBraceError) as exc_info:
            split_definitions("query A{f")
        assert exc_info.value.definition_name == "A"

    def test_unterminated_nested_body(self):
        text = """
      query IncompleteQuery {
        field1 {
    """
        with pytest.raises(UnmatchedBraceError, match="No matching closing brace found"):
            split_definitions(text)

    def test_missing_name(self):
        with pytest.raises(MalformedDefinitionError) as exc_info:
            split_definitions("query { a }")
        assert exc_info.value.position == 6

    def test_keyword_at_end_of_input(self):
        with pytest.raises(MalformedDefinitionError):
            split_definitions("query A { a } fragment")
