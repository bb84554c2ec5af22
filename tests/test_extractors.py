"""
Tests for the pattern extractors.

Tests cover:
1. ${NAME} and ${NAME:default} interpolation in config text
2. Literal-string lookup calls in JVM and Python source
3. Malformed or non-matching input never raising
"""

import pytest

from env_validator.core.scanner import (
    EXTRACTORS,
    Dialect,
    VariableReference,
    extract_lookup_refs,
    extract_references,
    extract_template_refs,
)


class TestTemplateExtractor:
    """Tests for ${VAR} / ${VAR:default} extraction."""

    @pytest.mark.parametrize("name", ["A", "DATABASE_URL", "API_KEY_2", "_X", "123"])
    def test_plain_reference_has_no_default(self, name):
        """${NAME} yields NAME without a default."""
        refs = extract_template_refs(f"url: ${{{name}}}")
        assert refs == [VariableReference(name=name, has_default=False)]

    @pytest.mark.parametrize("default", ["localhost", "jdbc:postgresql://db:5432/app", "a b c", ""])
    def test_default_clause_sets_has_default(self, default):
        """Any default clause, including an empty one, marks the reference defaulted."""
        refs = extract_template_refs(f"url: ${{DATABASE_URL:{default}}}")
        assert refs == [VariableReference(name="DATABASE_URL", has_default=True)]

    def test_multiple_references_in_order(self):
        """References are returned in order of appearance, duplicates included."""
        text = "a: ${FIRST}\nb: ${SECOND:x}\nc: ${FIRST}\n"
        refs = extract_template_refs(text)
        assert [r.name for r in refs] == ["FIRST", "SECOND", "FIRST"]
        assert [r.has_default for r in refs] == [False, True, False]

    def test_two_references_on_one_line(self):
        """Adjacent interpolations are matched separately."""
        refs = extract_template_refs("${HOST:localhost}:${PORT}")
        assert refs == [
            VariableReference("HOST", True),
            VariableReference("PORT", False),
        ]

    def test_first_closing_brace_terminates_default(self):
        """Nested braces are unsupported; the first } ends the default."""
        refs = extract_template_refs("x: ${OUTER:{inner}}")
        assert refs == [VariableReference("OUTER", True)]

    def test_unterminated_interpolation_is_ignored(self):
        """An unterminated ${ yields no match."""
        assert extract_template_refs("url: ${DATABASE_URL") == []
        assert extract_template_refs("url: ${DATABASE_URL:default") == []

    def test_lowercase_and_invalid_names_are_ignored(self):
        """Only [A-Z0-9_]+ names are recognized."""
        assert extract_template_refs("${database.url} ${my-var} ${} ${Mixed}") == []

    def test_properties_syntax(self):
        """Properties files use the same interpolation syntax."""
        text = "spring.datasource.url=${DB_URL}\nserver.port=${PORT:8080}\n"
        refs = extract_template_refs(text)
        assert refs == [VariableReference("DB_URL", False), VariableReference("PORT", True)]


class TestLookupExtractor:
    """Tests for source-code lookup call extraction."""

    @pytest.mark.parametrize("call", [
        'System.getenv("API_KEY")',
        "System.getenv('API_KEY')",
        'System.getenv( "API_KEY" )',
        'java.lang.System.getenv("API_KEY")',
        'getenv("API_KEY")',
        'os.getenv("API_KEY")',
        'os.getenv("API_KEY", "fallback")',
        'os.environ.get("API_KEY")',
        "os.environ['API_KEY']",
    ])
    def test_literal_lookup_is_detected(self, call):
        """Literal-string lookups in either quoting style are detected."""
        refs = extract_lookup_refs(f"val key = {call}")
        assert refs == [VariableReference("API_KEY", False)]

    def test_computed_names_are_not_detected(self):
        """Indirect or computed names are out of reach."""
        text = 'System.getenv(name)\nSystem.getenv("PREFIX_" + suffix)\nos.getenv(key)'
        assert extract_lookup_refs(text) == []

    def test_lowercase_names_are_not_detected(self):
        """Names must match [A-Z0-9_]+."""
        assert extract_lookup_refs('System.getenv("path")') == []

    def test_other_methods_named_like_getenv_are_ignored(self):
        """Identifiers merely ending in getenv do not count."""
        assert extract_lookup_refs('mygetenv("API_KEY")') == []

    def test_qualified_system_lookup(self):
        """A fully qualified java.lang.System lookup is detected once."""
        refs = extract_lookup_refs('String u = java.lang.System.getenv("DB_URL");')
        assert [r.name for r in refs] == ["DB_URL"]

    def test_lookup_on_other_receivers_is_ignored(self):
        """Only System or an unqualified getenv count in JVM code."""
        assert extract_lookup_refs('props.getenv("DB_URL")') == []

    def test_order_of_appearance_across_patterns(self):
        """Matches from different call shapes keep source order."""
        text = 'a = os.environ["B_VAR"]\nb = os.getenv("A_VAR")\nc = os.environ.get("C_VAR")'
        assert [r.name for r in extract_lookup_refs(text)] == ["B_VAR", "A_VAR", "C_VAR"]

    def test_code_references_never_carry_defaults(self):
        """Fallback arguments in code do not make a reference defaulted."""
        refs = extract_lookup_refs('os.getenv("TIMEOUT", "30")')
        assert refs[0].has_default is False


class TestDialectTable:
    """Tests for dialect dispatch."""

    def test_every_dialect_has_an_extractor(self):
        """Each dialect maps to an extractor."""
        assert set(EXTRACTORS) == set(Dialect)

    def test_dispatch_uses_the_dialect(self):
        """The same text is read differently by each dialect."""
        text = 'url: ${DB_URL}\nkey = System.getenv("API_KEY")'
        assert [r.name for r in extract_references(text, Dialect.CONFIG)] == ["DB_URL"]
        assert [r.name for r in extract_references(text, Dialect.CODE)] == ["API_KEY"]

    @pytest.mark.parametrize("text", ["", "${", "}}}", "\x00\xff", "${A:" * 100, "getenv(" * 50])
    def test_extractors_are_total(self, text):
        """No input makes an extractor fail."""
        for dialect in Dialect:
            assert isinstance(extract_references(text, dialect), list)
