"""Tests for the commit type registry."""
import pytest

from commitguard.errors import ConfigError
from commitguard.models import CommitTypeSpec
from commitguard.registry import DEFAULT_COMMIT_TYPES, TypeRegistry, parse_type_spec

def test_default_registry():
    registry = TypeRegistry.default()
    assert registry.types == ["fix", "feat", "docs", "style", "refactor", "perf", "test", "chore"]
    for name in DEFAULT_COMMIT_TYPES:
        assert registry.required_fields(name) == ("description",)

def test_build_without_override_uses_defaults():
    assert TypeRegistry.build().types == list(DEFAULT_COMMIT_TYPES)

def test_parse_type_without_fields():
    """An empty right-hand side only requires the description."""
    registry = TypeRegistry.build("fix=")
    assert registry.types == ["fix"]
    assert registry.required_fields("fix") == ("description",)

def test_parse_type_with_fields():
    registry = TypeRegistry.build("fix=field1,field2")
    assert registry.required_fields("fix") == ("description", "field1", "field2")

def test_parse_multiple_types():
    registry = TypeRegistry.build("fix=field1,field2;feature=field3,field4")
    assert list(registry) == [
        CommitTypeSpec(name="fix", required=("description", "field1", "field2")),
        CommitTypeSpec(name="feature", required=("description", "field3", "field4")),
    ]

def test_listed_description_keeps_its_position():
    registry = TypeRegistry.build("wild=scope,description")
    assert registry.required_fields("wild") == ("scope", "description")

def test_override_replaces_defaults():
    registry = TypeRegistry.build("wild=scope")
    assert "feat" not in registry
    assert len(registry) == 1

def test_whitespace_trailing_separator_and_duplicate_fields():
    registry = TypeRegistry.build(" feat = scope , scope ,body ; docs= ;")
    assert registry.types == ["feat", "docs"]
    assert registry.required_fields("feat") == ("description", "scope", "body")

@pytest.mark.parametrize("spec, message", [
    ("feat", "expected 'type=field1,field2'"),
    ("feat=scope;fix", "expected 'type=field1,field2'"),
    ("=scope", "missing type name"),
    ("  =", "missing type name"),
    ("feat(x)=scope", "must not contain"),
    ("my type=", "must not contain"),
    ("feat=;feat=scope", "Duplicate commit type"),
    ("", "defines no commit types"),
    (";;", "defines no commit types"),
])
def test_malformed_spec_raises_config_error(spec, message):
    with pytest.raises(ConfigError) as exc_info:
        TypeRegistry.build(spec)
    assert message in str(exc_info.value)

def test_parse_type_spec_returns_result():
    result = parse_type_spec("feat=scope;fix=")
    assert result.ok
    assert result.error is None
    assert result.registry.types == ["feat", "fix"]

    failed = parse_type_spec("feat=scope;oops")
    assert not failed.ok
    assert failed.registry is None
    assert isinstance(failed.error, ConfigError)
    assert failed.error.entry == "oops"
    with pytest.raises(ConfigError):
        failed.unwrap()

def test_duplicates_are_case_insensitive_when_ignoring_case():
    assert parse_type_spec("feat=;FEAT=").ok
    assert not parse_type_spec("feat=;FEAT=", ignore_case=True).ok

def test_lookup_respects_case_policy():
    registry = TypeRegistry.build("Feat=scope")
    assert registry.lookup("Feat").name == "Feat"
    assert registry.lookup("feat") is None
    assert registry.lookup("FEAT", ignore_case=True).name == "Feat"
    assert registry.lookup("fix", ignore_case=True) is None

def test_to_spec_round_trip():
    registry = TypeRegistry.build("feat=scope,body;docs=")
    assert registry.to_spec() == "feat=description,scope,body;docs=description"
    assert list(TypeRegistry.build(registry.to_spec())) == list(registry)
