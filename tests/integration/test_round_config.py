"""Integration tests for round configuration validation."""
import pytest
import json
import jsonschema

from holdem_showdown.config.loader import ROUNDS_DIR, SCHEMA_PATH, RoundRules, available_rules
from holdem_showdown.core.deck import DECK_SIZE


@pytest.fixture
def schema():
    """Load the JSON schema for round configurations."""
    with open(SCHEMA_PATH) as f:
        return json.load(f)


def test_schema_is_valid(schema):
    jsonschema.Draft7Validator.check_schema(schema)


def test_all_round_configs(schema):
    """Test that all bundled round configurations are valid."""
    config_files = list(ROUNDS_DIR.glob("*.json"))
    assert len(config_files) > 0, "No round configuration files found"

    for config_file in config_files:
        with open(config_file) as f:
            config = json.load(f)

        try:
            jsonschema.validate(instance=config, schema=schema)
        except jsonschema.exceptions.ValidationError as e:
            pytest.fail(f"Schema validation failed for {config_file.name}: {e}")

        try:
            rules = RoundRules.from_file(config_file)
        except ValueError as e:
            pytest.fail(f"RoundRules validation failed for {config_file.name}: {e}")

        assert rules.cards_needed(rules.max_players) <= DECK_SIZE


@pytest.mark.parametrize("name", sorted(available_rules()))
def test_bundled_rules_round_trip(name):
    rules = RoundRules.from_file(available_rules()[name])
    assert RoundRules.from_json(json.dumps(rules.to_json())) == rules
