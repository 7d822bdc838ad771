"""
Unit tests for the GraphQL input conversions
"""

import uuid

import pytest

from jydb.graphql.conversions import (
    animator_from_input,
    group_create_from_args,
    group_update_from_args,
    parse_id,
    participant_from_input,
    to_invalid_args,
)
from jydb.graphql.errors import ValidationError
from jydb.graphql.mutations.root import AnimatorInput, ParticipantInput


class TestChildConversions:
    def test_participant(self):
        record = participant_from_input(ParticipantInput(name="Ann", age=30))

        assert (record.name, record.age) == ("Ann", 30)

    def test_animator_defaults_to_empty_conversations(self):
        record = animator_from_input(AnimatorInput(name="Bo"))

        assert record.conversations == []

    def test_animator_rejects_null_entries(self):
        with pytest.raises(ValueError, match="must not be null"):
            animator_from_input(AnimatorInput(name="Bo", conversations=["a", None]))


class TestGroupCreate:
    def test_valid(self):
        data = group_create_from_args(
            "G1",
            [ParticipantInput(name="Ann", age=30)],
            [AnimatorInput(name="Bo", conversations=["hi"])],
            {},
        )

        assert data.name == "G1"
        assert data.participants[0].name == "Ann"
        assert data.animators[0].conversations == ["hi"]

    def test_no_upper_name_bound(self):
        data = group_create_from_args("G" * 1000, [], [AnimatorInput(name="B" * 1000)], {})

        assert len(data.name) == 1000

    def test_none_participants(self):
        data = group_create_from_args("G1", None, [], {})

        assert data.participants == []

    @pytest.mark.parametrize(
        "name, participants, animators, fragment",
        [
            ("", [], [], "name"),
            ("G", [], [], "name"),
            ("G1", [ParticipantInput(name="A", age=1)], [], "participants.0"),
            ("G1", [ParticipantInput(age=1)], [], "participants.0"),
            ("G1", [ParticipantInput(name="Ann")], [], "participants.0"),
            ("G1", [None], [], "participants.0"),
            ("G1", [], [AnimatorInput(name=None)], "animators.0"),
            ("G1", [], [AnimatorInput(name="Bo"), AnimatorInput(name="B")], "animators.1"),
        ],
    )
    def test_invalid(self, name, participants, animators, fragment):
        invalid_args = {"name": name}

        with pytest.raises(ValidationError) as exc_info:
            group_create_from_args(name, participants, animators, invalid_args)

        assert fragment in exc_info.value.message
        assert exc_info.value.extensions == {
            "code": "BAD_USER_INPUT",
            "invalidArgs": invalid_args,
        }


class TestGroupUpdate:
    def test_omitted_fields_stay_none(self):
        data = group_update_from_args("G2", None, None, {})

        assert data.name == "G2"
        assert data.participants is None
        assert data.animators is None
        assert data.updated_fields() == ["name"]

    def test_empty_list_is_a_replacement(self):
        data = group_update_from_args(None, [], None, {})

        assert data.participants == []
        assert data.updated_fields() == ["participants"]

    def test_short_name_rejected(self):
        with pytest.raises(ValidationError):
            group_update_from_args("G", None, None, {})


class TestHelpers:
    def test_parse_id(self):
        value = uuid.uuid4()

        assert parse_id(str(value)) == value
        assert parse_id("nonexistent-id") is None

    def test_invalid_args_are_plain_data(self):
        args = to_invalid_args(
            name="G1",
            participants=[ParticipantInput(name="Ann", age=30)],
            animators=None,
        )

        assert args == {"name": "G1", "participants": [{"name": "Ann", "age": 30}]}
