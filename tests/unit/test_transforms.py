"""
Unit tests for field transformers and record (de)serialization.
"""

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from dialogflowcx_rest.utils.transforms import (
    deserialize,
    format_duration,
    format_timestamp,
    parse_duration,
    serialize,
)
from dialogflowcx_rest.schemas.agents import Agent, ExportAgentResponse
from dialogflowcx_rest.schemas.common import Operation
from dialogflowcx_rest.schemas.settings import AdvancedSettings, DtmfSettings, SpeechSettings
from dialogflowcx_rest.schemas.environments import Environment, WebhookConfig
from dialogflowcx_rest.schemas import testcases
from dialogflowcx_rest.schemas.experiments import Experiment, RolloutConfig, RolloutState, RolloutStep
from dialogflowcx_rest.schemas.sessions import AudioInput, DetectIntentResponse
from dialogflowcx_rest.schemas.webhooks import GenericWebService, Webhook


class TestBytesFields:
    """Unit tests for base64 byte fields."""

    def test_audio_input_serialize(self):
        """Test that raw audio is sent as base64 text."""
        assert serialize(AudioInput(audio=bytes([1, 2, 3]))) == {"audio": "AQID"}

    def test_audio_input_deserialize(self):
        """Test that base64 text is decoded back into bytes."""
        record = deserialize(AudioInput, {"audio": "AQID"})

        assert record.audio == bytes([1, 2, 3])

    def test_list_order_preserved(self):
        """Test that list elements are transformed in order."""
        service = GenericWebService(allowed_ca_certs=[b"a", b"b", b"c"])

        assert serialize(service) == {"allowedCaCerts": ["YQ==", "Yg==", "Yw=="]}
        assert deserialize(GenericWebService, serialize(service)).allowed_ca_certs == [b"a", b"b", b"c"]

    def test_nested_records(self):
        """Test recursion through nested records and lists."""
        environment = Environment(
            display_name="prod",
            webhook_config=WebhookConfig(
                webhook_overrides=[
                    Webhook(generic_web_service=GenericWebService(allowed_ca_certs=[b"\x00\x01"]))
                ]
            ),
        )

        data = serialize(environment)
        override = data["webhookConfig"]["webhookOverrides"][0]
        assert override["genericWebService"]["allowedCaCerts"] == ["AAE="]

        restored = deserialize(Environment, data)
        certs = restored.webhook_config.webhook_overrides[0].generic_web_service.allowed_ca_certs
        assert certs == [b"\x00\x01"]

    def test_malformed_base64_raises(self):
        """Test that bad wire data surfaces as a validation error."""
        with pytest.raises(ValidationError):
            deserialize(DetectIntentResponse, {"outputAudio": "not base64!"})


class TestTimestampFields:
    """Unit tests for RFC 3339 timestamp fields."""

    def test_format_whole_seconds(self):
        """Test formatting without a fraction."""
        value = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)

        assert serialize(Environment(update_time=value)) == {"updateTime": "2024-01-02T03:04:05Z"}

    def test_format_fraction_digits(self):
        """Test millisecond and microsecond precision."""
        assert format_timestamp(datetime(2024, 1, 2, 3, 4, 5, 123000, tzinfo=timezone.utc)) == (
            "2024-01-02T03:04:05.123Z"
        )
        assert format_timestamp(datetime(2024, 1, 2, 3, 4, 5, 123456, tzinfo=timezone.utc)) == (
            "2024-01-02T03:04:05.123456Z"
        )

    def test_format_converts_to_utc(self):
        """Test that offsets are normalized to Z."""
        value = datetime(2024, 1, 2, 5, 4, 5, tzinfo=timezone(timedelta(hours=2)))

        assert format_timestamp(value) == "2024-01-02T03:04:05Z"

    def test_format_naive_as_utc(self):
        """Test naive datetimes."""
        assert format_timestamp(datetime(2024, 1, 2, 3, 4, 5)) == "2024-01-02T03:04:05Z"

    def test_parse_nanoseconds(self):
        """Test that digits past microseconds are dropped."""
        record = deserialize(Environment, {"updateTime": "2024-01-02T03:04:05.123456789Z"})

        assert record.update_time == datetime(2024, 1, 2, 3, 4, 5, 123456, tzinfo=timezone.utc)

    def test_round_trip(self):
        """Test timestamp round trip through the wire shape."""
        data = {
            "createTime": "2024-05-06T07:08:09.250Z",
            "startTime": "2024-05-06T08:00:00Z",
        }

        assert serialize(deserialize(Experiment, data)) == data

    @pytest.mark.parametrize("text", ["0999-01-02T03:04:05Z", "0001-01-01T00:00:00Z", "9999-12-31T23:59:59.999999Z"])
    def test_round_trip_year_bounds(self, text):
        """Test that years below 1000 keep their four digits."""
        assert serialize(deserialize(Environment, {"updateTime": text})) == {"updateTime": text}


class TestDurationFields:
    """Unit tests for protobuf duration fields."""

    def test_format(self):
        """Test duration formatting."""
        assert format_duration(timedelta(seconds=5)) == "5s"
        assert format_duration(timedelta(seconds=3, milliseconds=500)) == "3.500s"
        assert format_duration(timedelta(microseconds=1)) == "0.000001s"
        assert format_duration(timedelta(seconds=-1, milliseconds=-500)) == "-1.500s"

    def test_parse(self):
        """Test duration parsing."""
        assert parse_duration("5s") == timedelta(seconds=5)
        assert parse_duration("3.5s") == timedelta(seconds=3, milliseconds=500)
        assert parse_duration("0.000000001s") == timedelta(0)
        assert parse_duration("-2s") == timedelta(seconds=-2)
        assert parse_duration(10) == timedelta(seconds=10)

    def test_parse_invalid(self):
        """Test that malformed durations are rejected."""
        with pytest.raises(ValueError):
            parse_duration("5 minutes")

    def test_webhook_timeout(self):
        """Test a duration field on a record."""
        webhook = Webhook(display_name="fulfillment", timeout=timedelta(seconds=10))

        assert serialize(webhook) == {"displayName": "fulfillment", "timeout": "10s"}
        assert deserialize(Webhook, {"timeout": "10s"}).timeout == timedelta(seconds=10)


class TestRecords:
    """Unit tests for generic record behavior."""

    def test_absent_fields_stay_absent(self):
        """Test that unset fields are not emitted."""
        assert serialize(Webhook()) == {}
        assert serialize(Agent(display_name="pets")) == {"displayName": "pets"}

    def test_snake_and_camel_names(self):
        """Test that both field spellings are accepted."""
        by_alias = deserialize(Agent, {"defaultLanguageCode": "en"})
        by_name = Agent(default_language_code="en")

        assert by_alias.default_language_code == by_name.default_language_code == "en"

    def test_unknown_fields_pass_through(self):
        """Test that fields not modelled here survive a round trip."""
        data = {"displayName": "pets", "futureSetting": {"enabled": True}}

        assert serialize(deserialize(Agent, data)) == data

    def test_operation_response_payload(self):
        """Test decoding the typed result of a finished operation."""
        operation = deserialize(
            Operation,
            {
                "name": "projects/p/locations/global/operations/123",
                "done": True,
                "response": {
                    "@type": "type.googleapis.com/google.cloud.dialogflow.cx.v3.ExportAgentResponse",
                    "agentContent": "AQID",
                },
            },
        )

        assert operation.done is True
        result = deserialize(ExportAgentResponse, operation.response)
        assert result.agent_content == bytes([1, 2, 3])

    def test_unknown_fields_keep_given_key(self):
        """Test that fields not modelled here are sent under the key they were given with."""
        assert serialize(Agent(display_name="pets", newSetting=1)) == {"displayName": "pets", "newSetting": 1}


UTC_TIME = datetime(2024, 3, 4, 5, 6, 7, 890000, tzinfo=timezone.utc)

POPULATED_RECORDS = [
    Experiment(
        name="projects/p/locations/global/agents/a/environments/e/experiments/x",
        state="RUNNING",
        rollout_config=RolloutConfig(
            rollout_steps=[
                RolloutStep(display_name="first", traffic_percent=10, min_duration=timedelta(hours=1)),
                RolloutStep(display_name="second", traffic_percent=50, min_duration=timedelta(seconds=1.5)),
            ]
        ),
        rollout_state=RolloutState(step="first", step_index=0, start_time=UTC_TIME),
        create_time=UTC_TIME,
        start_time=datetime(2024, 3, 4, 6, 0, 0, tzinfo=timezone.utc),
        last_update_time=datetime(2024, 3, 4, 6, 0, 0, 123456, tzinfo=timezone.utc),
        experiment_length=timedelta(days=7),
    ),
    Environment(
        display_name="prod",
        update_time=UTC_TIME,
        webhook_config=WebhookConfig(
            webhook_overrides=[
                Webhook(
                    display_name="override",
                    timeout=timedelta(seconds=8),
                    generic_web_service=GenericWebService(
                        uri="https://example.com/hook",
                        allowed_ca_certs=[b"\x30\x82\x01", b"\x00\xff"],
                    ),
                )
            ]
        ),
    ),
    DetectIntentResponse(response_id="r1", output_audio=bytes(range(16))),
    testcases.TestCaseResult(
        name="projects/p/locations/global/agents/a/testCases/t/results/r",
        test_result="PASSED",
        test_time=UTC_TIME,
    ),
    AdvancedSettings(
        speech_settings=SpeechSettings(
            endpointer_sensitivity=90, no_speech_timeout=timedelta(seconds=5)
        ),
        dtmf_settings=DtmfSettings(
            enabled=True,
            interdigit_timeout_duration=timedelta(milliseconds=2500),
            endpointing_timeout_duration=timedelta(seconds=3),
        ),
    ),
]


class TestInMemoryRoundTrip:
    """Records survive a trip through their wire shape."""

    @pytest.mark.parametrize("record", POPULATED_RECORDS, ids=lambda r: type(r).__name__)
    def test_deserialize_serialize(self, record):
        """Test that deserializing the serialized record gives an equal record."""
        assert deserialize(type(record), serialize(record)) == record
