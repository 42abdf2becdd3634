import json
import sys

import pytest

from clinic_recruit_ai.schemas.extraction_schema import COMPETITOR_SCHEMA, POSITION_SCHEMA
from clinic_recruit_ai.services.response_parser import decode_model_json, extract_json_text, parse_model_reply
from clinic_recruit_ai.utils.errors import ErrorKind, PipelineError

POSITION_REPLY = {
    "title": "歯科衛生士",
    "employmentType": "FULL_TIME",
    "salaryMin": 250000,
    "salaryMax": 380000,
    "hourlyRateMin": None,
    "hourlyRateMax": None,
    "description": "歯科衛生士業務全般",
    "requirements": "歯科衛生士免許",
    "benefits": "社会保険完備",
}


def test_fenced_reply_parses_like_bare_json() -> None:
    bare = json.dumps(POSITION_REPLY, ensure_ascii=False)
    fenced = f"```json\n{bare}\n```"

    assert parse_model_reply(fenced, POSITION_SCHEMA) == parse_model_reply(bare, POSITION_SCHEMA)


def test_fence_without_language_tag() -> None:
    reply = '```\n{"title": "看護師"}\n```'

    assert extract_json_text(reply) == '{"title": "看護師"}'
    assert parse_model_reply(reply, POSITION_SCHEMA).title == "看護師"


def test_prose_around_fenced_block_is_ignored() -> None:
    reply = '抽出結果は以下の通りです。\n```json\n{"title": "医療事務"}\n```\n以上です。'

    assert parse_model_reply(reply, POSITION_SCHEMA).title == "医療事務"


def test_prose_around_unfenced_object_is_tolerated() -> None:
    reply = '結果: {"title": "歯科助手", "salaryMin": 220000} 以上'

    record = parse_model_reply(reply, POSITION_SCHEMA)

    assert record.title == "歯科助手"
    assert record.salary_min == 220000


def test_not_json_is_unparsable() -> None:
    with pytest.raises(PipelineError) as exc:
        parse_model_reply("not json at all", POSITION_SCHEMA)

    assert exc.value.kind is ErrorKind.UNPARSABLE_RESPONSE
    assert exc.value.http_status == 500
    assert exc.value.retriable
    assert exc.value.to_body()["error"]


def test_broken_json_is_unparsable() -> None:
    with pytest.raises(PipelineError) as exc:
        decode_model_json('```json\n{"title": "看護師",\n```')

    assert exc.value.kind is ErrorKind.UNPARSABLE_RESPONSE


HUGE_INTEGER_REPLY = '{"salaryMin": 1' + "0" * 5000 + "}"
DEEPLY_NESTED_REPLY = "[" * 100000 + "]" * 100000

requires_int_digit_limit = pytest.mark.skipif(
    not hasattr(sys, "get_int_max_str_digits"), reason="interpreter has no integer string length limit"
)


@pytest.mark.parametrize(
    "reply",
    [
        pytest.param(HUGE_INTEGER_REPLY, marks=requires_int_digit_limit, id="huge-integer"),
        pytest.param(DEEPLY_NESTED_REPLY, id="deep-nesting"),
    ],
)
def test_replies_that_break_the_json_decoder_are_unparsable(reply: str) -> None:
    with pytest.raises(PipelineError) as exc:
        parse_model_reply(reply, POSITION_SCHEMA)

    assert exc.value.kind is ErrorKind.UNPARSABLE_RESPONSE
    assert exc.value.http_status == 500


@pytest.mark.parametrize("reply", ['"just a string"', "42", "null", '["a", "b"]'])
def test_non_object_top_level_is_unparsable_for_position(reply: str) -> None:
    with pytest.raises(PipelineError) as exc:
        parse_model_reply(reply, POSITION_SCHEMA)

    assert exc.value.kind is ErrorKind.UNPARSABLE_RESPONSE


def test_missing_fields_are_filled_with_null() -> None:
    record = parse_model_reply('{"title": "看護師"}', POSITION_SCHEMA)

    assert record.to_wire() == {
        "title": "看護師",
        "employmentType": None,
        "salaryMin": None,
        "salaryMax": None,
        "hourlyRateMin": None,
        "hourlyRateMax": None,
        "description": None,
        "requirements": None,
        "benefits": None,
    }


def test_competitor_bare_array_becomes_conditions() -> None:
    reply = '[{"jobTitle": "歯科衛生士(常勤)", "salaryMin": 280000}, "noise"]'

    record = parse_model_reply(reply, COMPETITOR_SCHEMA)

    assert record.clinic_name is None
    assert len(record.conditions) == 1
    assert record.conditions[0].job_title == "歯科衛生士(常勤)"
    assert record.conditions[0].salary_min == 280000


def test_competitor_reply_keeps_separate_entries() -> None:
    reply = json.dumps(
        {
            "clinicName": "さくら歯科クリニック",
            "address": "東京都渋谷区",
            "website": None,
            "conditions": [
                {"jobTitle": "歯科衛生士(常勤)", "salaryMin": 280000, "salaryMax": 380000},
                {"jobTitle": "歯科衛生士(パート)", "hourlyRateMin": 1600, "hourlyRateMax": 1800},
            ],
        },
        ensure_ascii=False,
    )

    wire = parse_model_reply(reply, COMPETITOR_SCHEMA).to_wire()

    assert wire["clinicName"] == "さくら歯科クリニック"
    assert [c["jobTitle"] for c in wire["conditions"]] == ["歯科衛生士(常勤)", "歯科衛生士(パート)"]
    assert wire["conditions"][1]["hourlyRateMax"] == 1800
    assert set(wire["conditions"][0]) == {
        "jobTitle",
        "salaryMin",
        "salaryMax",
        "hourlyRateMin",
        "hourlyRateMax",
        "benefits",
        "workingHours",
        "holidays",
        "source",
    }
