"""Tests for prompt encoding and generation parameters."""

import pytest

from hf_chat.prompt import (
    DEFAULT_MAX_NEW_TOKENS,
    DEFAULT_TEMPERATURE,
    DEFAULT_TOP_P,
    MAX_NEW_TOKENS_LIMIT,
    build_parameters,
    encode_prompt,
)
from hf_chat.types import (
    AssistantTurn,
    FilePart,
    GenerationRequest,
    OtherPart,
    SystemTurn,
    TextPart,
    ToolCallPart,
    ToolResultPart,
    ToolTurn,
    UserTurn,
)


def _user(text):
    return UserTurn(content=[TextPart(text=text)])


class TestEncodePrompt:
    """Tests for encode_prompt."""

    def test_single_user_turn(self):
        assert encode_prompt([_user("Hi")]) == "Human: Hi\nAssistant:"

    def test_system_then_user(self):
        turns = [SystemTurn(content="Be terse."), _user("Hi")]
        assert encode_prompt(turns) == "System: Be terse.\nHuman: Hi\nAssistant:"

    def test_preserves_turn_order(self):
        turns = [
            _user("first"),
            AssistantTurn(content=[TextPart(text="second")]),
            _user("third"),
        ]
        assert encode_prompt(turns) == (
            "Human: first\nAssistant: second\nHuman: third\nAssistant:"
        )

    def test_multiple_text_parts_joined_with_space(self):
        turn = UserTurn(content=[TextPart(text="Hello"), TextPart(text="there")])
        assert encode_prompt([turn]) == "Human: Hello there\nAssistant:"

    def test_file_part_renders_placeholder(self):
        turn = UserTurn(content=[TextPart(text="Look:"), FilePart(media_type="image/png")])
        assert encode_prompt([turn]) == "Human: Look: [File]\nAssistant:"

    def test_assistant_tool_call_renders_placeholder(self):
        turn = AssistantTurn(
            content=[ToolCallPart(tool_call_id="c1", tool_name="search", input={"q": "x"})]
        )
        assert encode_prompt([turn]) == "Assistant: [File]\nAssistant:"

    def test_unknown_part_type_never_fails(self):
        turn = UserTurn(content=[OtherPart(type="image", image="aGVsbG8=")])
        assert encode_prompt([turn]) == "Human: [File]\nAssistant:"

    def test_unknown_part_from_payload(self):
        request = GenerationRequest.model_validate(
            {
                "prompt": [
                    {"role": "user", "content": [{"type": "audio", "url": "https://x/a.wav"}]}
                ]
            }
        )
        assert encode_prompt(request.prompt) == "Human: [File]\nAssistant:"

    def test_tool_result_renders_json(self):
        turn = ToolTurn(
            content=[
                ToolResultPart(
                    tool_call_id="c1",
                    tool_name="weather",
                    output={"city": "Paris", "temp": 21},
                )
            ]
        )
        assert encode_prompt([turn]) == 'Tool: {"city":"Paris","temp":21}\nAssistant:'

    def test_tool_result_string_output(self):
        turn = ToolTurn(content=[ToolResultPart(output="done")])
        assert encode_prompt([turn]) == 'Tool: "done"\nAssistant:'

    def test_tool_turn_other_part_placeholder(self):
        turn = ToolTurn(content=[FilePart(), ToolResultPart(output=[1, 2])])
        assert encode_prompt([turn]) == "Tool: [Tool Result] [1,2]\nAssistant:"

    def test_empty_turns_keep_their_label(self):
        turns = [SystemTurn(content=""), UserTurn(content=[]), _user("Hi")]
        assert encode_prompt(turns) == "System: \nHuman: \nHuman: Hi\nAssistant:"

    def test_empty_system_turn_before_user(self):
        turns = [SystemTurn(content=""), _user("Hi")]
        assert encode_prompt(turns) == "System: \nHuman: Hi\nAssistant:"

    def test_unrecognized_turn_is_dropped(self):
        turns = [_user("Hi"), object(), AssistantTurn(content=[TextPart(text="Hello")])]
        assert encode_prompt(turns) == "Human: Hi\nAssistant: Hello\nAssistant:"

    def test_empty_conversation(self):
        assert encode_prompt([]) == "\nAssistant:"

    def test_one_line_per_turn(self):
        turns = [SystemTurn(content="sys"), _user("a"), AssistantTurn(content=[TextPart(text="b")])]
        lines = encode_prompt(turns).split("\n")
        assert lines == ["System: sys", "Human: a", "Assistant: b", "Assistant:"]

    def test_accepts_camel_case_payload(self):
        request = GenerationRequest.model_validate(
            {
                "prompt": [
                    {"role": "system", "content": "Be terse."},
                    {
                        "role": "tool",
                        "content": [
                            {
                                "type": "tool-result",
                                "toolCallId": "c1",
                                "toolName": "calc",
                                "output": 42,
                            }
                        ],
                    },
                ],
                "maxOutputTokens": 20,
            }
        )
        assert encode_prompt(request.prompt) == "System: Be terse.\nTool: 42\nAssistant:"
        assert request.max_output_tokens == 20


class TestBuildParameters:
    """Tests for build_parameters defaults and clamping."""

    def test_defaults(self):
        params = build_parameters(GenerationRequest(prompt=[_user("Hi")]))
        assert params.max_new_tokens == DEFAULT_MAX_NEW_TOKENS == 150
        assert params.temperature == DEFAULT_TEMPERATURE == 0.7
        assert params.top_p == DEFAULT_TOP_P == 0.95
        assert params.return_full_text is False
        assert params.do_sample is True

    def test_requested_values_kept(self):
        request = GenerationRequest(
            prompt=[_user("Hi")], max_output_tokens=64, temperature=0.2, top_p=0.5
        )
        params = build_parameters(request)
        assert params.max_new_tokens == 64
        assert params.temperature == 0.2
        assert params.top_p == 0.5

    def test_max_new_tokens_clamped(self):
        request = GenerationRequest(prompt=[_user("Hi")], max_output_tokens=10000)
        assert build_parameters(request).max_new_tokens == MAX_NEW_TOKENS_LIMIT == 512

    def test_max_new_tokens_at_limit(self):
        request = GenerationRequest(prompt=[_user("Hi")], max_output_tokens=512)
        assert build_parameters(request).max_new_tokens == 512

    def test_zero_temperature_kept(self):
        request = GenerationRequest(prompt=[_user("Hi")], temperature=0.0)
        assert build_parameters(request).temperature == 0.0

    def test_wire_format(self):
        params = build_parameters(GenerationRequest(prompt=[_user("Hi")]))
        assert params.model_dump() == {
            "max_new_tokens": 150,
            "temperature": 0.7,
            "top_p": 0.95,
            "return_full_text": False,
            "do_sample": True,
        }

    def test_zero_max_tokens_uses_default(self):
        request = GenerationRequest(prompt=[_user("Hi")], max_output_tokens=0)
        assert build_parameters(request).max_new_tokens == DEFAULT_MAX_NEW_TOKENS

    def test_zero_max_tokens_from_payload(self):
        request = GenerationRequest.model_validate(
            {
                "prompt": [{"role": "user", "content": [{"type": "text", "text": "Hi"}]}],
                "maxOutputTokens": 0,
            }
        )
        assert build_parameters(request).max_new_tokens == 150

    def test_rejects_negative_max_tokens(self):
        from pydantic import ValidationError

        with pytest.raises(ValidationError):
            GenerationRequest(prompt=[_user("Hi")], max_output_tokens=-5)
