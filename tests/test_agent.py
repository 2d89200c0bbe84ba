import asyncio
from types import SimpleNamespace

import google.generativeai as genai
import pytest

from medical_agent.agent import AskHandler, build_model, build_tool_declarations
from medical_agent.errors import ClientInputError, UpstreamError
from medical_agent.tools import TOOLS, prescribe

from .fakes import FakeModel, call_part, model_reply, text_part


def ask(handler, question):
    return asyncio.run(handler.handle(question))


def test_tool_call_returns_prescription():
    model = FakeModel(model_reply(call_part("MedicinePrescribeTool", symptoms="fever")))
    result = ask(AskHandler(model=model), "I have a fever")

    assert result.type == "prescription"
    assert result.response == prescribe("fever")
    assert model.prompts == ["I have a fever"]


def test_plain_text_returns_general():
    model = FakeModel(model_reply(text_part("Hello! How can I help?")))
    result = ask(AskHandler(model=model), "hi")

    assert result.type == "general"
    assert result.response == "Hello! How can I help?"


def test_only_first_tool_call_is_dispatched():
    model = FakeModel(model_reply(
        call_part("MedicinePrescribeTool", symptoms="headache"),
        call_part("MedicinePrescribeTool", symptoms="fever"),
    ))
    result = ask(AskHandler(model=model), "headache and fever")

    assert result.response == prescribe("headache")
    assert "Paracetamol" not in result.response


def test_tool_call_wins_over_text_part():
    model = FakeModel(model_reply(
        text_part("Let me check that."),
        call_part("MedicinePrescribeTool", symptoms="cough"),
    ))
    result = ask(AskHandler(model=model), "I keep coughing")

    assert result.type == "prescription"
    assert result.response == prescribe("cough")


def test_unknown_symptom_from_model_is_still_prescription_type():
    model = FakeModel(model_reply(call_part("MedicinePrescribeTool", symptoms="broken arm")))
    result = ask(AskHandler(model=model), "my arm is broken")

    assert result.type == "prescription"
    assert "consult a doctor" in result.response


def test_missing_question_is_client_error():
    model = FakeModel(model_reply(text_part("unused")))
    for question in (None, ""):
        with pytest.raises(ClientInputError, match="Missing 'question' field"):
            ask(AskHandler(model=model), question)
    assert model.prompts == []


def test_model_failure_becomes_upstream_error():
    model = FakeModel(error=RuntimeError("quota exceeded"))
    with pytest.raises(UpstreamError, match="quota exceeded"):
        ask(AskHandler(model=model), "I have a fever")


def test_unknown_tool_is_upstream_error():
    model = FakeModel(model_reply(call_part("WeatherTool", city="Paris")))
    with pytest.raises(UpstreamError, match="unknown tool: WeatherTool"):
        ask(AskHandler(model=model), "weather?")


@pytest.mark.parametrize("reply", [
    SimpleNamespace(candidates=[]),
    model_reply(),
    model_reply(text_part("")),
])
def test_malformed_reply_is_upstream_error(reply):
    with pytest.raises(UpstreamError):
        ask(AskHandler(model=FakeModel(reply)), "hello")


def test_missing_api_key_is_upstream_error():
    with pytest.raises(UpstreamError, match="GEMINI_API_KEY"):
        build_model(TOOLS)


def test_tool_declarations_describe_symptoms_parameter():
    tool = build_tool_declarations(TOOLS)
    [declaration] = tool.function_declarations

    assert declaration.name == "MedicinePrescribeTool"
    assert declaration.parameters.type_ == genai.protos.Type.OBJECT
    assert list(declaration.parameters.required) == ["symptoms"]
    assert declaration.parameters.properties["symptoms"].type_ == genai.protos.Type.STRING


def proto_reply(*parts):
    return genai.protos.GenerateContentResponse(
        candidates=[genai.protos.Candidate(content=genai.protos.Content(parts=list(parts)))]
    )


def test_real_text_part_is_not_mistaken_for_tool_call():
    part = genai.protos.Part(text="Stay hydrated.")
    assert part.function_call.name == ""

    result = ask(AskHandler(model=FakeModel(proto_reply(part))), "tips?")

    assert result.type == "general"
    assert result.response == "Stay hydrated."


def test_real_function_call_part_is_dispatched():
    reply = proto_reply(
        genai.protos.Part(text="Checking."),
        genai.protos.Part(function_call=genai.protos.FunctionCall(
            name="MedicinePrescribeTool", args={"symptoms": "fever"},
        )),
    )
    result = ask(AskHandler(model=FakeModel(reply)), "I have a fever")

    assert result.type == "prescription"
    assert result.response == prescribe("fever")
