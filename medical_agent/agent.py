import logging
from typing import Any, Dict, List, Optional

import google.generativeai as genai

from .config import get_api_key, get_model_name, get_temperature
from .errors import AgentError, ClientInputError, UpstreamError
from .prompts import SYSTEM_PROMPT
from .schemas import AskResponse, ToolCallIntent
from .tools import TOOLS

logger = logging.getLogger(__name__)

# Only the first function call in a model reply is dispatched; any further
# calls in the same reply are logged and dropped.
MAX_TOOL_CALLS_PER_TURN = 1

_SCHEMA_TYPES = {
    "object": genai.protos.Type.OBJECT,
    "string": genai.protos.Type.STRING,
    "number": genai.protos.Type.NUMBER,
    "integer": genai.protos.Type.INTEGER,
    "boolean": genai.protos.Type.BOOLEAN,
    "array": genai.protos.Type.ARRAY,
}


# -----------------------------
# TOOL DECLARATIONS
# -----------------------------
def _to_schema(schema: Dict[str, Any]) -> genai.protos.Schema:
    kwargs = {"type_": _SCHEMA_TYPES[schema["type"]]}
    if "description" in schema:
        kwargs["description"] = schema["description"]
    if "properties" in schema:
        kwargs["properties"] = {
            name: _to_schema(prop) for name, prop in schema["properties"].items()
        }
    if "required" in schema:
        kwargs["required"] = list(schema["required"])
    return genai.protos.Schema(**kwargs)


def build_tool_declarations(tools: Dict[str, Any]) -> genai.protos.Tool:
    """Describe the capability set as Gemini function declarations."""
    return genai.protos.Tool(
        function_declarations=[
            genai.protos.FunctionDeclaration(
                name=tool.name,
                description=tool.description,
                parameters=_to_schema(tool.parameters),
            )
            for tool in tools.values()
        ]
    )


def build_model(tools: Dict[str, Any]):
    api_key = get_api_key()
    if not api_key:
        raise UpstreamError("Missing GEMINI_API_KEY environment variable.")

    genai.configure(api_key=api_key)
    model_name = get_model_name()
    logger.info("Binding %d tool(s) to %s", len(tools), model_name)
    return genai.GenerativeModel(
        model_name,
        tools=[build_tool_declarations(tools)],
        system_instruction=SYSTEM_PROMPT,
        generation_config={"temperature": get_temperature()},
    )


# -----------------------------
# RESPONSE PARSING
# -----------------------------
def _content_parts(result) -> list:
    candidates = getattr(result, "candidates", None)
    if not candidates:
        raise UpstreamError("Model returned no candidates.")
    content = getattr(candidates[0], "content", None)
    parts = getattr(content, "parts", None) if content is not None else None
    return list(parts or [])


def tool_call_intents(parts) -> List[ToolCallIntent]:
    intents = []
    for part in parts:
        call = getattr(part, "function_call", None)
        if call is None or not getattr(call, "name", None):
            continue
        args = getattr(call, "args", None)
        intents.append(ToolCallIntent(tool_name=call.name, arguments=dict(args) if args else {}))
    return intents


def first_text(parts) -> Optional[str]:
    for part in parts:
        text = getattr(part, "text", None)
        if text:
            return text
    return None


# -----------------------------
# ASK HANDLER
# -----------------------------
class AskHandler:
    """Send a question to the model and run the tool it asks for, if any."""

    def __init__(self, model=None, tools: Optional[Dict[str, Any]] = None):
        self.tools = tools if tools is not None else TOOLS
        self._model = model

    @property
    def model(self):
        if self._model is None:
            self._model = build_model(self.tools)
        return self._model

    async def handle(self, question: Optional[str]) -> AskResponse:
        if not question:
            raise ClientInputError("Missing 'question' field")

        try:
            result = await self.model.generate_content_async(question)
        except AgentError:
            raise
        except Exception as e:
            raise UpstreamError(str(e)) from e

        parts = _content_parts(result)
        intents = tool_call_intents(parts)
        if intents:
            if len(intents) > MAX_TOOL_CALLS_PER_TURN:
                logger.info(
                    "Model requested %d tool calls, dispatching only the first",
                    len(intents),
                )
            return AskResponse(response=self.dispatch(intents[0]), type="prescription")

        text = first_text(parts)
        if text is None:
            raise UpstreamError("Model response contained neither a tool call nor text.")
        logger.debug("Model answered without a tool call")
        return AskResponse(response=text, type="general")

    def dispatch(self, intent: ToolCallIntent) -> str:
        tool = self.tools.get(intent.tool_name)
        if tool is None:
            raise UpstreamError(f"Model requested unknown tool: {intent.tool_name}")
        logger.info("Dispatching %s with %s", intent.tool_name, intent.arguments)
        return tool.invoke(intent.arguments)


_handler = None

def get_handler() -> AskHandler:
    global _handler
    if _handler is None:
        _handler = AskHandler()
    return _handler
