"""Tool registry for Proxmox MCP server.

This module holds every tool definition: its JSON input schema, side-effect
hints and handler. Arguments are validated against the schema before a
handler runs, and every outcome is wrapped in a ``CallToolResult`` so the MCP
host always receives a well-formed response.
"""

from dataclasses import dataclass
import keyword
import re
from typing import (
    Any,
    Awaitable,
    Callable,
    Dict,
    List,
    Optional,
    Tuple,
    Type,
    Union,
    get_args,
    get_origin,
)

from mcp.types import CallToolResult, Tool, ToolAnnotations
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
    ValidationError,
    create_model,
)

from .core_utils import LoggingUtility, error_result, success_result

ToolHandler = Callable[..., Awaitable[Any]]

_JSON_TYPES: Dict[str, Any] = {
    "string": StrictStr,
    "number": Union[StrictInt, StrictFloat],
    "integer": StrictInt,
    "boolean": StrictBool,
}


class ToolValidationError(ValueError):
    """Tool arguments do not match the declared input schema."""


class ToolRegistrationError(RuntimeError):
    """A tool could not be added to the registry."""


def _field_name(prop_name: str) -> str:
    """Turn a schema property name into a valid pydantic field name."""
    name = re.sub(r"\W", "_", prop_name)
    if not name or name[0].isdigit() or name[0] == "_":
        name = f"f{name}"
    if keyword.iskeyword(name) or name.startswith("model_") or hasattr(BaseModel, name):
        name = f"{name}_"
    return name


def _annotation_for(json_type: Union[str, List[str]]) -> Any:
    if isinstance(json_type, list):
        members: List[Any] = []
        for item in json_type:
            annotation = _annotation_for(item)
            # flatten nested unions such as "number"
            if get_origin(annotation) is Union:
                members.extend(get_args(annotation))
            else:
                members.append(annotation)
        return Union[tuple(members)]
    try:
        return _JSON_TYPES[json_type]
    except KeyError:
        raise ToolRegistrationError(f"Unsupported schema type: {json_type}")


def build_arguments_model(tool_name: str, schema: Dict[str, Any]) -> Type[BaseModel]:
    """Create a strict pydantic model mirroring a tool's JSON input schema."""
    required = set(schema.get("required", []))
    fields: Dict[str, Tuple[Any, Any]] = {}
    for prop_name, prop_schema in schema.get("properties", {}).items():
        annotation = _annotation_for(prop_schema.get("type", "string"))
        if prop_name in required:
            fields[_field_name(prop_name)] = (annotation, Field(..., alias=prop_name))
        else:
            fields[_field_name(prop_name)] = (
                Optional[annotation],
                Field(None, alias=prop_name),
            )

    model_name = "".join(part.title() for part in tool_name.split("_")) + "Arguments"
    return create_model(
        model_name, __config__=ConfigDict(extra="ignore"), **fields
    )


def _normalize_number(value: Any) -> Any:
    # JSON has one number type; 100.0 must reach the API as 100
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _describe_validation_error(error: ValidationError) -> str:
    problems = []
    for detail in error.errors():
        location = ".".join(str(part) for part in detail["loc"]) or "arguments"
        problems.append(f"{location}: {detail['msg']}")
    return "; ".join(problems)


@dataclass(frozen=True)
class ToolSpec:
    """A registered tool: metadata, handler and argument model."""

    name: str
    description: str
    schema: Dict[str, Any]
    annotations: ToolAnnotations
    handler: ToolHandler
    arguments_model: Type[BaseModel]

    def to_tool(self) -> Tool:
        return Tool(
            name=self.name,
            description=self.description,
            inputSchema=self.schema,
            annotations=self.annotations,
        )

    def validate_arguments(self, arguments: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        """Validate caller arguments, returning only the values actually supplied."""
        try:
            validated = self.arguments_model.model_validate(arguments or {})
        except ValidationError as e:
            raise ToolValidationError(
                f"Invalid arguments for tool '{self.name}': {_describe_validation_error(e)}"
            ) from e
        return {
            key: _normalize_number(value)
            for key, value in validated.model_dump(by_alias=True, exclude_none=True).items()
        }


class ToolRegistry:
    """Registry for all Proxmox MCP tools.

    Tools are registered once at startup; ``freeze`` closes the registry so
    the set of tools cannot change while the server is running.
    """

    def __init__(self):
        self._tools: Dict[str, ToolSpec] = {}
        self._frozen = False

    def register_tool(
        self,
        name: str,
        description: str,
        schema: Dict[str, Any],
        handler: ToolHandler,
        annotations: ToolAnnotations,
    ) -> None:
        """Register a tool with its metadata and handler."""
        if self._frozen:
            raise ToolRegistrationError(f"Registry is frozen, cannot add tool: {name}")
        if name in self._tools:
            raise ToolRegistrationError(f"Tool already registered: {name}")
        self._tools[name] = ToolSpec(
            name=name,
            description=description,
            schema=schema,
            annotations=annotations,
            handler=handler,
            arguments_model=build_arguments_model(name, schema),
        )

    def freeze(self) -> "ToolRegistry":
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def get_tool_list(self) -> List[Tool]:
        """Get the list of all registered tools for MCP server."""
        return [spec.to_tool() for spec in self._tools.values()]

    def get_tool(self, name: str) -> Optional[ToolSpec]:
        return self._tools.get(name)

    def get_tool_handler(self, name: str) -> Optional[ToolHandler]:
        """Get the handler function for a specific tool."""
        spec = self._tools.get(name)
        return spec.handler if spec else None

    def list_tool_names(self) -> List[str]:
        """Get a list of all registered tool names."""
        return list(self._tools.keys())

    def __len__(self) -> int:
        return len(self._tools)

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    async def execute_tool(
        self, name: str, arguments: Optional[Dict[str, Any]] = None
    ) -> CallToolResult:
        """Execute a tool by name. Never raises; failures become error results."""
        spec = self._tools.get(name)
        if spec is None:
            return error_result(f"Unknown tool: {name}")

        try:
            params = spec.validate_arguments(arguments)
            payload = await spec.handler(**params)
        except Exception as e:
            LoggingUtility.log_error(name, e)
            return error_result(str(e) or type(e).__name__)

        return success_result(payload)
