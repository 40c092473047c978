"""Data models for routes, parsed annotations and the Swagger 2.0 document.

The route models are what the adapters produce; the Swagger models mirror
the JSON shape written to disk (field aliases carry the Swagger key names).
"""

from pydantic import BaseModel, ConfigDict, Field

CONSUMES = ["application/json", "application/xml"]
PRODUCES = ["application/xml", "application/json"]


class RouteDescriptor(BaseModel):
    """One registered route bound to a controller action."""

    model_config = ConfigDict(frozen=True)

    host: str | None = None
    http_methods: list[str]  # GET / HEAD / POST ...
    uri: str  # api/v1/users/{id}
    name: str | None = None
    controller_namespace: str  # app.controllers.users.UserController
    controller_class_name: str  # UserController
    action_name: str

    @property
    def method(self) -> str:
        return "|".join(self.http_methods)

    @property
    def handler(self) -> str:
        return f"{self.controller_class_name}@{self.action_name}"


class AnnotationBlock(BaseModel):
    """Annotation lines recognized in one action docstring."""

    desc: str | None = None
    params: list[str] = []
    responses: list[str] = []

    def is_empty(self) -> bool:
        return self.desc is None and not self.params and not self.responses


class ParamDescriptor(BaseModel):
    """A single operation parameter (path, query or formData)."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    location: str = Field(alias="in")  # path / query / formData
    description: str = ""
    required: bool = False
    type: str  # string / integer / number / array / file
    format: str | None = None


class TagEntry(BaseModel):
    name: str
    description: str


class OperationEntry(BaseModel):
    """One HTTP verb under a path."""

    model_config = ConfigDict(populate_by_name=True)

    tags: list[str]
    summary: str | None = None
    description: str
    operation_id: str = Field(default="", alias="operationId")
    consumes: list[str] = Field(default_factory=lambda: list(CONSUMES))
    produces: list[str] = Field(default_factory=lambda: list(PRODUCES))
    parameters: list[ParamDescriptor]
    responses: dict[str, dict[str, list[str]]]  # {status_code: {description: [...]}}


class SwaggerInfo(BaseModel):
    description: str = ""
    version: str = ""
    title: str = ""


class SwaggerDocument(BaseModel):
    """Root of the generated document."""

    model_config = ConfigDict(populate_by_name=True)

    swagger: str = "2.0"
    info: SwaggerInfo
    host: str
    base_path: str = Field(alias="basePath")
    tags: list[TagEntry] = []
    paths: dict[str, dict[str, OperationEntry]] = {}

    def dump(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)

    def dump_json(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True)
