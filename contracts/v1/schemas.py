"""Pydantic contracts for the v1 JSON export of a bug collection."""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class _StrictModel(BaseModel):
    """Base model that rejects unknown fields."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)


class SourceLineContract(_StrictModel):
    kind: Literal["SourceLine"] = "SourceLine"
    class_name: str
    start: int = -1
    end: int = -1
    start_bytecode: int = -1
    end_bytecode: int = -1
    source_file: str | None = None


class ClassAnnotationContract(_StrictModel):
    kind: Literal["Class"] = "Class"
    class_name: str


class MethodAnnotationContract(_StrictModel):
    kind: Literal["Method"] = "Method"
    class_name: str
    method_name: str
    signature: str
    source_lines: SourceLineContract | None = None


class FieldAnnotationContract(_StrictModel):
    kind: Literal["Field"] = "Field"
    class_name: str
    field_name: str
    signature: str
    is_static: bool = False


class IntAnnotationContract(_StrictModel):
    kind: Literal["Int"] = "Int"
    value: int


AnnotationContract = Annotated[
    Union[
        ClassAnnotationContract,
        MethodAnnotationContract,
        FieldAnnotationContract,
        SourceLineContract,
        IntAnnotationContract,
    ],
    Field(discriminator="kind"),
]


class BugInstanceContract(_StrictModel):
    type: str = Field(min_length=1)
    priority: int = Field(ge=1)
    annotations: list[AnnotationContract] = Field(default_factory=list)


class AppClassContract(_StrictModel):
    name: str
    is_interface: bool = False


class ProjectContract(_StrictModel):
    filename: str | None = None
    jars: list[str] = Field(default_factory=list)
    aux_classpath: list[str] = Field(default_factory=list)
    src_dirs: list[str] = Field(default_factory=list)


class BugCollectionContract(_StrictModel):
    project: ProjectContract
    application_classes: list[AppClassContract] = Field(default_factory=list)
    bug_instances: list[BugInstanceContract] = Field(default_factory=list)
    errors: list[str] = Field(default_factory=list)
    missing_classes: list[str] = Field(default_factory=list)
