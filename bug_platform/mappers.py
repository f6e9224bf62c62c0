"""Mapping helpers between bug collection models and v1 contracts."""

from __future__ import annotations

from contracts.v1.schemas import (
    AppClassContract,
    BugCollectionContract,
    BugInstanceContract,
    ClassAnnotationContract,
    FieldAnnotationContract,
    IntAnnotationContract,
    MethodAnnotationContract,
    ProjectContract,
    SourceLineContract,
)
from bug_platform.collection import BugCollection
from bug_platform.models import (
    BugAnnotation,
    BugInstance,
    ClassAnnotation,
    FieldAnnotation,
    IntAnnotation,
    MethodAnnotation,
    SourceLineAnnotation,
)
from bug_platform.project import Project


def _source_line_to_contract(lines: SourceLineAnnotation) -> SourceLineContract:
    return SourceLineContract(
        class_name=lines.class_name,
        start=lines.start,
        end=lines.end,
        start_bytecode=lines.start_bytecode,
        end_bytecode=lines.end_bytecode,
        source_file=lines.source_file,
    )


def _contract_to_source_line(contract: SourceLineContract) -> SourceLineAnnotation:
    return SourceLineAnnotation(
        class_name=contract.class_name,
        start=contract.start,
        end=contract.end,
        start_bytecode=contract.start_bytecode,
        end_bytecode=contract.end_bytecode,
        source_file=contract.source_file,
    )


def annotation_to_contract(annotation: BugAnnotation):
    """Convert one annotation to its contract variant."""
    if isinstance(annotation, SourceLineAnnotation):
        return _source_line_to_contract(annotation)
    if isinstance(annotation, ClassAnnotation):
        return ClassAnnotationContract(class_name=annotation.class_name)
    if isinstance(annotation, MethodAnnotation):
        return MethodAnnotationContract(
            class_name=annotation.class_name,
            method_name=annotation.method_name,
            signature=annotation.signature,
            source_lines=(
                _source_line_to_contract(annotation.source_lines)
                if annotation.source_lines is not None else None
            ),
        )
    if isinstance(annotation, FieldAnnotation):
        return FieldAnnotationContract(
            class_name=annotation.class_name,
            field_name=annotation.field_name,
            signature=annotation.signature,
            is_static=annotation.is_static,
        )
    if isinstance(annotation, IntAnnotation):
        return IntAnnotationContract(value=annotation.value)
    raise TypeError(f"No contract for annotation type {type(annotation).__name__}")


def contract_to_annotation(contract) -> BugAnnotation:
    """Convert an annotation contract back to the model."""
    if isinstance(contract, SourceLineContract):
        return _contract_to_source_line(contract)
    if isinstance(contract, ClassAnnotationContract):
        return ClassAnnotation(class_name=contract.class_name)
    if isinstance(contract, MethodAnnotationContract):
        return MethodAnnotation(
            class_name=contract.class_name,
            method_name=contract.method_name,
            signature=contract.signature,
            source_lines=(
                _contract_to_source_line(contract.source_lines)
                if contract.source_lines is not None else None
            ),
        )
    if isinstance(contract, FieldAnnotationContract):
        return FieldAnnotation(
            class_name=contract.class_name,
            field_name=contract.field_name,
            signature=contract.signature,
            is_static=contract.is_static,
        )
    if isinstance(contract, IntAnnotationContract):
        return IntAnnotation(value=contract.value)
    raise TypeError(f"Unsupported annotation contract {type(contract).__name__}")


def bug_instance_to_contract(bug: BugInstance) -> BugInstanceContract:
    """Convert a ``BugInstance`` to a v1 ``BugInstanceContract``."""
    return BugInstanceContract(
        type=bug.type,
        priority=bug.priority,
        annotations=[annotation_to_contract(a) for a in bug.annotations],
    )


def contract_to_bug_instance(contract: BugInstanceContract) -> BugInstance:
    """Convert a v1 ``BugInstanceContract`` to a ``BugInstance``."""
    return BugInstance(
        type=contract.type,
        priority=contract.priority,
        annotations=[contract_to_annotation(a) for a in contract.annotations],
    )


def project_to_contract(project: Project) -> ProjectContract:
    return ProjectContract(
        filename=project.filename,
        jars=list(project.jars),
        aux_classpath=list(project.aux_classpath),
        src_dirs=list(project.src_dirs),
    )


def collection_to_contract(collection: BugCollection, project: Project) -> BugCollectionContract:
    """Snapshot a collection and its project as a v1 contract."""
    return BugCollectionContract(
        project=project_to_contract(project),
        application_classes=[
            AppClassContract(name=name, is_interface=collection.is_interface(name))
            for name in collection.application_classes()
        ],
        bug_instances=[bug_instance_to_contract(bug) for bug in collection],
        errors=list(collection.errors()),
        missing_classes=list(collection.missing_classes()),
    )
