"""Backfilling source files from the legacy ``SrcMap`` encoding.

Old documents stored class → source file pairs in separate ``SrcMap``
elements instead of on each ``SourceLine``. After a read, annotations that
still lack a source file are filled in from those pairs.
"""

from __future__ import annotations

from typing import Iterable, Mapping

from ..models import BugInstance, MethodAnnotation, SourceLineAnnotation


def update_source_file(annotation: SourceLineAnnotation,
                       source_map: Mapping[str, str]) -> SourceLineAnnotation:
    """Fill in ``annotation.source_file`` from ``source_map`` when unknown.

    A source file that is already known is never replaced.
    """
    if not annotation.is_source_file_known():
        source_file = source_map.get(annotation.class_name)
        if source_file is not None:
            annotation.source_file = source_file
    return annotation


def reconcile_source_files(bugs: Iterable[BugInstance], source_map: Mapping[str, str]) -> int:
    """Apply ``update_source_file`` to every source-line annotation of ``bugs``.

    Covers top-level ``SourceLine`` annotations and the source lines owned by
    ``Method`` annotations. Returns the number of annotations updated.
    """
    if not source_map:
        return 0

    updated = 0
    for bug in bugs:
        for annotation in bug.annotation_iterator():
            if isinstance(annotation, SourceLineAnnotation):
                lines = annotation
            elif isinstance(annotation, MethodAnnotation) and annotation.source_lines is not None:
                lines = annotation.source_lines
            else:
                continue
            known = lines.is_source_file_known()
            update_source_file(lines, source_map)
            if not known and lines.is_source_file_known():
                updated += 1
    return updated
