"""Comment template ids shared by the pipeline and the analyzers.

A reviewer UI maps each id to human-readable text and fills in the
comment's params.
"""

from __future__ import annotations

# Pipeline-level comments
GENERAL_FILE_NOT_FOUND = "analyzer.general.file_not_found"
GENERAL_ANALYZER_FAILURE = "analyzer.general.analyzer_failure"

# Built-in analyzer comments
GENERAL_EMPTY_SOURCE = "analyzer.general.empty_source"
