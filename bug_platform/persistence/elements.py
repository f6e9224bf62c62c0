"""Element and attribute names of the saved bug collection format."""

ROOT_ELEMENT_NAME = "BugCollection"
SRCMAP_ELEMENT_NAME = "SrcMap"
PROJECT_ELEMENT_NAME = "Project"
ERRORS_ELEMENT_NAME = "Errors"
ANALYSIS_ERROR_ELEMENT_NAME = "AnalysisError"
MISSING_CLASS_ELEMENT_NAME = "MissingClass"
APP_CLASS_ELEMENT_NAME = "AppClass"

INTERFACE_ATTRIBUTE = "interface"
SRCMAP_CLASSNAME_ATTRIBUTE = "classname"
SRCMAP_SRCFILE_ATTRIBUTE = "srcfile"

# The precheck looks for this exact line near the start of a document.
ROOT_SIGNATURE_LINE = f"<{ROOT_ELEMENT_NAME}>"
