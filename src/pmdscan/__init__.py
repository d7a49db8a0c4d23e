from pmdscan.attach import AttachComponentDescriptor
from pmdscan.file_selector import SelectorConfig, SourceFileSelector
from pmdscan.project import Project, ProjectHelper
from pmdscan.report import AbstractPmdReport, ReportFormat
from pmdscan.xref import construct_xref_location

__all__ = [
    "AbstractPmdReport",
    "AttachComponentDescriptor",
    "Project",
    "ProjectHelper",
    "ReportFormat",
    "SelectorConfig",
    "SourceFileSelector",
    "construct_xref_location",
]
