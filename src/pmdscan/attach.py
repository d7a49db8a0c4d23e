"""Task that publishes the assembly component descriptor with the project."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import ClassVar

from pmdscan.project import Project, ProjectHelper

logger = logging.getLogger(__name__)

DEFAULT_COMPONENT_DESCRIPTOR = Path("src/main/resources/assembly-component.xml")


@dataclass
class AttachComponentDescriptor:
    """
    Make the component descriptor the project's artifact file, or, when
    `attachment_classifier` is set, attach it next to the main artifact.
    """

    goal: ClassVar[str] = "attach-component-descriptor"
    phase: ClassVar[str] = "package"

    project: Project
    project_helper: ProjectHelper = field(default_factory=ProjectHelper)
    component_descriptor: Path = DEFAULT_COMPONENT_DESCRIPTOR
    attachment_classifier: str | None = None

    def execute(self) -> None:
        descriptor = Path(self.component_descriptor)
        if self.attachment_classifier is not None:
            logger.debug(f"Attaching {descriptor} as '{self.attachment_classifier}'")
            self.project_helper.attach_artifact(
                self.project, descriptor, self.attachment_classifier
            )
        else:
            logger.debug(f"Setting artifact file to {descriptor}")
            self.project.artifact.file = descriptor
