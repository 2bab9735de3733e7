"""Upload planning: the remote steps a sync of a local tree would take.

The planner never touches the network. It turns a tree into an ordered
list of ``mkdir`` and ``upload`` steps in which every directory is planned
before anything placed inside it. The remote counterpart of the tree root
is the sync target itself and is expected to exist already.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum

from .tree.node import Node
from .tree.resolver import iter_ancestor_chains
from .utils import join_display_path

logger = logging.getLogger(__name__)


class SyncAction(str, Enum):
    """Actions a sync would take on the remote collection."""

    MKDIR = "mkdir"
    """Create a remote directory"""

    UPLOAD = "upload"
    """Upload local file to remote"""


@dataclass
class PlanStep:
    """One remote operation in an upload plan."""

    action: SyncAction
    """Action to take"""

    path: str
    """Local tree path the step is about"""

    remote_path: str
    """Display path under the collection"""

    def to_dict(self) -> dict:
        """Convert step to dictionary for JSON serialization."""
        return {
            "action": self.action.value,
            "path": self.path,
            "remote_path": self.remote_path,
        }


@dataclass
class UploadPlan:
    """Ordered steps for mirroring a tree into a collection."""

    collection_id: str
    """Collection the plan targets"""

    steps: list[PlanStep] = field(default_factory=list)
    """Steps in execution order"""

    @property
    def directories(self) -> list[str]:
        """Local paths of the directories to create, in order."""
        return [s.path for s in self.steps if s.action == SyncAction.MKDIR]

    @property
    def uploads(self) -> list[str]:
        """Local paths of the files to upload, in order."""
        return [s.path for s in self.steps if s.action == SyncAction.UPLOAD]

    def to_dict(self) -> dict:
        """Convert plan to dictionary for JSON serialization."""
        return {
            "collection": self.collection_id,
            "steps": [step.to_dict() for step in self.steps],
        }


def build_upload_plan(root: Node, collection_id: str) -> UploadPlan:
    """Plan the directory creations and uploads needed to mirror ``root``.

    Walks the tree once, carrying each node's chain of enclosing
    directories. For each file the directories not planned yet are emitted
    outermost first, followed by the upload itself. Empty directories are
    planned too, so the remote side mirrors them.

    Args:
        root: Tree root (the sync target, not planned itself)
        collection_id: Collection the tree is mirrored into

    Returns:
        UploadPlan with steps in execution order

    Examples:
        >>> tree = Node(True, "docs", [
        ...     Node(True, "docs/a", [Node(False, "docs/a/f.txt")]),
        ... ])
        >>> [s.action.value for s in build_upload_plan(tree, "u/i").steps]
        ['mkdir', 'upload']
    """
    plan = UploadPlan(collection_id=collection_id)
    created: set[str] = set()

    def ensure_directory(path: str) -> None:
        if path in created:
            return
        created.add(path)
        plan.steps.append(
            PlanStep(
                action=SyncAction.MKDIR,
                path=path,
                remote_path=join_display_path(collection_id, path),
            )
        )

    for node, chain in iter_ancestor_chains(root):
        if node.is_dir and node.children:
            # Created on demand by whatever lives inside
            continue
        for directory in chain:
            ensure_directory(directory)
        if node.is_dir:
            ensure_directory(node.path)
        else:
            plan.steps.append(
                PlanStep(
                    action=SyncAction.UPLOAD,
                    path=node.path,
                    remote_path=join_display_path(collection_id, node.path),
                )
            )

    logger.debug(
        f"Planned {len(plan.directories)} directories and "
        f"{len(plan.uploads)} uploads for {root.path}"
    )
    return plan
