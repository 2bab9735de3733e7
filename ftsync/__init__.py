"""ft-sync - mirror a local directory into a document collection."""

from .config import SyncConfig, load_config
from .exceptions import ConfigError, FtSyncError, TreeBuildError
from .plan import PlanStep, SyncAction, UploadPlan, build_upload_plan
from .tree import (
    Node,
    TreeBuilder,
    ancestors_of,
    build_tree,
    render_markdown,
    render_toc,
)

__all__ = [
    "Node",
    "TreeBuilder",
    "build_tree",
    "render_toc",
    "render_markdown",
    "ancestors_of",
    "build_upload_plan",
    "UploadPlan",
    "PlanStep",
    "SyncAction",
    "SyncConfig",
    "load_config",
    "FtSyncError",
    "TreeBuildError",
    "ConfigError",
]
