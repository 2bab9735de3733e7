"""CLI interface for ft-sync."""

import logging
from pathlib import Path
from typing import Any, Optional

import click

from .config import SyncConfig, get_config_path, load_config
from .exceptions import FtSyncError
from .output import OutputFormatter
from .plan import SyncAction, build_upload_plan
from .tree import ancestors_of, count_nodes, find_node, render_markdown, render_toc
from .tree.node import Node
from .utils import normalize_path

logger = logging.getLogger(__name__)


def _load_tree(ctx: Any) -> tuple[SyncConfig, Node]:
    """Load the config and build its tree, exiting with status 1 on failure."""
    out: OutputFormatter = ctx.obj["out"]
    config_path: Path = ctx.obj["config_path"]

    try:
        config = load_config(config_path)
        root = config.tree_builder().build(config.root)
    except FtSyncError as e:
        out.error(str(e))
        ctx.exit(1)

    return config, root


def _emit_document(ctx: Any, kind: str, text: str, output: Optional[Path]) -> None:
    """Print a rendered document or write it to ``output``."""
    out: OutputFormatter = ctx.obj["out"]

    if output is not None:
        try:
            output.parent.mkdir(parents=True, exist_ok=True)
            output.write_text(text, encoding="utf-8")
        except OSError as e:
            out.error(f"Failed to write {output}: {e}")
            ctx.exit(1)
        if out.json_output:
            out.output_json({"output": str(output)})
        else:
            out.success(f"✓ {kind} written to {output}")
        return

    if out.json_output:
        out.output_json({kind.lower(): text})
    elif text:
        out.print(text.rstrip("\n"))


@click.group()
@click.option(
    "--config",
    "-c",
    "config_file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to the ft-sync config file (default: ft-sync.json)",
)
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output")
@click.option("--json", is_flag=True, help="Output in JSON format")
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose/debug logging output",
)
@click.version_option(package_name="ft-sync")
@click.pass_context
def main(
    ctx: Any,
    config_file: Optional[Path],
    quiet: bool,
    json: bool,
    verbose: bool,
) -> None:
    """ft-sync - Mirror a local directory into a document collection."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = get_config_path(config_file)
    ctx.obj["out"] = OutputFormatter(json_output=json, quiet=quiet)
    ctx.obj["verbose"] = verbose

    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%H:%M:%S",
        )
        logging.getLogger("ftsync").setLevel(logging.DEBUG)
    else:
        logging.basicConfig(level=logging.WARNING)


@main.command()
@click.pass_context
def status(ctx: Any) -> None:
    """Show the sync status of the configured directory."""
    out: OutputFormatter = ctx.obj["out"]
    config, root = _load_tree(ctx)
    dirs, files = count_nodes(root)

    if out.json_output:
        out.output_json(
            {
                "config": str(ctx.obj["config_path"]),
                "root": root.path,
                "collection": config.collection,
                "directories": dirs,
                "files": files,
            }
        )
        return

    out.print_summary(
        "Sync Status",
        [
            ("Config", str(ctx.obj["config_path"])),
            ("Root", root.path),
            ("Collection", config.collection),
            ("Directories", str(dirs)),
            ("Files", str(files)),
        ],
    )


@main.command()
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write the TOC to this file instead of printing it",
)
@click.pass_context
def toc(ctx: Any, output: Optional[Path]) -> None:
    """Render the directory tree as a plain-text table of contents."""
    config, root = _load_tree(ctx)
    _emit_document(ctx, "TOC", render_toc(root, config.collection), output)


@main.command()
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write the markdown to this file instead of printing it",
)
@click.pass_context
def markdown(ctx: Any, output: Optional[Path]) -> None:
    """Render the directory tree as a markdown list of links."""
    config, root = _load_tree(ctx)
    _emit_document(ctx, "Markdown", render_markdown(root, config.collection), output)


@main.command()
@click.argument("path")
@click.pass_context
def ancestors(ctx: Any, path: str) -> None:
    """Show the directories that enclose PATH, innermost first.

    PATH is a tree path as shown by the toc command without the collection
    prefix, e.g. docs/guide/intro.md.

    Examples:
        ft-sync ancestors docs/guide/intro.md
    """
    out: OutputFormatter = ctx.obj["out"]
    _, root = _load_tree(ctx)
    target = normalize_path(path)
    chain = ancestors_of(root, target)
    found = find_node(root, target) is not None

    if out.json_output:
        out.output_json({"path": target, "found": found, "ancestors": chain})
        return

    if not found:
        out.warning(f"Path not found in tree: {target}")
        return

    for directory in chain:
        out.print(directory)
    if not chain:
        out.info(f"{target} has no ancestors below {root.path}")


@main.command()
@click.pass_context
def plan(ctx: Any) -> None:
    """Show the directories and uploads a sync would perform (dry run)."""
    out: OutputFormatter = ctx.obj["out"]
    config, root = _load_tree(ctx)
    upload_plan = build_upload_plan(root, config.collection)

    if out.json_output:
        out.output_json(upload_plan.to_dict())
        return

    if not upload_plan.steps:
        out.info("Nothing to sync.")
        return

    for step in upload_plan.steps:
        if step.action == SyncAction.MKDIR:
            out.print(f"mkdir   {step.remote_path}")
        else:
            out.print(f"upload  {step.path} -> {step.remote_path}")

    out.print("")
    out.print_summary(
        "Sync Plan",
        [
            ("Directories", str(len(upload_plan.directories))),
            ("Uploads", str(len(upload_plan.uploads))),
        ],
    )


if __name__ == "__main__":
    main()
