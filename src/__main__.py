#!/usr/bin/env python3
"""
gdslice - Godot script slice exporter

Scans a Godot project for GDScript files annotated with marker comments
and writes a JSON manifest describing every tagged region.

Markers:
    # EXPORT name       ...lines...       # /EXPORT name
        A named slice. The closing marker must sit at the same indentation
        as the opening one. Captured lines are de-indented by that depth.

    # EXPORT            (or "# EXPORT *")
        A whole-file slice: the entire script, de-indented by the marker's
        depth.

Usage:
    gdslice path/to/godot/project outputdir/

    path/to/godot/project is the directory holding a project.godot file.
    The manifest is written to outputdir/slices.json.

Examples:
    # Write outputdir/tutorial.json
    gdslice game/ out/ --outputFile tutorial.json

    # Print the manifest instead, e.g. to pipe it elsewhere
    gdslice game/ out/ --stdout

    # Scan a plain directory of scripts, verbosely
    gdslice scripts/ out/ --noProjectCheck -vv
"""

import sys
from pathlib import Path
from argparse import ArgumentParser, Namespace, ArgumentDefaultsHelpFormatter

from chris_plugin import chris_plugin
from .lib import __version__, LOG, state_connectToLogger
from .lib.aggregator import project_slice
from .lib.project import projectRoot_resolve, ProjectError
from .config import appsettings
from .models import ProgramState, pipeline


DISPLAY_TITLE = r"""
            _     _ _
   __ _  __| |___| (_) ___ ___
  / _` |/ _` / __| | |/ __/ _ \
 | (_| | (_| \__ \ | | (_|  __/
  \__, |\__,_|___/_|_|\___\___|
  |___/
  Godot script slice exporter
"""

# Define CLI arguments
parser = ArgumentParser(
    description="gdslice - extract # EXPORT marker slices from GDScript files into a JSON manifest",
    formatter_class=ArgumentDefaultsHelpFormatter,
)

parser.add_argument(
    "--outputFile",
    default=appsettings.output_file,
    type=str,
    help="Manifest filename (relative to outputdir)",
)

parser.add_argument(
    "--stdout",
    action="store_true",
    default=False,
    help="Print the manifest on standard output instead of writing outputFile",
)

parser.add_argument(
    "--extension",
    default=appsettings.extension,
    type=str,
    help="Extension of the script files to scan",
)

parser.add_argument(
    "--noProjectCheck",
    action="store_true",
    default=False,
    help=f"Do not require a {appsettings.project_marker} file in inputdir",
)

parser.add_argument(
    "-v",
    "--verbosity",
    action="count",
    default=1,
    help="Increase output verbosity (can be repeated: -v, -vv)",
)

parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")


def env_check(inputstate: ProgramState) -> ProgramState:
    """
    Validate the project directory and resolve the manifest destination.

    Args:
        inputstate: Initial program state with CLI options

    Returns:
        ProgramState with added fields:
            - projectRoot: Absolute path of the project
            - manifestFile: Destination path, None when printing to stdout
            - envOK: True if environment is valid

    Exits:
        1 if the project directory is missing or has no project.godot
    """

    state = inputstate.copy()

    LOG(DISPLAY_TITLE, level=2)

    LOG("Checking environment...", level=2)

    marker = "" if state.noProjectCheck else appsettings.project_marker
    try:
        state.projectRoot = projectRoot_resolve(state.inputdir, marker=marker)
    except ProjectError as e:
        print(f"Error: {e}", file=sys.stderr)
        state.envOK = False
        sys.exit(1)

    LOG(f"Project root: {state.projectRoot}", level=2)

    if not state.stdout:
        state.manifestFile = state.outputdir / state.outputFile
        LOG(f"Manifest file: {state.manifestFile}", level=2)

    state.envOK = True
    return state


def slices_extract(inputstate: ProgramState) -> ProgramState:
    """
    Scan the project and build the slice manifest.

    Args:
        inputstate: Program state with projectRoot set

    Returns:
        ProgramState with added field:
            - extraction: ExtractionResult holding the manifest

    Exits:
        1 if any file has an unclosed marker; nothing is written
    """

    state = inputstate.copy()

    LOG(f"Scanning {state.projectRoot} for '{state.extension}' files...", level=1)

    try:
        state.extraction = project_slice(state.projectRoot, extension=state.extension)
    except OSError as e:
        print(f"Error reading project files: {e}", file=sys.stderr)
        sys.exit(1)

    if not state.extraction.ok:
        print(f"Error: {state.extraction.error}", file=sys.stderr)
        sys.exit(1)

    LOG(
        f"Scanned {state.extraction.files_scanned} files, "
        f"{len(state.extraction.manifest.file_paths)} with slices",
        level=2,
    )
    return state


def manifest_write(inputstate: ProgramState) -> ProgramState:
    """
    Serialize the manifest and send it to its sink.

    Args:
        inputstate: Program state with a successful extraction

    Returns:
        ProgramState with added fields:
            - manifestJSON: Serialized manifest
            - written: True once written to file or stdout

    Exits:
        1 if there is no manifest or the file cannot be written
    """

    state = inputstate.copy()

    if not state.extraction or not state.extraction.ok:
        print("Error: No manifest available", file=sys.stderr)
        sys.exit(1)

    state.manifestJSON = state.extraction.manifest.to_json(indent=appsettings.json_indent)

    if state.stdout:
        print(state.manifestJSON)
        state.written = True
        return state

    LOG(f"Writing manifest to {state.manifestFile}", level=1)
    try:
        state.manifestFile.parent.mkdir(parents=True, exist_ok=True)
        state.manifestFile.write_text(state.manifestJSON, encoding="utf-8")
    except OSError as e:
        print(f"Error writing manifest: {e}", file=sys.stderr)
        sys.exit(1)

    state.written = True
    return state


def results_report(inputstate: ProgramState) -> ProgramState:
    """
    Summarize the export for the user.

    Args:
        inputstate: Program state after manifest_write

    Returns:
        ProgramState unchanged (terminal pipeline stage)
    """
    state: ProgramState = inputstate.copy()
    if not state.written:
        print("Error: Export failed", file=sys.stderr)
        sys.exit(1)

    manifest = state.extraction.manifest
    slice_count = sum(len(record.slices) for record in manifest.files.values())

    LOG("✓ Export successful!", level=1)
    LOG(f"  Files with slices: {len(manifest.file_paths)}", level=1)
    LOG(f"  Slices: {slice_count}", level=1)
    if state.manifestFile is not None:
        LOG(f"  Output: {state.manifestFile}", level=1)
    return state


@chris_plugin(
    parser=parser,
    title="gdslice - Godot script slice exporter",
    category="Utility",
    min_memory_limit="100Mi",
    min_cpu_limit="500m",
)
def main(options: Namespace, inputdir: Path, outputdir: Path):
    """
    Main entry point - export marker slices of a Godot project to JSON.

    Orchestrates the export pipeline:
        1. env_check: Validate the project and resolve the destination
        2. slices_extract: Walk the project and resolve every marker
        3. manifest_write: Serialize and write (or print) the manifest
        4. results_report: Display a summary

    Args:
        options: CLI arguments from argparse
            - outputFile: str - Manifest filename inside outputdir
            - stdout: bool - Print instead of writing
            - extension: str - Script extension to scan
            - noProjectCheck: bool - Skip the project.godot check
            - verbosity: int - Logging verbosity level (1-3)
        inputdir: Godot project directory
        outputdir: Directory where the manifest is written

    Note:
        This function is wrapped by @chris_plugin which handles CLI
        argument parsing and invokes this function with parsed values.
    """

    state: ProgramState = ProgramState.state_createFromNamespace(
        options=options, inputdir=inputdir, outputdir=outputdir
    )

    state_connectToLogger(state)

    pipeline(state, env_check, slices_extract, manifest_write, results_report)


if __name__ == "__main__":
    main()  # type: ignore  # @chris_plugin decorator transforms signature
