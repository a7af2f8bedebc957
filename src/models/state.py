"""
Program state model and pipeline helper

Defines ProgramState dataclass for the functional pipeline pattern and
the pipeline() helper for composing transformation stages.
"""

import dataclasses
from pathlib import Path
from argparse import Namespace
from functools import reduce
from typing import Optional, Type, TypeVar, Callable
from dataclasses import dataclass, field

from .slices import ExtractionResult


PS = TypeVar("PS", bound="ProgramState")


@dataclass
class ProgramState:
    """
    Central state container for the export pipeline (state bus pattern).

    Each stage receives a copy of the state, adds its own fields and
    hands the result to the next stage.

    Pipeline stages and their state additions:
        - Initial: inputdir, outputdir, verbosity, outputFile, stdout,
          extension, noProjectCheck
        - env_check: projectRoot, manifestFile, envOK
        - slices_extract: extraction
        - manifest_write: manifestJSON, written
        - results_report: (no additions, terminal stage)

    Attributes:
        inputdir: Root of the Godot project to scan
        outputdir: Directory the manifest file is written to
        verbosity: Logging verbosity level (0-3)
        outputFile: Manifest filename inside outputdir
        stdout: Emit the manifest on stdout instead of writing a file
        extension: Script extension to scan; None means use settings
        noProjectCheck: Skip the project marker file check
        envOK: Environment validation passed
        projectRoot: Resolved project root
        manifestFile: Resolved manifest destination (None with --stdout)
        extraction: Result of the fail-fast extraction fold
        manifestJSON: Serialized manifest
        written: True once the manifest reached its sink
    """

    # CLI arguments
    inputdir: Optional[Path] = field(default=None)
    outputdir: Optional[Path] = field(default=None)
    verbosity: int = field(default=1)
    outputFile: str = field(default="")
    stdout: bool = field(default=False)
    extension: Optional[str] = field(default=None)
    noProjectCheck: bool = field(default=False)

    # Pipeline state
    envOK: bool = field(default=False)
    projectRoot: Path = field(default=Path("/"))
    manifestFile: Optional[Path] = field(default=None)
    extraction: Optional[ExtractionResult] = field(default=None)
    manifestJSON: str = field(default="")
    written: bool = field(default=False)

    @classmethod
    def state_createFromNamespace(
        cls: Type["ProgramState"], options: Namespace, inputdir: Path, outputdir: Path
    ) -> "ProgramState":
        """
        Create ProgramState from argparse Namespace and directory paths.

        Only Namespace attributes that are ProgramState fields are kept;
        the explicit directories override anything of the same name.

        Args:
            options: Parsed CLI arguments (outputFile, stdout, etc.)
            inputdir: Godot project directory
            outputdir: Directory for the manifest file

        Returns:
            ProgramState instance with all CLI options as attributes
        """
        valid_fields = {f.name for f in dataclasses.fields(cls)}
        filtered_options = {k: v for k, v in vars(options).items() if k in valid_fields}
        return cls(**{**filtered_options, "inputdir": inputdir, "outputdir": outputdir})

    def copy(self: PS) -> PS:
        """
        Creates a shallow copy of the ProgramState instance.

        Returns:
            A new ProgramState instance.
        """
        return type(self)(**self.__dict__)


def pipeline(
    initial_state: ProgramState, *stages: Callable[[ProgramState], ProgramState]
) -> ProgramState:
    """
    Execute a functional pipeline of state transformations.

    Each stage is a function (ProgramState) -> ProgramState that receives
    the output of the previous stage and returns a new state.

    Example:
        final_state = pipeline(
            initial_state,
            env_check,
            slices_extract,
            manifest_write,
            results_report
        )

    This is equivalent to:
        results_report(manifest_write(slices_extract(env_check(initial_state))))
    """
    return reduce(lambda state, stage: stage(state), stages, initial_state)
