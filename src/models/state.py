"""
Program state model and pipeline helper

Defines ProgramState dataclass for the functional pipeline pattern and
the pipeline() helper for composing transformation stages.
"""

import dataclasses
from functools import reduce
from pathlib import Path
from argparse import Namespace
from typing import Optional, Type, TypeVar, List, Callable, TYPE_CHECKING
from dataclasses import dataclass, field

# Forward reference for type hint - avoid circular import
if TYPE_CHECKING:
    from .component import GenerateResult


PS = TypeVar("PS", bound="ProgramState")


@dataclass
class ProgramState:
    """
    Central state container for the generation pipeline (state bus pattern).

    This dataclass carries all program state through the functional pipeline,
    with each stage adding new fields as generation progresses.

    Pipeline stages and their state additions:
        - Initial: inputdir, outputdir, verbosity, inputFiles, packageName,
          root, outviews, outcss, formatter, bindings
        - env_check: inputPaths, rootDirectory, viewsOutputFile,
          cssOutputFile, envOK
        - components_generate: generateResult
        - outputs_write: (no additions, writes files)
        - results_report: (no additions, terminal stage)

    Attributes:
        inputdir: Directory containing component .html files
        outputdir: Directory receiving generated files
        verbosity: Logging verbosity level (1-3)
        inputFiles: Component files (relative to inputdir); empty means discover
        packageName: Go package name for the generated source
        root: Root directory for absolute include paths (default: inputdir)
        outviews: Generated Go file name (relative to outputdir)
        outcss: Generated stylesheet file name (relative to outputdir)
        formatter: Source formatter name
        bindings: Optional custom binding table (YAML)
        envOK: Environment validation passed
        inputPaths: Resolved component paths, in generation order
        rootDirectory: Resolved include root directory
        viewsOutputFile: Resolved path of the generated Go file
        cssOutputFile: Resolved path of the generated stylesheet
        generateResult: Generator output (source, styles, components)
    """

    # CLI arguments
    inputdir: Optional[Path] = field(default=None)
    outputdir: Optional[Path] = field(default=None)
    verbosity: int = field(default=1)
    inputFiles: List[str] = field(default_factory=list)
    packageName: Optional[str] = field(default=None)
    root: Optional[str] = field(default=None)
    outviews: str = field(default="views.go")
    outcss: str = field(default="components.css")
    formatter: Optional[str] = field(default=None)
    bindings: Optional[str] = field(default=None)

    # Pipeline state
    envOK: bool = field(default=False)
    inputPaths: List[str] = field(default_factory=list)
    rootDirectory: str = field(default=".")
    viewsOutputFile: Path = field(default=Path("/"))
    cssOutputFile: Path = field(default=Path("/"))
    generateResult: Optional["GenerateResult"] = field(default=None)

    @classmethod
    def state_createFromNamespace(
        cls: Type["ProgramState"], options: Namespace, inputdir: Path, outputdir: Path
    ) -> "ProgramState":
        """
        Create ProgramState from argparse Namespace and directory paths.

        Merges CLI options with explicitly provided directories to create
        the initial program state for the generation pipeline.

        Args:
            options: Parsed CLI arguments (inputFiles, packageName, etc.)
            inputdir: Directory containing component files
            outputdir: Directory for generated output

        Returns:
            ProgramState instance with all CLI options as attributes
        """
        options_dict = vars(options)

        # Only keep options that are ProgramState fields
        valid_fields = {f.name for f in dataclasses.fields(cls)}
        filtered_options = {k: v for k, v in options_dict.items() if k in valid_fields}
        if filtered_options.get("inputFiles") is None:
            filtered_options["inputFiles"] = []

        # Explicit directories override anything in the namespace
        merged_args = {**filtered_options, "inputdir": inputdir, "outputdir": outputdir}

        return cls(**merged_args)

    def copy(self: PS) -> PS:
        """Shallow copy; stages mutate the copy, never their input"""
        return type(self)(**self.__dict__)


def pipeline(
    initial_state: ProgramState, *stages: Callable[[ProgramState], ProgramState]
) -> ProgramState:
    """
    Thread a ProgramState through stages, left to right.

    pipeline(s, env_check, components_generate) is
    components_generate(env_check(s)). A stage that fails exits the
    process, so later stages never see a half-built state.

    Args:
        initial_state: Starting ProgramState
        *stages: (ProgramState) -> ProgramState functions, in order

    Returns:
        State returned by the last stage
    """
    return reduce(lambda state, stage: stage(state), stages, initial_state)
