#!/usr/bin/env python3
"""
nausicaa - HTML component to Go source generator

Compiles HTML component files into Go source that constructs the same
element trees through the gowebapi/webapi binding API, and collects the
components' top-level <style> blocks into one stylesheet.

As an aside, this codebase leverages the ChRIS "plugin" concept/pattern as
general purpose python app development framework.

Component files:
    - One file is one component: Button.html -> type Button, NewButton()
    - ref="name" exposes an element as a field of the component type
    - <include path="Icon.html" /> embeds another component
    - A top-level <style> block is moved to the stylesheet

Usage:
    nausicaa inputdir/ outputdir/ [--inputFiles Button.html ...]

    All *.html files under inputdir are used when --inputFiles is omitted.
    The Go source and the stylesheet are written to outputdir/.

Examples:
    # Every component under components/, package "ui"
    nausicaa components/ out/ --package ui

    # Selected components, custom output names
    nausicaa . out/ --inputFiles Select.html Button.html --outviews ui.go --outcss ui.css

    # Verbose output, echo generated source
    nausicaa components/ out/ -vv
"""

import sys
from pathlib import Path
from argparse import ArgumentParser, Namespace, ArgumentDefaultsHelpFormatter

from chris_plugin import chris_plugin
from pygments import highlight
from pygments.lexers import GoLexer
from pygments.formatters import TerminalFormatter

from .config import appsettings
from .lib import generate, BindingTable, NausicaaError, FormatterError, BindingsError
from .lib import __version__, LOG, state_connectToLogger
from .models import ProgramState, GenerateOptions, pipeline


DISPLAY_TITLE = r"""
                       _
  _ __   __ _ _   _ ___(_) ___ __ _  __ _
 | '_ \ / _` | | | / __| |/ __/ _` |/ _` |
 | | | | (_| | |_| \__ \ | (_| (_| | (_| |
 |_| |_|\__,_|\__,_|___/_|\___\__,_|\__,_|

  HTML components -> Go
"""

# Define CLI arguments
parser = ArgumentParser(
    description="nausicaa - generate Go webapi code from HTML components",
    formatter_class=ArgumentDefaultsHelpFormatter,
)

parser.add_argument(
    "--inputFiles",
    nargs="*",
    default=None,
    type=str,
    help="Component files (relative to inputdir); defaults to every *.html under inputdir",
)

parser.add_argument(
    "--packageName",
    "--package",
    dest="packageName",
    default=appsettings.package_name,
    type=str,
    help="Package name to use in the generated Go source",
)

parser.add_argument(
    "--root",
    default=None,
    type=str,
    help="Root directory for absolute paths in <include /> elements. Defaults to inputdir",
)

parser.add_argument(
    "--outviews",
    default="views.go",
    type=str,
    help="Generated Go file (relative to outputdir)",
)

parser.add_argument(
    "--outcss",
    default="components.css",
    type=str,
    help="Generated stylesheet (relative to outputdir)",
)

parser.add_argument(
    "--formatter",
    default=appsettings.formatter,
    choices=["auto", "gofmt", "builtin"],
    help="Formatter for the generated Go source",
)

parser.add_argument(
    "--bindings",
    default=None,
    type=str,
    help="Custom element binding table (YAML). Defaults to the packaged webapi table",
)

parser.add_argument(
    "-v",
    "--verbosity",
    action="count",
    default=1,
    help="Increase output verbosity (can be repeated: -v, -vv, -vvv)",
)

parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")


def env_check(inputstate: ProgramState) -> ProgramState:
    """
    Validate environment and resolve all file paths.

    Resolves the component files to generate, the include root directory
    and the output files, creating the output directories.

    Args:
        inputstate: Initial program state with CLI options

    Returns:
        ProgramState with added fields:
            - inputPaths: Component paths in generation order
            - rootDirectory: Root for absolute include paths
            - viewsOutputFile: Generated Go file path
            - cssOutputFile: Generated stylesheet path
            - envOK: True if environment is valid

    Exits:
        1 if an input file is missing or no components are found
    """

    state = inputstate.copy()

    if state.verbosity >= 2:
        LOG(DISPLAY_TITLE, level=2)

    LOG("Checking environment...", level=2)

    if state.inputFiles:
        input_paths = [state.inputdir / name for name in state.inputFiles]
        for input_path in input_paths:
            if not input_path.is_file():
                print(f"Error: Input file not found: {input_path}", file=sys.stderr)
                state.envOK = False
                sys.exit(1)
    else:
        input_paths = sorted(p for p in state.inputdir.glob(appsettings.input_glob) if p.is_file())

    if not input_paths:
        print(f"Error: No components found in {state.inputdir}", file=sys.stderr)
        state.envOK = False
        sys.exit(1)

    state.inputPaths = [str(p) for p in input_paths]
    LOG(f"Input components: {len(state.inputPaths)}", level=2)

    state.rootDirectory = state.root if state.root else str(state.inputdir)
    LOG(f"Include root: {state.rootDirectory}", level=2)

    state.viewsOutputFile = state.outputdir / state.outviews
    state.cssOutputFile = state.outputdir / state.outcss
    for output_file in (state.viewsOutputFile, state.cssOutputFile):
        output_file.parent.mkdir(parents=True, exist_ok=True)
    LOG(f"Output files: {state.viewsOutputFile}, {state.cssOutputFile}", level=2)

    state.envOK = True
    return state


def components_generate(inputstate: ProgramState) -> ProgramState:
    """
    Compile the component files into Go source and a stylesheet.

    Args:
        inputstate: Program state with inputPaths resolved

    Returns:
        ProgramState with added field:
            - generateResult: GenerateResult (source, styles, components)

    Exits:
        1 on any component error, binding table error, or formatter failure
    """

    state = inputstate.copy()

    LOG("Generating components...", level=1)

    try:
        bindings = BindingTable.table_load(state.bindings) if state.bindings else None
        options = GenerateOptions(
            package_name=state.packageName,
            root_directory=state.rootDirectory,
            formatter=state.formatter,
            bindings=bindings,
        )
        state.generateResult = generate(state.inputPaths, options)
    except (NausicaaError, BindingsError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except FormatterError as e:
        print(f"Internal error: generated source did not format: {e}", file=sys.stderr)
        if state.verbosity >= 3:
            import traceback

            traceback.print_exc()
        sys.exit(1)

    LOG(f"Generated {len(state.generateResult.components)} components", level=2)
    return state


def outputs_write(inputstate: ProgramState) -> ProgramState:
    """
    Write the generated Go source and stylesheet.

    Args:
        inputstate: Program state with generateResult populated

    Returns:
        ProgramState unchanged

    Exits:
        1 if generateResult is None or a file cannot be written
    """

    state = inputstate.copy()

    if not state.generateResult:
        print("Error: No generated output available", file=sys.stderr)
        sys.exit(1)

    try:
        state.viewsOutputFile.write_bytes(state.generateResult.source)
        LOG(f"Wrote {state.viewsOutputFile}", level=2)
        state.cssOutputFile.write_bytes(state.generateResult.styles)
        LOG(f"Wrote {state.cssOutputFile}", level=2)
    except OSError as e:
        print(f"Error writing output: {e}", file=sys.stderr)
        sys.exit(1)

    return state


def results_report(inputstate: ProgramState) -> ProgramState:
    """
    Display generation results to user.

    At verbosity 3 and above the generated Go source is echoed with syntax
    highlighting.

    Args:
        inputstate: Program state with generateResult populated

    Returns:
        ProgramState unchanged (terminal pipeline stage)

    Exits:
        1 if generateResult is None
    """
    state: ProgramState = inputstate.copy()
    if not state.generateResult:
        print("Error: Generation failed", file=sys.stderr)
        sys.exit(1)

    result = state.generateResult
    if state.verbosity >= 1:
        LOG("\n✓ Generation successful!", level=1)
        LOG(f"  Components: {len(result.components)}", level=1)
        for compiled in result.components:
            LOG(f"    {compiled.component.type_name} <- {compiled.component.path}", level=2)
        LOG(f"  Go source:  {state.viewsOutputFile}", level=1)
        LOG(f"  Stylesheet: {state.cssOutputFile}", level=1)

    if state.verbosity >= 3:
        source = result.source.decode("utf-8")
        print(highlight(source, GoLexer(), TerminalFormatter()), file=sys.stderr)

    return state


@chris_plugin(
    parser=parser,
    title="nausicaa - HTML component to Go source generator",
    category="Utility",
    min_memory_limit="100Mi",
    min_cpu_limit="500m",
)
def main(options: Namespace, inputdir: Path, outputdir: Path):
    """
    Main entry point - generate Go source from HTML components.

    Orchestrates the full generation pipeline:
        1. env_check: Resolve components and output paths
        2. components_generate: Compile components to Go and CSS
        3. outputs_write: Write the generated files
        4. results_report: Display results to user

    Args:
        options: CLI arguments from argparse
            - inputFiles: Optional[List[str]] - Component files
            - packageName: str - Go package name
            - root: Optional[str] - Include root directory
            - outviews / outcss: str - Output file names
            - formatter: str - Source formatter
            - bindings: Optional[str] - Custom binding table
            - verbosity: int - Logging verbosity level (1-3)
        inputdir: Directory containing component files
        outputdir: Directory where generated files will be written

    Note:
        This function is wrapped by @chris_plugin which handles CLI
        argument parsing and invokes this function with parsed values.
    """

    state: ProgramState = ProgramState.state_createFromNamespace(
        options=options, inputdir=inputdir, outputdir=outputdir
    )

    # Connect state to logger for entire pipeline
    state_connectToLogger(state)

    # Execute generation pipeline
    pipeline(state, env_check, components_generate, outputs_write, results_report)


if __name__ == "__main__":
    main()  # type: ignore  # @chris_plugin decorator transforms signature
