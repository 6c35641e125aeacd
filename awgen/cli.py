"""Command-line entry point: opens a project and reports its settings."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence, Tuple, Union

from awgen.settings import ProjectSettings, ProjectSettingsError

ENGINE_VERSION = "0.1.0"
"""Version reported by the command line."""

DEV_MODE = False
"""Whether the engine runs as the editor rather than the player."""

PROJECT_NAME_KEY = "NAME"
"""Settings key holding the project name."""

PROJECT_VERSION_KEY = "VERSION"
"""Settings key holding the project version."""

DEFAULT_PROJECT_NAME = "Untitled"
DEFAULT_PROJECT_VERSION = "0.0.1"


def window_title(
    project_name: str, project_version: str, dev_mode: bool, debug: bool
) -> str:
    """The window title for a project in the given mode."""
    title = f"{project_name} - {project_version}"
    if dev_mode:
        title = f"Awgen Editor [{title}]"
    if debug:
        title = f"{title} (debug)"
    return title


def load_project(
    project_folder: Union[str, Path], dev_mode: bool
) -> Tuple[ProjectSettings, str, str]:
    """Open a project's settings and read its name and version.

    In dev mode a missing settings file is created. Missing keys fall back to
    defaults. Raises ProjectSettingsError when the settings cannot be read.
    """
    settings = ProjectSettings(project_folder, create=dev_mode)
    try:
        name = settings.get(PROJECT_NAME_KEY)
        version = settings.get(PROJECT_VERSION_KEY)
    except ProjectSettingsError:
        settings.close()
        raise
    return (
        settings,
        DEFAULT_PROJECT_NAME if name is None else name,
        DEFAULT_PROJECT_VERSION if version is None else version,
    )


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="awgen", description="The Awgen voxel engine.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {ENGINE_VERSION}")
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug mode")
    parser.add_argument(
        "-p",
        "--project",
        help="The project workspace to open. Defaults to the current directory.",
    )
    parser.add_argument(
        "-f", "--fullscreen", action="store_true", help="Launch in fullscreen mode."
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command line; return the exit status."""
    args = _parser().parse_args(argv)

    print(f"Awgen Engine v{ENGINE_VERSION}")
    print("Running in development mode." if DEV_MODE else "Running in player mode.")

    if args.project is not None:
        project_folder = Path(args.project)
    else:
        try:
            project_folder = Path.cwd()
        except OSError:
            print("Failed to get current directory.", file=sys.stderr)
            return 1

    print(f"Opening project at: {project_folder}")

    try:
        settings = ProjectSettings(project_folder, create=DEV_MODE)
    except ProjectSettingsError as err:
        print(f"Failed to open project settings: {err}", file=sys.stderr)
        return 1

    with settings:
        try:
            name = settings.get(PROJECT_NAME_KEY)
            version = settings.get(PROJECT_VERSION_KEY)
        except ProjectSettingsError as err:
            print(f"Failed to read project settings: {err}", file=sys.stderr)
            return 1

    name = DEFAULT_PROJECT_NAME if name is None else name
    version = DEFAULT_PROJECT_VERSION if version is None else version
    print(f"Project name: {name}")
    print(f"Project version: {version}")

    title = window_title(name, version, DEV_MODE, args.debug)
    print(f"Debug enabled: {str(args.debug).lower()}")

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.INFO)
    logging.getLogger(__name__).info(
        "Window '%s' (%s), assets at %s",
        title,
        "fullscreen" if args.fullscreen else "windowed",
        project_folder / "assets",
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())