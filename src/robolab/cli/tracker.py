"""Interactive robot state tracker.

Reads menu choices and numeric arguments from a prompt, applies them to a
:class:`~robolab.tracker.RobotTracker` and prints the resulting pose.
Invalid entries print a message and return to the menu.
"""

from __future__ import annotations

import argparse
import enum
from collections.abc import Callable, Sequence

from robolab.cli._common import add_verbose_flag, configure_logging
from robolab.exceptions import InvalidInputError
from robolab.models.robot import RobotPose
from robolab.normalize import safe_int
from robolab.tracker import RobotTracker

BANNER = "Assignment 1 - Robot state control"
MENU = (
    "1. Move Forward",
    "2. Turn Left",
    "3. Turn Right",
    "4. Get Robot Status",
    "5. Exit",
)
CHOICE_PROMPT = "Choose an option 1-5: "
INVALID_CHOICE = "Invalid input: Enter a number 1-5"
INVALID_NUMBER = "Invalid input: Enter a positive number."


class MenuOption(enum.IntEnum):
    MOVE_FORWARD = 1
    TURN_LEFT = 2
    TURN_RIGHT = 3
    STATUS = 4
    EXIT = 5


def format_position(pose: RobotPose) -> str:
    return f"Robot position:  X: {pose.x:g}   Y: {pose.y:g}"


def format_status(pose: RobotPose) -> str:
    return f"{format_position(pose)}   Angle: {pose.orientation_deg:g}"


def format_orientation(pose: RobotPose) -> str:
    return f"New orientation: {pose.orientation_deg:g}"


def _parse_choice(text: str) -> MenuOption | None:
    value = safe_int(text)
    if value is None:
        return None
    try:
        return MenuOption(value)
    except ValueError:
        return None


def run_session(
    tracker: RobotTracker,
    *,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> int:
    """Run the menu loop until the operator exits or input ends.

    Returns the process exit code.
    """
    write(BANNER + "\n")

    actions: dict[MenuOption, tuple[str, Callable[[str], RobotPose], Callable[[RobotPose], str]]] = {
        MenuOption.MOVE_FORWARD: ("Enter distance to move forward: ", tracker.move_forward, format_position),
        MenuOption.TURN_LEFT: ("Enter angle (degrees) to turn left: ", tracker.turn_left, format_orientation),
        MenuOption.TURN_RIGHT: ("Enter angle (degrees) to turn right: ", tracker.turn_right, format_orientation),
    }

    while True:
        for line in MENU:
            write(line)
        try:
            choice = _parse_choice(read(CHOICE_PROMPT))
        except EOFError:
            return 0

        if choice is None:
            write(INVALID_CHOICE + "\n")
            continue

        if choice == MenuOption.EXIT:
            write("Program complete\n")
            return 0

        if choice == MenuOption.STATUS:
            write(format_status(tracker.status()) + "\n")
            continue

        prompt, command, render = actions[choice]
        try:
            pose = command(read(prompt))
        except EOFError:
            return 0
        except InvalidInputError:
            write(INVALID_NUMBER + "\n")
            continue
        write(render(pose) + "\n")


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Track a robot's position and heading from menu commands.")
    add_verbose_flag(parser)
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        return run_session(RobotTracker())
    except KeyboardInterrupt:
        print()
        return 0


if __name__ == "__main__":
    raise SystemExit(main())
