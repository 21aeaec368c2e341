"""Interactive text editor for the car parts file."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from os import PathLike
from typing import Sequence, TextIO

from drvr.car import DEFAULT_OUTPUT, Car
from drvr.carpart import CarPart, Component

DEFAULT_PARTS_FILE = "Car part descriptions.txt"

_BATCH_DESCRIPTIONS = {
    1: [
        "You are trying to do the following: ",
        "1. Updating all part images",
        "2. Updating all component images",
        "3. Updating all component videos",
        "",
        "The expected format for the file is detailed below: ",
    ],
    2: [
        "You are trying to do the following:",
        "1. Updating all part images",
        "2. Updating all component images",
    ],
    3: [
        "You are trying to do the following: ",
        "1. Updating the chosen part's image",
        "2. Updating the images for all components for a chosen part ",
    ],
    4: [
        "You are trying to do the following: ",
        "1. Updating the images for all components for a chosen part",
    ],
    5: [
        "You are trying to do the following: ",
        "1. Updating the videos for all components for a chosen part",
    ],
    6: [
        "You are trying to do the following: ",
        "1. Updating the name for all components for a chosen part",
    ],
}

_COMPONENT_FIELDS = {
    1: ("name", "What is the modified component name?", "Component name: "),
    2: ("image", "What is the modified image file?", "Image file: "),
    3: ("video", "What is the modified video file?", "Video file: "),
    4: (
        "description",
        "What is the modified component description?",
        "Component description: ",
    ),
}


class TextEditor:
    """Menu-driven editing of a car's parts and their components.

    Input is read as whitespace-separated words, so every name, file and
    description entered is a single word.
    """

    def __init__(
        self, car: Car, stdin: TextIO | None = None, stdout: TextIO | None = None
    ) -> None:
        self.car = car
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout
        self._tokens: deque[str] = deque()

    def _say(self, *lines: str) -> None:
        for line in lines:
            self._out.write(line + "\n")

    def _prompt(self, text: str) -> None:
        self._out.write(text)

    def _word(self) -> str:
        while not self._tokens:
            line = self._in.readline()
            if not line:
                raise EOFError("input ended before the editor was closed")
            self._tokens.extend(line.split())
        return self._tokens.popleft()

    def _number(self) -> int | None:
        """Read a number; anything that is not one gives None."""
        try:
            return int(self._word())
        except ValueError:
            return None

    def _ask(self, question: str, prompt: str) -> str:
        self._say(question)
        self._prompt(prompt)
        return self._word()

    def _choose_part(self) -> int | None:
        """Show the part list and read a choice: an index, -1 to exit, None if invalid."""
        self._say("Which car part do you wish to edit?")
        for number, part in enumerate(self.car.parts, start=1):
            self._say(f"{number}. \t{part.name}")
        self._say("0. \tExit")
        self._prompt("Input: ")
        choice = self._number()
        if choice is not None and 0 < choice <= len(self.car.parts):
            return choice - 1
        if choice == 0:
            return -1
        self._say("Invalid choice", "Please try again")
        return None

    def run(self) -> None:
        """Show the top-level editor menu until the user exits."""
        while True:
            self._say(">> Text Editor <<", "", "How do you wish to edit today?")
            self._say("1. Edit by batch", "2. Edit individually", "3. Exit")
            self._prompt("Input: ")
            choice = self._number()
            if choice == 1:
                self._say(">> Editing by batch <<", "")
                self.edit_by_batch()
            elif choice == 2:
                self._say(">> Editing individually <<", "")
                self.edit_individually()
            elif choice == 3:
                self._say(">> Exiting << ")
                return
            else:
                self._say(">> Invalid input <<", "Please try again")

    def edit_by_batch(self) -> None:
        """Describe the batch update options and let the user pick a part."""
        self._say(
            '>> If there is no option that you seek, use "Edit Individually" instead. <<',
            ">> Make a choice and get a description on what it is suppose to do "
            "and the format of the text file that is expected <<",
            "",
            "How do you wish to update by batch today?",
            "1. Update by batch for ALL images AND videos for parts and ALL COMPONENTS",
            "2. Update by batch for ALL images for ALL PARTS and ALL COMPONENTS",
            "3. Update by batch for images for  THE CHOSEN PART and ITS COMPONENTS",
            "4. Update by batch for images for COMPONENTS only",
            "5. Update by batch for videos for COMPONENTS only ",
            "6. Update by batch for components name for COMPONENTS only",
            "0. Exit",
        )
        self._prompt("Choice: ")
        choice = self._number()
        if choice in _BATCH_DESCRIPTIONS:
            self._say(*_BATCH_DESCRIPTIONS[choice])
        elif choice != 0:
            self._say(">> Invalid input <<", "Please try again")

        while self._choose_part() != -1:
            pass

    def edit_individually(self) -> None:
        """Let the user pick parts one at a time and edit each."""
        while True:
            selected = self._choose_part()
            if selected == -1:
                return
            if selected is not None:
                self.edit_selected_part(selected)

    def edit_selected_part(self, index: int) -> None:
        """Edit the part at ``index`` until the user quits its menu."""
        if not 0 <= index < len(self.car.parts):
            raise IndexError(f"part index {index} out of range")
        part = self.car.parts[index]
        while True:
            self._say(
                "",
                "What do you wish to modify?",
                f"Current part being modified: {part.name}",
                "1. Part name",
                "2. Part image",
                "3. Add a component",
                "4. Delete a component",
                "5. Modify a component",
                "0. Quit",
            )
            self._prompt("Choice: ")
            choice = self._number()
            if choice == 1:
                self._say(">> Modifying part name <<")
                part.name = self._ask("What is the new part name? ", "Part name: ")
            elif choice == 2:
                self._say(">> Modifying part image <<")
                part.image = self._ask("What is the new image file?", "File name: ")
            elif choice == 3:
                self._say(">> Adding a component <<")
                self._add_component(part)
            elif choice == 4:
                self._say(">> Deleting a component <<")
                self._delete_components(part)
            elif choice == 5:
                self._say(">> Modifying a component <<")
                self._modify_components(part)
            elif choice == 0:
                self._say(">> Exiting <<")
                return
            else:
                self._say(">> Invalid choice <<", "Please try again")

    def _add_component(self, part: CarPart) -> None:
        name = self._ask("What is the name of the new component? ", "New component name: ")
        image = self._ask("What is the image file for this component?", "Image file: ")
        video = self._ask("What is the video file for this component?", "Video file: ")
        description = self._ask("What is the component description?", "Component description: ")
        part.add_component(Component(name, image, video, description))

    def _choose_component(self, part: CarPart, action: str) -> int | None:
        """Read a component choice: an index, -1 to exit, None if invalid."""
        self._say(f"Which component do you want to {action}? ")
        for number, component in enumerate(part.components, start=1):
            self._say(f"{number}. \t{component.name}")
        self._say("0. \tExit")
        self._prompt("Choice: ")
        choice = self._number()
        if choice is not None and 0 < choice <= part.component_count:
            return choice - 1
        if choice == 0:
            return -1
        self._say(">> Invalid input. <<", "Please try again ")
        return None

    def _delete_components(self, part: CarPart) -> None:
        while True:
            if not part.components:
                self._say(">> There are no components to be deleted << ")
                return
            selected = self._choose_component(part, "delete")
            if selected == -1:
                return
            if selected is None:
                continue
            self._say(
                f"We are attempting to delete {part.components[selected].name}",
                "Are you sure? ",
                "1. Yes",
                "2. No",
            )
            self._prompt("Choice: ")
            if self._number() == 1:
                part.remove_component(selected)

    def _modify_components(self, part: CarPart) -> None:
        while True:
            if not part.components:
                self._say(">> There are no components to be modified << ")
                return
            selected = self._choose_component(part, "modify")
            if selected == -1:
                return
            if selected is None:
                continue
            self._say(
                f"What do you wish to modify for {part.components[selected].name}?",
                "1. Component name",
                "2. Component image file",
                "3. Component video file",
                "4. Component description",
                "0. Exit",
            )
            self._prompt("Choice: ")
            choice = self._number()
            if choice in _COMPONENT_FIELDS:
                field_name, question, prompt = _COMPONENT_FIELDS[choice]
                value = self._ask(question, prompt)
                part.edit_component(selected, **{field_name: value})
            elif choice != 0:
                self._say(">> Invalid input << ", "Please try again")


def print_file(path: str | PathLike[str], out: TextIO | None = None) -> None:
    """Copy the file at ``path`` to ``out`` line by line; a missing file prints nothing."""
    out = out if out is not None else sys.stdout
    try:
        with open(path, encoding="utf-8") as handle:
            text = handle.read()
    except OSError:
        return
    for line in text.split("\n"):
        out.write(line + "\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Load a parts file, edit it interactively and save the result."""
    parser = argparse.ArgumentParser(prog="drvr", description="Edit the car parts file.")
    parser.add_argument("parts", nargs="?", default=DEFAULT_PARTS_FILE, help="parts file to edit")
    parser.add_argument("--output", default=DEFAULT_OUTPUT, help="file to save the edits to")
    args = parser.parse_args(argv)

    car = Car()
    try:
        car.load(args.parts)
    except FileNotFoundError:
        print("File not found")
        return 1

    try:
        TextEditor(car).run()
    except EOFError:
        pass
    print(">> Writing to file << ")
    car.write(args.output)
    print("Goodbye")
    return 0


if __name__ == "__main__":
    sys.exit(main())