"""
Command-line driver: sort integers from a file with a BST or a sortable list.

The user is prompted for an input file, an output file and the data
structure to use ("bst" or "list"). With "bst" the values are written in
pre-order, in-order and post-order, then a second file of values to remove
is requested and the tree is written again in-order. With "list" the values
are written sorted. Typing "cancel" at any prompt ends the run cleanly.

Usage:
    bst-sort
    bst-sort --input data.txt --output out.txt --structure bst --remove del.txt
"""

import argparse
import re
import sys
from contextlib import ExitStack
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, Optional, TextIO, Tuple

from binary_search_tree import BinarySearchTree, Traversal
from linked_list import LinkedList
from sortable_list import SortableList

INTEGER_TOKEN = re.compile(r"[+-]?\d+")


class UserCancelled(Exception):
    """The user typed the cancel token (or closed stdin) at a prompt."""


@dataclass
class DriverConfig:
    input_prompt: str = "Enter the name of the input file:"
    output_prompt: str = "Enter the name of the output file:"
    structure_prompt: str = "Enter the data structure (should be list or bst):"
    remove_prompt: str = "Enter the name of the file with numbers to remove:"
    cancel_token: str = "cancel"
    values_per_line: int = 5
    structures: Tuple[str, ...] = ("list", "bst")


def read_integers(stream: Iterable[str]) -> Iterator[int]:
    """Yield whitespace-separated integers, stopping at the first non-integer."""
    for line in stream:
        for token in line.split():
            if not INTEGER_TOKEN.fullmatch(token):
                return
            yield int(token)


def write_values(output: TextIO, values: Iterable[int], per_line: int = 5) -> None:
    """Write values separated by spaces, ending a line after every ``per_line``."""
    count = 0
    for value in values:
        output.write(str(value))
        count += 1
        if count % per_line == 0:
            output.write("\n")
        else:
            output.write(" ")


class BstMain:
    def __init__(self, config: Optional[DriverConfig] = None,
                 input_func: Optional[Callable[[], str]] = None) -> None:
        self.config = config or DriverConfig()
        self._input = input_func or input
        self.tree: Optional[BinarySearchTree[int]] = None
        self.list: Optional[SortableList] = None

    def get_line_from_user(self, prompt: str) -> str:
        print(prompt)
        try:
            line = self._input()
        except EOFError:
            raise UserCancelled() from None
        line = line.strip()
        if line.lower() == self.config.cancel_token.lower():
            raise UserCancelled()
        return line

    def open_for_reading(self, prompt: str, preset: Optional[str] = None) -> TextIO:
        file_name = preset
        while True:
            if file_name is None:
                file_name = self.get_line_from_user(prompt)
            try:
                return open(file_name, "r")
            except OSError:
                print(f"File {file_name} does not exist or cannot be opened.", file=sys.stderr)
            file_name = None

    def open_for_writing(self, preset: Optional[str] = None) -> TextIO:
        file_name = preset
        while True:
            if file_name is None:
                file_name = self.get_line_from_user(self.config.output_prompt)
            try:
                return open(file_name, "w")
            except OSError:
                print(f"File {file_name} cannot be opened to write in it.", file=sys.stderr)
            file_name = None

    def get_data_structure(self, preset: Optional[str] = None) -> str:
        if preset in self.config.structures:
            return preset
        while True:
            line = self.get_line_from_user(self.config.structure_prompt)
            if line in self.config.structures:
                return line

    def write_data(self, structure: str, input_file: TextIO, output: TextIO) -> None:
        per_line = self.config.values_per_line
        if structure == "bst":
            self.tree = BinarySearchTree()
            for value in read_integers(input_file):
                self.tree.insert(value)

            output.write("Pre-order:\n")
            write_values(output, self.tree.traverse(Traversal.PRE_ORDER), per_line)
            output.write("\n\nIn-order:\n")
            write_values(output, self.tree.traverse(Traversal.IN_ORDER), per_line)
            output.write("\n\nPost-order:\n")
            write_values(output, self.tree.traverse(Traversal.POST_ORDER), per_line)
        elif structure == "list":
            self.list = SortableList(read_integers(input_file))
            output.write("Sorted list:\n")
            write_values(output, self.list.sorted_list(), per_line)
        else:
            raise ValueError(f"unknown data structure: {structure!r}")

    def remove_data(self, input_file: TextIO, output: TextIO) -> None:
        if self.tree is None:
            raise RuntimeError("remove_data called before a tree was built")
        to_remove = LinkedList(read_integers(input_file))
        for value in to_remove:
            self.tree.remove(value)

        output.write("\n\nAfter delete:\n")
        write_values(output, self.tree.traverse(Traversal.IN_ORDER), self.config.values_per_line)

    def run(self, input_path: Optional[str] = None, output_path: Optional[str] = None,
            structure: Optional[str] = None, remove_path: Optional[str] = None) -> int:
        with ExitStack() as stack:
            try:
                input_file = stack.enter_context(
                    self.open_for_reading(self.config.input_prompt, input_path))
                output = stack.enter_context(self.open_for_writing(output_path))

                chosen = self.get_data_structure(structure)
                self.write_data(chosen, input_file, output)

                if chosen == "bst":
                    remove_file = stack.enter_context(
                        self.open_for_reading(self.config.remove_prompt, remove_path))
                    self.remove_data(remove_file, output)
            except UserCancelled:
                print("Program terminated")
        return 0


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Sort integers from a file using a binary search tree or a sortable list.")
    parser.add_argument("--input", type=str, default=None, help="file of integers to insert")
    parser.add_argument("--output", type=str, default=None, help="file to write results to")
    parser.add_argument("--structure", choices=DriverConfig.structures, default=None,
                        help="data structure to use")
    parser.add_argument("--remove", type=str, default=None,
                        help="file of integers to remove (bst only)")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    program = BstMain()
    return program.run(args.input, args.output, args.structure, args.remove)


if __name__ == "__main__":
    sys.exit(main())
