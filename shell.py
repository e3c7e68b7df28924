"""CLI entry point for vfs-shell: mkdir/cd/pwd/ls over an in-memory directory tree."""

import argparse
import os
import sys

from filesystem import Filesystem, FilesystemError

HELP = """\
mkdir PATH...   create directories
cd [PATH]       change the current directory (default: /)
pwd             print the current directory
ls [PATH]       list a directory
help            show this message
exit            stop reading commands"""


class Shell:
    """Runs shell-like command lines against a Filesystem."""

    def __init__(self, fs: Filesystem | None = None, out=None, err=None):
        self.fs = fs if fs is not None else Filesystem()
        self.out = out if out is not None else sys.stdout
        self.err = err if err is not None else sys.stderr
        self.commands = {
            "mkdir": self._mkdir,
            "cd": self._cd,
            "pwd": self._pwd,
            "ls": self._ls,
            "help": self._help,
        }

    def _mkdir(self, args: list[str]):
        if not args:
            raise ValueError("missing operand")
        for path in args:
            self.fs.create_dir(path)

    def _cd(self, args: list[str]):
        self.fs.change_dir(args[0] if args else "/")

    def _pwd(self, args: list[str]):
        print(self.fs.print_working_directory(), file=self.out)

    def _ls(self, args: list[str]):
        for name in self.fs.list_dir(args[0] if args else ""):
            print(name, file=self.out)

    def _help(self, args: list[str]):
        print(HELP, file=self.out)

    def execute(self, line: str) -> bool:
        """Execute one command line. Returns False if the command failed."""
        words = line.split()
        if not words or words[0].startswith("#"):
            return True
        name, args = words[0], words[1:]
        command = self.commands.get(name)
        if command is None:
            print(f"{name}: command not found", file=self.err)
            return False
        try:
            command(args)
        except (FilesystemError, ValueError) as e:
            print(f"{name}: {e}", file=self.err)
            return False
        return True

    def run(self, lines, prompt: bool = False) -> int:
        """Execute lines until exhausted or 'exit'. Returns the number of failures."""
        failures = 0
        for line in lines:
            if line.strip() in ("exit", "quit"):
                break
            if not self.execute(line):
                failures += 1
            if prompt:
                self._prompt()
        return failures

    def _prompt(self):
        print(f"vfs:{self.fs.print_working_directory()}$ ", end="", file=self.out, flush=True)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="vfs-shell: in-memory directory tree with mkdir, cd, pwd and ls"
    )
    parser.add_argument("script", nargs="?", help="File of commands to run, one per line")
    parser.add_argument("-c", "--command", help="Commands to run, separated by ';'")
    args = parser.parse_args(argv)

    shell = Shell()

    if args.command is not None:
        failures = shell.run(args.command.split(";"))
    elif args.script is not None:
        if not os.path.exists(args.script):
            print(f"Error: {args.script} not found", file=sys.stderr)
            sys.exit(1)
        with open(args.script, "r", encoding="utf-8") as f:
            failures = shell.run(f)
    else:
        interactive = sys.stdin.isatty()
        if interactive:
            shell._prompt()
        failures = shell.run(sys.stdin, prompt=interactive)

    if failures:
        sys.exit(1)


if __name__ == "__main__":
    main()
