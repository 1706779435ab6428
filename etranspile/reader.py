"""Reading input files and processing their tag lines."""

from __future__ import annotations

from etranspile.model import FileData
from etranspile.project import Project
from etranspile.tools import Log, trim_text


def read_file(file_path: str, project: Project) -> "Reader":
    """Create a reader for ``file_path`` and register it if the file exists."""
    reader = Reader(file_path, project)
    print(1 if reader.file_exists else 0)
    if reader.file_exists:
        project.add_reader(reader)
    else:
        Log.write_line(file_path + " is not existing")
    return reader


class Reader:
    """Reads one input file, scanning its leading tag lines."""

    def __init__(self, file_path: str, project: Project) -> None:
        self.project = project
        self.data = FileData()
        self.logger = Log(self.data)
        self.file_exists = True
        self.total_line = 0

        Log.write_line("Openning " + file_path)
        try:
            handle = open(file_path, encoding="utf-8", newline="")
        except OSError:
            Log.write_line("Cannot open file" + self.data.path)
            self.file_exists = False
            return
        with handle:
            Log.write_line("File openned")
            self._initialize(file_path, handle)

    def _initialize(self, file_path: str, handle) -> None:
        self.data.path = file_path
        self.data.input_file_path = file_path
        self._set_file_name_and_dir(file_path)
        Log.write_line("FileName: " + self.data.file_name)
        self._find_tags(handle)

    def _set_file_name_and_dir(self, file_path: str) -> None:
        parts = trim_text(file_path, "/\\")
        self.data.file_name = parts[-1]
        if not self.project.input_dir:
            directory = "".join(p + "/" for p in parts if p != self.data.file_name)
            if directory:
                self.project.set_input_dir(directory)

    def _find_tags(self, handle) -> None:
        self.data.current_line = 0
        while True:
            self.data.current_line += 1
            line = handle.readline()
            if line.endswith("\n"):
                line = line[:-1]
            if not line:
                break
            if line.startswith("#"):
                content = line[1:]
                print(f"{self.data.file_name} {self.data.current_line}.{content}")
                if self._identify_tag(content):
                    self.data.tag_lines.append(self.data.current_line)
        self.total_line = self.data.current_line - 1

    def _identify_tag(self, content: str) -> bool:
        """Act on one tag; return False when the tag is in error."""
        words = trim_text(content, " ")
        if not words:
            return False
        tag = words[0]
        if tag == "Use":
            if len(words) != 2:
                self.logger.err("No file name to include", "")
                return False
            read_file(self.project.input_dir + words[1], self.project)
        elif tag == "Entry":
            if self.data.path != self.project.entry_file:
                self.logger.err("Entry function have to be inside the entry file", "")
                return False
            if self.project.entry_function or len(words) != 2:
                self.logger.err(
                    "Entry function has already been set or there is no function after entry tag",
                    "",
                )
                return False
            Log.write_line("Set entry function " + words[1])
            self.project.entry_function = words[1]
        return True