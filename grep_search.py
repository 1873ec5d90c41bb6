from grep_config import Config, GrepError


class IoError(GrepError):
    """The target file could not be read as UTF-8 text."""

    def __init__(self, file_path, reason):
        super().__init__(f"Error reading {file_path}: {reason}")
        self.file_path = file_path


def read_contents(file_path) -> str:
    """Reads the whole file into memory. Line endings are left as they are on disk."""
    try:
        with open(file_path, encoding="utf-8", newline="") as fh:
            return fh.read()
    except FileNotFoundError as err:
        raise IoError(file_path, "file not found") from err
    except UnicodeDecodeError as err:
        raise IoError(file_path, f"not valid UTF-8 ({err.reason})") from err
    except OSError as err:
        raise IoError(file_path, err.strerror or err) from err


def split_lines(contents: str) -> list[str]:
    """
    Splits on \\n only. A \\r is dropped when it is part of a \\r\\n pair;
    a bare \\r stays in the line. No empty line follows a final newline.
    """
    if not contents:
        return []
    pieces = contents.split("\n")
    tail = pieces.pop()

    lines = [piece[:-1] if piece.endswith("\r") else piece for piece in pieces]
    if tail:
        lines.append(tail)
    return lines


def search(query: str, contents: str) -> list[str]:
    return [line for line in split_lines(contents) if query in line]


def search_case_insensitive(query: str, contents: str) -> list[str]:
    query = query.lower()
    results = []

    for line in split_lines(contents):
        if query in line.lower():
            results.append(line)

    return results


def find_matches(config: Config, contents: str) -> list[str]:
    if config.ignore_case:
        return search_case_insensitive(config.query, contents)
    return search(config.query, contents)
