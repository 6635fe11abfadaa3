"""Front-matter parsing and format conversion for the command file.

The command file is Markdown with an optional leading metadata block::

    ---
    description: Review UI code against the guidelines
    argument-hint: <file>
    ---

    # Web Interface Guidelines
    ...

Everything here is pure text processing; nothing touches the filesystem.
"""

import re
from typing import Dict, List, NamedTuple, Optional, Tuple

SEPARATOR = re.compile(r"^---[ \t\f\v]*$")


class FrontMatter(NamedTuple):
    """A document split into its metadata fields and body."""

    fields: Dict[str, str]
    body: str


def normalize_newlines(text: str) -> str:
    """Remove every carriage return, leaving LF line endings."""
    return text.replace("\r", "")


def _front_matter_bounds(lines: List[str]) -> Optional[Tuple[int, int]]:
    """Index of the first two separator lines, or None."""
    found = []
    for i, line in enumerate(lines):
        if SEPARATOR.match(line):
            found.append(i)
            if len(found) == 2:
                return found[0], found[1]
    return None


def split_front_matter(text: str) -> FrontMatter:
    """Split a Markdown document into front matter and body.

    Parameters
    ----------
    text : str
        The raw document. Line endings are normalised first.

    Returns
    -------
    FrontMatter
        When the document has at least two separator lines, the lines
        between the first two are parsed as ``key: value`` pairs and the
        body is everything after the second separator. Otherwise there is
        no front matter and the body is the whole document.
    """
    text = normalize_newlines(text)
    lines = text.split("\n")
    bounds = _front_matter_bounds(lines)
    if bounds is None:
        return FrontMatter({}, text)

    start, end = bounds
    block = lines[start + 1 : end]
    fields: Dict[str, str] = {}
    for line in block:
        key, sep, value = line.partition(":")
        # Indented lines belong to a nested value, not a top-level key
        if not sep or not key or key != key.strip():
            continue
        fields.setdefault(key, value.strip())
    return FrontMatter(fields, "\n".join(lines[end + 1 :]))


def escape_toml_basic(value: str) -> str:
    """Escape a value for a TOML basic or multi-line basic string."""
    return value.replace("\\", "\\\\").replace('"', '\\"')


def to_gemini_toml(text: str) -> str:
    """Convert the command file into a Gemini CLI TOML command.

    The front-matter ``description`` becomes the ``description`` key and the
    body becomes a multi-line ``prompt`` with backslashes doubled and quotes
    escaped, so triple quotes in code samples cannot close the string.
    """
    parsed = split_front_matter(text)
    description = escape_toml_basic(parsed.fields.get("description", ""))

    body_lines = parsed.body.split("\n")
    if body_lines[-1] == "":
        body_lines.pop()
    prompt = "".join(escape_toml_basic(line) + "\n" for line in body_lines)

    return f'description = "{description}"\nprompt = """\n{prompt}"""\n'


def to_antigravity_skill(text: str, name: str) -> str:
    """Convert the command file into an Antigravity ``SKILL.md``.

    A ``name:`` field is added before ``description:`` and ``argument-hint:``
    is dropped. Documents without front matter are returned unchanged.
    """
    lines = normalize_newlines(text).split("\n")
    bounds = _front_matter_bounds(lines)
    if bounds is None:
        return text

    start, end = bounds
    meta: List[str] = []
    for line in lines[start + 1 : end]:
        if line.startswith("argument-hint:"):
            continue
        if line.startswith("description:"):
            meta.append(f"name: {name}")
        meta.append(line)
    return "\n".join(lines[: start + 1] + meta + lines[end:])
