"""Split a raw commit message into header fields, body and footer."""
import re
from typing import List, Optional, Tuple

from ..errors import FormatError
from ..models import ParsedMessage

EXPECTED_FORMAT = "expected format 'TYPE(SCOPE): DESCRIPTION'"

# type and scope exclude '(', ')' and ':', type also excludes whitespace.
# Only the first colon after the optional scope group ends the header prefix.
HEADER_PATTERN = re.compile(
    r"^\s*(?P<type>[^\s():]+)\s*"
    r"(?:\((?P<scope>[^():]*)\))?\s*"
    r":(?P<description>.*)$"
)

# Trailer lines: "Token: value", "Token #value" or "BREAKING CHANGE: value".
FOOTER_PATTERN = re.compile(r"^(?:BREAKING[ -]CHANGE|[\w-]+)(?::\s|\s#)")


def _header_error(header: str) -> FormatError:
    if ":" not in header:
        return FormatError(f"{EXPECTED_FORMAT}, no ':' separator in the header", header)
    prefix = header.split(":", 1)[0]
    if "(" in prefix or ")" in prefix:
        return FormatError(f"{EXPECTED_FORMAT}, failed to read the scope from the header", header)
    return FormatError(f"{EXPECTED_FORMAT}, failed to read the type from the header", header)


def parse_header(header: str) -> Tuple[str, Optional[str], str]:
    """Parse a header line into its type, scope and description.

    Raises:
        FormatError: If the line is not a ``type(scope): description`` header
    """
    match = HEADER_PATTERN.match(header)
    if not match:
        raise _header_error(header)
    scope = match.group("scope")
    return (
        match.group("type").strip(),
        scope.strip() if scope is not None else None,
        match.group("description").strip(),
    )


def _paragraphs(lines: List[str]) -> List[List[int]]:
    """Group the indexes of non-blank lines into blank-line separated runs."""
    paragraphs: List[List[int]] = [[]]
    for index, line in enumerate(lines):
        if line.strip():
            paragraphs[-1].append(index)
        elif paragraphs[-1]:
            paragraphs.append([])
    return [p for p in paragraphs if p]


def split_body_and_footer(lines: List[str]) -> Tuple[Optional[str], Optional[str]]:
    """Separate the trailing footer paragraph from the body lines."""
    paragraphs = _paragraphs(lines)
    if not paragraphs:
        return None, None

    footer = None
    if all(FOOTER_PATTERN.match(lines[i]) for i in paragraphs[-1]):
        footer = "\n".join(lines[i].rstrip() for i in paragraphs.pop())

    # Keep the body's internal blank lines, only trim around it.
    body = None
    if paragraphs:
        start, end = paragraphs[0][0], paragraphs[-1][-1]
        body = "\n".join(line.rstrip() for line in lines[start:end + 1]).strip()
    return body or None, footer


def tokenize(raw: str) -> ParsedMessage:
    """Tokenize a raw commit message.

    Args:
        raw: The full commit message text

    Returns:
        ParsedMessage: The header fields with optional body and footer

    Raises:
        FormatError: If no colon delimited header can be identified
    """
    lines = raw.replace("\r\n", "\n").split("\n")
    while lines and not lines[0].strip():
        lines.pop(0)
    if not lines:
        raise FormatError(f"{EXPECTED_FORMAT}, the message is empty")

    header = lines[0].strip()
    commit_type, scope, description = parse_header(header)
    body, footer = split_body_and_footer(lines[1:])
    return ParsedMessage(
        header=header,
        type=commit_type,
        scope=scope,
        description=description,
        body=body,
        footer=footer,
    )
