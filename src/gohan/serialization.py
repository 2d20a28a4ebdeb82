"""JSON form of Gohan trees and token streams.

Nodes become dicts tagged with ``_type`` and tuples become lists. Reading a
tree back checks the same shape rules the parser obeys: only Heading and
Paragraph under a Document, only inline nodes under a block or inside a
Link, and heading levels 1 to 6. Bad input raises ValueError naming the
offending node instead of producing a tree the renderer would reject later.

Token streams (the output of scan()) serialize to a list of flat dicts, so
a lexer snapshot can be stored and fed to parse_tokens() later.

Example:
    >>> from gohan import parse
    >>> doc = parse("# Hello **World**")
    >>> from_json(to_json(doc)) == doc
    True

Output always has sorted keys, so equal trees give identical text.
"""

import json
from collections.abc import Sequence
from dataclasses import fields
from typing import Any

from gohan.location import SourceLocation
from gohan.nodes import (
    Digit,
    Document,
    Emphasis,
    Heading,
    LineBreak,
    Link,
    Node,
    Paragraph,
    Strong,
    Text,
)
from gohan.tokens import Token, TokenType

_NODE_TYPES: dict[str, type[Node]] = {
    cls.__name__: cls
    for cls in (Document, Heading, Paragraph, Text, Digit, Emphasis, Strong, Link, LineBreak)
}

_BLOCK_TYPES = (Heading, Paragraph)
_INLINE_TYPES = (Text, Digit, Emphasis, Strong, Link, LineBreak)


def to_dict(node: Node) -> dict[str, Any]:
    """Plain-data form of ``node`` and everything under it.

    Example:
        >>> from gohan.location import SourceLocation
        >>> to_dict(Text(SourceLocation(1, 1, 0, 2), "hi"))["content"]
        'hi'
    """
    data: dict[str, Any] = {"_type": type(node).__name__}
    for f in fields(node):
        data[f.name] = _dump(getattr(node, f.name))
    return data


def _dump(value: Any) -> Any:
    if isinstance(value, Node):
        return to_dict(value)
    if isinstance(value, SourceLocation):
        return _location_to_dict(value)
    if isinstance(value, tuple):
        return [_dump(item) for item in value]
    return value


def _location_to_dict(location: SourceLocation) -> dict[str, Any]:
    return {
        "_type": "SourceLocation",
        "lineno": location.lineno,
        "col_offset": location.col_offset,
        "offset": location.offset,
        "end_offset": location.end_offset,
        "source_file": location.source_file,
    }


def from_dict(data: dict[str, Any]) -> Node:
    """Rebuild a node from to_dict() output, checking its structure.

    A missing ``location`` becomes SourceLocation.unknown(); keys that name
    no field are ignored.

    Raises:
        ValueError: ``_type`` is missing or unknown, a field has the wrong
            kind of value, a node sits where it cannot go, or a heading
            level is outside 1-6.
    """
    return _load_node(data, Node, "top level")


def _load_node(data: Any, allowed: type | tuple[type, ...], where: str) -> Node:
    if not isinstance(data, dict):
        raise ValueError(f"Expected a serialized node at {where}, got {type(data).__name__}")

    type_name = data.get("_type")
    if type_name is None:
        raise ValueError("Missing '_type' field in serialized node")
    node_cls = _NODE_TYPES.get(type_name)
    if node_cls is None:
        raise ValueError(f"Unknown node type: {type_name!r}")
    if not issubclass(node_cls, allowed):
        raise ValueError(f"{type_name} cannot appear in {where}")

    kwargs: dict[str, Any] = {}
    for f in fields(node_cls):
        if f.name not in data:
            if f.name != "location":
                raise ValueError(f"{type_name} is missing {f.name!r}")
            kwargs["location"] = SourceLocation.unknown()
            continue
        kwargs[f.name] = _load_field(node_cls, f.name, data[f.name])
    return node_cls(**kwargs)


def _load_field(node_cls: type[Node], name: str, value: Any) -> Any:
    owner = node_cls.__name__
    match name:
        case "location":
            return _location_from_dict(value)
        case "children" | "url":
            if not isinstance(value, list | tuple):
                raise ValueError(f"{owner}.{name} must be a list, got {type(value).__name__}")
            allowed = _BLOCK_TYPES if node_cls is Document else _INLINE_TYPES
            return tuple(_load_node(item, allowed, f"{owner}.{name}") for item in value)
        case "level":
            if type(value) is not int or not 1 <= value <= 6:
                raise ValueError(f"Heading level must be an integer from 1 to 6, got {value!r}")
            return value
        case "content":
            if not isinstance(value, str):
                raise ValueError(f"{owner}.content must be a string, got {type(value).__name__}")
            return value
    return value


def _location_from_dict(value: Any) -> SourceLocation:
    if not isinstance(value, dict):
        raise ValueError(f"Expected a serialized SourceLocation, got {type(value).__name__}")
    try:
        return SourceLocation(
            lineno=value["lineno"],
            col_offset=value["col_offset"],
            offset=value.get("offset", 0),
            end_offset=value.get("end_offset", 0),
            source_file=value.get("source_file"),
        )
    except KeyError as e:
        raise ValueError(f"SourceLocation is missing {e.args[0]!r}") from e


def to_json(doc: Document, *, indent: int | None = None) -> str:
    """Serialize a Document; compact unless ``indent`` is given."""
    return json.dumps(to_dict(doc), sort_keys=True, indent=indent)


def from_json(data: str) -> Document:
    """Read a Document written by to_json().

    Raises:
        ValueError: The JSON is not a Document, or fails from_dict() checks.
    """
    raw = json.loads(data)
    type_name = raw.get("_type") if isinstance(raw, dict) else type(raw).__name__
    if type_name != "Document":
        raise ValueError(f"Expected Document, got {type_name}")
    return _load_node(raw, Document, "top level")


def token_to_dict(token: Token) -> dict[str, Any]:
    """Flat dict for one token; the type is stored by name.

    Example:
        >>> from gohan.lexer import scan
        >>> token_to_dict(scan("*")[0])["type"]
        'STAR'
    """
    location = token.location
    return {
        "type": token.type.name,
        "value": token.value,
        "lineno": location.lineno,
        "col_offset": location.col_offset,
        "offset": location.offset,
        "end_offset": location.end_offset,
        "source_file": location.source_file,
    }


def token_from_dict(data: dict[str, Any]) -> Token:
    """Rebuild a token from token_to_dict() output.

    Raises:
        ValueError: The type name is unknown or a field is missing.
    """
    try:
        token_type = TokenType[data["type"]]
    except KeyError as e:
        raise ValueError(f"Unknown or missing token type: {data.get('type')!r}") from e
    try:
        return Token(
            token_type,
            data["value"],
            data["lineno"],
            data["col_offset"],
            data["offset"],
            data["end_offset"],
            data.get("source_file"),
        )
    except KeyError as e:
        raise ValueError(f"Token is missing {e.args[0]!r}") from e


def tokens_to_json(tokens: Sequence[Token], *, indent: int | None = None) -> str:
    """Serialize a token list such as scan() returns."""
    return json.dumps([token_to_dict(t) for t in tokens], sort_keys=True, indent=indent)


def tokens_from_json(data: str) -> list[Token]:
    """Read a token list written by tokens_to_json()."""
    raw = json.loads(data)
    if not isinstance(raw, list):
        raise ValueError(f"Expected a list of tokens, got {type(raw).__name__}")
    return [token_from_dict(item) for item in raw]
