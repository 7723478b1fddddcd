"""
spec.py

In-memory shape of a session spec file:

  session: work
  windows:
    - name: dev
      layout: even-horizontal
      panes:
        - command: vim
          path: ~/src/app
        - command: make watch

Loading only checks shape. Whether the result can actually be built (at least
one window, at least one pane per window) is decided by the builder.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Mapping, Union

import yaml

from .errors import InputError, ParseError


class SpecLoader(yaml.SafeLoader):
    """Safe loader that leaves plain scalars as written.

    Only null (and merge keys) are still resolved implicitly, so `true`, `yes`,
    `12:30` or `0755` reach the model as the strings the author typed.
    """


SpecLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers
            if tag in ("tag:yaml.org,2002:null", "tag:yaml.org,2002:merge")]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


# ---------------------------
# Model
# ---------------------------

@dataclass(frozen=True)
class Pane:
    command: str = ""
    path: str = ""


@dataclass(frozen=True)
class Window:
    name: str = ""
    layout: str = ""
    panes: List[Pane] = field(default_factory=list)


@dataclass(frozen=True)
class SessionSpecification:
    session: str = ""
    windows: List[Window] = field(default_factory=list)

    @staticmethod
    def from_yaml(path: Union[str, Path]) -> "SessionSpecification":
        """! @brief Load a spec from a YAML file.

        @param path Spec file path.
        @return Parsed specification.
        @throws InputError if the file cannot be opened or read.
        @throws ParseError if the content is not YAML or has the wrong shape.
        """
        path = Path(path)
        try:
            with path.open("r", encoding="utf-8") as f:
                try:
                    text = f.read()
                except (OSError, UnicodeDecodeError) as e:
                    raise InputError(f"failed to read spec: {e}") from e
        except OSError as e:
            raise InputError(f"failed to open spec: {e}") from e

        try:
            data = yaml.load(text, Loader=SpecLoader)
        except yaml.YAMLError as e:
            raise ParseError(f"failed to parse YAML: {e}") from e
        return SessionSpecification.from_mapping(data)

    @staticmethod
    def from_mapping(data: Any) -> "SessionSpecification":
        """! @brief Build a spec from an already-loaded YAML document.

        An empty document yields an empty spec. Missing optional strings become "".

        @param data Result of yaml.load with SpecLoader.
        @return Parsed specification.
        @throws ParseError on a shape mismatch.
        """
        if data is None:
            data = {}
        doc = _mapping(data, "document")
        windows = [
            _window(w, f"windows[{i}]")
            for i, w in enumerate(_sequence(doc.get("windows"), "windows"))
        ]
        return SessionSpecification(session=_text(doc.get("session"), "session"), windows=windows)


# ---------------------------
# Shape helpers
# ---------------------------

def _window(data: Any, where: str) -> Window:
    w = _mapping(data, where)
    panes = [
        _pane(p, f"{where}.panes[{j}]")
        for j, p in enumerate(_sequence(w.get("panes"), f"{where}.panes"))
    ]
    return Window(
        name=_text(w.get("name"), f"{where}.name"),
        layout=_text(w.get("layout"), f"{where}.layout"),
        panes=panes,
    )


def _pane(data: Any, where: str) -> Pane:
    p = _mapping(data, where)
    return Pane(
        command=_text(p.get("command"), f"{where}.command"),
        path=_text(p.get("path"), f"{where}.path"),
    )


def _mapping(value: Any, where: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ParseError(f"failed to parse YAML: {where} must be a mapping, got {type(value).__name__}")
    return value


def _sequence(value: Any, where: str) -> List[Any]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ParseError(f"failed to parse YAML: {where} must be a list, got {type(value).__name__}")
    return value


def _text(value: Any, where: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ParseError(f"failed to parse YAML: {where} must be a string, got {type(value).__name__}")
    return value
