"""
Response vocabulary: what a node body (or the editor itself) reports back
to the host after a redraw.

Two layers:

* user responses (``SetActiveNode``, ``ClearActiveNode``): the closed set a
  node body may emit. Only ``GraphState.apply`` consumes them.
* graph responses: the editor-level events a redraw or an edit produces.
  ``UserResponse`` wraps a user response so both travel in one list.

All of them are frozen dataclasses so they compare by variant *and* payload.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union


# ── User responses ──────────────────────────────────────────────────────────

@dataclass(frozen=True)
class SetActiveNode:
    node_id: str


@dataclass(frozen=True)
class ClearActiveNode:
    pass


Response = Union[SetActiveNode, ClearActiveNode]


# ── Graph responses ─────────────────────────────────────────────────────────

@dataclass(frozen=True)
class UserResponse:
    response: Response


@dataclass(frozen=True)
class CreatedNode:
    node_id: str


@dataclass(frozen=True)
class SelectNode:
    node_id: str


@dataclass(frozen=True)
class DeleteNodeFull:
    node_id: str
    node: Any  # the removed Node, handed back so the host can inspect its data


@dataclass(frozen=True)
class ConnectEventEnded:
    output_id: str
    input_id: str


@dataclass(frozen=True)
class DisconnectEvent:
    output_id: str
    input_id: str


NodeResponse = Union[
    UserResponse,
    CreatedNode,
    SelectNode,
    DeleteNodeFull,
    ConnectEventEnded,
    DisconnectEvent,
]
