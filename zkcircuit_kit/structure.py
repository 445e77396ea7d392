"""Circuit structure descriptions read from JSON files."""

import json
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from typing import Any, Mapping


def _require(data: Mapping[str, Any], key: str) -> Any:
    try:
        return data[key]
    except KeyError:
        raise ValueError(f"missing field {key!r}") from None
    except TypeError:
        raise ValueError("expected a JSON object") from None


def _int_list(data: Mapping[str, Any], key: str) -> list[int]:
    return [int(v) for v in _require(data, key)]


def _str_list(data: Mapping[str, Any], key: str) -> list[str]:
    return [str(v) for v in _require(data, key)]


@dataclass
class TimingInfo:
    """Seconds spent in each phase of the analysis."""

    graph_construction: float | None
    clustering: float
    dag_construction: float
    equivalency: float
    total: float

    def __iadd__(self, other: "TimingInfo") -> "TimingInfo":
        if self.graph_construction is None or other.graph_construction is None:
            self.graph_construction = None
        else:
            self.graph_construction += other.graph_construction
        self.clustering += other.clustering
        self.dag_construction += other.dag_construction
        self.equivalency += other.equivalency
        self.total += other.total
        return self

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TimingInfo":
        graph = data.get("graph_construction") if isinstance(data, Mapping) else None
        return cls(
            graph_construction=None if graph is None else float(graph),
            clustering=float(_require(data, "clustering")),
            dag_construction=float(_require(data, "dag_construction")),
            equivalency=float(_require(data, "equivalency")),
            total=float(_require(data, "total")),
        )


@dataclass
class NodeInfo:
    """One node of the circuit's cluster graph."""

    node_id: int
    node_name: str
    constraints: list[int]
    input_signals: list[int]
    output_signals: list[int]
    signals: list[int]
    is_custom: bool
    predecessors: list[int] = field(default_factory=list)
    successors: list[int] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "NodeInfo":
        return cls(
            node_id=int(_require(data, "node_id")),
            node_name=str(_require(data, "node_name")),
            constraints=_int_list(data, "constraints"),
            input_signals=_int_list(data, "input_signals"),
            output_signals=_int_list(data, "output_signals"),
            signals=_int_list(data, "signals"),
            is_custom=bool(_require(data, "is_custom")),
            predecessors=_int_list(data, "predecessors"),
            successors=_int_list(data, "successors"),
        )


@dataclass
class StructureInfo:
    """Nodes of a circuit together with their equivalence classes."""

    timing: TimingInfo
    nodes: list[NodeInfo]
    local_equivalency: list[list[int]]
    structural_equivalency: list[list[int]]


@dataclass
class SpecificationInfo:
    """SMT specification of one node, with signals and constraints as text."""

    node_id: int
    node_name: str
    constraints: list[str]
    input_signals: list[str]
    output_signals: list[str]
    signals: list[str]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SpecificationInfo":
        return cls(
            node_id=int(_require(data, "node_id")),
            node_name=str(_require(data, "node_name")),
            constraints=_str_list(data, "constraints"),
            input_signals=_str_list(data, "input_signals"),
            output_signals=_str_list(data, "output_signals"),
            signals=_str_list(data, "signals"),
        )


def structure_from_dict(data: Mapping[str, Any]) -> StructureInfo:
    """Build a structure from its JSON form.

    Without local equivalence classes each node is its own class; without
    structural classes the local ones are used.
    """
    timing = TimingInfo.from_dict(_require(data, "timing"))
    nodes = [NodeInfo.from_dict(node) for node in _require(data, "nodes")]

    local = data.get("equivalency_local")
    if local is None:
        local_classes = [[node.node_id] for node in nodes]
    else:
        local_classes = [[int(v) for v in group] for group in local]

    structural = data.get("equivalency_structural")
    if structural is None:
        structural_classes = [list(group) for group in local_classes]
    else:
        structural_classes = [[int(v) for v in group] for group in structural]

    return StructureInfo(timing, nodes, local_classes, structural_classes)


def _load_json(path: str | PathLike) -> Any:
    with Path(path).open("r", encoding="utf-8") as handle:
        return json.load(handle)


def read_structure(path: str | PathLike) -> StructureInfo:
    """Read a structure JSON file."""
    return structure_from_dict(_load_json(path))


def generate_empty_structure(
    n_constraints: int, n_signals: int, n_outputs: int, n_inputs: int
) -> StructureInfo:
    """Structure with a single node ``main`` holding the whole circuit."""
    timing = TimingInfo(
        graph_construction=0.0,
        clustering=0.0,
        dag_construction=0.0,
        equivalency=0.0,
        total=0.0,
    )
    node = NodeInfo(
        node_id=0,
        node_name="main",
        constraints=list(range(n_constraints)),
        input_signals=list(range(n_outputs + 1, n_outputs + n_inputs + 1)),
        output_signals=list(range(1, n_outputs + 1)),
        signals=list(range(1, n_signals)),
        is_custom=False,
    )
    return StructureInfo(timing, [node], [[0]], [[0]])


def read_original_structure(path: str | PathLike) -> dict[int, str]:
    """Read a JSON object mapping integer ids to names, sorted by id."""
    data = _load_json(path)
    if not isinstance(data, dict):
        raise ValueError("expected a JSON object")
    result: dict[int, str] = {}
    for key, value in data.items():
        if not isinstance(value, str):
            raise ValueError(f"value for {key!r} is not a string")
        try:
            number = int(key)
        except ValueError:
            raise ValueError(f"key {key!r} is not an integer") from None
        if number < 0:
            raise ValueError(f"key {key!r} is negative")
        result[number] = value
    return dict(sorted(result.items()))


def read_smt_specification(path: str | PathLike) -> SpecificationInfo:
    """Read a node specification JSON file."""
    return SpecificationInfo.from_dict(_load_json(path))