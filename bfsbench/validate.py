"""Validation of a BFS predecessor map against the graph's edge list.

Predecessor entries are signed 64-bit values. The low 48 bits hold the
predecessor vertex, sign-extended, and the high 16 bits hold a BFS depth.
Validation writes the depths, so an unreached vertex (predecessor -1,
depth ``UINT16_MAX``) has the entry -1.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Sequence

UINT16_MAX = 0xFFFF

_LOW48 = (1 << 48) - 1
_SIGN48 = 1 << 47
_SIGN64 = 1 << 63
_WRAP64 = 1 << 64


def get_pred_from_entry(val: int) -> int:
    """Return the predecessor stored in the low 48 bits, sign-extended."""
    low = val & _LOW48
    if low & _SIGN48:
        low -= 1 << 48
    return low


def get_depth_from_entry(val: int) -> int:
    """Return the depth stored in the high 16 bits."""
    return (val >> 48) & 0xFFFF


def with_depth(val: int, depth: int) -> int:
    """Return ``val`` with its high 16 bits replaced by ``depth``."""
    new = (val & _LOW48) | ((depth & 0xFFFF) << 48)
    if new >= _SIGN64:
        new -= _WRAP64
    return new


@dataclass
class ValidationResult:
    """Outcome of validating one BFS run.

    ``entries`` is the predecessor map with depths written into the high
    bits; ``errors`` lists every problem found.
    """

    passed: bool
    edge_visit_count: int
    entries: list[int] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    def __bool__(self) -> bool:
        return self.passed

    @property
    def depths(self) -> list[int | None]:
        """Depth of every vertex, or None where it is unreached."""
        result: list[int | None] = []
        for entry in self.entries:
            depth = get_depth_from_entry(entry)
            result.append(None if depth == UINT16_MAX else depth)
        return result


def _check_value_ranges(nglobalverts: int, pred: Sequence[int],
                        errors: list[str]) -> bool:
    ok = True
    for v, entry in enumerate(pred):
        p = get_pred_from_entry(entry)
        if p < -1 or p >= nglobalverts:
            errors.append(
                f"Validation error: parent of vertex {v} is out-of-range value {p}."
            )
            ok = False
    return ok


def _build_depth_map(root: int, pred: list[int], errors: list[str]) -> bool:
    """Write depths into ``pred`` by relaxing along predecessors."""
    ok = True
    for v in range(len(pred)):
        pred[v] = with_depth(pred[v], UINT16_MAX)
    pred[root] = with_depth(pred[root], 0)

    while True:
        gathered = []
        for entry in pred:
            p = get_pred_from_entry(entry)
            gathered.append(-1 if entry == -1 or p == -1 else pred[p])
        any_changes = False
        for v, pp in enumerate(gathered):
            if v == root:
                continue
            pp_depth = get_depth_from_entry(pp)
            if pp_depth == UINT16_MAX:
                continue
            depth = get_depth_from_entry(pred[v])
            if depth != UINT16_MAX and depth != pp_depth + 1:
                errors.append(
                    "Validation error: BFS predecessors do not form a tree; "
                    f"see vertices {v} (depth {depth}) and "
                    f"{get_pred_from_entry(pred[v])} (depth {pp_depth})."
                )
                ok = False
            elif depth == pp_depth + 1:
                pass
            else:
                pred[v] = with_depth(pred[v], pp_depth + 1)
                any_changes = True
        if not any_changes:
            return ok


def validate_bfs_result(edges: Iterable[tuple[int, int]], nglobalverts: int,
                        root: int, pred: Sequence[int]) -> ValidationResult:
    """Check a BFS predecessor map against the graph's edges.

    ``pred`` holds one entry per vertex. The input is not modified; the
    map with depths is returned in the result. Raises ValueError when
    ``pred`` is too short for ``nglobalverts`` or an edge names a vertex
    outside the map.
    """
    entries = list(pred)
    nverts = len(entries)
    if nglobalverts > nverts:
        raise ValueError(
            f"predecessor map holds {nverts} entries but {nglobalverts} vertices are checked"
        )
    errors: list[str] = []

    ranges_ok = _check_value_ranges(nglobalverts, entries, errors)
    if root < 0 or root >= nglobalverts:
        errors.append(f"Validation error: root vertex {root} is invalid.")
        ranges_ok = False
    if not ranges_ok:
        return ValidationResult(False, 0, entries, errors)

    passed = True
    root_parent = get_pred_from_entry(entries[root])
    if root_parent != root:
        errors.append(
            f"Validation error: parent of root vertex {root} is {root_parent}, "
            "not the root itself."
        )
        passed = False

    for v, entry in enumerate(entries):
        if v != root and get_pred_from_entry(entry) == v:
            errors.append(f"Validation error: parent of non-root vertex {v} is itself.")
            passed = False

    if not _build_depth_map(root, entries, errors):
        passed = False

    pred_valid = bytearray(nverts)
    edge_visit_count = 0
    for src, tgt in edges:
        for endpoint in (src, tgt):
            if not 0 <= endpoint < nverts:
                raise ValueError(
                    f"edge ({src}, {tgt}) names a vertex outside 0..{nverts - 1}"
                )
        src_entry = entries[src]
        tgt_entry = entries[tgt]
        src_depth = get_depth_from_entry(src_entry)
        tgt_depth = get_depth_from_entry(tgt_entry)
        if src_depth != UINT16_MAX and tgt_depth == UINT16_MAX:
            errors.append(
                f"Validation error: edge connects vertex {src} in the BFS tree "
                f"(depth {src_depth}) to vertex {tgt} outside the tree."
            )
            passed = False
        elif src_depth == UINT16_MAX and tgt_depth != UINT16_MAX:
            errors.append(
                f"Validation error: edge connects vertex {tgt} in the BFS tree "
                f"(depth {tgt_depth}) to vertex {src} outside the tree."
            )
            passed = False
        elif abs(src_depth - tgt_depth) > 1:
            errors.append(
                f"Validation error: depths of edge endpoints {src} (depth {src_depth}) "
                f"and {tgt} (depth {tgt_depth}) are too far apart (abs. val. > 1)."
            )
            passed = False
        elif src_depth != UINT16_MAX:
            edge_visit_count += 1
        if get_pred_from_entry(src_entry) == tgt:
            pred_valid[src] = 1
        if get_pred_from_entry(tgt_entry) == src:
            pred_valid[tgt] = 1

    for v, entry in enumerate(entries):
        p = get_pred_from_entry(entry)
        if p == -1:
            continue
        if not pred_valid[v] and v != root:
            errors.append(
                f"Validation error: no graph edge from vertex {v} to its parent {p}."
            )
            passed = False

    return ValidationResult(passed, edge_visit_count, entries, errors)