"""Writer for the binary R1CS constraint-system format."""

from dataclasses import dataclass
from enum import IntEnum
from os import PathLike
from pathlib import Path
from typing import Iterable, Mapping, Sequence

MAGIC = b"r1cs"
VERSION = 1

LinearCombination = Mapping[int, int]


class SectionType(IntEnum):
    """Section identifiers used in an R1CS file."""

    HEADER = 1
    CONSTRAINTS = 2
    WIRE_TO_LABEL = 3
    CUSTOM_GATES_USED = 4
    CUSTOM_GATES_APPLIED = 5


def _minimal_le(value: int) -> bytes:
    """Little-endian bytes of the magnitude of ``value``, at least one byte long."""
    magnitude = abs(value)
    return magnitude.to_bytes(max(1, (magnitude.bit_length() + 7) // 8), "little")


def _int_bytes(value: int, width: int) -> bytes:
    """Little-endian magnitude of ``value`` padded with zeros up to ``width`` bytes."""
    return _minimal_le(value).ljust(width, b"\x00")


def encode_linear_combination(combination: LinearCombination, field_size: int) -> bytes:
    """Encode a linear combination as count, then (wire id, factor) pairs.

    Entries are ordered by the little-endian byte string of the wire id.
    """
    parts = [_int_bytes(len(combination), 4)]
    ordered = sorted(
        ((_minimal_le(signal), factor) for signal, factor in combination.items()),
        key=lambda entry: entry[0],
    )
    for id_bytes, factor in ordered:
        parts.append(id_bytes.ljust(4, b"\x00"))
        parts.append(_int_bytes(factor, field_size))
    return b"".join(parts)


@dataclass
class HeaderData:
    """Contents of the header section."""

    field: int
    total_wires: int
    public_outputs: int
    public_inputs: int
    private_inputs: int
    number_of_labels: int
    number_of_constraints: int


class R1CSWriter:
    """Writes an R1CS file section by section."""

    def __init__(self, path: str | PathLike, field_size: int, custom_gates: bool = False):
        self.path = Path(path)
        self.field_size = field_size
        self.custom_gates = custom_gates
        self.sections_written: set[SectionType] = set()
        num_sections = 5 if custom_gates else 3
        self._file = open(self.path, "wb")
        self._file.write(MAGIC + _int_bytes(VERSION, 4) + bytes([num_sections, 0, 0, 0]))

    def _write_section(self, kind: SectionType, payload: bytes) -> None:
        if self._file.closed:
            raise ValueError("R1CS writer is closed")
        self._file.write(_int_bytes(kind, 4))
        self._file.write(_int_bytes(len(payload), 8))
        self._file.write(payload)
        self.sections_written.add(kind)

    def write_header(self, data: HeaderData) -> None:
        """Write the header section."""
        fields = (
            (data.total_wires, 4),
            (data.public_outputs, 4),
            (data.public_inputs, 4),
            (data.private_inputs, 4),
            (data.number_of_labels, 8),
            (data.number_of_constraints, 4),
        )
        payload = b"".join(
            [
                _int_bytes(self.field_size, 4),
                _int_bytes(data.field, self.field_size),
                *(_int_bytes(value, width) for value, width in fields),
            ]
        )
        self._write_section(SectionType.HEADER, payload)

    def write_constraints(
        self,
        constraints: Iterable[tuple[LinearCombination, LinearCombination, LinearCombination]],
    ) -> int:
        """Write the constraints section; return the number of constraints written."""
        blocks = []
        for a, b, c in constraints:
            blocks.append(encode_linear_combination(a, self.field_size))
            blocks.append(encode_linear_combination(b, self.field_size))
            blocks.append(encode_linear_combination(c, self.field_size))
        self._write_section(SectionType.CONSTRAINTS, b"".join(blocks))
        return len(blocks) // 3

    def write_signals(self, signals: Iterable[int]) -> None:
        """Write the wire-to-label section, eight bytes per signal."""
        payload = b"".join(_int_bytes(signal, 8) for signal in signals)
        self._write_section(SectionType.WIRE_TO_LABEL, payload)

    def write_custom_gates_used(self, data: Iterable[tuple[str, Sequence[int]]]) -> None:
        """Write the custom-gates-used section from (name, parameters) pairs."""
        entries = list(data)
        parts = [_int_bytes(len(entries), 4)]
        for name, parameters in entries:
            parts.append(name.encode("utf-8") + b"\x00")
            parts.append(_int_bytes(len(parameters), 4))
            parts.extend(_int_bytes(p, self.field_size) for p in parameters)
        self._write_section(SectionType.CUSTOM_GATES_USED, b"".join(parts))

    def write_custom_gates_applied(self, data: Iterable[tuple[int, Sequence[int]]]) -> None:
        """Write the custom-gates-applied section from (gate index, signals) pairs."""
        entries = list(data)
        parts = [_int_bytes(len(entries), 4)]
        for index, signals in entries:
            parts.append(_int_bytes(index, 4))
            parts.append(_int_bytes(len(signals), 4))
            parts.extend(_int_bytes(s, 8) for s in signals)
        self._write_section(SectionType.CUSTOM_GATES_APPLIED, b"".join(parts))

    def close(self) -> None:
        """Flush and close the underlying file."""
        if not self._file.closed:
            self._file.flush()
            self._file.close()

    def __enter__(self) -> "R1CSWriter":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()