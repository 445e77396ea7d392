"""Reader for the binary R1CS constraint-system format."""

from dataclasses import dataclass, field as dataclass_field
from os import PathLike
from pathlib import Path

MAGIC = b"r1cs"
VERSION = bytes([1, 0, 0, 0])

HEADER = 1
CONSTRAINTS = 2
WIRE_TO_LABEL = 3
CUSTOM_GATES_USED = 4
CUSTOM_GATES_APPLIED = 5

LinearCombination = dict[int, int]
Constraint = tuple[LinearCombination, LinearCombination, LinearCombination]


class R1CSFormatError(ValueError):
    """Raised when a file is not a well-formed R1CS file."""


@dataclass
class R1CSHeader:
    """Contents of the header section."""

    field: int = 0
    field_size: int = 0
    total_wires: int = 0
    public_outputs: int = 0
    public_inputs: int = 0
    private_inputs: int = 0
    number_of_labels: int = 0
    number_of_constraints: int = 0


@dataclass
class R1CSData:
    """Everything read from an R1CS file."""

    header: R1CSHeader = dataclass_field(default_factory=R1CSHeader)
    constraints: list[Constraint] = dataclass_field(default_factory=list)
    signals: list[int] = dataclass_field(default_factory=list)
    custom_gates: bool = False
    custom_gates_used_data: list[tuple[str, list[int]]] | None = None
    custom_gates_applied_data: list[tuple[int, list[int]]] | None = None


class _Cursor:
    """Sequential reader over an in-memory byte string."""

    def __init__(self, data: bytes, position: int = 0):
        self.data = data
        self.position = position

    def read(self, size: int) -> bytes:
        end = self.position + size
        if self.position < 0 or end > len(self.data):
            raise R1CSFormatError("unexpected end of file")
        chunk = self.data[self.position:end]
        self.position = end
        return chunk

    def read_int(self, size: int) -> int:
        return int.from_bytes(self.read(size), "little")

    def read_cstring(self) -> str:
        end = self.data.find(b"\x00", self.position)
        if end < 0:
            raise R1CSFormatError("unexpected end of file")
        raw = self.data[self.position:end]
        self.position = end + 1
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as err:
            raise R1CSFormatError("invalid custom gate name") from err


def _open_section(cursor: _Cursor, kind: int) -> None:
    """Check the section type at the cursor and skip the size field."""
    if cursor.read(4) != bytes([kind, 0, 0, 0]):
        raise R1CSFormatError("Invalid section header")
    cursor.read(8)


def _read_linear_combination(cursor: _Cursor, field_size: int) -> LinearCombination:
    combination: LinearCombination = {}
    for _ in range(cursor.read_int(4)):
        signal = cursor.read_int(4)
        combination[signal] = cursor.read_int(field_size)
    return combination


def _read_header(cursor: _Cursor) -> R1CSHeader:
    field_size = cursor.read_int(4)
    return R1CSHeader(
        field_size=field_size,
        field=cursor.read_int(field_size),
        total_wires=cursor.read_int(4),
        public_outputs=cursor.read_int(4),
        public_inputs=cursor.read_int(4),
        private_inputs=cursor.read_int(4),
        number_of_labels=cursor.read_int(8),
        number_of_constraints=cursor.read_int(4),
    )


def _read_custom_gates_used(cursor: _Cursor, field_size: int) -> list[tuple[str, list[int]]]:
    gates = []
    for _ in range(cursor.read_int(4)):
        name = cursor.read_cstring()
        count = cursor.read_int(4)
        gates.append((name, [cursor.read_int(field_size) for _ in range(count)]))
    return gates


def _read_custom_gates_applied(cursor: _Cursor) -> list[tuple[int, list[int]]]:
    applications = []
    for _ in range(cursor.read_int(4)):
        index = cursor.read_int(4)
        count = cursor.read_int(4)
        applications.append((index, [cursor.read_int(8) for _ in range(count)]))
    return applications


def _section_starts(cursor: _Cursor, n_sections: int) -> dict[int, int]:
    starts: dict[int, int] = {}
    for _ in range(n_sections):
        start = cursor.position
        section_type = cursor.read(4)[0]
        size = cursor.read_int(8)
        if not 1 <= section_type <= n_sections:
            raise R1CSFormatError("Invalid section type")
        starts[section_type] = start
        cursor.position += size
    return starts


def _locate(starts: dict[int, int], kind: int, name: str) -> int:
    try:
        return starts[kind]
    except KeyError:
        raise R1CSFormatError(f'Section "{name}" not present') from None


def read_r1cs(path: str | PathLike) -> R1CSData:
    """Read an R1CS file into an :class:`R1CSData`."""
    cursor = _Cursor(Path(path).read_bytes())
    if cursor.read(len(MAGIC)) != MAGIC:
        raise R1CSFormatError("Invalid magic number")
    if cursor.read(len(VERSION)) != VERSION:
        raise R1CSFormatError("Invalid version")
    n_sections = cursor.read(4)[0]

    info = R1CSData(custom_gates=n_sections == 5)
    starts = _section_starts(cursor, n_sections)

    cursor.position = _locate(starts, HEADER, "Header")
    _open_section(cursor, HEADER)
    info.header = _read_header(cursor)
    field_size = info.header.field_size

    cursor.position = _locate(starts, CONSTRAINTS, "Constraints")
    _open_section(cursor, CONSTRAINTS)
    info.constraints = [
        (
            _read_linear_combination(cursor, field_size),
            _read_linear_combination(cursor, field_size),
            _read_linear_combination(cursor, field_size),
        )
        for _ in range(info.header.number_of_constraints)
    ]

    cursor.position = _locate(starts, WIRE_TO_LABEL, "Signals")
    _open_section(cursor, WIRE_TO_LABEL)
    info.signals = [cursor.read_int(8) for _ in range(info.header.total_wires)]

    if info.custom_gates:
        cursor.position = _locate(starts, CUSTOM_GATES_USED, "Custom Gates Used")
        _open_section(cursor, CUSTOM_GATES_USED)
        info.custom_gates_used_data = _read_custom_gates_used(cursor, field_size)

        cursor.position = _locate(starts, CUSTOM_GATES_APPLIED, "Custom Gates Applied")
        _open_section(cursor, CUSTOM_GATES_APPLIED)
        info.custom_gates_applied_data = _read_custom_gates_applied(cursor)

    return info