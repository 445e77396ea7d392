import pytest

from zkcircuit_kit.r1cs_reader import R1CSData, R1CSFormatError, R1CSHeader, read_r1cs
from zkcircuit_kit.r1cs_writer import HeaderData, R1CSWriter

PRIME = 21888242871839275222246405745257275088548364400416034343698204186575808495617

CONSTRAINTS = [
    ({0: 1, 2: PRIME - 1}, {1: 3}, {3: 1}),
    ({}, {}, {1: 5, 300: 7}),
]
SIGNALS = [0, 1, 2, 3, 300]


def _header(n_constraints=len(CONSTRAINTS), total_wires=len(SIGNALS)):
    return HeaderData(
        field=PRIME,
        total_wires=total_wires,
        public_outputs=1,
        public_inputs=0,
        private_inputs=2,
        number_of_labels=total_wires,
        number_of_constraints=n_constraints,
    )


def _write_plain(path):
    with R1CSWriter(path, 32) as writer:
        writer.write_header(_header())
        writer.write_constraints(CONSTRAINTS)
        writer.write_signals(SIGNALS)
    return path


def test_round_trip_header(tmp_path):
    data = read_r1cs(_write_plain(tmp_path / "c.r1cs"))
    assert data.header == R1CSHeader(
        field=PRIME,
        field_size=32,
        total_wires=len(SIGNALS),
        public_outputs=1,
        public_inputs=0,
        private_inputs=2,
        number_of_labels=len(SIGNALS),
        number_of_constraints=len(CONSTRAINTS),
    )


def test_round_trip_constraints_and_signals(tmp_path):
    data = read_r1cs(_write_plain(tmp_path / "c.r1cs"))
    assert data.constraints == CONSTRAINTS
    assert data.signals == SIGNALS
    assert data.custom_gates is False
    assert data.custom_gates_used_data is None
    assert data.custom_gates_applied_data is None


def test_sections_in_any_order(tmp_path):
    path = tmp_path / "c.r1cs"
    with R1CSWriter(path, 32) as writer:
        writer.write_signals(SIGNALS)
        writer.write_constraints(CONSTRAINTS)
        writer.write_header(_header())
    data = read_r1cs(path)
    assert data.constraints == CONSTRAINTS
    assert data.signals == SIGNALS
    assert data.header.field == PRIME


def test_custom_gates_round_trip(tmp_path):
    path = tmp_path / "g.r1cs"
    used = [("Gate", [1, PRIME - 1]), ("Other", [])]
    applied = [(0, [1, 2, 3]), (1, [])]
    with R1CSWriter(path, 32, custom_gates=True) as writer:
        writer.write_header(_header())
        writer.write_constraints(CONSTRAINTS)
        writer.write_signals(SIGNALS)
        writer.write_custom_gates_used(used)
        writer.write_custom_gates_applied(applied)
    data = read_r1cs(path)
    assert data.custom_gates is True
    assert data.custom_gates_used_data == used
    assert data.custom_gates_applied_data == applied
    assert data.constraints == CONSTRAINTS


def test_empty_data_defaults():
    data = R1CSData()
    assert data.constraints == [] and data.signals == []
    assert data.header.field == 0


def test_invalid_magic(tmp_path):
    path = _write_plain(tmp_path / "c.r1cs")
    raw = path.read_bytes()
    path.write_bytes(b"xxxx" + raw[4:])
    with pytest.raises(R1CSFormatError, match="Invalid magic number"):
        read_r1cs(path)


def test_invalid_version(tmp_path):
    path = _write_plain(tmp_path / "c.r1cs")
    raw = path.read_bytes()
    path.write_bytes(raw[:4] + bytes([2, 0, 0, 0]) + raw[8:])
    with pytest.raises(R1CSFormatError, match="Invalid version"):
        read_r1cs(path)


def test_invalid_section_type(tmp_path):
    path = tmp_path / "c.r1cs"
    with R1CSWriter(path, 32) as writer:
        writer.write_header(_header())
        writer.write_custom_gates_used([])
        writer.write_signals(SIGNALS)
    with pytest.raises(R1CSFormatError, match="Invalid section type"):
        read_r1cs(path)


def test_missing_signals_section(tmp_path):
    path = tmp_path / "c.r1cs"
    with R1CSWriter(path, 32) as writer:
        writer.write_header(_header())
        writer.write_constraints(CONSTRAINTS)
        writer.write_constraints(CONSTRAINTS)
    with pytest.raises(R1CSFormatError, match='Section "Signals" not present'):
        read_r1cs(path)


def test_missing_header_section(tmp_path):
    path = tmp_path / "c.r1cs"
    with R1CSWriter(path, 32) as writer:
        writer.write_constraints(CONSTRAINTS)
        writer.write_constraints(CONSTRAINTS)
        writer.write_signals(SIGNALS)
    with pytest.raises(R1CSFormatError, match='Section "Header" not present'):
        read_r1cs(path)


def test_truncated_file(tmp_path):
    path = _write_plain(tmp_path / "c.r1cs")
    raw = path.read_bytes()
    path.write_bytes(raw[:-4])
    with pytest.raises(R1CSFormatError):
        read_r1cs(path)


def test_header_count_larger_than_signals(tmp_path):
    path = tmp_path / "c.r1cs"
    with R1CSWriter(path, 32) as writer:
        writer.write_header(_header(total_wires=len(SIGNALS) + 1))
        writer.write_constraints(CONSTRAINTS)
        writer.write_signals(SIGNALS)
    with pytest.raises(R1CSFormatError):
        read_r1cs(path)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_r1cs(tmp_path / "absent.r1cs")