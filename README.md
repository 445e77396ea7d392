# zkcircuit_kit

Tools for working with rank-1 constraint systems (R1CS) as produced by
zero-knowledge circuit compilers: reading and writing binary `.r1cs` files,
loading circuit structure descriptions, interval reasoning over field
elements, and building SMT-LIB 2 text over the `QF_FF` finite-field logic.
It has no dependencies beyond the standard library.

## Modules

- `zkcircuit_kit.r1cs_writer` — `R1CSWriter(path, field_size, custom_gates)`
  writes a `.r1cs` file section by section: `write_header(HeaderData(...))`,
  `write_constraints(...)` (returns the number written), `write_signals(...)`,
  and, for files with custom gates, `write_custom_gates_used(...)` and
  `write_custom_gates_applied(...)`. It is a context manager; `close()` flushes
  and closes the file. `encode_linear_combination(combination, field_size)`
  gives the byte encoding of one linear combination.
- `zkcircuit_kit.r1cs_reader` — `read_r1cs(path)` parses a `.r1cs` file into an
  `R1CSData` record (`header`, `constraints`, `signals`, and the custom-gate
  data when present). Malformed input raises `R1CSFormatError`.
- `zkcircuit_kit.structure` — dataclasses `TimingInfo`, `NodeInfo`,
  `StructureInfo` and `SpecificationInfo`; `read_structure(path)` and
  `structure_from_dict(data)` load a structure (nodes without equivalence
  classes each form their own class), `read_original_structure(path)` reads an
  id-to-name map sorted by id, `read_smt_specification(path)` reads a node
  specification, and `generate_empty_structure(...)` builds a single `main`
  node covering the whole circuit. `TimingInfo` supports `+=`.
- `zkcircuit_kit.union_find` — `UnionFind` with `find`, `union` over any
  iterable of elements, `components()`, and optional tracking of current roots
  in `representatives`.
- `zkcircuit_kit.assignment` — `Assignment` numbers new keys consecutively
  from an offset; `enable_inverse()` (before any key is assigned, otherwise
  `AssignmentError`) enables `get_inv_assignment`.
- `zkcircuit_kit.graph_utils` — the option enums `GraphBackend`,
  `EquivalenceMode`, `ClusteringPreprocessing` and `FileType`;
  `distance_to_source_set`, `dfs_merge_in_dag`,
  `dfs_merge_in_dag_with_bfs_preprocessing` and `count_ints`.
- `zkcircuit_kit.bounds` — interval bounds over a prime field, reading
  elements above `field // 2` as negative: `compute_bounds_linear_expression`,
  `compute_bounds_linear_expression_strict`, `compute_bounds_product`,
  `is_positive`, `check_correct_signs`, `check_same_field_round`.
- `zkcircuit_kit.smt2` — string builders for SMT-LIB 2: `declare_header(prime)`,
  `declare_signal(name)`, `safety_implication_to_smt2`,
  `declare_all_signals_equal` and `declare_all_signals_equal_2`.

## Installation

```
pip install .
```

## Example

```python
from zkcircuit_kit.r1cs_writer import HeaderData, R1CSWriter
from zkcircuit_kit.r1cs_reader import read_r1cs

field = 21888242871839275222246405745257275088548364400416034343698204186575808495617

with R1CSWriter("circuit.r1cs", 32, False) as writer:
    writer.write_header(HeaderData(
        field=field, total_wires=3, public_outputs=1, public_inputs=0,
        private_inputs=1, number_of_labels=3, number_of_constraints=1,
    ))
    writer.write_constraints([({2: 1}, {2: 1}, {1: 1})])
    writer.write_signals([0, 1, 2])

data = read_r1cs("circuit.r1cs")
print(data.header.field == field, len(data.constraints))
```

Building SMT-LIB text:

```python
from zkcircuit_kit.smt2 import declare_header, declare_signal, declare_all_signals_equal

names = {1: "s_1"}
names_aux = {1: "s_1_aux"}
lines = [
    *declare_header(7),
    declare_signal("s_1"),
    declare_signal("s_1_aux"),
    f"(assert (not {declare_all_signals_equal([1], names, [1], names_aux)}))",
    "(check-sat)",
]
print("\n".join(lines))
```

## What it does not do

The package produces SMT-LIB problem text but does not run any solver and
has no notion of a verification result: feeding the text to a solver and
interpreting its answer is left to the caller. There is no command-line
program.

## Running the tests

```
pip install .[test]
pytest
```