# dockscore

`dockscore` is a set of building blocks for a protein–ligand docking engine. It is written in plain Python and has no third-party dependencies.

- **Geometry primitives.** `dockscore.common` provides the immutable `Vec` and `Mat` types. It also has `cross_product`, `elementwise_product`, `vec_distance_sqr`, `eq` (a comparison with tolerance), `fl_to_sz`, `find_min`, `normalized_angle` and `pk_to_energy`. Failed consistency checks raise `InternalError`.
- **Dense arrays.** `dockscore.array3d.Array3D` is a three-dimensional float array indexed as `a[i, j, k]`. `checked_multiply` computes a size and raises `MemoryError` if the size would overflow.
- **Atom typing.** `dockscore.atom_constants` holds the AutoDock 4 parameter table (`ATOM_KIND_DATA`), the X-Score radii and the type numbering constants. It also provides:
  - `string_to_ad_type`, `ad_type_to_el_type`, `xs_radius` and `ad_type_property`;
  - the predicates `xs_is_hydrophobic`, `xs_is_donor`, `xs_is_acceptor` and `xs_h_bond_possible`;
  - `max_covalent_radius`;
  - the `AtomBase` dataclass.
- **Scoring terms.** `dockscore.scoring_terms` contains the pairwise terms `Gauss`, `Repulsion`, `Hydrophobic`, `NonHydrophobic`, `Vdw`, `NonDirHBond`, `Electrostatic` and `AD4Solvation`. It also contains conformation-independent terms such as `NumTorsDiv`. `default_terms()` returns the default set of terms, and `current_weights(n)` returns the matching weights. `current_weights` raises `InternalError` when `n` does not match the number of weights.
- **Energy capping.** `dockscore.curl` provides `curl` and `curl_deriv`. Both smoothly cap a positive energy by a value `v`, and `curl_deriv` scales the derivative to match.
- **Grid extents.** `dockscore.grid_dim` provides `GridDim`, `grid_dims_eq`, `grid_dims_begin`, `grid_dims_end` and `format_grid_dims`.
- **Energy grids.** `dockscore.grid.Grid` interpolates the values stored in `Grid.data` trilinearly. A point outside the box is clamped to the box and given a linear penalty of `slope` per unit of distance. `evaluate` returns the energy. `evaluate_deriv` returns the energy and its gradient.
- **Pose bookkeeping.** `dockscore.coords` provides `Pose`, `rmsd_upper_bound`, `find_closest` and `add_to_output_container`. Together they maintain a bounded list of distinct poses, sorted by energy.
- **Statistics.** `dockscore.stats` provides `mean`, `deviation`, `rmsd`, `average_difference`, `pearson`, `get_rankings` and `spearman`. `dockscore.recent_history.RecentHistory` keeps an exponentially weighted estimate of a value and of its error.
- **Fixed-width parsing.** `dockscore.convert_substring` provides `convert_substring` and `substring_is_blank`, which take 1-based, inclusive column ranges. `convert_substring` raises `BadConversion` when a field cannot be converted. Pass `int`, `float`, `str` or `UNSIGNED` as the kind.
- **Parallel helpers.** `dockscore.parallel` provides `parallel_for` and `parallel_iter`, which spread calls over a number of threads. `ParallelProgress` is a thread-safe text progress bar.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

Interpolate an energy grid:

```python
from dockscore.common import Vec
from dockscore.grid_dim import GridDim
from dockscore.grid import Grid

dims = [GridDim(begin=0.0, end=1.0, n=1) for _ in range(3)]
grid = Grid(dims)
grid.data[1, 0, 0] = 2.0

energy = grid.evaluate(Vec(0.5, 0.0, 0.0), slope=1e6, v=1000.0)
energy, gradient = grid.evaluate_deriv(Vec(0.5, 0.0, 0.0), slope=1e6, v=1000.0)
```

Score a pair of X-Score atom types with the default pairwise terms:

```python
from dockscore.scoring_terms import default_terms, current_weights
from dockscore import atom_constants as ac

terms = default_terms()
weights = current_weights(len(terms))
pair_terms = [t for t in terms if hasattr(t, "cutoff")]
energy = sum(w * t.eval(ac.XS_TYPE_C_H, ac.XS_TYPE_O_A, 3.5)
             for w, t in zip(weights, pair_terms))
```

Keep the best distinct poses:

```python
from dockscore.common import Vec
from dockscore.coords import Pose, add_to_output_container

poses = []
add_to_output_container(poses, Pose(e=-7.1, coords=[Vec(0, 0, 0)]), min_rmsd=2.0, max_size=20)
add_to_output_container(poses, Pose(e=-8.3, coords=[Vec(5, 0, 0)]), min_rmsd=2.0, max_size=20)
best = poses[0]  # lowest energy first
```

Parse fixed-width columns:

```python
from dockscore.convert_substring import convert_substring, substring_is_blank

line = "ATOM      1  C   LIG     1      12.345"
x = convert_substring(line, 31, 38, float)   # 12.345
blank = substring_is_blank(line, 27, 30)     # True
```

Run work on several threads:

```python
from dockscore.parallel import parallel_for

results = [0] * 10
def work(i):
    results[i] = i * i

parallel_for(work, len(results), num_threads=4)
```

## What this package does not do

`dockscore` is a library of components. It is not a complete docking program:

- It has no molecule model. It does not represent ligands, receptors, torsion trees or flexible residues.
- It does not read or write structure files. `convert_substring` only parses individual columns.
- It does not precompute receptor grids, and it has no search or optimisation routines such as Monte Carlo sampling or local minimisation.
- It provides no command-line program.

Code that uses the package has to supply these parts.