# latticeqft

Building blocks for lattice gauge theory simulations in Python, built on
NumPy and PyYAML.

## What it contains

- `latticeqft.gauge_group`: the link groups `U1`, `SU2` and `SU3`. They are
  immutable dataclasses. Each has:
  - `identity()` and `random(rng, delta)`. The `rng` is anything with
    `uniform(low, high)`, such as `numpy.random.Generator`.
  - `dagger()`, `retrace()` (real part of the trace) and `restore_gauge()`,
    which returns a new element projected back onto the group.
  - `+`, `-` and `*` between elements of the same group.

  `SU3` also has `det()`. The function `dagger(element)` does the same as the
  method.
- `latticeqft.adjoint_group`: the Lie-algebra elements `AdjointU1` and
  `AdjointSU2`. Each has `from_group(element)`, `random(rng)`, `flip_sign()`,
  `norm2()`, indexing, `+`, `-`, and multiplication by a real number on the
  left. `exp()` maps the element into the group; for `AdjointSU2` the zero
  element maps to the identity.
- `latticeqft.adjoint_sun`: adjoint vectors as real NumPy arrays, with group
  elements as `N x N` complex arrays:
  - `adjoint_dimension(nc)`, which gives 1 for U(1) and `nc*nc - 1` otherwise
  - `trace_t(matrix)`, which projects a 1x1, 2x2 or 3x3 matrix onto the
    adjoint components
  - `expo_sun(a)` for U(1) and SU(2)
  - `norm2`, `flip_sign`, `random_adjoint(nc, rng)` and
    `format_adjoint(a, name)`
- `latticeqft.adjoint_field`: `AdjointField(dimensions, nc, init)`. This is a
  2D, 3D or 4D lattice with one adjoint vector per site and direction. It
  holds the conjugate momenta. Its `data` array has shape
  `dimensions + (rank, adjoint_dimension(nc))`.
  - Index it with `field[site..., mu]` or `field[(site), mu]`. Reading returns
    a copy.
  - `randomize(rng)` and `flip_sign()` work in place. `copy()` returns a new
    field.
- `latticeqft.fields`: `ComplexField` and `ScalarField`. These hold one value
  per site of a 2D, 3D or 4D lattice. Index them with a site tuple; `sum()`
  adds up all sites.
- `latticeqft.spinor_linalg`: linear algebra on spinor fields, which are
  complex arrays of any shape:
  - `spinor_dot_product(a, b)` (conjugating `a`)
  - `spinor_norm_sq` and `spinor_norm`
  - `spinor_add_mul(a, b, alpha)` and `spinor_sub_mul(a, b, alpha)`, which
    return new arrays

  Fields of different shapes raise `ValueError`.
- `latticeqft.solver`: `CGSolver(b, operator)`. This is a conjugate-gradient
  solver for a Hermitian positive-definite operator, given as a function from
  array to array.
  - `solve(x0, tol)` returns the solution and also stores it in `x`. The
    number of iterations it took goes in `iterations`.
  - If the true residual, taken relative to the solution, is still above
    `tol` after convergence, it starts again from that result.
  - It raises `RuntimeError` after `max_iterations` (10 000) iterations in
    total.
- `latticeqft.update_position`: `UpdatePositionGauge(gauge_field,
  adjoint_field)` for U(1) and SU(2) links. The gauge field is a complex
  array of shape `dimensions + (rank, nc, nc)`. `update(step_size)` sets every
  link, in place, to `exp(step_size * P) @ U`.
- `latticeqft.hmc`: the Hybrid Monte Carlo step.
  - `restore_gauge_field(gauge_field)` projects every link of a U(1), SU(2)
    or SU(3) gauge array back onto the group, in place.
  - `HamiltonianField(gauge_field, adjoint_field)` pairs the links with their
    momenta. `randomize_momentum(rng)` draws new Gaussian momenta.
  - `HMC(params, hamiltonian_field, integrator, rng, accept_rng)` has
    `add_monomial(monomial)` and `hmc_step(check_reversibility=False)`.

  One `hmc_step` does the following, then returns whether the trajectory was
  accepted:
  1. Draws new momenta.
  2. Calls each monomial's `heatbath`.
  3. Calls `integrator.integrate(params.tau, False)`.
  4. Restores the links to the group.
  5. Adds up each monomial's `delta_h` after its `accept` call.
  6. Accepts with probability `min(1, exp(-delta_h))`, drawing from
     `accept_rng.random()`.
  7. Puts the old links back if the trajectory is rejected.

  With `check_reversibility=True` it also integrates back with the momenta
  reversed and stores that energy difference in `delta_h_reversed`. The
  links from the forward trajectory are kept.
- `latticeqft.params`: the dataclasses `HMCParams`, `GaugeMonomialParams`,
  `FermionMonomialParams`, `IntegratorMonomialParams` and `IntegratorParams`.
  All except `IntegratorMonomialParams` have `describe()`, which returns a
  text summary.
- `latticeqft.input_parser`: YAML input loading. It has the further
  dataclasses `MetropolisParams`, `GaugeObservableParams` and
  `SimulationLoggingParams`.

## Examples

```python
import numpy as np
from latticeqft.gauge_group import SU2, dagger

rng = np.random.default_rng(1234)
u = SU2.random(rng, 0.5)
print((u * dagger(u)).retrace())   # 2.0 up to rounding
```

Moving SU(2) links along random momenta:

```python
import numpy as np
from latticeqft.adjoint_field import AdjointField
from latticeqft.update_position import UpdatePositionGauge

rng = np.random.default_rng(1234)
dims = (4, 4, 4, 4)
gauge = np.broadcast_to(np.eye(2, dtype=complex), dims + (4, 2, 2)).copy()
momenta = AdjointField(dims, 2)
momenta.randomize(rng)
UpdatePositionGauge(gauge, momenta).update(0.1)
```

Solving a linear system on a spinor field:

```python
import numpy as np
from latticeqft.solver import CGSolver

b = np.ones((4, 4, 2, 4), dtype=complex)
solver = CGSolver(b, lambda x: 2.0 * x)
x = solver.solve(np.zeros_like(b), 1e-10)   # every entry 0.5
```

## Input files

Parameters are read from the YAML sections `MetropolisParams`, `HMCParams`,
`GaugeObservableParams`, `SimulationLoggingParams`, `Gauge Monomial`,
`Fermion Monomial` and `Integrator`:

```yaml
HMCParams:
  Ndims: 4
  L0: 8
  L1: 8
  L2: 8
  L3: 8
  Nc: 2
  seed: 1234
Gauge Monomial:
  level: 1
  beta: 2.3
Integrator:
  tau: 1.0
  nSteps: 100
  Monomials:
    - level: 0
      steps: 20
```

```python
from latticeqft.input_parser import (
    check_sanity,
    load_fermion_monomial_params,
    load_gauge_monomial_params,
    load_hmc_params,
    load_integrator_params,
)

hmc = load_hmc_params("input.yaml", "out/")
integrator = load_integrator_params("input.yaml", "out/")
gauge = load_gauge_monomial_params("input.yaml", "out/")
fermions = load_fermion_monomial_params("input.yaml", "out/")   # None here
check_sanity(integrator, gauge, fermions)
```

The loaders behave as follows:

- **Errors.** A file that cannot be read, that is not valid YAML, or whose
  top level is not a mapping raises `InputError`.
- **`MetropolisParams`, `HMCParams`, `GaugeObservableParams` and
  `SimulationLoggingParams`.** If the section is missing, loading raises
  `InputError`. A value of the wrong type falls back to its default.
- **Output directory.** It is put in front of the file names in
  `GaugeObservableParams` and `SimulationLoggingParams`.
- **`Gauge Monomial`.** A missing section logs a warning and gives the
  defaults.
- **`Fermion Monomial`.** A missing section gives `None`, meaning no
  fermions.
- **`Integrator`.** A missing section raises `InputError`.
  - Values of the wrong type raise `InputError`, as do a `Monomials` entry
    that is not a sequence and a monomial without a `level`.
  - Monomials are sorted by ascending `level`.
  - A missing `Monomials` list logs a warning.

`check_sanity(integrator_params, gauge_params, fermion_params)` raises
`InputError` in any of these cases:

- there are no integrator monomials
- `beta` is not positive

When fermion parameters are given, it also raises `InputError` in these
cases:

- the fermion type is empty, or is not `HWilson` or `Wilson`
- the solver is not `CG`
- `RepDim` is not 2 or 4
- `kappa` is negative

## What the package does not do

The package is a library only and has no command-line program. It has no
ready-made simulation.

- `HMC` expects the caller to supply the monomials and the integrator:
  - a monomial has `heatbath`, `accept` and `delta_h`
  - an integrator has `integrate(tau, check_reversibility)`

  The package provides no gauge or fermion actions, force terms, Dirac
  operators or integration schemes of its own.
- The package has no Metropolis update and no measurement of observables.
  `MetropolisParams`, `GaugeObservableParams` and `SimulationLoggingParams`
  only hold the settings read from an input file.
- Exponentiation from the algebra (`expo_sun`, `UpdatePositionGauge`) covers
  U(1) and SU(2) only.

## Tests

```
pip install -e .[test]
pytest
```