import pytest

from latticeqft.input_parser import (
    InputError,
    check_sanity,
    load_fermion_monomial_params,
    load_gauge_monomial_params,
    load_gauge_observable_params,
    load_hmc_params,
    load_integrator_params,
    load_metropolis_params,
    load_simulation_logging_params,
)
from latticeqft.params import (
    FermionMonomialParams,
    GaugeMonomialParams,
    IntegratorMonomialParams,
    IntegratorParams,
)


@pytest.fixture
def write_input(tmp_path):
    def _write(text):
        path = tmp_path / "input.yaml"
        path.write_text(text, encoding="utf-8")
        return str(path)

    return _write


def test_metropolis_defaults(write_input):
    params = load_metropolis_params(write_input("MetropolisParams:\n  Nc: 3\n"))
    assert params.nc == 3
    assert (params.l0, params.l1, params.l2, params.l3) == (32, 32, 32, 32)
    assert params.n_hits == 10
    assert params.n_sweep == 1000
    assert params.seed == 1234
    assert params.beta == 1.0


def test_metropolis_values_read(write_input):
    params = load_metropolis_params(
        write_input("MetropolisParams:\n  Ndims: 2\n  L0: 8\n  beta: 2.3\n  delta: 0.4\n")
    )
    assert params.ndims == 2
    assert params.l0 == 8
    assert params.beta == pytest.approx(2.3)
    assert params.delta == pytest.approx(0.4)


def test_metropolis_bad_value_falls_back(write_input):
    params = load_metropolis_params(write_input("MetropolisParams:\n  L0: abc\n"))
    assert params.l0 == 32


def test_missing_section_raises(write_input):
    with pytest.raises(InputError):
        load_metropolis_params(write_input("Other: 1\n"))


def test_missing_file_raises(tmp_path):
    with pytest.raises(InputError):
        load_hmc_params(str(tmp_path / "absent.yaml"))


def test_malformed_yaml_raises(write_input):
    with pytest.raises(InputError):
        load_hmc_params(write_input("HMCParams: [unclosed\n"))


def test_hmc_params(write_input):
    params = load_hmc_params(
        write_input("HMCParams:\n  L1: 6\n  coldStart: true\n  rngDelta: 0.5\n")
    )
    assert params.l1 == 6
    assert params.l0 == 32
    assert params.cold_start is True
    assert params.rng_delta == 0.5


def test_gauge_observables_prefix_and_pairs(write_input):
    path = write_input(
        "GaugeObservableParams:\n"
        "  measure_plaquette: true\n"
        "  W_temp_L_T_pairs: [[1, 2], [3, 4]]\n"
        "  plaquette_filename: plaq.txt\n"
    )
    params = load_gauge_observable_params(path, "out/")
    assert params.measure_plaquette is True
    assert params.w_temp_l_t_pairs == [(1, 2), (3, 4)]
    assert params.w_mu_nu_pairs == []
    assert params.plaquette_filename == "out/plaq.txt"
    assert params.w_temp_filename == "out/"
    assert params.flush == 25


def test_gauge_observables_bad_pair_raises(write_input):
    path = write_input("GaugeObservableParams:\n  W_mu_nu_pairs: [[1, x]]\n")
    with pytest.raises(InputError):
        load_gauge_observable_params(path, "")


def test_gauge_monomial_missing_gives_defaults(write_input):
    params = load_gauge_monomial_params(write_input("Other: 1\n"))
    assert params == GaugeMonomialParams()


def test_gauge_monomial_read(write_input):
    params = load_gauge_monomial_params(
        write_input("Gauge Monomial:\n  level: 2\n  beta: 5.5\n")
    )
    assert (params.level, params.beta) == (2, 5.5)


def test_fermion_monomial_absent_is_none(write_input):
    assert load_fermion_monomial_params(write_input("Other: 1\n")) is None


def test_fermion_monomial_defaults(write_input):
    params = load_fermion_monomial_params(write_input("Fermion Monomial:\n  kappa: 0.2\n"))
    assert params.kappa == 0.2
    assert params.fermion_type == "HWilson"
    assert params.solver == "CG"
    assert params.rep_dim == 4
    assert params.tol == 1e-8


def test_integrator_sorts_by_level(write_input):
    path = write_input(
        "Integrator:\n"
        "  tau: 1.0\n"
        "  nSteps: 5\n"
        "  Monomials:\n"
        "    - level: 2\n"
        "      steps: 4\n"
        "    - level: 0\n"
        "    - level: 1\n"
        "      Type: Leapfrog\n"
    )
    params = load_integrator_params(path)
    assert params.tau == 1.0
    assert params.nsteps == 5
    assert [m.level for m in params.monomials] == [0, 1, 2]
    assert params.monomials[0].steps == 20
    assert params.monomials[2].steps == 4


def test_integrator_defaults_without_monomials(write_input):
    params = load_integrator_params(write_input("Integrator:\n  nSteps: 3\n"))
    assert params.tau == 0.01
    assert params.nsteps == 3
    assert params.monomials == []


def test_integrator_monomial_needs_level(write_input):
    path = write_input("Integrator:\n  Monomials:\n    - steps: 3\n")
    with pytest.raises(InputError):
        load_integrator_params(path)


def test_integrator_monomials_must_be_sequence(write_input):
    path = write_input("Integrator:\n  Monomials:\n    level: 1\n")
    with pytest.raises(InputError):
        load_integrator_params(path)


def test_integrator_bad_tau_raises(write_input):
    with pytest.raises(InputError):
        load_integrator_params(write_input("Integrator:\n  tau: fast\n"))


def test_simulation_logging(write_input):
    path = write_input(
        "SimulationLoggingParams:\n  log_filename: log.txt\n  log_delta_H: true\n"
    )
    params = load_simulation_logging_params(path, "run/")
    assert params.log_filename == "run/log.txt"
    assert params.log_delta_h is True
    assert params.log_time is False
    assert params.flush == 25


def _integrator():
    return IntegratorParams(monomials=[IntegratorMonomialParams()])


def test_sanity_accepts_valid_setup():
    check_sanity(_integrator(), GaugeMonomialParams(beta=2.0), FermionMonomialParams())
    with pytest.raises(InputError):
        check_sanity(_integrator(), GaugeMonomialParams(beta=0.0), None)


def test_sanity_requires_monomials():
    with pytest.raises(InputError, match="at least one monomial"):
        check_sanity(IntegratorParams(), GaugeMonomialParams(), None)


@pytest.mark.parametrize(
    "fermion",
    [
        FermionMonomialParams(fermion_type=""),
        FermionMonomialParams(fermion_type="Staggered"),
        FermionMonomialParams(solver="BiCGStab"),
        FermionMonomialParams(rep_dim=3),
        FermionMonomialParams(kappa=-0.1),
    ],
)
def test_sanity_rejects_bad_fermions(fermion):
    with pytest.raises(InputError):
        check_sanity(_integrator(), GaugeMonomialParams(), fermion)


def test_sanity_ignores_fermions_when_absent():
    check_sanity(_integrator(), GaugeMonomialParams(), None)
    with pytest.raises(InputError):
        check_sanity(_integrator(), GaugeMonomialParams(), FermionMonomialParams(rep_dim=1))