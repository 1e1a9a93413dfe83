"""Reading simulation parameters from YAML input files."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

import yaml

from latticeqft.params import (
    FermionMonomialParams,
    GaugeMonomialParams,
    HMCParams,
    IntegratorMonomialParams,
    IntegratorParams,
)

logger = logging.getLogger(__name__)


class InputError(ValueError):
    """An input file is unreadable, incomplete or inconsistent."""


@dataclass
class MetropolisParams:
    """Settings of a Metropolis simulation of the Wilson gauge action."""

    ndims: int = 4
    l0: int = 32
    l1: int = 32
    l2: int = 32
    l3: int = 32
    n_hits: int = 10
    n_sweep: int = 1000
    seed: int = 1234
    nd: int = 4
    nc: int = 2
    beta: float = 1.0
    delta: float = 0.1


@dataclass
class GaugeObservableParams:
    """Which gauge observables to measure and where to write them."""

    measurement_interval: int = 0
    measure_plaquette: bool = False
    measure_wilson_loop_temporal: bool = False
    measure_wilson_loop_mu_nu: bool = False
    w_temp_l_t_pairs: list[tuple[int, int]] = field(default_factory=list)
    w_mu_nu_pairs: list[tuple[int, int]] = field(default_factory=list)
    w_lmu_lnu_pairs: list[tuple[int, int]] = field(default_factory=list)
    plaquette_filename: str = ""
    w_temp_filename: str = ""
    w_mu_nu_filename: str = ""
    write_to_file: bool = False
    flush: int = 25


@dataclass
class SimulationLoggingParams:
    """What to log during a simulation and where."""

    log_interval: int = 0
    log_filename: str = ""
    write_to_file: bool = False
    flush: int = 25
    log_delta_h: bool = False
    log_acceptance: bool = False
    log_accept: bool = False
    log_time: bool = False


def _to_int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{value!r} is not an integer")
    return value


def _to_float(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{value!r} is not a number")
    return float(value)


def _to_bool(value: Any) -> bool:
    if not isinstance(value, bool):
        raise TypeError(f"{value!r} is not a boolean")
    return value


def _to_str(value: Any) -> str:
    if isinstance(value, (dict, list)):
        raise TypeError(f"{value!r} is not a scalar")
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _lenient(section: dict, key: str, convert: Callable[[Any], Any], default: Any) -> Any:
    """Value of ``key`` converted, or ``default`` if absent or unconvertible."""
    value = section.get(key)
    if value is None:
        return default
    try:
        return convert(value)
    except TypeError:
        return default


def _strict(section: dict, key: str, convert: Callable[[Any], Any], default: Any) -> Any:
    """Value of ``key`` converted, or ``default`` if absent; bad values raise."""
    if key not in section:
        return default
    try:
        return convert(section[key])
    except TypeError as exc:
        raise InputError(f"bad value for '{key}': {exc}") from exc


def _load(filename: str) -> dict:
    try:
        with open(filename, encoding="utf-8") as handle:
            config = yaml.safe_load(handle)
    except OSError as exc:
        raise InputError(f"cannot read input file {filename}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise InputError(f"error parsing input file {filename}: {exc}") from exc
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise InputError(f"input file {filename} must hold a mapping")
    return config


def _section(config: dict, name: str) -> Optional[dict]:
    if name not in config or config[name] is None:
        return None
    section = config[name]
    if not isinstance(section, dict):
        raise InputError(f"'{name}' must be a mapping")
    return section


def _required_section(filename: str, name: str) -> dict:
    section = _section(_load(filename), name)
    if section is None:
        raise InputError(f"{name} not found in input file")
    return section


def _pairs(section: dict, key: str) -> list[tuple[int, int]]:
    raw = section.get(key)
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise InputError(f"'{key}' must be a sequence of pairs")
    pairs = []
    for pair in raw:
        if not isinstance(pair, list) or len(pair) < 2:
            raise InputError(f"'{key}' entries must be pairs, got {pair!r}")
        try:
            pairs.append((_to_int(pair[0]), _to_int(pair[1])))
        except TypeError as exc:
            raise InputError(f"bad pair in '{key}': {exc}") from exc
    return pairs


def load_metropolis_params(filename: str, output_directory: str = "") -> MetropolisParams:
    """Read the ``MetropolisParams`` section."""
    mp = _required_section(filename, "MetropolisParams")
    return MetropolisParams(
        ndims=_lenient(mp, "Ndims", _to_int, 4),
        l0=_lenient(mp, "L0", _to_int, 32),
        l1=_lenient(mp, "L1", _to_int, 32),
        l2=_lenient(mp, "L2", _to_int, 32),
        l3=_lenient(mp, "L3", _to_int, 32),
        n_hits=_lenient(mp, "nHits", _to_int, 10),
        n_sweep=_lenient(mp, "nSweep", _to_int, 1000),
        seed=_lenient(mp, "seed", _to_int, 1234),
        nd=_lenient(mp, "Nd", _to_int, 4),
        nc=_lenient(mp, "Nc", _to_int, 2),
        beta=_lenient(mp, "beta", _to_float, 1.0),
        delta=_lenient(mp, "delta", _to_float, 0.1),
    )


def load_gauge_observable_params(
    filename: str, output_directory: str = ""
) -> GaugeObservableParams:
    """Read the ``GaugeObservableParams`` section; filenames get the output prefix."""
    gp = _required_section(filename, "GaugeObservableParams")
    return GaugeObservableParams(
        measurement_interval=_lenient(gp, "measurement_interval", _to_int, 0),
        measure_plaquette=_lenient(gp, "measure_plaquette", _to_bool, False),
        measure_wilson_loop_temporal=_lenient(
            gp, "measure_wilson_loop_temporal", _to_bool, False
        ),
        measure_wilson_loop_mu_nu=_lenient(gp, "measure_wilson_loop_mu_nu", _to_bool, False),
        w_temp_l_t_pairs=_pairs(gp, "W_temp_L_T_pairs"),
        w_mu_nu_pairs=_pairs(gp, "W_mu_nu_pairs"),
        w_lmu_lnu_pairs=_pairs(gp, "W_Lmu_Lnu_pairs"),
        plaquette_filename=output_directory + _lenient(gp, "plaquette_filename", _to_str, ""),
        w_temp_filename=output_directory + _lenient(gp, "W_temp_filename", _to_str, ""),
        w_mu_nu_filename=output_directory + _lenient(gp, "W_mu_nu_filename", _to_str, ""),
        write_to_file=_lenient(gp, "write_to_file", _to_bool, False),
        flush=_lenient(gp, "flush", _to_int, 25),
    )


def load_hmc_params(filename: str, output_directory: str = "") -> HMCParams:
    """Read the ``HMCParams`` section."""
    mp = _required_section(filename, "HMCParams")
    return HMCParams(
        ndims=_lenient(mp, "Ndims", _to_int, 4),
        l0=_lenient(mp, "L0", _to_int, 32),
        l1=_lenient(mp, "L1", _to_int, 32),
        l2=_lenient(mp, "L2", _to_int, 32),
        l3=_lenient(mp, "L3", _to_int, 32),
        seed=_lenient(mp, "seed", _to_int, 1234),
        rng_delta=_lenient(mp, "rngDelta", _to_float, 1.0),
        cold_start=_lenient(mp, "coldStart", _to_bool, False),
        nd=_lenient(mp, "Nd", _to_int, 4),
        nc=_lenient(mp, "Nc", _to_int, 2),
    )


def load_gauge_monomial_params(
    filename: str, output_directory: str = ""
) -> GaugeMonomialParams:
    """Read the ``Gauge Monomial`` section; a missing section yields the defaults."""
    gp = _section(_load(filename), "Gauge Monomial")
    if gp is None:
        logger.warning("no Gauge Monomial in input file %s", filename)
        return GaugeMonomialParams()
    return GaugeMonomialParams(
        level=_lenient(gp, "level", _to_int, 1),
        beta=_lenient(gp, "beta", _to_float, 1.0),
    )


def load_fermion_monomial_params(
    filename: str, output_directory: str = ""
) -> Optional[FermionMonomialParams]:
    """Read the ``Fermion Monomial`` section, or ``None`` if there are no fermions."""
    fp = _section(_load(filename), "Fermion Monomial")
    if fp is None:
        return None
    return FermionMonomialParams(
        level=_lenient(fp, "level", _to_int, 0),
        fermion_type=_lenient(fp, "fermion", _to_str, "HWilson"),
        solver=_lenient(fp, "solver", _to_str, "CG"),
        rep_dim=_lenient(fp, "RepDim", _to_int, 4),
        kappa=_lenient(fp, "kappa", _to_float, 0.1),
        tol=_lenient(fp, "tol", _to_float, 1e-8),
    )


def _integrator_monomial(node: Any) -> IntegratorMonomialParams:
    if not isinstance(node, dict):
        raise InputError(f"monomial must be a mapping, got {node!r}")
    if node.get("level") is None:
        raise InputError("Monomial missing required field 'level'")
    return IntegratorMonomialParams(
        type=_strict(node, "Type", _to_str, "Leapfrog"),
        level=_strict(node, "level", _to_int, 0),
        steps=_strict(node, "steps", _to_int, 20),
    )


def load_integrator_params(filename: str, output_directory: str = "") -> IntegratorParams:
    """Read the ``Integrator`` section; monomials are sorted by ascending level."""
    ip = _required_section(filename, "Integrator")
    params = IntegratorParams(
        tau=_strict(ip, "tau", _to_float, 0.01),
        nsteps=_strict(ip, "nSteps", _to_int, 10),
    )
    monomials = ip.get("Monomials")
    if monomials is None:
        logger.warning("no monomials found in input file %s", filename)
        return params
    if not isinstance(monomials, list):
        raise InputError("'Monomials' must be a YAML sequence")
    params.monomials = sorted(
        (_integrator_monomial(node) for node in monomials), key=lambda m: m.level
    )
    return params


def load_simulation_logging_params(
    filename: str, output_directory: str = ""
) -> SimulationLoggingParams:
    """Read the ``SimulationLoggingParams`` section."""
    sp = _required_section(filename, "SimulationLoggingParams")
    return SimulationLoggingParams(
        log_interval=_lenient(sp, "log_interval", _to_int, 0),
        log_filename=output_directory + _lenient(sp, "log_filename", _to_str, ""),
        write_to_file=_lenient(sp, "write_to_file", _to_bool, False),
        flush=_lenient(sp, "flush", _to_int, 25),
        log_delta_h=_lenient(sp, "log_delta_H", _to_bool, False),
        log_acceptance=_lenient(sp, "log_acceptance", _to_bool, False),
        log_accept=_lenient(sp, "log_accept", _to_bool, False),
        log_time=_lenient(sp, "log_time", _to_bool, False),
    )


def check_sanity(
    integrator_params: IntegratorParams,
    gauge_params: GaugeMonomialParams,
    fermion_params: Optional[FermionMonomialParams] = None,
) -> None:
    """Raise ``InputError`` if the parameter sets do not form a valid HMC setup."""
    if not integrator_params.monomials:
        raise InputError("Integrator must have at least one monomial")
    if gauge_params.beta <= 0:
        raise InputError("Gauge Monomial beta must be positive")
    if fermion_params is None:
        return
    if not fermion_params.fermion_type:
        raise InputError("Fermion Monomial type must be specified")
    if fermion_params.fermion_type not in ("HWilson", "Wilson"):
        raise InputError(
            f"Unsupported Fermion Monomial type: {fermion_params.fermion_type}"
        )
    if fermion_params.solver != "CG":
        raise InputError(
            f"Unsupported Fermion Monomial solver: {fermion_params.solver} "
            f"for Fermion Type: {fermion_params.fermion_type}"
        )
    if fermion_params.rep_dim not in (2, 4):
        raise InputError("Fermion Monomial RepDim must be 2 or 4")
    if fermion_params.kappa < 0:
        raise InputError("Fermion Monomial kappa must be positive")