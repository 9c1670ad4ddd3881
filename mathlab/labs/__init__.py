"""
Lab simulators.

Eight scenarios driven by a seeded SFC32 stream:
    IV, VAR, VECM, ARDL, OU, MCMC, RISK, GBM

Usage:
    from mathlab.labs import Session, LabId

    session = Session(seed=12345)
    result = session.simulate(LabId.GBM, drift=0.001)
    result.series['price'], result.statistics['final_price']

Labs can also be used directly on a generator:
    lab = create_lab(LabId.OU, SFC32.from_seed(7))
    lab.configure(reversion=0.2)
    lab.simulate()
"""

from mathlab.labs._common import DEFAULT_SEED, LabId, LabOutput, LabState
from mathlab.labs.base import Lab
from mathlab.labs.solution import LabResult
from mathlab.labs.registry import LAB_REGISTRY, create_lab, resolve_lab_id
from mathlab.labs.session import Session
from mathlab.labs.scenarios import (
    IVLab, IVParams,
    VARLab, VARParams,
    VECMLab, VECMParams,
    ARDLLab, ARDLParams,
    OULab, OUParams,
    MCMCLab, MCMCParams,
    RiskLab, RiskParams,
    GBMLab, GBMParams,
)

__all__ = [
    "DEFAULT_SEED",
    "LabId",
    "LabState",
    "LabOutput",
    "LabResult",
    "Lab",
    "LAB_REGISTRY",
    "create_lab",
    "resolve_lab_id",
    "Session",
    "IVLab", "IVParams",
    "VARLab", "VARParams",
    "VECMLab", "VECMParams",
    "ARDLLab", "ARDLParams",
    "OULab", "OUParams",
    "MCMCLab", "MCMCParams",
    "RiskLab", "RiskParams",
    "GBMLab", "GBMParams",
]
