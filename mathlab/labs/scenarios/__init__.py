"""Concrete lab scenarios."""

from mathlab.labs.scenarios.iv import IVLab, IVParams
from mathlab.labs.scenarios.var import VARLab, VARParams
from mathlab.labs.scenarios.vecm import VECMLab, VECMParams
from mathlab.labs.scenarios.ardl import ARDLLab, ARDLParams, BOUNDS_F_STATISTIC
from mathlab.labs.scenarios.ou import OULab, OUParams
from mathlab.labs.scenarios.mcmc import MCMCLab, MCMCParams
from mathlab.labs.scenarios.risk import RiskLab, RiskParams, tail_count
from mathlab.labs.scenarios.gbm import GBMLab, GBMParams

__all__ = [
    "IVLab", "IVParams",
    "VARLab", "VARParams",
    "VECMLab", "VECMParams",
    "ARDLLab", "ARDLParams", "BOUNDS_F_STATISTIC",
    "OULab", "OUParams",
    "MCMCLab", "MCMCParams",
    "RiskLab", "RiskParams", "tail_count",
    "GBMLab", "GBMParams",
]
