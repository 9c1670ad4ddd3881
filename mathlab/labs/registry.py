"""
Lab registry.

Maps each LabId to its implementation. This module is the single place
that knows which class serves which lab.
"""

from __future__ import annotations

from mathlab.core.exceptions import LabStateError
from mathlab.labs._common import LabId
from mathlab.labs.base import Lab
from mathlab.labs.scenarios import (
    ARDLLab,
    GBMLab,
    IVLab,
    MCMCLab,
    OULab,
    RiskLab,
    VARLab,
    VECMLab,
)
from mathlab.rng.sfc32 import SFC32

LAB_REGISTRY: dict[LabId, type[Lab]] = {
    LabId.IV: IVLab,
    LabId.VAR: VARLab,
    LabId.VECM: VECMLab,
    LabId.ARDL: ARDLLab,
    LabId.OU: OULab,
    LabId.MCMC: MCMCLab,
    LabId.RISK: RiskLab,
    LabId.GBM: GBMLab,
}


def resolve_lab_id(lab_id: LabId | str) -> LabId:
    """
    Coerce a LabId or its string value to LabId.

    Raises:
        LabStateError: If the value names no lab
    """
    if isinstance(lab_id, LabId):
        return lab_id
    try:
        return LabId(lab_id)
    except ValueError as e:
        valid = ", ".join(lid.value for lid in LabId)
        raise LabStateError(f"Unknown lab {lab_id!r}; expected one of {valid}") from e


def create_lab(lab_id: LabId | str, rng: SFC32) -> Lab:
    """
    Instantiate the lab registered for ``lab_id`` on generator ``rng``.

    Raises:
        LabStateError: If no implementation is registered
    """
    key = resolve_lab_id(lab_id)
    lab_cls = LAB_REGISTRY.get(key)
    if lab_cls is None:
        raise LabStateError(f"No implementation registered for lab {key.value}")
    return lab_cls(rng)
