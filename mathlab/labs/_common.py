"""
Common data structures for lab simulators.

LabOutput is the parameter payload wrapped by Result[P] and exposed
through LabResult.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

import numpy as np
from numpy.typing import NDArray

DEFAULT_SEED = 12345


class LabId(str, Enum):
    """Identifiers of the available labs."""
    IV = 'IV'
    VAR = 'VAR'
    VECM = 'VECM'
    ARDL = 'ARDL'
    OU = 'OU'
    MCMC = 'MCMC'
    RISK = 'RISK'
    GBM = 'GBM'


class LabState(Enum):
    """Lab lifecycle: IDLE -> CONFIGURED -> RENDERED."""
    IDLE = 'idle'
    CONFIGURED = 'configured'
    RENDERED = 'rendered'


@dataclass(frozen=True)
class LabOutput:
    """
    Parameter payload for one simulate() call.

    - series: named 1D arrays for plotting
    - statistics: named scalar statistics
    - parameters: the frozen parameter object the run used
    """
    lab: LabId
    series: dict[str, NDArray[np.floating[Any]]]
    statistics: dict[str, float]
    parameters: Any
