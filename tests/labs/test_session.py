"""
Tests for the lab lifecycle, registry and Session.
"""

import threading

import numpy as np
import pytest

from mathlab.core.exceptions import LabStateError, ValidationError
from mathlab.labs import (
    DEFAULT_SEED,
    LAB_REGISTRY,
    GBMLab,
    GBMParams,
    IVLab,
    LabId,
    LabState,
    Session,
    create_lab,
    resolve_lab_id,
)
from mathlab.rng import SFC32


# ═══════════════════════════════════════════════════════════════════════
# Lifecycle
# ═══════════════════════════════════════════════════════════════════════


class TestLabLifecycle:

    def test_starts_idle_with_defaults(self):
        lab = GBMLab(SFC32.from_seed(1))
        assert lab.state is LabState.IDLE
        assert lab.params == GBMParams()
        assert lab.last_result is None

    def test_configure_then_simulate(self):
        lab = GBMLab(SFC32.from_seed(1))
        params = lab.configure(n=20)
        assert params.n == 20
        assert lab.state is LabState.CONFIGURED
        result = lab.simulate()
        assert lab.state is LabState.RENDERED
        assert lab.last_result is result
        assert result.info['state_before'] == 'configured'

    def test_simulate_from_idle_reports_idle(self):
        lab = GBMLab(SFC32.from_seed(1))
        result = lab.simulate()
        assert result.info['state_before'] == 'idle'
        assert lab.simulate().info['state_before'] == 'rendered'

    def test_reconfigure_after_render(self):
        lab = GBMLab(SFC32.from_seed(1))
        lab.configure(n=20)
        lab.simulate()
        lab.configure(volatility=0.1)
        assert lab.state is LabState.CONFIGURED
        assert lab.params.n == 20
        assert lab.params.volatility == 0.1

    def test_simulate_from_idle_uses_defaults(self):
        lab = GBMLab(SFC32.from_seed(1))
        result = lab.simulate()
        assert lab.state is LabState.RENDERED
        assert result.series['price'].shape == (GBMParams().n,)

    def test_repeat_simulate_advances_stream(self):
        lab = GBMLab(SFC32.from_seed(1))
        lab.configure(n=10)
        first = lab.simulate().series['price']
        second = lab.simulate().series['price']
        assert not np.array_equal(first, second)

    def test_unknown_parameter(self):
        lab = GBMLab(SFC32.from_seed(1))
        with pytest.raises(ValidationError, match="unknown parameter"):
            lab.configure(steps=10)
        assert lab.state is LabState.IDLE

    def test_invalid_value_keeps_previous_params(self):
        lab = GBMLab(SFC32.from_seed(1))
        lab.configure(n=30)
        with pytest.raises(ValidationError):
            lab.configure(n=1)
        assert lab.params.n == 30

    def test_result_envelope(self):
        lab = GBMLab(SFC32.from_seed(1))
        result = lab.simulate()
        assert result.lab is LabId.GBM
        assert result.parameters == GBMParams()
        assert 'draws' in result.timing
        assert "GBM lab" in result.summary()
        assert "LabResult" in repr(result)


# ═══════════════════════════════════════════════════════════════════════
# Registry
# ═══════════════════════════════════════════════════════════════════════


class TestRegistry:

    def test_every_lab_registered(self):
        assert set(LAB_REGISTRY) == set(LabId)

    @pytest.mark.parametrize("lab_id", list(LabId))
    def test_create_lab(self, lab_id):
        lab = create_lab(lab_id, SFC32.from_seed(1))
        assert lab.lab_id is lab_id
        assert lab.state is LabState.IDLE

    def test_resolve_from_string(self):
        assert resolve_lab_id('VECM') is LabId.VECM

    def test_unknown_lab(self):
        with pytest.raises(LabStateError, match="Unknown lab"):
            resolve_lab_id('ARIMA')


# ═══════════════════════════════════════════════════════════════════════
# Session
# ═══════════════════════════════════════════════════════════════════════


def _run_sequence(session):
    a = session.simulate(LabId.IV, n=30)
    b = session.simulate(LabId.RISK, n=100, confidence=0.9)
    c = session.simulate(LabId.GBM, n=15)
    return a, b, c


class TestSessionDeterminism:

    def test_default_seed(self):
        session = Session()
        assert session.seed == DEFAULT_SEED == 12345
        assert session.rng.state == (12345, 1, 1, 1)

    def test_same_seed_same_results(self):
        first = _run_sequence(Session(seed=7))
        second = _run_sequence(Session(seed=7))
        for a, b in zip(first, second):
            assert a.statistics == b.statistics
            for name in a.series:
                np.testing.assert_array_equal(a.series[name], b.series[name])

    def test_different_seed_different_results(self):
        a = Session(seed=1).simulate(LabId.GBM, n=15)
        b = Session(seed=2).simulate(LabId.GBM, n=15)
        assert a.statistics['final_price'] != b.statistics['final_price']

    def test_labs_share_one_stream(self):
        """Running IV first changes what GBM draws."""
        alone = Session(seed=3).simulate(LabId.GBM, n=15)
        session = Session(seed=3)
        session.simulate(LabId.IV, n=10)
        after = session.simulate(LabId.GBM, n=15)
        assert alone.statistics['final_price'] != after.statistics['final_price']

    def test_matches_standalone_lab(self):
        session_result = Session(seed=11).simulate('IV', n=40)
        lab = IVLab(SFC32.from_seed(11))
        lab.configure(n=40)
        assert session_result.statistics == lab.simulate().statistics

    def test_reseed_replays(self):
        session = Session(seed=5)
        first = session.simulate(LabId.GBM, n=12)
        session.reseed(5)
        again = session.simulate(LabId.GBM)
        np.testing.assert_array_equal(first.series['price'], again.series['price'])
        assert session.lab(LabId.GBM).rng is session.rng


class TestSessionLabs:

    def test_lab_created_once(self):
        session = Session()
        assert session.lab('OU') is session.lab(LabId.OU)

    def test_configure_without_simulate(self):
        session = Session()
        params = session.configure(LabId.OU, reversion=0.3)
        assert params.reversion == 0.3
        assert session.lab(LabId.OU).state is LabState.CONFIGURED

    def test_simulate_reuses_configuration(self):
        session = Session()
        session.configure(LabId.MCMC, n_steps=50)
        result = session.simulate(LabId.MCMC)
        assert result.series['chain'].shape == (51,)

    def test_unknown_lab(self):
        with pytest.raises(LabStateError):
            Session().simulate('NOPE')

    def test_lab_warning_points_at_caller(self):
        with pytest.warns(RuntimeWarning, match="oscillates") as record:
            result = Session().simulate('OU', reversion=2.5, n=20)
        assert record[0].filename == __file__
        assert result.has_warning("oscillates")

    def test_direct_lab_warning_points_at_caller(self):
        lab = create_lab(LabId.MCMC, SFC32.from_seed(1))
        lab.configure(proposal_width=500.0, n_steps=200)
        with pytest.warns(RuntimeWarning, match="acceptance rate") as record:
            result = lab.simulate()
        assert record[0].filename == __file__
        assert result.has_warning("acceptance rate")

    def test_concurrent_simulations_consume_whole_runs(self):
        """Each simulate holds the stream; the final state is order-free."""
        sequential = Session(seed=99)
        for _ in range(4):
            sequential.simulate(LabId.GBM, n=50)

        concurrent = Session(seed=99)
        concurrent.configure(LabId.GBM, n=50)
        threads = [
            threading.Thread(target=concurrent.simulate, args=(LabId.GBM,))
            for _ in range(4)
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert concurrent.rng.state == sequential.rng.state
