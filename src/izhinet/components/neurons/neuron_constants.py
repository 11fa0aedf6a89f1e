"""
Neuron Constants - Izhikevich thresholds, resets and input scaling.

This module defines the constants of the Izhikevich (2003) cortical network
so that magic numbers do not get scattered across the neuron model, the
factories and the simulator.

Biological Basis:
=================

Membrane potential is expressed in mV and time in ms. A spike is emitted when
the potential reaches the 30 mV apex, after which the potential is reset to
``c`` and the recovery variable is incremented by ``d``.

Thalamic drive is modelled as Gaussian noise scaled more strongly for
excitatory cells than for inhibitory interneurons.

References:
-----------
- Izhikevich, E.M. (2003). Simple model of spiking neurons.
  IEEE Transactions on Neural Networks, 14(6), 1569-1572.
"""

# =============================================================================
# VOLTAGE PARAMETERS (mV)
# =============================================================================

V_REST = -65.0
"""Initial membrane potential of every freshly created neuron (mV)."""

V_PEAK = 30.0
"""Spike apex (mV). Reaching it triggers the reset."""

# =============================================================================
# INTEGRATION
# =============================================================================

INTEGRATION_SUBSTEP_MS = 0.5
"""Euler sub-step for the membrane potential (ms)."""

N_INTEGRATION_SUBSTEPS = 2
"""Potential sub-steps per tick; the recovery variable is updated once."""

# Quadratic membrane equation: dv/dt = 0.04 v^2 + 5 v + 140 - u + I
QUADRATIC_COEFF = 0.04
LINEAR_COEFF = 5.0
CONSTANT_TERM = 140.0

# =============================================================================
# THALAMIC INPUT SCALING
# =============================================================================

THALAMIC_SCALE_EXCITATORY = 5.0
"""Gain applied to the thalamic noise sample of excitatory neurons."""

THALAMIC_SCALE_INHIBITORY = 2.0
"""Gain applied to the thalamic noise sample of inhibitory neurons."""

# =============================================================================
# PARAMETER RANDOMIZATION
# =============================================================================

# Excitatory: c = -65 + 15 r^2, d = 8 - 6 r^2 (r^2 biases toward RS over CH)
EXCITATORY_A = 0.02
EXCITATORY_B = 0.2
EXCITATORY_C_BASE = -65.0
EXCITATORY_C_SPAN = 15.0
EXCITATORY_D_BASE = 8.0
EXCITATORY_D_SPAN = 6.0

# Inhibitory: a = 0.02 + 0.08 r, b = 0.25 - 0.05 r (FS-derived)
INHIBITORY_A_BASE = 0.02
INHIBITORY_A_SPAN = 0.08
INHIBITORY_B_BASE = 0.25
INHIBITORY_B_SPAN = 0.05
INHIBITORY_C = -65.0
INHIBITORY_D = 2.0

# =============================================================================
# CONNECTIVITY
# =============================================================================

WEIGHT_SCALE_EXCITATORY = 0.5
"""Excitatory weights are drawn from [0, WEIGHT_SCALE_EXCITATORY)."""

WEIGHT_SCALE_INHIBITORY = 1.0
"""Inhibitory weights are drawn from (-WEIGHT_SCALE_INHIBITORY, 0]."""
