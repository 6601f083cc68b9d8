"""
JAX Configuration - MUST be imported before any other vizmcmc module.

This module configures JAX for stepwise sampling on small (2-D) states:
- Double precision, so log(density + 1e-300) stays finite and the leapfrog
  integrator is reversible to well below 1e-6
- CPU platform by default; per-step kernels are far too small to benefit
  from an accelerator and device transfers would dominate
- Quieter XLA C++ logging
"""
import os

# --- PRECISION ---
os.environ.setdefault("JAX_ENABLE_X64", "True")

# --- PLATFORM ---
os.environ.setdefault("JAX_PLATFORMS", "cpu")

# Suppress CUDA/XLA C++ warnings
os.environ.setdefault("TF_CPP_MIN_LOG_LEVEL", "2")

import jax  # noqa: E402

# The env var only takes effect if JAX has not been imported yet
jax.config.update("jax_enable_x64", True)
