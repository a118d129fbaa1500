"""Test configuration for gellens."""

import matplotlib

# Plots are only built, never shown
matplotlib.use("Agg")
