# (C) 2024 Irreducible Inc.

import os

from hypothesis import HealthCheck, settings

# `fast` keeps property tests cheap enough for every run; select `slow` with HYPOTHESIS_PROFILE=slow.
settings.register_profile("fast", max_examples=50, deadline=None)
settings.register_profile(
    "slow",
    max_examples=1000,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow],
)
settings.load_profile(os.environ.get("HYPOTHESIS_PROFILE", "fast"))

