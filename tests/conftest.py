import os

from hypothesis import HealthCheck, settings

# CI runs more examples; local runs stay quick
settings.register_profile("ci", max_examples=500, deadline=None)
settings.register_profile(
    "dev", max_examples=50, suppress_health_check=[HealthCheck.too_slow]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))
