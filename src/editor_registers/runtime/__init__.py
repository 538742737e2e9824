"""Runtime services: settings and telelog-backed telemetry."""

from .settings import RegisterSettings, SCRATCH_BUFFER_NAME

__all__ = ["RegisterSettings", "SCRATCH_BUFFER_NAME"]
