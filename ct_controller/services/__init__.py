"""Controller services."""

from .doctor_service import DoctorService
from .doctor_types import DoctorCheck, DoctorCheckGroup, DoctorReport
from .fanout_service import FanOutPlan, FanOutService, RunAborted

__all__ = [
    "DoctorCheck",
    "DoctorCheckGroup",
    "DoctorReport",
    "DoctorService",
    "FanOutPlan",
    "FanOutService",
    "RunAborted",
]
