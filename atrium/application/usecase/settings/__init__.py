"""Account settings use cases."""

from .reconcile_timezone import ReconcileTimezoneUseCase

__all__ = ["ReconcileTimezoneUseCase"]
