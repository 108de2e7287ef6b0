from finagg.application.services.refresh_orchestrator import RefreshOrchestrator
from finagg.application.services.refresh_state import RefreshState

__all__ = [
    "RefreshOrchestrator",
    "RefreshState",
]
