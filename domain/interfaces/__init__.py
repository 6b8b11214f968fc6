from .user_repo import UserRepository
from .metrics_port import MetricsPort
from .logging_port import LoggingPort, BoundLogger

__all__ = ["UserRepository", "MetricsPort", "LoggingPort", "BoundLogger"]
