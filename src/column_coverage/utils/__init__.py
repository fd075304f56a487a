"""
Utility modules for column coverage

Provides:
- logging: Console/JSON logging setup and context-aware logger
- metrics: Coverage metrics in Prometheus format
"""

__all__ = ["logging", "metrics"]
