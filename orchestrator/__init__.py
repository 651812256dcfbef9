"""
Orchestration package for coordinating conversion phases.

This package sequences the conversion: Load → Index → Export → Report.
"""

from .conversion_orchestrator import ConversionOrchestrator
from .conversion_report import ConversionReport

__all__ = [
    'ConversionOrchestrator',
    'ConversionReport'
]
