"""
COMMISSION STATEMENT ENGINE
Tiered (accelerator) commission calculations
"""

from .models import StatementInput, StatementResult
from .processor import StatementProcessor

__all__ = ['StatementProcessor', 'StatementInput', 'StatementResult']
