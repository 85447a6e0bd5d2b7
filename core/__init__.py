"""
Core package for the pizzeria order pipeline
Contains the order desk that orchestrates all services
"""

from .order_desk import PizzeriaOrderDesk

__all__ = [
    'PizzeriaOrderDesk'
]
