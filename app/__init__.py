"""
                Dishes & Orders API

An in-memory HTTP resource service for restaurant dishes and delivery
orders. Every operation runs an ordered chain of guards before it touches
the stores; orders follow a small status workflow.

Author: Khalil_Bannouri
Version: 1.0.0
License: MIT
"""

__version__ = "1.0.0"
__author__ = "Khalil_Bannouri"
