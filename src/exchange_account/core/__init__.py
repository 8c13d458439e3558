"""
Core domain models and configuration contracts.

This module contains the foundational building blocks that are independent
of how configuration is obtained (files, environment, etc.).
"""
